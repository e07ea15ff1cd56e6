"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from svgpathinfo.main import app
from tests.conftest import IMPLICIT_LINETO_PATH, SHORTCUT_CUBIC_PATH


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 2


def test_parse_implicit_lineto():
    response = client.post("/api/parse", json={"path": IMPLICIT_LINETO_PATH})
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert data["segments"][0]["type"] == "moveto"
    line = data["segments"][1]
    assert line["type"] == "line-to"
    assert line["command_letter"] == "L"
    assert line["position"] == "absolute"
    assert line["end"] == [-1.733, -6.165]
    assert data["transforms_completed"] == []


def test_parse_with_options():
    response = client.post(
        "/api/parse",
        json={"path": SHORTCUT_CUBIC_PATH, "options": {"absolute": True, "no_shortcuts": True}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["transforms_completed"] == ["T0.01", "T0.02"]
    assert [s["type"] for s in data["segments"]] == ["moveto"] + ["cubic-bezier"] * 3
    assert all(s["position"] == "absolute" for s in data["segments"])


def test_parse_error_reports_kind_and_offset():
    response = client.post("/api/parse", json={"path": "M0,0 X"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error"] == "UnknownCommand"
    assert detail["offset"] == 5


def test_parse_unknown_option():
    response = client.post("/api/parse", json={"path": "M0,0", "options": {"bogus": True}})
    assert response.status_code == 422


def test_serialize():
    response = client.post(
        "/api/serialize",
        json={
            "segments": [
                {"type": "moveto", "point": [1, 2]},
                {"type": "cubic-bezier", "control1": [3, 4], "control2": [5, 6], "end": [7, 8]},
                {"type": "closepath", "command_letter": "z"},
            ]
        },
    )
    assert response.status_code == 200
    assert response.json()["path"] == "M 1,2 C 3,4 5,6 7,8 z"


def test_serialize_rejects_wrong_letter():
    response = client.post(
        "/api/serialize",
        json={"segments": [{"type": "moveto", "command_letter": "L", "point": [1, 2]}]},
    )
    assert response.status_code == 422


def test_reverse():
    response = client.post("/api/reverse", json={"path": "M0,0 C1,1 2,2 3,3"})
    assert response.status_code == 200
    assert response.json()["path"] == "M 3,3 C 2,2 1,1 0,0"


def test_reverse_unsupported():
    response = client.post("/api/reverse", json={"path": "M0,0 A1 1 0 0 0 5 5"})
    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "UnsupportedForOperation"
