"""POST /api/parse, /api/serialize, /api/reverse — path data in and out.

PathError subclasses raised here are turned into JSON error responses by the
handlers installed in ``svgpathinfo.main``.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from svgpathinfo.config import Settings
from svgpathinfo.dependencies import get_settings
from svgpathinfo.engine.config import ParseOptions
from svgpathinfo.models.requests import ParseRequest, ReverseRequest, SerializeRequest
from svgpathinfo.models.responses import ParseResponse, PathResponse
from svgpathinfo.svg.parser import parse_path
from svgpathinfo.svg.serializer import create_path_string, reverse_path

router = APIRouter()


def _options(req: ParseRequest, settings: Settings) -> ParseOptions:
    values = {
        "absolute": settings.default_absolute,
        "no_shortcuts": settings.default_no_shortcuts,
    }
    if req.options is not None:
        values = dict(req.options)
    try:
        return ParseOptions.coerce(values)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/parse", response_model=ParseResponse)
async def parse(req: ParseRequest, settings: Settings = Depends(get_settings)) -> ParseResponse:
    start = time.perf_counter()

    ctx = parse_path(req.path, _options(req, settings))

    elapsed = (time.perf_counter() - start) * 1000
    return ParseResponse(
        segments=ctx.segments,
        count=ctx.num_segments,
        transforms_completed=sorted(ctx.completed_transforms),
        processing_time_ms=round(elapsed, 3),
    )


@router.post("/serialize", response_model=PathResponse)
async def serialize(req: SerializeRequest) -> PathResponse:
    return PathResponse(path=create_path_string(req.segments))


@router.post("/reverse", response_model=PathResponse)
async def reverse(req: ReverseRequest) -> PathResponse:
    return PathResponse(path=reverse_path(req.path))
