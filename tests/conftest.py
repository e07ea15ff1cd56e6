"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Implicit line-to after a moveto, upper and lower case
IMPLICIT_LINETO_PATH = "M 0,0 -1.733,-6.165"

# Relative cubics followed by a relative shortcut cubic
SHORTCUT_CUBIC_PATH = (
    "M10,10 c3.61,-2.46,6.65,-6.21,6.65,-13.29"
    "c0,-1.68,-1.36,-3.03,-3.03,-3.03"
    "s-3.03,1.36,-3.03,3.03"
)

QUADRATIC_PATH = "M0,0 Q5,10 10,0 T20,0 t10,0"

ARC_PATH = "M0,0 a25,25 -30 0,1 50,-25"

HV_PATH = "M300,200 h-150 v-100 l50,25"

# Every command letter, mixed case, closed subpaths
MIXED_PATH = (
    "M10 10 L20 20 h5 v5 H40 V0 c1 1 2 2 3 3 s4 4 5 5 "
    "Q60 60 70 70 t5 5 a10 10 0 1 0 20 20 z "
    "m5 5 l1 1 Z"
)

# Only absolute moveto + cubic bezier
ABSOLUTE_CUBIC_PATHS = [
    "M 0,0 C 1,1 2,2 3,3",
    "M10.5,20.25 C11,22 13.125,24 15,25 C17,26 19,26 21,25",
    "M1e2,2e-3 C0.1,0.2 0.3,0.4 0.5,0.6 M7,7 C8,8 9,9 10,10",
    "M-1,-2C-3,-4-5,-6-7,-8",
]

# A lucide-style icon path
HOME_PATH = (
    "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999"
    "A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"
)

SAMPLE_PATHS = [
    IMPLICIT_LINETO_PATH,
    SHORTCUT_CUBIC_PATH,
    QUADRATIC_PATH,
    ARC_PATH,
    HV_PATH,
    MIXED_PATH,
    HOME_PATH,
    *ABSOLUTE_CUBIC_PATHS,
]


@pytest.fixture
def shortcut_cubic_path() -> str:
    return SHORTCUT_CUBIC_PATH


@pytest.fixture
def mixed_path() -> str:
    return MIXED_PATH


@pytest.fixture(params=SAMPLE_PATHS)
def sample_path(request) -> str:
    return request.param
