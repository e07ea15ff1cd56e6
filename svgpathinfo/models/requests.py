"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgpathinfo.models.segments import Segment


class ParseRequest(BaseModel):
    path: str = Field(..., description="Path data (the d attribute)")
    options: dict[str, bool] | None = Field(
        default=None,
        description="Parse options (absolute, no_shortcuts, verbose); server defaults when omitted",
    )


class SerializeRequest(BaseModel):
    segments: list[Segment] = Field(..., description="Segments to render as path data")


class ReverseRequest(BaseModel):
    path: str = Field(..., description="Path data made of moveto, cubic, line-to and closepath")
