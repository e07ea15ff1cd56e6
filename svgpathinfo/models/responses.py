"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgpathinfo.models.segments import Segment


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class ParseResponse(BaseModel):
    segments: list[Segment] = Field(default_factory=list)
    count: int = 0
    transforms_completed: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class PathResponse(BaseModel):
    path: str


class ErrorResponse(BaseModel):
    error: str
    message: str
    offset: int | None = None
