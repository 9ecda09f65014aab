"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PointIn(BaseModel):
    x: float = Field(..., allow_inf_nan=False, description="X coordinate in canvas units")
    y: float = Field(..., allow_inf_nan=False, description="Y coordinate in canvas units")


class AnalyzeRequest(BaseModel):
    points: list[PointIn] = Field(..., description="Stroke samples in drawing order")
    center: PointIn | None = Field(
        default=None,
        description="Reference nucleus; omit to score shape only (no centering penalty)",
    )
    record: bool = Field(default=True, description="Add successful results to history")
