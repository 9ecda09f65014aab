"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from nucleus.engine.result import CircleResult
from nucleus.history.store import HistoryStats


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    min_samples: int = 0


class CircleResultOut(BaseModel):
    score: int
    center_x: float
    center_y: float
    radius: float
    message: str
    is_too_small: bool = False
    not_closed: bool = False
    timestamp: float = 0.0

    @classmethod
    def from_result(cls, result: CircleResult) -> CircleResultOut:
        return cls(**result.to_dict())


class AnalyzeResponse(CircleResultOut):
    recorded: bool = False
    processing_time_ms: float = 0.0


class StatsResponse(BaseModel):
    count: int = 0
    best: int = 0
    average: int = 0

    @classmethod
    def from_stats(cls, stats: HistoryStats) -> StatsResponse:
        return cls(count=stats.count, best=stats.best, average=stats.average)


class HistoryResponse(BaseModel):
    entries: list[CircleResultOut] = Field(default_factory=list)
    stats: StatsResponse = Field(default_factory=StatsResponse)


class ClearHistoryResponse(BaseModel):
    status: str = "ok"
    cleared: int = 0


class TierOut(BaseModel):
    threshold: int
    label: str


class TiersResponse(BaseModel):
    tiers: list[TierOut] = Field(default_factory=list)
