"""Value objects produced and consumed by the analyzer."""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class CircleResult:
    """Outcome of analyzing one finished stroke.

    ``score`` is only meaningful when neither ``is_too_small`` nor
    ``not_closed`` is set; rejected strokes always carry a score of 0.
    """

    score: int
    # Fitted circle: centroid of the stroke and mean distance to it
    center_x: float
    center_y: float
    radius: float
    message: str
    is_too_small: bool = False
    not_closed: bool = False
    timestamp: float = field(default_factory=time.time)

    @property
    def is_rejected(self) -> bool:
        return self.is_too_small or self.not_closed

    @property
    def is_success(self) -> bool:
        """Worth keeping in history: a closed, full-size loop that scored."""
        return not self.is_rejected and self.score > 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
