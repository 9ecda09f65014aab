"""Score history — bounded, most-recent-first, in memory.

Only successful attempts are kept (closed, full-size loops with a nonzero
score). Best and average are derived on demand.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass

from nucleus.engine.result import CircleResult
from nucleus.utils.math_helpers import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 30


@dataclass(frozen=True)
class HistoryStats:
    count: int = 0
    best: int = 0
    average: int = 0


class HistoryStore:
    """Thread-safe bounded history of scored attempts."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"History limit must be >= 1, got {limit}")
        self.limit = limit
        # Newest first: appendleft + maxlen drops the oldest from the right
        self._entries: deque[CircleResult] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def record(self, result: CircleResult) -> bool:
        """Add ``result`` if it is a successful attempt. Returns whether it was kept."""
        if not result.is_success:
            return False
        with self._lock:
            self._entries.appendleft(result)
            size = len(self._entries)
        logger.debug("Recorded score %d (%d in history)", result.score, size)
        return True

    def entries(self) -> list[CircleResult]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> int:
        with self._lock:
            cleared = len(self._entries)
            self._entries.clear()
        logger.info("History cleared (%d entries)", cleared)
        return cleared

    def stats(self) -> HistoryStats:
        scores = [r.score for r in self.entries()]
        if not scores:
            return HistoryStats()
        return HistoryStats(
            count=len(scores),
            best=max(scores),
            average=round_half_up(sum(scores) / len(scores)),
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_store: HistoryStore | None = None


def get_history_store() -> HistoryStore:
    """Get or create the global HistoryStore singleton."""
    global _store
    if _store is None:
        from nucleus.config import settings

        _store = HistoryStore(limit=settings.history_limit)
    return _store
