"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from nucleus.config import Settings, settings
from nucleus.engine.analyzer import CircleAnalyzer
from nucleus.engine.config import ScoringConfig
from nucleus.history.store import HistoryStore, get_history_store


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_analyzer() -> CircleAnalyzer:
    return CircleAnalyzer(ScoringConfig.from_settings(settings))


def get_history() -> HistoryStore:
    return get_history_store()
