"""Nucleus circle-scoring engine."""

from nucleus.engine.analyzer import CircleAnalyzer, analyze_circle
from nucleus.engine.config import ScoringConfig
from nucleus.engine.result import CircleResult, Point
from nucleus.engine.tiers import DEFAULT_TIERS, MessageTier, message_for_score

__all__ = [
    "CircleAnalyzer",
    "analyze_circle",
    "ScoringConfig",
    "CircleResult",
    "Point",
    "DEFAULT_TIERS",
    "MessageTier",
    "message_for_score",
]
