"""Circle analyzer — scores a finished stroke against a perfect circle.

Fit:      center = centroid of samples, radius = mean sample distance to it.
Reject:   too few samples, radius < min_radius, start/end gap > radius * closure_fraction.
Score:    100 * (1 - relative_deviation / forgiveness)
          - centering_error * centering_weight
          + bonus (once above cutoff)
          - residual gap penalty
          → clamped to [0, 100], rounded.

Every input yields a CircleResult; degenerate geometry is a flag, never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from nucleus.engine.config import ScoringConfig
from nucleus.engine.result import CircleResult
from nucleus.engine.tiers import message_for_score
from nucleus.utils.geometry import (
    as_xy,
    centroid,
    closure_gap,
    collapse_repeats,
    distances_to,
    drop_closing_copies,
    mean_absolute_deviation,
    point_distance,
    to_points_array,
)
from nucleus.utils.math_helpers import round_half_up

logger = logging.getLogger(__name__)

Stroke = Iterable[Any] | NDArray[np.float64]


class CircleAnalyzer:
    """Stateless scorer; one instance can be shared across threads."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def analyze(self, stroke: Stroke, center: Any | None = None) -> CircleResult:
        """Score ``stroke`` as a circle around ``center``.

        ``center`` is the reference nucleus the user is meant to encircle.
        When ``None`` the stroke's own centroid is used, which disables the
        centering penalty. Points and center may be ``(x, y)`` pairs,
        ``{"x": ..., "y": ...}`` mappings or objects with ``x``/``y``.
        """
        cfg = self.config
        raw = to_points_array(stroke)

        if len(raw) < cfg.min_samples:
            logger.debug("Stroke rejected: %d samples < %d", len(raw), cfg.min_samples)
            return self._too_few_samples()

        # A paused pointer repeats its position; those repeats are not new samples
        distinct = collapse_repeats(raw)
        if len(distinct) < cfg.min_samples:
            logger.debug(
                "Stroke rejected: %d distinct samples < %d", len(distinct), cfg.min_samples
            )
            return self._too_few_samples()
        samples = drop_closing_copies(distinct)

        fit_center = centroid(samples)
        distances = distances_to(samples, fit_center)
        radius = float(np.mean(distances))

        # Zero radius lands here too, before anything divides by it
        if radius <= 0 or radius < cfg.min_radius:
            logger.debug("Stroke rejected: radius %.2f < %.2f", radius, cfg.min_radius)
            return CircleResult(
                score=0,
                center_x=fit_center[0],
                center_y=fit_center[1],
                radius=radius,
                message=cfg.too_small_message,
                is_too_small=True,
            )

        relative_deviation = mean_absolute_deviation(distances, radius) / radius

        gap = closure_gap(distinct)
        if gap > radius * cfg.closure_fraction:
            logger.debug("Stroke rejected: gap %.2f > %.2f", gap, radius * cfg.closure_fraction)
            return CircleResult(
                score=0,
                center_x=fit_center[0],
                center_y=fit_center[1],
                radius=radius,
                message=cfg.not_closed_message,
                not_closed=True,
            )

        centering_error = 0.0
        if center is not None:
            centering_error = point_distance(fit_center, as_xy(center)) / radius

        score = self._compose_score(relative_deviation, centering_error, gap / radius)
        logger.debug(
            "Stroke scored %d (deviation=%.4f, centering=%.4f, gap=%.4f)",
            score,
            relative_deviation,
            centering_error,
            gap / radius,
        )
        return CircleResult(
            score=score,
            center_x=fit_center[0],
            center_y=fit_center[1],
            radius=radius,
            message=message_for_score(score, cfg.tiers),
        )

    def _compose_score(
        self, relative_deviation: float, centering_error: float, relative_gap: float
    ) -> int:
        cfg = self.config
        score = 100.0 * (1.0 - relative_deviation / cfg.deviation_forgiveness)
        score -= centering_error * cfg.centering_weight
        if score > cfg.bonus_cutoff:
            score += cfg.bonus_amount
        if relative_gap > cfg.gap_tolerance:
            score -= relative_gap * cfg.gap_penalty_weight
        score = max(0.0, min(100.0, score))
        return round_half_up(score)

    def _too_few_samples(self) -> CircleResult:
        return CircleResult(
            score=0,
            center_x=0.0,
            center_y=0.0,
            radius=0.0,
            message=self.config.too_few_samples_message,
            is_too_small=True,
        )


def analyze_circle(
    stroke: Stroke,
    center: Any | None = None,
    config: ScoringConfig | None = None,
) -> CircleResult:
    """Convenience wrapper around ``CircleAnalyzer(config).analyze``."""
    return CircleAnalyzer(config).analyze(stroke, center)
