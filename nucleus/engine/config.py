"""Scoring configuration — every tunable constant of the circle analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nucleus.engine.tiers import DEFAULT_TIERS, MessageTier, sort_tiers

if TYPE_CHECKING:
    from nucleus.config import Settings


@dataclass(frozen=True)
class ScoringConfig:
    """Controls rejection thresholds, the scoring curve and message tiers.

    Lengths are in the caller's coordinate units (canvas pixels by default).
    """

    # Strokes with fewer raw samples are rejected before fitting
    min_samples: int = 10
    # Fitted radius below this is a tap or jitter, not a circle
    min_radius: float = 25.0
    # Loop is open when start/end gap > radius * closure_fraction
    closure_fraction: float = 0.35

    # Relative deviation that drives the score to 0; smaller = stricter
    deviation_forgiveness: float = 0.4
    # Points lost per radius of offset between fitted and reference center
    centering_weight: float = 40.0

    # Flat bonus once the running score clears the cutoff
    bonus_cutoff: float = 60.0
    bonus_amount: float = 5.0

    # Closed loops with gap > radius * gap_tolerance lose (gap / radius) * weight
    gap_tolerance: float = 0.1
    gap_penalty_weight: float = 10.0

    tiers: tuple[MessageTier, ...] = field(default=DEFAULT_TIERS)

    too_few_samples_message: str = "Draw more!"
    too_small_message: str = "Too small!"
    not_closed_message: str = "Finish the loop!"

    def __post_init__(self) -> None:
        if self.min_samples < 1:
            raise ValueError(f"min_samples must be >= 1, got {self.min_samples}")
        if self.min_radius < 0:
            raise ValueError(f"min_radius must be >= 0, got {self.min_radius}")
        if self.closure_fraction < 0:
            raise ValueError(f"closure_fraction must be >= 0, got {self.closure_fraction}")
        if self.deviation_forgiveness <= 0:
            raise ValueError(
                f"deviation_forgiveness must be > 0, got {self.deviation_forgiveness}"
            )
        if self.centering_weight < 0 or self.gap_penalty_weight < 0:
            raise ValueError("Penalty weights must be >= 0")
        if not self.tiers:
            raise ValueError("At least one message tier is required")
        tiers = sort_tiers(self.tiers)
        if tiers[-1].threshold > 0:
            raise ValueError("Lowest message tier must start at 0")
        # frozen dataclass: bypass __setattr__ to store the sorted table
        object.__setattr__(self, "tiers", tiers)

    @classmethod
    def from_settings(cls, settings: Settings) -> ScoringConfig:
        tiers = sort_tiers(settings.scoring_tiers) if settings.scoring_tiers else DEFAULT_TIERS
        return cls(
            min_samples=settings.scoring_min_samples,
            min_radius=settings.scoring_min_radius,
            closure_fraction=settings.scoring_closure_fraction,
            deviation_forgiveness=settings.scoring_deviation_forgiveness,
            centering_weight=settings.scoring_centering_weight,
            bonus_cutoff=settings.scoring_bonus_cutoff,
            bonus_amount=settings.scoring_bonus_amount,
            gap_tolerance=settings.scoring_gap_tolerance,
            gap_penalty_weight=settings.scoring_gap_penalty_weight,
            tiers=tiers,
            too_few_samples_message=settings.scoring_too_few_samples_message,
            too_small_message=settings.scoring_too_small_message,
            not_closed_message=settings.scoring_not_closed_message,
        )
