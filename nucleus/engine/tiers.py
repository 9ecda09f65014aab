"""Score → message tiers.

Thresholds are inclusive lower bounds on the final integer score:
  99+ → "ATOMIC PERFECTION"
  96+ → "Pure Nucleus!"
  ...
   0+ → "Unstable."
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple


class MessageTier(NamedTuple):
    threshold: int
    label: str


DEFAULT_TIERS: tuple[MessageTier, ...] = (
    MessageTier(99, "ATOMIC PERFECTION"),
    MessageTier(96, "Pure Nucleus!"),
    MessageTier(91, "Highly Stable!"),
    MessageTier(81, "Strong Bond!"),
    MessageTier(61, "In Orbit."),
    MessageTier(41, "Decaying..."),
    MessageTier(0, "Unstable."),
)


def sort_tiers(tiers: Sequence[MessageTier | tuple[int, str]]) -> tuple[MessageTier, ...]:
    """Normalize to MessageTier and order by descending threshold."""
    normalized = [MessageTier(int(t[0]), str(t[1])) for t in tiers]
    return tuple(sorted(normalized, key=lambda t: t.threshold, reverse=True))


def message_for_score(score: int, tiers: Sequence[MessageTier] = DEFAULT_TIERS) -> str:
    """Label of the highest tier the score reaches.

    ``tiers`` must be sorted by descending threshold (see ``sort_tiers``).
    Scores below every threshold fall into the last tier.
    """
    for tier in tiers:
        if score >= tier.threshold:
            return tier.label
    return tiers[-1].label
