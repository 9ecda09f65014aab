"""Math helpers. No engine imports."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Nearest integer with .5 rounded up (``round`` would go to the even neighbor)."""
    return int(math.floor(value + 0.5))
