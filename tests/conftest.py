"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest


def circle_stroke(
    n: int,
    radius: float,
    cx: float = 0.0,
    cy: float = 0.0,
    sweep: float = 2 * math.pi,
    close: bool = True,
    wobble: float = 0.0,
    lobes: int = 5,
) -> list[tuple[float, float]]:
    """n samples along an arc of ``sweep`` radians; ``close`` repeats the first sample."""
    points = []
    for i in range(n):
        theta = sweep * i / n
        r = radius + wobble * math.sin(lobes * theta)
        points.append((cx + r * math.cos(theta), cy + r * math.sin(theta)))
    if close:
        points.append(points[0])
    return points


@pytest.fixture
def make_stroke():
    return circle_stroke


@pytest.fixture
def perfect_circle() -> list[tuple[float, float]]:
    # 20 evenly spaced samples, radius 200 around (500, 500), closed on sample 0
    return circle_stroke(20, 200.0, 500.0, 500.0)


@pytest.fixture
def wobbly_circle() -> list[tuple[float, float]]:
    return circle_stroke(60, 150.0, 400.0, 380.0, wobble=12.0)


@pytest.fixture
def half_circle() -> list[tuple[float, float]]:
    return [
        (500.0 + 200.0 * math.cos(math.pi * i / 19), 500.0 + 200.0 * math.sin(math.pi * i / 19))
        for i in range(20)
    ]


@pytest.fixture
def tiny_scribble() -> list[tuple[float, float]]:
    # 12 samples, all within radius 5 of each other
    return circle_stroke(12, 2.0, 100.0, 100.0, close=False)
