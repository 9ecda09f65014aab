"""Tests for the score history store."""

from __future__ import annotations

import pytest

from nucleus.engine.result import CircleResult
from nucleus.history.store import HistoryStats, HistoryStore


def _result(score: int, **flags) -> CircleResult:
    return CircleResult(
        score=score, center_x=0.0, center_y=0.0, radius=100.0, message="", **flags
    )


def test_records_successful_results():
    store = HistoryStore()
    assert store.record(_result(80)) is True
    assert len(store) == 1


@pytest.mark.parametrize(
    "result",
    [
        _result(0),
        _result(0, is_too_small=True),
        _result(0, not_closed=True),
    ],
)
def test_skips_rejected_and_zero_scores(result):
    store = HistoryStore()
    assert store.record(result) is False
    assert store.entries() == []


def test_most_recent_first():
    store = HistoryStore()
    for score in (10, 20, 30):
        store.record(_result(score))
    assert [r.score for r in store.entries()] == [30, 20, 10]


def test_bounded():
    store = HistoryStore(limit=3)
    for score in range(1, 6):
        store.record(_result(score))
    assert [r.score for r in store.entries()] == [5, 4, 3]


def test_average_rounds_half_up():
    store = HistoryStore()
    store.record(_result(80))
    store.record(_result(81))
    assert store.stats() == HistoryStats(count=2, best=81, average=81)


def test_stats():
    store = HistoryStore()
    for score in (70, 91, 82):
        store.record(_result(score))
    assert store.stats() == HistoryStats(count=3, best=91, average=81)


def test_empty_stats():
    assert HistoryStore().stats() == HistoryStats(count=0, best=0, average=0)


def test_clear():
    store = HistoryStore()
    store.record(_result(50))
    store.record(_result(60))
    assert store.clear() == 2
    assert store.entries() == []
    assert store.stats().best == 0


def test_invalid_limit():
    with pytest.raises(ValueError):
        HistoryStore(limit=0)
