"""Tests for message tiers and scoring config."""

from __future__ import annotations

import pytest

from nucleus.config import Settings
from nucleus.engine.config import ScoringConfig
from nucleus.engine.tiers import DEFAULT_TIERS, MessageTier, message_for_score, sort_tiers


@pytest.mark.parametrize(
    "score,label",
    [
        (100, "ATOMIC PERFECTION"),
        (99, "ATOMIC PERFECTION"),
        (98, "Pure Nucleus!"),
        (96, "Pure Nucleus!"),
        (95, "Highly Stable!"),
        (91, "Highly Stable!"),
        (90, "Strong Bond!"),
        (81, "Strong Bond!"),
        (80, "In Orbit."),
        (61, "In Orbit."),
        (60, "Decaying..."),
        (41, "Decaying..."),
        (40, "Unstable."),
        (0, "Unstable."),
    ],
)
def test_default_tier_boundaries(score, label):
    assert message_for_score(score) == label


def test_tier_lookup_is_order_independent():
    labels = [message_for_score(s) for s in (97, 12, 97, 85, 12)]
    assert labels[0] == labels[2]
    assert labels[1] == labels[4]


def test_sort_tiers_descending():
    tiers = sort_tiers([(0, "low"), (50, "mid"), (90, "high")])
    assert [t.threshold for t in tiers] == [90, 50, 0]
    assert all(isinstance(t, MessageTier) for t in tiers)


def test_custom_tiers_in_config():
    config = ScoringConfig(tiers=((0, "meh"), (70, "nice")))
    assert config.tiers == (MessageTier(70, "nice"), MessageTier(0, "meh"))
    assert message_for_score(70, config.tiers) == "nice"
    assert message_for_score(69, config.tiers) == "meh"


def test_default_config_tiers():
    assert ScoringConfig().tiers == DEFAULT_TIERS


@pytest.mark.parametrize(
    "kwargs",
    [
        {"deviation_forgiveness": 0.0},
        {"min_samples": 0},
        {"min_radius": -1.0},
        {"closure_fraction": -0.1},
        {"centering_weight": -5.0},
        {"tiers": ()},
        {"tiers": ((50, "half"),)},
    ],
)
def test_invalid_config_raises(kwargs):
    with pytest.raises(ValueError):
        ScoringConfig(**kwargs)


def test_config_from_settings():
    settings = Settings(scoring_min_samples=15, scoring_closure_fraction=0.2)
    config = ScoringConfig.from_settings(settings)
    assert config.min_samples == 15
    assert config.closure_fraction == 0.2
    assert config.min_radius == 25.0


def test_tiers_and_messages_from_settings():
    settings = Settings(
        scoring_tiers=[(0, "Try again"), (90, "Great")],
        scoring_not_closed_message="Close it!",
    )
    config = ScoringConfig.from_settings(settings)
    assert config.tiers == (MessageTier(90, "Great"), MessageTier(0, "Try again"))
    assert config.not_closed_message == "Close it!"
    assert config.too_small_message == "Too small!"


def test_default_tiers_when_settings_leave_them_unset():
    assert ScoringConfig.from_settings(Settings()).tiers == DEFAULT_TIERS


def test_tiers_from_environment(monkeypatch):
    monkeypatch.setenv("SCORING_TIERS", '[[75, "Good"], [0, "Bad"]]')
    config = ScoringConfig.from_settings(Settings())
    assert message_for_score(80, config.tiers) == "Good"
    assert message_for_score(74, config.tiers) == "Bad"
