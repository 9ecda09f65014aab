"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    nucleus_env: str = "development"
    nucleus_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Score history
    history_limit: int = 30

    # Scoring overrides (see nucleus.engine.config.ScoringConfig)
    scoring_min_samples: int = 10
    scoring_min_radius: float = 25.0
    scoring_closure_fraction: float = 0.35
    scoring_deviation_forgiveness: float = 0.4
    scoring_centering_weight: float = 40.0
    scoring_bonus_cutoff: float = 60.0
    scoring_bonus_amount: float = 5.0
    scoring_gap_tolerance: float = 0.1
    scoring_gap_penalty_weight: float = 10.0
    # JSON [[threshold, label], ...], e.g. SCORING_TIERS='[[90, "Great"], [0, "Again"]]'
    scoring_tiers: list[tuple[int, str]] | None = None
    scoring_too_few_samples_message: str = "Draw more!"
    scoring_too_small_message: str = "Too small!"
    scoring_not_closed_message: str = "Finish the loop!"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
