"""Nested pydantic-settings configuration for research-digest.

Each group reads its own ``DIGEST_<GROUP>_*`` env vars::

    export DIGEST_SUMMARY_MAX_LENGTH=800
    export DIGEST_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_ALGORITHM_ID = "research-digest/extractive-heuristic"


class SummaryConfig(BaseSettings):
    """Summary budgets and selection policy.

    Env vars use ``DIGEST_SUMMARY_`` prefix.
    """

    model_config = {"env_prefix": "DIGEST_SUMMARY_"}

    max_length: int = 500
    min_length: int = 100
    sentences_per_section: int = 2
    default_section: str = "introduction"
    chunk_length: int = 1000
    algorithm_id: str = DEFAULT_ALGORITHM_ID


class ScoringConfig(BaseSettings):
    """Sentence scoring thresholds and weights.

    Env vars use ``DIGEST_SCORING_`` prefix.
    """

    model_config = {"env_prefix": "DIGEST_SCORING_"}

    # ── Length ──────────────────────────────────────────────────────
    min_chars: int = 30
    ideal_max_chars: int = 150
    max_chars: int = 250
    ideal_length_bonus: float = Field(default=2.0, ge=0.0)
    long_length_bonus: float = Field(default=1.0, ge=0.0)

    # ── Position ────────────────────────────────────────────────────
    lead_fraction: float = 0.2
    tail_fraction: float = 0.2
    lead_bonus: float = Field(default=3.0, ge=0.0)
    tail_bonus: float = Field(default=2.0, ge=0.0)

    # ── Keywords ────────────────────────────────────────────────────
    primary_keyword_weight: float = Field(default=2.0, ge=0.0)
    secondary_keyword_weight: float = Field(default=1.0, ge=0.0)

    # ── Surface features ────────────────────────────────────────────
    capitalized_bonus: float = Field(default=0.5, ge=0.0)
    numeric_bonus: float = Field(default=0.5, ge=0.0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``DIGEST_OBSERVABILITY_`` prefix. ``json_logs`` left unset
    means JSON when stderr is not a TTY.
    """

    model_config = {"env_prefix": "DIGEST_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: Optional[bool] = None


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
