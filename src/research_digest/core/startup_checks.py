"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from research_digest.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_budgets(settings)
    _check_selection(settings)
    _check_fractions(settings)


def _check_budgets(settings: AppSettings) -> None:
    """Reject negative budgets; an unreachable minimum only warrants a warning."""
    summary = settings.summary
    if summary.max_length < 0:
        raise ValueError(
            f"DIGEST_SUMMARY_MAX_LENGTH must be >= 0, got {summary.max_length}."
        )
    if summary.min_length < 0:
        raise ValueError(
            f"DIGEST_SUMMARY_MIN_LENGTH must be >= 0, got {summary.min_length}."
        )
    if summary.min_length > summary.max_length:
        log.warning(
            "DIGEST_SUMMARY_MIN_LENGTH exceeds DIGEST_SUMMARY_MAX_LENGTH. "
            "Summaries will always stop short of the minimum."
        )


def _check_selection(settings: AppSettings) -> None:
    if settings.summary.sentences_per_section < 1:
        raise ValueError(
            "DIGEST_SUMMARY_SENTENCES_PER_SECTION must be at least 1, "
            f"got {settings.summary.sentences_per_section}."
        )


def _check_fractions(settings: AppSettings) -> None:
    """Position fractions are shares of the document and must lie in [0, 1]."""
    scoring = settings.scoring
    for name, value in (
        ("DIGEST_SCORING_LEAD_FRACTION", scoring.lead_fraction),
        ("DIGEST_SCORING_TAIL_FRACTION", scoring.tail_fraction),
    ):
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must be between 0 and 1, got {value}.")
