"""Research-paper domain enums."""

from __future__ import annotations

from enum import Enum


class KeywordCategory(str, Enum):
    """Groups of domain-signal words used to weight sentence importance."""

    METHODOLOGY = "methodology"
    RESULTS = "results"
    IMPORTANCE = "importance"
    NOVELTY = "novelty"
    IMPACT = "impact"
    LIMITATION = "limitation"
    FUTURE = "future"
