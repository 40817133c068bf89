"""Heuristic sentence scoring.

A sentence's score is the sum of four independent signals:

- **length**: medium-length sentences carry content without rambling
- **position**: the opening and closing stretches of a paper are denser
- **keywords**: methodology/results vocabulary weighs double
- **surface**: a leading capital and any digit each add a half point

Scores are not normalized or clamped.
"""

from __future__ import annotations

import re
from typing import Optional

from research_digest.core.config import ScoringConfig
from research_digest.domains.research.categories import (
    CATEGORY_KEYWORDS,
    PRIMARY_CATEGORIES,
)
from research_digest.domains.research.models import KeywordCategory

_LEADING_CAPITAL = re.compile(r"^[A-Z]")
_ANY_DIGIT = re.compile(r"[0-9]")

KeywordMatcher = tuple[tuple[str, float], ...]


def build_keyword_matcher(
    config: ScoringConfig,
    keywords: Optional[dict[KeywordCategory, tuple[str, ...]]] = None,
) -> KeywordMatcher:
    """Flatten keyword categories into ``(keyword, weight)`` pairs."""
    source = CATEGORY_KEYWORDS if keywords is None else keywords
    pairs: list[tuple[str, float]] = []
    for category, words in source.items():
        if category in PRIMARY_CATEGORIES:
            weight = config.primary_keyword_weight
        else:
            weight = config.secondary_keyword_weight
        pairs.extend((word.lower(), weight) for word in words)
    return tuple(pairs)


def length_score(text: str, config: ScoringConfig) -> float:
    length = len(text)
    if config.min_chars < length < config.ideal_max_chars:
        return config.ideal_length_bonus
    if config.ideal_max_chars <= length < config.max_chars:
        return config.long_length_bonus
    return 0.0


def position_score(position: int, total: int, config: ScoringConfig) -> float:
    """Bonus for sentences in the leading or trailing share of the document."""
    if total <= 0:
        return 0.0
    relative = position / total
    if relative < config.lead_fraction:
        return config.lead_bonus
    if relative > 1.0 - config.tail_fraction:
        return config.tail_bonus
    return 0.0


def keyword_score(text: str, matcher: KeywordMatcher) -> float:
    """Each distinct keyword present adds its category weight once."""
    lowered = text.lower()
    return sum(weight for word, weight in matcher if word in lowered)


def surface_score(text: str, config: ScoringConfig) -> float:
    score = 0.0
    if _LEADING_CAPITAL.match(text):
        score += config.capitalized_bonus
    if _ANY_DIGIT.search(text):
        score += config.numeric_bonus
    return score


class SentenceScorer:
    """Scores sentences from their text and document position.

    The keyword matcher is built once per instance; pass a prebuilt one to
    share it between scorers.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        matcher: Optional[KeywordMatcher] = None,
    ) -> None:
        self._config = config or ScoringConfig()
        self._matcher = matcher if matcher is not None else build_keyword_matcher(self._config)

    @property
    def config(self) -> ScoringConfig:
        return self._config

    def score(self, text: str, position: int, total: int) -> float:
        return (
            length_score(text, self._config)
            + position_score(position, total, self._config)
            + keyword_score(text, self._matcher)
            + surface_score(text, self._config)
        )
