"""Keyword categories for research-paper sentence scoring.

Keywords are matched as lowercase substrings, so ``result`` also fires on
``results`` and ``resulted``.
"""

from __future__ import annotations

from research_digest.domains.research.models import KeywordCategory

CATEGORY_KEYWORDS: dict[KeywordCategory, tuple[str, ...]] = {
    KeywordCategory.METHODOLOGY: (
        "method",
        "approach",
        "technique",
        "procedure",
        "experiment",
        "study",
        "analysis",
        "evaluation",
    ),
    KeywordCategory.RESULTS: (
        "result",
        "finding",
        "outcome",
        "conclusion",
        "demonstrate",
        "show",
        "prove",
        "indicate",
        "reveal",
    ),
    KeywordCategory.IMPORTANCE: (
        "important",
        "significant",
        "crucial",
        "essential",
        "key",
        "critical",
        "vital",
        "fundamental",
    ),
    KeywordCategory.NOVELTY: (
        "novel",
        "new",
        "innovative",
        "original",
        "unique",
        "unprecedented",
        "groundbreaking",
    ),
    KeywordCategory.IMPACT: (
        "impact",
        "effect",
        "influence",
        "contribution",
        "implication",
        "application",
        "relevance",
    ),
    KeywordCategory.LIMITATION: (
        "limitation",
        "constraint",
        "challenge",
        "drawback",
        "weakness",
        "restriction",
    ),
    KeywordCategory.FUTURE: (
        "future",
        "further",
        "next",
        "prospect",
        "potential",
        "recommendation",
        "suggestion",
    ),
}

# Categories that carry the primary keyword weight; all others get the secondary one.
PRIMARY_CATEGORIES: frozenset[KeywordCategory] = frozenset(
    {KeywordCategory.METHODOLOGY, KeywordCategory.RESULTS}
)
