"""Section-header vocabulary for research papers.

Used by ``SectionClassifier`` to detect which structural section a
sentence announces. Order matters: the first entry found in a sentence
wins, even when a later one is more specific (``methodology`` is checked
before ``methods``, and ``approach`` before ``results``).
"""

from __future__ import annotations

SECTION_HEADERS: tuple[str, ...] = (
    "abstract",
    "introduction",
    "background",
    "related work",
    "literature review",
    "methodology",
    "methods",
    "approach",
    "experimental setup",
    "implementation",
    "results",
    "findings",
    "analysis",
    "discussion",
    "evaluation",
    "conclusion",
    "future work",
    "limitations",
    "recommendations",
)

DEFAULT_SECTION = "introduction"
