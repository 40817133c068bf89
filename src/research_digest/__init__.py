"""research-digest: heuristic extractive summaries of research papers.

Public API::

    from research_digest import (
        summarize, ExtractiveSummarizer,
        SectionClassifier, SentenceScorer,
        Sentence, Section, SummaryRecord,
        SummaryService, AppSettings,
    )
"""

from __future__ import annotations

from research_digest.core.config import (
    AppSettings,
    ObservabilityConfig,
    ScoringConfig,
    SummaryConfig,
)
from research_digest.domains.research import SectionClassifier
from research_digest.engine import (
    ExtractiveSummarizer,
    SentenceScorer,
    organize_into_sections,
    split_into_sentences,
    summarize,
)
from research_digest.exceptions import (
    DigestError,
    InvalidBudgetError,
    InvalidDocumentError,
    SummaryWriteError,
)
from research_digest.models import Section, Sentence, SummaryRecord
from research_digest.services.summary_service import SummaryService

__all__ = [
    "AppSettings",
    "ObservabilityConfig",
    "ScoringConfig",
    "SummaryConfig",
    "SectionClassifier",
    "ExtractiveSummarizer",
    "SentenceScorer",
    "organize_into_sections",
    "split_into_sentences",
    "summarize",
    "DigestError",
    "InvalidBudgetError",
    "InvalidDocumentError",
    "SummaryWriteError",
    "Section",
    "Sentence",
    "SummaryRecord",
    "SummaryService",
]
