"""Extractive summarization: segment, score, organize, assemble.

Usage::

    from research_digest import ExtractiveSummarizer, summarize

    summary = summarize(text, max_length=500, min_length=100)

    summarizer = ExtractiveSummarizer()
    summary = summarizer.summarize(text)
"""

from __future__ import annotations

import logging
from typing import Optional

from research_digest.core.config import ScoringConfig, SummaryConfig
from research_digest.domains.research.classifier import SectionClassifier
from research_digest.engine.assembler import (
    assemble_by_section,
    assemble_global_fallback,
)
from research_digest.engine.organizer import organize_into_sections
from research_digest.engine.scoring import SentenceScorer
from research_digest.engine.segmenter import split_into_sentences
from research_digest.exceptions import InvalidBudgetError, InvalidDocumentError
from research_digest.models import Sentence

log = logging.getLogger(__name__)


def _check_budget(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidBudgetError(f"{name} must be a number, got {type(value).__name__}")
    if value < 0:
        raise InvalidBudgetError(f"{name} must be >= 0, got {value}")
    return value


class ExtractiveSummarizer:
    """Caller-owned summarization pipeline.

    Classifier and scorer are immutable after construction, so one instance
    can serve concurrent calls. Every call builds its own sentences and
    sections.
    """

    def __init__(
        self,
        config: Optional[SummaryConfig] = None,
        classifier: Optional[SectionClassifier] = None,
        scorer: Optional[SentenceScorer] = None,
        scoring_config: Optional[ScoringConfig] = None,
    ) -> None:
        self._config = config or SummaryConfig()
        self._classifier = classifier or SectionClassifier()
        self._scorer = scorer or SentenceScorer(scoring_config)

    @property
    def config(self) -> SummaryConfig:
        return self._config

    def score_sentences(self, text: str) -> list[Sentence]:
        """Segment ``text`` and score each sentence by position."""
        raw = split_into_sentences(text)
        total = len(raw)
        return [
            Sentence(text=s, score=self._scorer.score(s, i, total), position=i)
            for i, s in enumerate(raw)
        ]

    def summarize(
        self,
        document_text: str,
        max_length: Optional[float] = None,
        min_length: Optional[float] = None,
    ) -> str:
        """Return an extractive summary no longer than ``max_length`` characters.

        Budgets default to the configured ones. A summary shorter than
        ``min_length`` is returned when the document cannot fill it.
        """
        if not isinstance(document_text, str):
            raise InvalidDocumentError(
                f"document_text must be str, got {type(document_text).__name__}"
            )
        max_length = _check_budget(
            "max_length", self._config.max_length if max_length is None else max_length
        )
        min_length = _check_budget(
            "min_length", self._config.min_length if min_length is None else min_length
        )

        sentences = self.score_sentences(document_text)
        log.info(
            f"Summarizing {len(document_text)} chars: {len(sentences)} sentences "
            f"(max_length={max_length}, min_length={min_length})"
        )
        if not sentences:
            return ""

        scores = [s.score for s in sentences]
        log.debug(
            f"Scores: high={max(scores)}, low={min(scores)}, "
            f"mean={sum(scores) / len(scores):.2f}"
        )

        sections = organize_into_sections(
            sentences, self._classifier, self._config.default_section
        )
        log.info(f"Organized into {len(sections)} sections")

        result = assemble_by_section(
            sections,
            max_length,
            min_length,
            per_section=self._config.sentences_per_section,
        )
        if not result.reached_min_length:
            log.debug(f"Section pass stopped at {len(result.text)} chars, running fallback")
            result = assemble_global_fallback(
                sections, max_length, min_length, summary=result.text
            )

        log.info(f"Summary length: {len(result.text)} chars")
        return result.text


def summarize(
    document_text: str, max_length: float = 500, min_length: float = 100
) -> str:
    """Summarize ``document_text`` with a freshly built default pipeline."""
    return ExtractiveSummarizer().summarize(
        document_text, max_length=max_length, min_length=min_length
    )
