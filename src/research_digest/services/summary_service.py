"""Summary service: runs the summarizer and packages the result for storage."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from research_digest.core.config import AppSettings
from research_digest.engine.summarizer import ExtractiveSummarizer
from research_digest.exceptions import SummaryWriteError
from research_digest.models import SummaryRecord

log = logging.getLogger(__name__)


class SummaryService:
    """Summarize extracted text and record the generation parameters."""

    def __init__(
        self,
        summarizer: Optional[ExtractiveSummarizer] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._summarizer = summarizer or ExtractiveSummarizer(
            config=self._settings.summary,
            scoring_config=self._settings.scoring,
        )

    def create_summary(
        self,
        text: str,
        title: str = "",
        max_length: Optional[float] = None,
        min_length: Optional[float] = None,
    ) -> SummaryRecord:
        """Summarize ``text`` and return it with the budgets that were applied."""
        config = self._summarizer.config
        max_length = config.max_length if max_length is None else max_length
        min_length = config.min_length if min_length is None else min_length

        summary = self._summarizer.summarize(text, max_length=max_length, min_length=min_length)
        return SummaryRecord(
            paper_title=title,
            original_text=text,
            summary_text=summary,
            chunk_length=config.chunk_length,
            summary_min_length=min_length,
            summary_max_length=max_length,
            model_used=config.algorithm_id,
        )

    def write_summary(self, record: SummaryRecord, path: Path) -> Path:
        """Write the summary text as a UTF-8 plain-text file."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(record.summary_text, encoding="utf-8")
        except OSError as exc:
            raise SummaryWriteError(f"Failed to write summary to {path}: {exc}", str(path)) from exc
        log.info(f"Saved summary to {path}")
        return path
