"""Pydantic data models for research-digest.

``Sentence`` and ``Section`` are transient and live for one summarization
call. ``SummaryRecord`` is the hand-off shape for whatever store persists
summaries alongside their generation parameters.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from research_digest.core.config import DEFAULT_ALGORITHM_ID

# ── Engine models ────────────────────────────────────────────────────


class Sentence(BaseModel):
    """A scored sentence with its position in the segmented document."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    score: float = Field(default=0.0, ge=0.0)
    position: int = Field(ge=0)
    section: Optional[str] = None


class Section(BaseModel):
    """A structural section bucket holding sentences in append order."""

    name: str
    sentences: list[Sentence] = Field(default_factory=list)

    def add_sentence(self, sentence: Sentence) -> None:
        self.sentences.append(sentence)


# ── Persistence hand-off ─────────────────────────────────────────────


class SummaryRecord(BaseModel):
    """A generated summary plus the parameters that produced it."""

    paper_title: str = ""
    original_text: str
    summary_text: str
    chunk_length: int = 1000
    summary_min_length: Union[int, float]
    summary_max_length: Union[int, float]
    model_used: str = DEFAULT_ALGORITHM_ID
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
