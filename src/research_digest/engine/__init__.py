"""Extractive summarization engine: segmenter, scorer, organizer, assembler."""

from __future__ import annotations

from research_digest.engine.assembler import (
    AssemblyResult,
    assemble_by_section,
    assemble_global_fallback,
)
from research_digest.engine.organizer import organize_into_sections
from research_digest.engine.scoring import SentenceScorer, build_keyword_matcher
from research_digest.engine.segmenter import split_into_sentences
from research_digest.engine.summarizer import ExtractiveSummarizer, summarize

__all__ = [
    "AssemblyResult",
    "ExtractiveSummarizer",
    "SentenceScorer",
    "assemble_by_section",
    "assemble_global_fallback",
    "build_keyword_matcher",
    "organize_into_sections",
    "split_into_sentences",
    "summarize",
]
