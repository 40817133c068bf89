"""Shared fixtures for research-digest tests."""

from __future__ import annotations

import logging
import os

import pytest
import structlog

from research_digest.core.config import ScoringConfig, SummaryConfig
from research_digest.domains.research.classifier import SectionClassifier
from research_digest.engine.scoring import SentenceScorer
from research_digest.engine.summarizer import ExtractiveSummarizer

SAMPLE_PAPER = """Abstract
This paper presents a novel method for summarizing scientific articles. We show that simple heuristics are competitive.
1
Introduction
Summaries help readers triage the growing literature. Prior systems rely on large neural models.
Methods
We collected 250 papers from 12 venues. Each sentence was scored by length, position and keywords.
2
Results
The results demonstrate a significant improvement over the lead baseline. Summaries were 40% shorter on average.
Discussion
These findings indicate that section structure is a key signal. A limitation is the fixed vocabulary.
Conclusion
Future work will explore further weighting schemes.
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer DIGEST_* env vars out of test settings."""
    for key in list(os.environ):
        if key.startswith("DIGEST_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo root-logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("research_digest").setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def sample_paper() -> str:
    """Eleven-sentence synthetic research paper with section headers."""
    return SAMPLE_PAPER


@pytest.fixture
def classifier() -> SectionClassifier:
    return SectionClassifier()


@pytest.fixture
def scoring_config() -> ScoringConfig:
    return ScoringConfig()


@pytest.fixture
def scorer(scoring_config: ScoringConfig) -> SentenceScorer:
    return SentenceScorer(scoring_config)


@pytest.fixture
def summarizer() -> ExtractiveSummarizer:
    return ExtractiveSummarizer(config=SummaryConfig(), scoring_config=ScoringConfig())

