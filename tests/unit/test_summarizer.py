"""Unit tests for ExtractiveSummarizer and the module-level summarize()."""

from __future__ import annotations

import pytest

from research_digest.core.config import SummaryConfig
from research_digest.engine.summarizer import ExtractiveSummarizer, summarize
from research_digest.exceptions import (
    DigestError,
    InvalidBudgetError,
    InvalidDocumentError,
)

METHODS = "Methods: We used a novel approach."
RESULTS = "Results: The outcome was significant."
CONCLUSION = "Conclusion: This matters."
SHORT_PAPER = f"{METHODS} {RESULTS} {CONCLUSION}"


class TestScenarios:
    def test_short_paper_with_low_minimum(self):
        summary = summarize(SHORT_PAPER, max_length=500, min_length=10)
        assert summary
        assert METHODS in summary
        assert len(summary) <= 500

    def test_short_paper_with_default_minimum(self):
        # 98 chars never reaches 100, so every sentence is taken in section order
        summary = summarize(SHORT_PAPER, max_length=500, min_length=100)
        assert summary == SHORT_PAPER
        assert RESULTS in summary

    def test_empty_document(self):
        assert summarize("") == ""

    @pytest.mark.parametrize("text", ["   ", "\n\n", " 7 ", "3\n\n"])
    def test_degenerate_documents(self, text):
        assert summarize(text) == ""

    def test_unpunctuated_block_over_budget(self):
        block = "word " * 2000
        assert len(block) == 10_000
        assert summarize(block, max_length=500) == ""

    def test_unpunctuated_block_within_budget(self):
        block = "word " * 2000
        assert summarize(block, max_length=20_000, min_length=100) == block.strip()

    def test_equal_scores_keep_document_order(self):
        # "Tom..." and "Sam..." both score 0.5; "ok." leads with 3
        text = "ok. Tom ate a pear. Sam ate a plum. zz. zz zz."
        assert summarize(text, max_length=500, min_length=19) == "ok. Tom ate a pear."

        full = summarize(text, max_length=500, min_length=1000)
        assert full == "ok. Tom ate a pear. Sam ate a plum. zz. zz zz."


class TestBudgets:
    @pytest.mark.parametrize("max_length", [0, 1, 50, 120, 300, 500, 2000])
    def test_never_exceeds_max_length(self, summarizer, sample_paper, max_length):
        assert len(summarizer.summarize(sample_paper, max_length=max_length, min_length=100)) <= max_length

    def test_unreachable_minimum_returns_short_summary(self, summarizer, sample_paper):
        summary = summarizer.summarize(sample_paper, max_length=200, min_length=10_000)
        assert 0 < len(summary) <= 200

    def test_min_above_max_is_allowed(self, summarizer, sample_paper):
        assert len(summarizer.summarize(sample_paper, max_length=50, min_length=80)) <= 50

    def test_config_defaults_apply(self, sample_paper):
        summarizer = ExtractiveSummarizer(config=SummaryConfig(max_length=90, min_length=10))
        summary = summarizer.summarize(sample_paper)
        assert 10 <= len(summary) <= 90

    def test_sentences_per_section(self, sample_paper):
        one = ExtractiveSummarizer(config=SummaryConfig(sentences_per_section=1))
        two = ExtractiveSummarizer(config=SummaryConfig(sentences_per_section=2))
        assert one.summarize(sample_paper, 2000, 2000) != two.summarize(sample_paper, 2000, 2000)


class TestInputValidation:
    @pytest.mark.parametrize("bad", [None, b"bytes", 42, ["a list"]])
    def test_non_string_document(self, summarizer, bad):
        with pytest.raises(InvalidDocumentError):
            summarizer.summarize(bad)

    def test_document_error_is_type_error(self, summarizer):
        with pytest.raises(TypeError):
            summarizer.summarize(None)

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_length": -1}, {"min_length": -5}, {"max_length": True}, {"min_length": "10"}],
    )
    def test_bad_budgets(self, summarizer, kwargs):
        with pytest.raises(InvalidBudgetError):
            summarizer.summarize("Some text.", **kwargs)

    def test_float_budgets(self):
        summary = summarize(SHORT_PAPER, max_length=500.0, min_length=10.0)
        assert METHODS in summary
        assert summary == summarize(SHORT_PAPER, max_length=500, min_length=10)

    def test_fractional_budget_caps_length(self, summarizer, sample_paper):
        summary = summarizer.summarize(sample_paper, max_length=100.5, min_length=10.5)
        assert 0 < len(summary) <= 100.5

    def test_budget_error_hierarchy(self):
        assert issubclass(InvalidBudgetError, ValueError)
        assert issubclass(InvalidBudgetError, DigestError)


class TestScoreSentences:
    def test_positions_and_scores(self, summarizer, sample_paper):
        sentences = summarizer.score_sentences(sample_paper)
        assert [s.position for s in sentences] == list(range(11))
        assert all(s.score >= 0 for s in sentences)
        assert all(s.section is None for s in sentences)

    def test_repeatable(self, summarizer, sample_paper):
        first = summarizer.summarize(sample_paper)
        second = summarizer.summarize(sample_paper)
        assert first == second == summarize(sample_paper)
