"""Greedy, budget-constrained summary assembly.

Assembly runs in two phases:

1. ``assemble_by_section`` walks sections in first-appearance order and
   takes up to ``per_section`` of each section's best sentences.
2. ``assemble_global_fallback`` runs only when phase 1 stopped short of
   ``min_length`` and fills from all sentences ranked by score.

In both phases the first candidate that would push the summary past
``max_length`` stops selection (the rest of the section in phase 1, the
whole phase in phase 2). Smaller candidates further down are not tried.
Which content survives truncation therefore depends on section order and
score order together; changing this changes observable output.

Sorting is stable, so equal scores keep document order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from research_digest.models import Section, Sentence

log = logging.getLogger(__name__)

SEPARATOR = " "


class AssemblyResult(NamedTuple):
    text: str
    reached_min_length: bool


def _by_score(sentences: Sequence[Sentence]) -> list[Sentence]:
    return sorted(sentences, key=lambda s: -s.score)


def _appended_length(summary: str, text: str) -> int:
    if not summary:
        return len(text)
    return len(summary) + len(SEPARATOR) + len(text)


def _append(summary: str, text: str) -> str:
    return f"{summary}{SEPARATOR}{text}" if summary else text


def assemble_by_section(
    sections: Sequence[Section],
    max_length: float,
    min_length: float,
    per_section: int = 2,
) -> AssemblyResult:
    """Take each section's top-scoring sentences until ``min_length`` is reached."""
    summary = ""
    for section in sections:
        picks = _by_score(section.sentences)[:per_section]
        log.debug(f"Section {section.name!r}: {len(picks)} candidates")

        for sentence in picks:
            if _appended_length(summary, sentence.text) > max_length:
                log.debug(f"Max length reached in section {section.name!r}")
                break
            summary = _append(summary, sentence.text)
            if len(summary) >= min_length:
                log.debug("Min length reached during section pass")
                return AssemblyResult(summary, True)

    return AssemblyResult(summary, len(summary) >= min_length)


def assemble_global_fallback(
    sections: Sequence[Section],
    max_length: float,
    min_length: float,
    summary: str = "",
) -> AssemblyResult:
    """Extend ``summary`` with the best remaining sentences across all sections.

    Sentences whose text already appears in ``summary`` are skipped.
    """
    everything = sorted(
        (sentence for section in sections for sentence in section.sentences),
        key=lambda s: s.position,
    )
    remaining = [s for s in _by_score(everything) if s.text not in summary]
    log.debug(f"Fallback pass over {len(remaining)} unused sentences")

    for sentence in remaining:
        if _appended_length(summary, sentence.text) > max_length:
            log.debug("Max length reached during fallback pass")
            break
        summary = _append(summary, sentence.text)
        if len(summary) >= min_length:
            return AssemblyResult(summary, True)

    return AssemblyResult(summary, len(summary) >= min_length)
