"""Sentence segmentation for extracted document text."""

from __future__ import annotations

import re

# A terminal mark followed by any whitespace run ends a sentence; the
# whitespace is consumed by the split.
SENTENCE_BREAK_PATTERN = re.compile(r"(?<=[.!?])\s+")

# Stray page numbers and figure indices.
DIGITS_ONLY_PATTERN = re.compile(r"^[0-9]+$")


def split_into_sentences(text: str) -> list[str]:
    """Split ``text`` into trimmed, non-empty, non-numeric sentences in document order.

    Text without terminal punctuation comes back as a single sentence.
    """
    sentences: list[str] = []
    for piece in SENTENCE_BREAK_PATTERN.split(text):
        piece = piece.strip()
        if not piece or DIGITS_ONLY_PATTERN.match(piece):
            continue
        sentences.append(piece)
    return sentences
