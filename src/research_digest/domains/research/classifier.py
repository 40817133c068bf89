"""Research-paper section detection by vocabulary substring match."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from research_digest.domains.research.section_patterns import SECTION_HEADERS


class SectionClassifier:
    """Detects which known section header, if any, a sentence contains.

    The vocabulary is scanned in order and the first case-insensitive
    substring hit is returned. Instances hold no mutable state.
    """

    def __init__(self, headers: Optional[Iterable[str]] = None) -> None:
        source = SECTION_HEADERS if headers is None else headers
        self._headers: tuple[str, ...] = tuple(h.lower() for h in source)

    @property
    def headers(self) -> tuple[str, ...]:
        return self._headers

    def detect(self, text: str) -> Optional[str]:
        """Return the first vocabulary header found in ``text``, else ``None``."""
        lowered = text.lower()
        for header in self._headers:
            if header in lowered:
                return header
        return None
