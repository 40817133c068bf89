"""Research-paper domain module.

- Enum: ``KeywordCategory``
- Keyword data: ``CATEGORY_KEYWORDS``, ``PRIMARY_CATEGORIES``
- Section vocabulary: ``SECTION_HEADERS``, ``DEFAULT_SECTION``
- Classification: ``SectionClassifier``
"""

from __future__ import annotations

from research_digest.domains.research.categories import (
    CATEGORY_KEYWORDS,
    PRIMARY_CATEGORIES,
)
from research_digest.domains.research.classifier import SectionClassifier
from research_digest.domains.research.models import KeywordCategory
from research_digest.domains.research.section_patterns import (
    DEFAULT_SECTION,
    SECTION_HEADERS,
)

__all__ = [
    "KeywordCategory",
    "CATEGORY_KEYWORDS",
    "PRIMARY_CATEGORIES",
    "SECTION_HEADERS",
    "DEFAULT_SECTION",
    "SectionClassifier",
]
