"""Group scored sentences into structural section buckets."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from research_digest.domains.research.classifier import SectionClassifier
from research_digest.domains.research.section_patterns import DEFAULT_SECTION
from research_digest.models import Section, Sentence

log = logging.getLogger(__name__)


def organize_into_sections(
    sentences: Iterable[Sentence],
    classifier: SectionClassifier,
    default_section: str = DEFAULT_SECTION,
) -> list[Section]:
    """Return section buckets in first-appearance order.

    A sentence that names a section header is filed under the section it
    announces. A header that reappears later routes sentences back into the
    existing bucket of that name.
    """
    buckets: dict[str, Section] = {}
    order: list[str] = []
    current = default_section

    for sentence in sentences:
        detected = classifier.detect(sentence.text)
        if detected is not None:
            current = detected

        bucket = buckets.get(current)
        if bucket is None:
            bucket = Section(name=current)
            buckets[current] = bucket
            order.append(current)
        bucket.add_sentence(sentence.model_copy(update={"section": current}))

    log.debug(f"Organized sentences into {len(order)} sections: {order}")
    return [buckets[name] for name in order]
