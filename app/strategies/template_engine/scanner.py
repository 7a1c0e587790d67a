"""Placeholder scanner.

Finds ``{{ name }}`` spans in markdown text. A span is the shortest text
between ``{{`` and the next ``}}`` on the same line; the captured name is
whitespace-trimmed. Empty names (``{{}}``) are kept as ``""`` so they render
like any other placeholder.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{(.*?)\}\}")


@dataclass(frozen=True)
class PlaceholderSpan:
    """A single placeholder occurrence in a document.

    Attributes:
        name: Trimmed placeholder name.
        start: Offset of the opening ``{{``.
        end: Offset just past the closing ``}}``.
    """

    name: str
    start: int
    end: int


def find_spans(text: str) -> list[PlaceholderSpan]:
    """Return every placeholder occurrence in document order."""
    return [
        PlaceholderSpan(name=match.group(1).strip(), start=match.start(), end=match.end())
        for match in PLACEHOLDER_PATTERN.finditer(text or "")
    ]


def scan_placeholders(text: str) -> list[str]:
    """Extract unique placeholder names in order of first appearance.

    Args:
        text: Markdown document text.

    Returns:
        Placeholder names without duplicates.
    """
    names = list(dict.fromkeys(span.name for span in find_spans(text)))
    logger.debug(f"Scanned {len(text or '')} characters: {len(names)} placeholders")
    return names
