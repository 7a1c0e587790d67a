"""Merge engine.

Decides the final markdown for every placeholder: a non-blank generated
value wins verbatim, otherwise the user's raw value is rendered locally.
The result is always derived from scratch from its inputs.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from app.strategies.template_engine.codec import render_value, to_context
from app.strategies.template_engine.models import PlaceholderType, RawInput
from app.strategies.template_engine.resolver import resolve_type
from app.strategies.template_engine.scanner import PLACEHOLDER_PATTERN

logger = logging.getLogger(__name__)


def _type_for(name: str, types: Mapping[str, PlaceholderType | str]) -> PlaceholderType:
    # Names without a resolved type fall back to the naming convention.
    return resolve_type(name, types)


def merge_values(
    names: Iterable[str],
    types: Mapping[str, PlaceholderType | str],
    raw_values: Mapping[str, RawInput],
    generated: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Build the name -> markdown mapping substituted into the document.

    Args:
        names: Placeholder names to resolve.
        types: Resolved type per name.
        raw_values: User-entered value per name.
        generated: Values returned by the generation service.

    Returns:
        The final markdown string for every name.
    """
    generated = generated or {}
    merged: dict[str, str] = {}
    fallbacks = 0

    for name in names:
        candidate = generated.get(name)
        if isinstance(candidate, str) and candidate.strip():
            merged[name] = candidate
            continue
        merged[name] = render_value(raw_values.get(name), _type_for(name, types))
        fallbacks += 1

    logger.debug(f"Merged {len(merged)} placeholders ({fallbacks} rendered locally)")
    return merged


def build_context(
    names: Iterable[str],
    types: Mapping[str, PlaceholderType | str],
    raw_values: Mapping[str, RawInput],
) -> dict[str, str]:
    """Serialize every raw value as plain text for a generation request."""
    return {
        name: to_context(raw_values.get(name), _type_for(name, types))
        for name in names
    }


def normalize_generated(names: Iterable[str], values: Mapping[str, Any] | None) -> dict[str, str]:
    """Coerce a generation response into a complete name -> string mapping.

    Requested names missing from the response map to ``""`` so the merge
    falls back to the local rendering. Extra names are kept.
    """
    normalized: dict[str, str] = {}
    for name, value in (values or {}).items():
        if value is None:
            normalized[str(name)] = ""
        elif isinstance(value, str):
            normalized[str(name)] = value
        else:
            normalized[str(name)] = str(value)

    missing = [name for name in names if name not in normalized]
    if missing:
        logger.warning(f"Generation response missing {len(missing)} placeholders: {missing}")
        for name in missing:
            normalized[name] = ""
    return normalized


def fill_document(text: str, merged: Mapping[str, str]) -> str:
    """Substitute merged values into every ``{{ name }}`` span.

    Spans whose trimmed name is not in ``merged`` are left as written.
    """

    def _replace(match) -> str:
        name = match.group(1).strip()
        if name in merged:
            return merged[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, text or "")
