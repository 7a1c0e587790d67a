"""Editor state operations.

Pure functions over ``EditorState`` snapshots. Each operation returns a new
snapshot and leaves its input untouched; derived views (placeholders, types,
merged values) are recomputed from the snapshot on every call.
"""

import logging
from collections.abc import Mapping
from typing import Any

from app.interfaces.generator import GenerationRequest
from app.strategies.template_engine.catalog import DEFAULT_TEMPLATES, find_template
from app.strategies.template_engine.codec import coerce_value
from app.strategies.template_engine.merge import (
    build_context,
    fill_document,
    merge_values,
    normalize_generated,
)
from app.strategies.template_engine.models import (
    EditorState,
    PlaceholderType,
    RawInput,
    Template,
)
from app.strategies.template_engine.resolver import (
    resolve_type,
    resolve_types,
    set_type_override,
)
from app.strategies.template_engine.scanner import scan_placeholders

logger = logging.getLogger(__name__)


def _evolve(state: EditorState, **changes: Any) -> EditorState:
    """Copy a snapshot with its mappings detached from the original."""
    update = {
        "values": dict(state.values),
        "type_overrides": dict(state.type_overrides),
        "generated": dict(state.generated),
    }
    update.update(changes)
    return state.model_copy(update=update)


# =============================================================================
# Transitions
# =============================================================================


def initial_state(templates: tuple[Template, ...] = DEFAULT_TEMPLATES) -> EditorState:
    """Create a snapshot with the first template selected."""
    first = templates[0] if templates else None
    return EditorState(
        templates=templates,
        selected_template_id=first.id if first else "",
        content=first.content if first else "",
    )


def select_template(state: EditorState, template_id: str) -> EditorState:
    """Switch to another template.

    Clears raw values, type overrides and generated values, and bumps the
    revision so in-flight generation results are discarded. Unknown ids
    leave the snapshot unchanged.
    """
    found = find_template(template_id, state.templates)
    if found is None:
        logger.warning(f"Ignoring selection of unknown template: {template_id}")
        return state

    logger.info(f"Selected template: {found.id}")
    return _evolve(
        state,
        selected_template_id=found.id,
        content=found.content,
        values={},
        type_overrides={},
        generated={},
        is_generating=False,
        error_message=None,
        revision=state.revision + 1,
    )


def set_content(state: EditorState, content: str) -> EditorState:
    """Replace the editor text."""
    return _evolve(state, content=content)


def update_value(state: EditorState, name: str, raw: RawInput) -> EditorState:
    """Store the raw value for ``name`` in the shape its current type expects."""
    value = coerce_value(raw, resolve_type(name, state.type_overrides))
    return _evolve(state, values={**state.values, name: value})


def set_type(state: EditorState, name: str, placeholder_type: PlaceholderType | str) -> EditorState:
    """Override the type of ``name``; overrides matching the convention are pruned."""
    overrides = set_type_override(state.type_overrides, name, placeholder_type)
    return _evolve(state, type_overrides=overrides)


def begin_generation(state: EditorState) -> EditorState:
    """Mark a generation request as in flight."""
    return _evolve(state, is_generating=True, error_message=None)


def apply_generation(
    state: EditorState, revision: int, values: Mapping[str, Any] | None
) -> EditorState:
    """Replace the generated layer with a generation response.

    Responses for an older revision are dropped.
    """
    if revision != state.revision:
        logger.info(f"Discarding stale generation result (revision {revision} != {state.revision})")
        return state

    generated = normalize_generated(placeholders(state), values)
    return _evolve(state, generated=generated, is_generating=False, error_message=None)


def fail_generation(state: EditorState, revision: int, message: str) -> EditorState:
    """Record a failed generation request; generated values are kept."""
    if revision != state.revision:
        logger.info(f"Discarding stale generation failure (revision {revision} != {state.revision})")
        return state
    return _evolve(state, is_generating=False, error_message=message)


# =============================================================================
# Derived views
# =============================================================================


def placeholders(state: EditorState) -> list[str]:
    return scan_placeholders(state.content)


def placeholder_types(state: EditorState) -> dict[str, PlaceholderType]:
    return resolve_types(placeholders(state), state.type_overrides)


def merged_values(state: EditorState) -> dict[str, str]:
    """Final markdown for each placeholder in the current document."""
    return merge_values(
        placeholders(state), placeholder_types(state), state.values, state.generated
    )


def context_values(state: EditorState) -> dict[str, str]:
    """Plain-text context for each placeholder, ignoring generated values."""
    return build_context(placeholders(state), placeholder_types(state), state.values)


def rendered_document(state: EditorState) -> str:
    """The current document with every placeholder substituted."""
    return fill_document(state.content, merged_values(state))


def generation_request(state: EditorState) -> GenerationRequest:
    """Build the request sent to the generation service."""
    names = placeholders(state)
    return GenerationRequest(
        template=state.content,
        placeholders=names,
        context=context_values(state),
        types=resolve_types(names, state.type_overrides),
    )
