"""Template engine strategies.

Implements placeholder scanning, type resolution, value conversion and
merging of generated and user-entered values for markdown templates.
"""

from app.strategies.template_engine.catalog import DEFAULT_TEMPLATES, find_template
from app.strategies.template_engine.codec import (
    coerce_value,
    render_value,
    to_context,
    to_editable_list,
    to_final_list,
)
from app.strategies.template_engine.merge import (
    build_context,
    fill_document,
    merge_values,
    normalize_generated,
)
from app.strategies.template_engine.models import (
    EditorState,
    ListValue,
    PlaceholderType,
    TableValue,
    Template,
    TextValue,
)
from app.strategies.template_engine.resolver import (
    default_type,
    resolve_type,
    set_type_override,
)
from app.strategies.template_engine.scanner import scan_placeholders
from app.strategies.template_engine.service import PlaceholderFillService

__all__ = [
    "DEFAULT_TEMPLATES",
    "EditorState",
    "ListValue",
    "PlaceholderFillService",
    "PlaceholderType",
    "TableValue",
    "Template",
    "TextValue",
    "build_context",
    "coerce_value",
    "default_type",
    "fill_document",
    "find_template",
    "merge_values",
    "normalize_generated",
    "render_value",
    "resolve_type",
    "scan_placeholders",
    "set_type_override",
    "to_context",
    "to_editable_list",
    "to_final_list",
]
