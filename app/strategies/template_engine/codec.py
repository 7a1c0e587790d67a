"""Placeholder value codec.

Converts a placeholder's raw value between the editable form shown in the
editor, the markdown rendering substituted into the document and the plain
text context sent along with generation requests.

Every function here is total: malformed or empty input degrades to empty
output instead of raising.
"""

import logging
import re
from collections.abc import Sequence

from app.strategies.template_engine.models import (
    ListValue,
    PlaceholderType,
    PlaceholderValue,
    RawInput,
    TableValue,
    TextValue,
)

logger = logging.getLogger(__name__)

# Leading "-", "*", "1." or "1)" list marker
LIST_MARKER_PATTERN = re.compile(r"^(?:[-*]|\d+[.)])\s*")


def _unwrap(raw: RawInput) -> str | list[str]:
    """Reduce any accepted input to a plain string or list of strings."""
    if raw is None:
        return ""
    if isinstance(raw, (TextValue, ListValue, TableValue)):
        return raw.raw
    if isinstance(raw, str):
        return raw
    if isinstance(raw, Sequence):
        return ["" if item is None else str(item) for item in raw]
    return str(raw)


def _as_type(placeholder_type: PlaceholderType | str) -> PlaceholderType:
    try:
        return PlaceholderType(placeholder_type)
    except ValueError:
        return PlaceholderType.TEXT


def _strip_marker(line: str) -> str:
    return LIST_MARKER_PATTERN.sub("", line.strip(), count=1).strip()


def _split_lines(text: str) -> list[str]:
    items = [_strip_marker(line) for line in text.splitlines()]
    return [item for item in items if item]


# =============================================================================
# List forms
# =============================================================================


def to_editable_list(raw: RawInput) -> list[str]:
    """Return the list items an editor should show.

    Sequences are copied as-is. Strings are split on line breaks with list
    markers and blank lines removed. The result always holds at least one
    (possibly blank) entry.
    """
    value = _unwrap(raw)
    if isinstance(value, list):
        items = list(value)
    else:
        items = _split_lines(value)
    return items or [""]


def to_final_list(raw: RawInput) -> list[str]:
    """Return the trimmed, non-blank list items used for rendering."""
    value = _unwrap(raw)
    if isinstance(value, list):
        return [item.strip() for item in value if item.strip()]
    return _split_lines(value)


# =============================================================================
# Text and CSV forms
# =============================================================================


def to_text(raw: RawInput) -> str:
    """Return the raw value as one string, joining sequences with newlines."""
    value = _unwrap(raw)
    if isinstance(value, list):
        return "\n".join(value)
    return value


def to_csv_text(raw: RawInput) -> str:
    """Return the CSV string stored for a table placeholder."""
    return to_text(raw)


def parse_csv_rows(raw: RawInput) -> list[list[str]]:
    """Split CSV text into trimmed rows of trimmed cells.

    Blank lines are skipped. Quoting is not supported; every comma
    separates cells.
    """
    rows = []
    for line in to_csv_text(raw).splitlines():
        line = line.strip()
        if not line:
            continue
        rows.append([cell.strip() for cell in line.split(",")])
    return rows


# =============================================================================
# Markdown rendering
# =============================================================================


def render_list(raw: RawInput) -> str:
    """Render list items as a markdown bullet list."""
    return "\n".join(f"- {item}" for item in to_final_list(raw))


def _escape_cell(cell: str) -> str:
    return cell.replace("|", "\\|")


def _table_line(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_table(raw: RawInput) -> str:
    """Render CSV text as a markdown table.

    The first row is the header; blank header cells become ``Column <n>``.
    Short rows are padded with empty cells. A table without body rows
    renders as an empty string.
    """
    rows = parse_csv_rows(raw)
    if len(rows) < 2:
        return ""

    width = max(len(row) for row in rows)
    padded = [row + [""] * (width - len(row)) for row in rows]

    header = [
        _escape_cell(cell) if cell else f"Column {index}"
        for index, cell in enumerate(padded[0], start=1)
    ]
    lines = [_table_line(header), _table_line(["---"] * width)]
    lines.extend(_table_line([_escape_cell(cell) for cell in row]) for row in padded[1:])
    return "\n".join(lines)


def render_value(raw: RawInput, placeholder_type: PlaceholderType | str) -> str:
    """Render a raw value as markdown according to its placeholder type."""
    match _as_type(placeholder_type):
        case PlaceholderType.LIST:
            return render_list(raw)
        case PlaceholderType.TABLE:
            return render_table(raw)
        case _:
            return to_text(raw)


# =============================================================================
# Generation context
# =============================================================================


def to_context(raw: RawInput, placeholder_type: PlaceholderType | str) -> str:
    """Serialize a raw value as plain text for a generation request."""
    match _as_type(placeholder_type):
        case PlaceholderType.LIST:
            return "\n".join(to_final_list(raw))
        case PlaceholderType.TABLE:
            return "\n".join(" | ".join(row) for row in parse_csv_rows(raw))
        case _:
            return to_text(raw)


def coerce_value(raw: RawInput, placeholder_type: PlaceholderType | str) -> PlaceholderValue:
    """Build the stored value variant for a placeholder of the given type."""
    match _as_type(placeholder_type):
        case PlaceholderType.LIST:
            return ListValue(items=to_editable_list(raw))
        case PlaceholderType.TABLE:
            return TableValue(csv=to_csv_text(raw))
        case _:
            return TextValue(text=to_text(raw))
