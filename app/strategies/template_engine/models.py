"""Template engine domain models.

Pydantic models for placeholder types, stored raw values, templates and
the immutable editor snapshot passed through the state operations.
"""

import enum
from collections.abc import Sequence
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class PlaceholderType(str, enum.Enum):
    """Semantic type of a placeholder, controls how its value renders."""

    TEXT = "text"
    LIST = "list"
    TABLE = "table"


class TextValue(BaseModel):
    """Free-form text entered for a ``text`` placeholder."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str = ""

    @property
    def raw(self) -> str:
        return self.text


class ListValue(BaseModel):
    """Editable line items entered for a ``list`` placeholder."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    items: list[str] = Field(default_factory=lambda: [""])

    @property
    def raw(self) -> list[str]:
        return list(self.items)


class TableValue(BaseModel):
    """CSV text entered for a ``table`` placeholder."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["table"] = "table"
    csv: str = ""

    @property
    def raw(self) -> str:
        return self.csv


PlaceholderValue = Annotated[
    TextValue | ListValue | TableValue,
    Field(discriminator="kind"),
]

# Anything a caller may hand to the codec.
RawInput = TextValue | ListValue | TableValue | str | Sequence[str] | None


class Template(BaseModel):
    """A markdown template the editor can switch to."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable template identifier")
    name: str = Field(description="Human readable template name")
    description: str = Field(default="", description="Short summary shown in pickers")
    content: str = Field(description="Markdown body containing {{placeholders}}")


class EditorState(BaseModel):
    """Caller-owned snapshot of everything the editor knows.

    Every state operation returns a new snapshot; instances are never
    mutated in place.

    Attributes:
        templates: Catalog of templates available for selection.
        selected_template_id: Id of the active template.
        content: Current markdown text in the editor.
        values: Raw value per placeholder name.
        type_overrides: Sparse name -> type mapping, only deltas from the
            naming convention are stored.
        generated: Values returned by the last generation response.
        is_generating: Whether a generation request is in flight.
        error_message: Message of the last failed generation, if any.
        revision: Incremented on template switch; generation responses
            tagged with an older revision are discarded.
    """

    model_config = ConfigDict(frozen=True)

    templates: tuple[Template, ...] = ()
    selected_template_id: str = ""
    content: str = ""
    values: dict[str, PlaceholderValue] = Field(default_factory=dict)
    type_overrides: dict[str, PlaceholderType] = Field(default_factory=dict)
    generated: dict[str, str] = Field(default_factory=dict)
    is_generating: bool = False
    error_message: str | None = None
    revision: int = 0
