"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from pydantic import BaseModel, Field

from app.strategies.template_engine.models import EditorState, PlaceholderType, Template

RawValueField = str | list[str] | None


# =============================================================================
# Placeholder Schemas
# =============================================================================


class PlaceholderInfo(BaseModel):
    """A placeholder found in a document with its resolved type."""

    name: str = Field(description="Trimmed placeholder name")
    type: PlaceholderType = Field(description="Resolved type (override or convention)")
    default_type: PlaceholderType = Field(description="Type implied by the naming convention")
    overridden: bool = Field(default=False, description="Whether an override is in effect")


class ScanRequest(BaseModel):
    """Request to list the placeholders of a markdown document."""

    content: str = Field(description="Markdown document text")
    type_overrides: dict[str, PlaceholderType] = Field(
        default_factory=dict, description="Per-name type overrides"
    )


class ScanResponse(BaseModel):
    """Placeholders in order of first appearance."""

    placeholders: list[PlaceholderInfo]


class RenderRequest(BaseModel):
    """Request to merge raw and generated values into a document."""

    content: str = Field(description="Markdown document text")
    values: dict[str, RawValueField] = Field(
        default_factory=dict, description="Raw user value per placeholder"
    )
    type_overrides: dict[str, PlaceholderType] = Field(default_factory=dict)
    generated: dict[str, str] = Field(
        default_factory=dict, description="Generated value per placeholder"
    )


class RenderResponse(BaseModel):
    """Merged values and the filled document."""

    merged: dict[str, str] = Field(description="Final markdown per placeholder")
    context: dict[str, str] = Field(description="Plain-text context per placeholder")
    document: str = Field(description="Document with every placeholder substituted")


class EditableListRequest(BaseModel):
    """A raw list value to normalize."""

    value: RawValueField = None


class EditableListResponse(BaseModel):
    """The editable, final and rendered forms of a list value."""

    editable: list[str]
    final: list[str]
    rendered: str


# =============================================================================
# Generation Schemas
# =============================================================================


class GenerateRequest(BaseModel):
    """Request body of the generation endpoint."""

    template: str = Field(description="Markdown template text")
    placeholders: list[str] = Field(description="Placeholder names to fill")
    context: dict[str, str] = Field(
        default_factory=dict, description="Plain-text user context per placeholder"
    )
    types: dict[str, PlaceholderType] = Field(
        default_factory=dict, description="Optional resolved type per placeholder"
    )


class GenerateResponse(BaseModel):
    """Generated value per requested placeholder."""

    values: dict[str, str]


# =============================================================================
# Template & Session Schemas
# =============================================================================


class TemplateListResponse(BaseModel):
    """Available templates."""

    templates: list[Template]
    total: int


class SelectTemplateRequest(BaseModel):
    """Switch the active template of an editor snapshot."""

    state: EditorState
    template_id: str


class SessionRequest(BaseModel):
    """An editor snapshot to act on."""

    state: EditorState


class SessionResponse(BaseModel):
    """A new editor snapshot with its derived views."""

    state: EditorState
    placeholders: list[PlaceholderInfo]
    merged: dict[str, str]
    document: str


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
