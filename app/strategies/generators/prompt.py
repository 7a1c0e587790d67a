"""Prompt construction for placeholder generation."""

from app.interfaces.generator import GenerationRequest
from app.strategies.template_engine.models import PlaceholderType
from app.strategies.template_engine.resolver import resolve_type

SYSTEM_PROMPT = (
    "You are a meticulous assistant that fills in markdown templates using user hints. "
    "Always respond with valid JSON."
)

FILL_PROMPT = """You are a writing assistant that completes markdown templates.
Template markdown:
\"\"\"
{template}
\"\"\"

The template includes placeholders in double curly braces like {{{{placeholder}}}}.
Fill each placeholder with concise, professional markdown content. Respect markdown syntax and keep tables intact.

Guidance by type:
- Placeholders marked as tables must be rendered as markdown tables (| columns | rows |) using the provided CSV context when available.
- Placeholders marked as bullet lists should be rendered as bullet lists.

List of placeholders:
{placeholder_list}

User provided context for placeholders:
{context_entries}

Respond ONLY with a valid JSON object with the following shape:
{{
  "values": {{
    "placeholder_name": "filled markdown content"
  }}
}}
Ensure every placeholder listed is present in the JSON."""


def describe_placeholder(name: str, placeholder_type: PlaceholderType | str | None = None) -> str:
    """Return the placeholder name annotated with its rendering hint."""
    resolved = resolve_type(name, {name: placeholder_type} if placeholder_type else None)
    if resolved == PlaceholderType.TABLE:
        return f"{name} (render as a markdown table using pipes)"
    if resolved == PlaceholderType.LIST:
        return f"{name} (render as a bullet list)"
    return name


def build_prompt(request: GenerationRequest) -> str:
    """Render the user prompt for a generation request."""
    placeholder_list = "\n".join(
        f"- {describe_placeholder(name, request.types.get(name))}"
        for name in request.placeholders
    )
    context_entries = "\n".join(
        f"- {key}: {value}" for key, value in request.context.items()
    ) or "No additional context provided."

    return FILL_PROMPT.format(
        template=request.template,
        placeholder_list=placeholder_list,
        context_entries=context_entries,
    )
