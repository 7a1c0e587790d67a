"""Built-in markdown templates."""

from app.strategies.template_engine.models import Template

PROJECT_PROPOSAL = Template(
    id="project-proposal",
    name="Project Proposal",
    description="A concise proposal structure for new initiatives.",
    content="""# Project Proposal: {{project_title}}

## Executive Summary
{{executive_summary}}

## Objectives
{{objective_list}}

## Timeline
{{timeline_table}}

## Budget Overview
{{budget_overview}}

## Call To Action
{{call_to_action}}
""",
)

MEETING_NOTES = Template(
    id="meeting-notes",
    name="Meeting Notes",
    description="Structured meeting note template with decisions and action items.",
    content="""# Meeting Notes: {{meeting_topic}}

**Date:** {{meeting_date}}
**Facilitator:** {{facilitator}}

## Agenda Highlights
{{agenda_items}}

## Key Decisions
{{decisions}}

## Action Items
{{action_items}}

## Attendees
{{attendees_csv}}
""",
)

DEFAULT_TEMPLATES: tuple[Template, ...] = (PROJECT_PROPOSAL, MEETING_NOTES)


def find_template(template_id: str, templates: tuple[Template, ...] = DEFAULT_TEMPLATES) -> Template | None:
    """Return the template with ``template_id`` or None."""
    return next((template for template in templates if template.id == template_id), None)
