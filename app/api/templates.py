"""Template and editor session API routes.

Lists the built-in templates and applies editor transitions to caller-owned
snapshots: the client sends its current ``EditorState`` and receives a new
one back.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.placeholders import describe_placeholders
from app.api.deps import get_fill_service
from app.api.schemas import (
    SelectTemplateRequest,
    SessionRequest,
    SessionResponse,
    TemplateListResponse,
)
from app.strategies.template_engine import DEFAULT_TEMPLATES, PlaceholderFillService, find_template
from app.strategies.template_engine import state as editor
from app.strategies.template_engine.models import EditorState, Template

logger = logging.getLogger(__name__)

router = APIRouter(tags=["templates"])


def _session_response(state: EditorState) -> SessionResponse:
    return SessionResponse(
        state=state,
        placeholders=describe_placeholders(editor.placeholders(state), state.type_overrides),
        merged=editor.merged_values(state),
        document=editor.rendered_document(state),
    )


# =============================================================================
# Template Endpoints
# =============================================================================


@router.get("/templates", response_model=TemplateListResponse)
async def list_templates() -> TemplateListResponse:
    """List the built-in templates."""
    return TemplateListResponse(templates=list(DEFAULT_TEMPLATES), total=len(DEFAULT_TEMPLATES))


@router.get("/templates/{template_id}", response_model=Template)
async def get_template(template_id: str) -> Template:
    """Fetch one built-in template.

    Raises:
        HTTPException: If no template has this id.
    """
    template = find_template(template_id)
    if template is None:
        logger.warning(f"Template not found: {template_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Template not found: {template_id}",
        )
    return template


# =============================================================================
# Session Endpoints
# =============================================================================


@router.post("/session", response_model=SessionResponse)
async def new_session() -> SessionResponse:
    """Create a fresh editor snapshot with the first template selected."""
    return _session_response(editor.initial_state())


@router.post("/session/select", response_model=SessionResponse)
async def select_template(request: SelectTemplateRequest) -> SessionResponse:
    """Switch the snapshot to another template, clearing all entered values.

    Raises:
        HTTPException: If the template id is unknown.
    """
    if find_template(request.template_id, request.state.templates) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Template not found: {request.template_id}",
        )
    return _session_response(editor.select_template(request.state, request.template_id))


@router.post("/session/generate", response_model=SessionResponse)
async def generate_session(
    request: SessionRequest,
    service: PlaceholderFillService = Depends(get_fill_service),
) -> SessionResponse:
    """Fill the snapshot's placeholders with generated values.

    Generation failures are reported in ``state.error_message``; the merged
    values then fall back to the user's input.
    """
    try:
        state = await service.generate(request.state)
        return _session_response(state)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Session generation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Session generation failed: {str(e)}",
        ) from e
