"""Placeholder API routes.

Exposes the placeholder engine (scan, render, list normalization) and the
generation boundary over HTTP. All routes are stateless: the caller sends
the document and values with every request.
"""

import logging
from collections.abc import Iterable, Mapping

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_generator
from app.api.schemas import (
    EditableListRequest,
    EditableListResponse,
    GenerateRequest,
    GenerateResponse,
    PlaceholderInfo,
    RenderRequest,
    RenderResponse,
    ScanRequest,
    ScanResponse,
)
from app.interfaces.generator import BaseContentGenerator, GenerationError, GenerationRequest
from app.strategies.template_engine import (
    build_context,
    default_type,
    fill_document,
    merge_values,
    render_value,
    resolve_type,
    scan_placeholders,
    to_editable_list,
    to_final_list,
)
from app.strategies.template_engine.models import PlaceholderType
from app.strategies.template_engine.resolver import resolve_types

logger = logging.getLogger(__name__)

router = APIRouter(tags=["placeholders"])


def describe_placeholders(
    names: Iterable[str], overrides: Mapping[str, PlaceholderType]
) -> list[PlaceholderInfo]:
    """Build the API view of each placeholder name."""
    infos = []
    for name in names:
        resolved = resolve_type(name, overrides)
        convention = default_type(name)
        infos.append(
            PlaceholderInfo(
                name=name,
                type=resolved,
                default_type=convention,
                overridden=resolved != convention,
            )
        )
    return infos


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/placeholders/scan", response_model=ScanResponse)
async def scan(request: ScanRequest) -> ScanResponse:
    """List the unique placeholders of a document with their types."""
    names = scan_placeholders(request.content)
    logger.info(f"Scanned document: {len(names)} placeholders")
    return ScanResponse(placeholders=describe_placeholders(names, request.type_overrides))


@router.post("/placeholders/render", response_model=RenderResponse)
async def render(request: RenderRequest) -> RenderResponse:
    """Merge generated and raw values and substitute them into the document."""
    names = scan_placeholders(request.content)
    types = resolve_types(names, request.type_overrides)

    merged = merge_values(names, types, request.values, request.generated)
    context = build_context(names, types, request.values)

    logger.info(f"Rendered document with {len(merged)} placeholders")
    return RenderResponse(
        merged=merged,
        context=context,
        document=fill_document(request.content, merged),
    )


@router.post("/placeholders/editable-list", response_model=EditableListResponse)
async def editable_list(request: EditableListRequest) -> EditableListResponse:
    """Return the editable, final and rendered forms of a list value."""
    return EditableListResponse(
        editable=to_editable_list(request.value),
        final=to_final_list(request.value),
        rendered=render_value(request.value, PlaceholderType.LIST),
    )


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    request: GenerateRequest,
    generator: BaseContentGenerator = Depends(get_generator),
) -> GenerateResponse:
    """Ask the generation service to fill the requested placeholders.

    Raises:
        HTTPException: 400 without placeholders, 500 without credentials,
            502 when the backend fails or answers with malformed content.
    """
    try:
        logger.info(
            f"Generation requested for {len(request.placeholders)} placeholders "
            f"via {generator.name}"
        )
        values = await generator.generate(
            GenerationRequest(
                template=request.template,
                placeholders=request.placeholders,
                context=request.context,
                types={name: kind.value for name, kind in request.types.items()},
            )
        )
        return GenerateResponse(values=values)

    except GenerationError as e:
        logger.warning(f"Generation failed ({e.error_code}): {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Generation failed unexpectedly: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Generation failed: {str(e)}",
        ) from e
