"""FastAPI dependencies for dependency injection.

Provides reusable dependencies for routes including:
- Component factory
- Content generator
- Placeholder fill service
"""

import logging

from fastapi import Depends, HTTPException, status

from app.core.config import Settings, get_settings
from app.core.factory import ComponentFactory
from app.interfaces.generator import BaseContentGenerator
from app.strategies.template_engine import PlaceholderFillService

logger = logging.getLogger(__name__)

_factory: ComponentFactory | None = None


def get_factory(settings: Settings = Depends(get_settings)) -> ComponentFactory:
    """Return the process-wide component factory."""
    global _factory
    if _factory is None:
        _factory = ComponentFactory(settings)
    return _factory


def get_generator(factory: ComponentFactory = Depends(get_factory)) -> BaseContentGenerator:
    """Dependency for the configured content generator.

    Raises:
        HTTPException: If the configured generator type is unknown.
    """
    try:
        return factory.get_generator()
    except ValueError as e:
        logger.error(f"Generator configuration error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e


def get_fill_service(
    generator: BaseContentGenerator = Depends(get_generator),
) -> PlaceholderFillService:
    """Dependency for the placeholder fill service."""
    return PlaceholderFillService(generator)
