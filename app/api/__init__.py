"""FastAPI routers and dependencies."""

from app.api.deps import get_factory, get_fill_service, get_generator
from app.api.placeholders import router as placeholders_router
from app.api.templates import router as templates_router

__all__ = [
    "get_factory",
    "get_fill_service",
    "get_generator",
    "placeholders_router",
    "templates_router",
]
