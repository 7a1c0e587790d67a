"""Abstract base classes for placeholder generation strategies."""

from app.interfaces.generator import (
    BaseContentGenerator,
    GenerationError,
    GenerationRequest,
    InvalidGenerationRequest,
    MalformedResponseError,
    MissingAPIKeyError,
)

__all__ = [
    "BaseContentGenerator",
    "GenerationError",
    "GenerationRequest",
    "InvalidGenerationRequest",
    "MalformedResponseError",
    "MissingAPIKeyError",
]
