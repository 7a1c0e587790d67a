"""Concrete strategy implementations."""

from app.strategies.generators import (
    OpenAIPlaceholderGenerator,
    PassthroughGenerator,
)
from app.strategies.template_engine import PlaceholderFillService

__all__ = [
    "OpenAIPlaceholderGenerator",
    "PassthroughGenerator",
    "PlaceholderFillService",
]
