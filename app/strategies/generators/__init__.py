"""Placeholder generation strategies."""

from app.strategies.generators.openai import OpenAIPlaceholderGenerator
from app.strategies.generators.passthrough import PassthroughGenerator

__all__ = [
    "OpenAIPlaceholderGenerator",
    "PassthroughGenerator",
]
