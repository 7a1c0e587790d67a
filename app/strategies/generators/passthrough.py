"""Offline generator.

Returns an empty value for every placeholder so the merge falls back to the
user's own input. Useful for local development without API credentials.
"""

import logging

from app.interfaces.generator import (
    BaseContentGenerator,
    GenerationRequest,
    InvalidGenerationRequest,
)

logger = logging.getLogger(__name__)


class PassthroughGenerator(BaseContentGenerator):
    """Generator that never produces content."""

    @property
    def name(self) -> str:
        return "passthrough"

    async def generate(self, request: GenerationRequest) -> dict[str, str]:
        if not request.placeholders:
            raise InvalidGenerationRequest("Invalid payload: No placeholders supplied.")
        logger.debug(f"Passthrough generation for {len(request.placeholders)} placeholders")
        return {name: "" for name in request.placeholders}
