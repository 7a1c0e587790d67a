"""Placeholder fill service.

Runs one generation round trip for an editor snapshot: builds the request
from the snapshot, awaits the generator and folds the result (or failure)
back into a new snapshot.
"""

import logging

from app.interfaces.generator import BaseContentGenerator, GenerationError
from app.strategies.template_engine import state as editor
from app.strategies.template_engine.models import EditorState

logger = logging.getLogger(__name__)


class PlaceholderFillService:
    """Fills editor snapshots using a content generator."""

    def __init__(self, generator: BaseContentGenerator) -> None:
        self._generator = generator

    async def generate(self, state: EditorState) -> EditorState:
        """Request generated values for every placeholder in ``state``.

        Generation errors are recorded on the returned snapshot instead of
        raised; the merge then falls back to the user's raw values.

        Args:
            state: Current editor snapshot.

        Returns:
            A new snapshot with the generated layer replaced, or with
            ``error_message`` set when generation failed.
        """
        request = editor.generation_request(state)
        pending = editor.begin_generation(state)
        revision = pending.revision

        logger.info(
            f"Generating {len(request.placeholders)} placeholders with {self._generator.name} "
            f"(template={state.selected_template_id}, revision={revision})"
        )

        try:
            values = await self._generator.generate(request)
        except GenerationError as e:
            logger.error(f"Placeholder generation failed: {e}")
            return editor.fail_generation(pending, revision, str(e))

        return editor.apply_generation(pending, revision, values)
