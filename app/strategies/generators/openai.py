"""OpenAI-based placeholder generator.

Sends the template, placeholder list and user context to a chat completion
model and parses the JSON ``{"values": {...}}`` reply.
"""

import json
import logging

from openai import AsyncOpenAI, OpenAIError

from app.interfaces.generator import (
    BaseContentGenerator,
    GenerationError,
    GenerationRequest,
    InvalidGenerationRequest,
    MalformedResponseError,
    MissingAPIKeyError,
)
from app.strategies.generators.prompt import SYSTEM_PROMPT, build_prompt
from app.strategies.template_engine.merge import normalize_generated

logger = logging.getLogger(__name__)


class OpenAIPlaceholderGenerator(BaseContentGenerator):
    """Generator implementation using the OpenAI chat completions API.

    Works with any OpenAI-compatible endpoint (e.g. OpenRouter) through
    ``base_url``.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        base_url: str | None = None,
        organization: str | None = None,
        timeout: float = 60.0,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            api_key: OpenAI API key. An empty key makes every call fail with
                MissingAPIKeyError.
            model: Chat model name.
            temperature: Sampling temperature.
            base_url: Optional custom base URL for the API.
            organization: Optional OpenAI organization ID.
            timeout: Request timeout in seconds.
            client: Pre-built client, mainly for tests.
        """
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._client = client
        if self._client is None and api_key:
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                organization=organization,
                timeout=timeout,
            )

        logger.info(f"OpenAIPlaceholderGenerator initialized: model={model}")

    @property
    def name(self) -> str:
        return f"openai:{self._model}"

    async def generate(self, request: GenerationRequest) -> dict[str, str]:
        """Fill every placeholder in the request.

        Args:
            request: Template, placeholder names and context.

        Returns:
            Mapping of placeholder name to generated markdown; names missing
            from the model reply map to "".

        Raises:
            InvalidGenerationRequest: If no placeholders were supplied.
            MissingAPIKeyError: If no API key is configured.
            MalformedResponseError: If the reply is empty or not JSON.
            GenerationError: If the API call fails.
        """
        if not request.placeholders:
            raise InvalidGenerationRequest("Invalid payload: No placeholders supplied.")

        if self._client is None:
            raise MissingAPIKeyError(
                "Missing OpenAI API key. Set OPENAI_API_KEY in your environment."
            )

        logger.info(f"Requesting generation for {len(request.placeholders)} placeholders")

        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(request)},
                ],
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            logger.error(f"OpenAI request failed: {e}", exc_info=True)
            raise GenerationError(f"OpenAI request failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            logger.warning("OpenAI returned an empty response")
            raise MalformedResponseError("OpenAI did not return a response.")

        return self._parse_response(content, request.placeholders)

    def _parse_response(self, content: str, placeholders: list[str]) -> dict[str, str]:
        """Parse the model's JSON reply into a complete value mapping."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse OpenAI response: {e}; raw={content[:200]!r}")
            raise MalformedResponseError("Failed to parse AI response.") from e

        values = data.get("values") if isinstance(data, dict) else None
        if not isinstance(values, dict):
            logger.warning("OpenAI response has no 'values' object, treating as empty")
            values = {}

        logger.info(f"Generation response parsed: {len(values)} values")
        return normalize_generated(placeholders, values)
