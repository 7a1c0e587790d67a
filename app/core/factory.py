"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different generator implementations at runtime based on
configuration or environment variables.
"""

import logging

from app.core.config import Settings, get_settings
from app.interfaces.generator import BaseContentGenerator
from app.strategies.generators import OpenAIPlaceholderGenerator, PassthroughGenerator

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        generator = factory.get_generator()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._generator_cache: BaseContentGenerator | None = None

    def get_generator(self, generator_type: str | None = None) -> BaseContentGenerator:
        """Get a generator instance based on the specified type.

        A missing OpenAI key does not fail here; the generator reports it
        when a request is made.

        Args:
            generator_type: The generator type to instantiate. If None, uses settings.

        Returns:
            A BaseContentGenerator implementation instance.

        Raises:
            ValueError: If the generator type is unknown.
        """
        if self._generator_cache is None or generator_type is not None:
            generator_type = generator_type or self._settings.generator_type

            logger.info(f"Instantiating generator: {generator_type}")

            match generator_type:
                case "openai":
                    if not self._settings.openai_api_key:
                        logger.warning("OPENAI_API_KEY is not set; generation requests will fail")
                    self._generator_cache = OpenAIPlaceholderGenerator(
                        api_key=self._settings.openai_api_key,
                        model=self._settings.llm_chat_model,
                        temperature=self._settings.llm_temperature,
                        base_url=self._settings.openai_base_url,
                        organization=self._settings.openai_organization,
                        timeout=self._settings.llm_timeout,
                    )
                case "passthrough":
                    self._generator_cache = PassthroughGenerator()
                case _:
                    raise ValueError(
                        f"Unknown generator type: {generator_type}. "
                        f"Valid options: 'openai', 'passthrough'"
                    )

        return self._generator_cache
