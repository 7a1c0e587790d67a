"""Content generation interfaces.

Defines the abstract base class for services that fill placeholders with
generated markdown, plus the errors they raise.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GenerationRequest:
    """Everything a generator needs to fill a template's placeholders.

    Attributes:
        template: The markdown template text.
        placeholders: Placeholder names to fill, in document order.
        context: Plain-text user input per placeholder.
        types: Resolved placeholder type tag ("text", "list", "table") per name.
    """

    template: str
    placeholders: list[str]
    context: dict[str, str] = field(default_factory=dict)
    types: dict[str, str] = field(default_factory=dict)


class BaseContentGenerator(ABC):
    """Abstract base class for placeholder generation strategies."""

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> dict[str, str]:
        """Generate a value for every requested placeholder.

        Args:
            request: The template, placeholder names and context.

        Returns:
            Mapping of placeholder name to generated markdown. Every name in
            ``request.placeholders`` is present; names the service could not
            fill map to an empty string.

        Raises:
            GenerationError: If generation fails.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a short identifier for logging."""
        ...


class GenerationError(Exception):
    """Exception raised when placeholder generation fails."""

    status_code = 502
    error_code = "GENERATION_FAILED"


class InvalidGenerationRequest(GenerationError):
    """The request cannot be sent, e.g. it names no placeholders."""

    status_code = 400
    error_code = "INVALID_REQUEST"


class MissingAPIKeyError(GenerationError):
    """The generation backend has no credentials configured."""

    status_code = 500
    error_code = "MISSING_API_KEY"


class MalformedResponseError(GenerationError):
    """The backend returned no content or content that is not valid JSON."""

    status_code = 502
    error_code = "MALFORMED_RESPONSE"
