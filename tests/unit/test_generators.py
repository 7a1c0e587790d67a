"""Unit tests for generation strategies, the prompt builder and the factory."""

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import OpenAIError

from app.core.config import Settings
from app.core.factory import ComponentFactory
from app.interfaces.generator import (
    GenerationError,
    GenerationRequest,
    InvalidGenerationRequest,
    MalformedResponseError,
    MissingAPIKeyError,
)
from app.strategies.generators import OpenAIPlaceholderGenerator, PassthroughGenerator
from app.strategies.generators.prompt import build_prompt, describe_placeholder


def _completion(content):
    """Build a minimal chat completion object."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def request_payload():
    """Create a generation request for two placeholders."""
    return GenerationRequest(
        template="# {{title}}\n{{team_table}}",
        placeholders=["title", "team_table"],
        context={"title": "Apollo", "team_table": "Name | Role"},
    )


# =============================================================================
# Prompt Tests
# =============================================================================


class TestPrompt:
    """Test suite for prompt construction."""

    def test_describe_by_suffix(self):
        """Test rendering hints derived from the name."""
        assert describe_placeholder("budget_table") == (
            "budget_table (render as a markdown table using pipes)"
        )
        assert describe_placeholder("goal_items") == "goal_items (render as a bullet list)"
        assert describe_placeholder("title") == "title"

    def test_describe_with_explicit_type(self):
        """Test that an explicit type overrides the suffix."""
        assert describe_placeholder("notes", "list") == "notes (render as a bullet list)"
        assert describe_placeholder("budget_table", "text") == "budget_table"

    def test_build_prompt(self, request_payload):
        """Test that the prompt embeds template, placeholders and context."""
        prompt = build_prompt(request_payload)

        assert "# {{title}}\n{{team_table}}" in prompt
        assert "- team_table (render as a markdown table using pipes)" in prompt
        assert "- title: Apollo" in prompt
        assert "{{placeholder}}" in prompt
        assert '"values"' in prompt

    def test_build_prompt_without_context(self):
        """Test the fallback line when no context was given."""
        prompt = build_prompt(GenerationRequest(template="{{a}}", placeholders=["a"]))
        assert "No additional context provided." in prompt


# =============================================================================
# OpenAI Generator Tests
# =============================================================================


class TestOpenAIPlaceholderGenerator:
    """Test suite for OpenAIPlaceholderGenerator."""

    @pytest.fixture
    def client(self):
        """Create a mocked AsyncOpenAI client."""
        client = MagicMock()
        client.chat.completions.create = AsyncMock()
        return client

    def test_generate_fills_missing_names(self, client, request_payload):
        """Test that names absent from the reply map to empty strings."""
        client.chat.completions.create.return_value = _completion(
            json.dumps({"values": {"title": "Apollo Program"}})
        )
        generator = OpenAIPlaceholderGenerator(api_key="test-key", client=client)

        values = asyncio.run(generator.generate(request_payload))

        assert values == {"title": "Apollo Program", "team_table": ""}
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][0]["role"] == "system"
        assert "team_table" in kwargs["messages"][1]["content"]

    def test_reply_without_values_object(self, client, request_payload):
        """Test a JSON reply missing the values key."""
        client.chat.completions.create.return_value = _completion("{}")
        generator = OpenAIPlaceholderGenerator(api_key="test-key", client=client)

        values = asyncio.run(generator.generate(request_payload))

        assert values == {"title": "", "team_table": ""}

    def test_invalid_json(self, client, request_payload):
        """Test that non-JSON replies raise MalformedResponseError."""
        client.chat.completions.create.return_value = _completion("not json")
        generator = OpenAIPlaceholderGenerator(api_key="test-key", client=client)

        with pytest.raises(MalformedResponseError):
            asyncio.run(generator.generate(request_payload))

    def test_empty_reply(self, client, request_payload):
        """Test that an empty reply raises MalformedResponseError."""
        client.chat.completions.create.return_value = _completion(None)
        generator = OpenAIPlaceholderGenerator(api_key="test-key", client=client)

        with pytest.raises(MalformedResponseError):
            asyncio.run(generator.generate(request_payload))

    def test_api_error(self, client, request_payload):
        """Test that client errors surface as GenerationError."""
        client.chat.completions.create.side_effect = OpenAIError("boom")
        generator = OpenAIPlaceholderGenerator(api_key="test-key", client=client)

        with pytest.raises(GenerationError) as exc_info:
            asyncio.run(generator.generate(request_payload))
        assert exc_info.value.status_code == 502

    def test_missing_api_key(self, request_payload):
        """Test that generation without credentials fails with a 500 error."""
        generator = OpenAIPlaceholderGenerator(api_key="")

        with pytest.raises(MissingAPIKeyError) as exc_info:
            asyncio.run(generator.generate(request_payload))
        assert exc_info.value.status_code == 500

    def test_no_placeholders(self, client):
        """Test that empty requests are rejected before calling the API."""
        generator = OpenAIPlaceholderGenerator(api_key="test-key", client=client)

        with pytest.raises(InvalidGenerationRequest):
            asyncio.run(generator.generate(GenerationRequest(template="", placeholders=[])))
        client.chat.completions.create.assert_not_called()


class TestPassthroughGenerator:
    """Test suite for PassthroughGenerator."""

    def test_returns_empty_values(self, request_payload):
        """Test that every name maps to an empty string."""
        values = asyncio.run(PassthroughGenerator().generate(request_payload))
        assert values == {"title": "", "team_table": ""}


# =============================================================================
# Factory Tests
# =============================================================================


class TestComponentFactory:
    """Test suite for generator selection."""

    def test_passthrough(self):
        """Test selecting the offline generator."""
        factory = ComponentFactory(Settings(generator_type="Passthrough"))
        assert isinstance(factory.get_generator(), PassthroughGenerator)

    def test_openai_without_key(self):
        """Test that a missing key does not fail at construction."""
        factory = ComponentFactory(Settings(generator_type="openai", openai_api_key=""))
        generator = factory.get_generator()

        assert isinstance(generator, OpenAIPlaceholderGenerator)
        assert generator.name == "openai:gpt-4o-mini"

    def test_generator_is_cached(self):
        """Test that repeated calls reuse the instance."""
        factory = ComponentFactory(Settings(generator_type="passthrough"))
        assert factory.get_generator() is factory.get_generator()

    def test_unknown_generator(self):
        """Test that unknown types raise ValueError."""
        factory = ComponentFactory(Settings(generator_type="passthrough"))
        with pytest.raises(ValueError):
            factory.get_generator("mystery")
