# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for LLMClient.

Tests the LLM client functionality including:
- Initialization from settings
- Completion request construction
- Error handling
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pydantic import SecretStr

from levixia_screening.core.config.settings import LLMSettings
from levixia_screening.core.intelligence.llm.client import (
    LLMClient,
    LLMError,
    LLMResponse,
)


def _mock_completion(content: str = "Hello") -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    response.choices[0].finish_reason = "stop"
    response.usage.prompt_tokens = 12
    response.usage.completion_tokens = 7
    return response


@pytest.mark.unit
class TestLLMClientInit:
    """Test cases for LLMClient initialization."""

    def test_default_initialization(self) -> None:
        """Test that default initialization uses settings values."""
        with patch("levixia_screening.core.intelligence.llm.client.get_settings") as mock_settings:
            mock_settings.return_value.llm = LLMSettings(
                model="ollama/qwen2.5:7b", request_timeout=60.0, max_retries=3
            )

            client = LLMClient()

            assert client.model == "ollama/qwen2.5:7b"
            assert client._timeout == 60.0
            assert client._max_retries == 3

    def test_custom_values_override_settings(self) -> None:
        """Test explicit arguments win over settings."""
        client = LLMClient(
            model="gpt-4o-mini",
            timeout=5.0,
            max_retries=0,
            llm_settings=LLMSettings(),
        )

        assert client.model == "gpt-4o-mini"
        assert client._timeout == 5.0
        assert client._max_retries == 0


@pytest.mark.unit
class TestLLMClientComplete:
    """Test cases for LLMClient.complete."""

    @pytest.mark.asyncio
    async def test_complete_builds_request(self) -> None:
        """Test system and user messages plus connection params are sent."""
        settings = LLMSettings(api_base="http://localhost:11434", api_key=SecretStr("secret"))
        client = LLMClient(llm_settings=settings)

        with patch(
            "levixia_screening.core.intelligence.llm.client.acompletion",
            new=AsyncMock(return_value=_mock_completion('{"ok": true}')),
        ) as mock_acompletion:
            response = await client.complete(
                prompt="Summarize",
                system_prompt="Be kind",
                temperature=0.3,
            )

        kwargs = mock_acompletion.call_args.kwargs
        assert [m["role"] for m in kwargs["messages"]] == ["system", "user"]
        assert kwargs["temperature"] == 0.3
        assert kwargs["api_base"] == "http://localhost:11434"
        assert kwargs["api_key"] == "secret"
        assert kwargs["num_retries"] == settings.max_retries
        assert "response_format" not in kwargs
        assert isinstance(response, LLMResponse)
        assert response.content == '{"ok": true}'
        assert response.total_tokens == 19

    @pytest.mark.asyncio
    async def test_empty_prompt_rejected(self) -> None:
        """Test empty prompts raise ValueError."""
        client = LLMClient(llm_settings=LLMSettings())

        with pytest.raises(ValueError):
            await client.complete(prompt="   ")

    @pytest.mark.asyncio
    async def test_provider_failure_wrapped(self) -> None:
        """Test provider exceptions are wrapped in LLMError."""
        client = LLMClient(model="ollama/qwen2.5:7b", llm_settings=LLMSettings())

        with patch(
            "levixia_screening.core.intelligence.llm.client.acompletion",
            new=AsyncMock(side_effect=ConnectionError("refused")),
        ):
            with pytest.raises(LLMError) as exc_info:
                await client.complete(prompt="Summarize")

        assert exc_info.value.model == "ollama/qwen2.5:7b"
        assert isinstance(exc_info.value.original_error, ConnectionError)

    @pytest.mark.asyncio
    async def test_json_mode_sets_response_format(self) -> None:
        """Test JSON mode requests a JSON object response."""
        client = LLMClient(llm_settings=LLMSettings())

        with patch(
            "levixia_screening.core.intelligence.llm.client.acompletion",
            new=AsyncMock(return_value=_mock_completion("{}")),
        ) as mock_acompletion:
            await client.complete(prompt="Summarize", json_mode=True)

        kwargs = mock_acompletion.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert [m["role"] for m in kwargs["messages"]] == ["user"]

    @pytest.mark.asyncio
    async def test_empty_choices_raise_llm_error(self) -> None:
        """Test a response without choices is reported as LLMError."""
        client = LLMClient(llm_settings=LLMSettings())

        with patch(
            "levixia_screening.core.intelligence.llm.client.acompletion",
            new=AsyncMock(return_value=SimpleNamespace(choices=[], usage=None)),
        ):
            with pytest.raises(LLMError) as exc_info:
                await client.complete(prompt="Summarize")

        assert "no choices" in exc_info.value.message
        assert exc_info.value.original_error is None
