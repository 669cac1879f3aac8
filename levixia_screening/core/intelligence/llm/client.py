# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Single-turn completion client over LiteLLM.

The narrative screening report is the only caller. One model string
from settings selects the provider; endpoint and key are handed to
acompletion() per request instead of through provider environment
variables.

Example:
    >>> from levixia_screening.core.intelligence.llm import LLMClient
    >>> client = LLMClient()
    >>> response = await client.complete(
    ...     "Summarize this screening result",
    ...     system_prompt="Reply with JSON only.",
    ...     json_mode=True,
    ... )
    >>> response.content
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import litellm
from litellm import acompletion

from levixia_screening.core.config.settings import LLMSettings, get_settings

logger = logging.getLogger(__name__)

# Providers that reject response_format get it dropped instead of failing
litellm.drop_params = True


@dataclass
class LLMResponse:
    """Generated text and token accounting.

    Attributes:
        content: Generated text, empty when the provider returned none.
        model: Model that produced the text.
        tokens_input: Prompt tokens.
        tokens_output: Completion tokens.
        finish_reason: Provider stop reason.
    """

    content: str
    model: str
    tokens_input: int = 0
    tokens_output: int = 0
    finish_reason: str = "stop"
    raw_response: Optional[object] = field(default=None, repr=False)

    @property
    def total_tokens(self) -> int:
        """Prompt plus completion tokens."""
        return self.tokens_input + self.tokens_output


class LLMError(Exception):
    """Raised when a completion cannot be produced.

    Attributes:
        message: Error description.
        model: Model the request was sent to.
        original_error: Provider exception, if any.
    """

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.model = model
        self.original_error = original_error
        super().__init__(self.message)


class LLMClient:
    """Completion client bound to one configured model.

    Example:
        >>> client = LLMClient(model="gpt-4o-mini", timeout=10)
        >>> response = await client.complete("Write one encouraging sentence")
    """

    def __init__(
        self,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        llm_settings: Optional[LLMSettings] = None,
    ):
        """Initialize the client.

        Args:
            model: Model in LiteLLM format. Falls back to settings.
            timeout: Per-request timeout in seconds. Falls back to settings.
            max_retries: Provider retries. Falls back to settings.
            llm_settings: LLM configuration. Uses get_settings() if None.
        """
        self._settings = llm_settings or get_settings().llm
        self._model = model or self._settings.model
        self._timeout = timeout or self._settings.request_timeout
        self._max_retries = max_retries if max_retries is not None else self._settings.max_retries

        logger.debug(
            "LLM client ready",
            extra={"model": self._model, "timeout": self._timeout},
        )

    @property
    def model(self) -> str:
        """Configured model."""
        return self._model

    def _connection_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self._settings.api_base:
            params["api_base"] = self._settings.api_base
        if self._settings.api_key is not None:
            params["api_key"] = self._settings.api_key.get_secret_value()
        return params

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.4,
        max_tokens: int = 1024,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate one completion.

        Args:
            prompt: User prompt.
            system_prompt: Optional system instruction sent first.
            temperature: Sampling temperature.
            max_tokens: Completion token limit.
            json_mode: Ask the provider for a JSON object response.

        Returns:
            LLMResponse with the generated text.

        Raises:
            ValueError: If the prompt is blank.
            LLMError: If the provider call fails.
        """
        if not prompt or not prompt.strip():
            raise ValueError("Prompt cannot be empty")

        messages = [{"role": "user", "content": prompt}]
        if system_prompt:
            messages.insert(0, {"role": "system", "content": system_prompt})

        request: dict[str, Any] = {
            "model": self._model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "timeout": self._timeout,
            "num_retries": self._max_retries,
            **self._connection_params(),
        }
        if json_mode:
            request["response_format"] = {"type": "json_object"}

        try:
            response = await acompletion(**request)
        except Exception as e:
            logger.error(
                "Completion failed",
                extra={"model": self._model, "error": str(e)},
            )
            raise LLMError(
                f"Completion failed: {e}",
                model=self._model,
                original_error=e,
            ) from e

        if not getattr(response, "choices", None):
            logger.error("Completion returned no choices", extra={"model": self._model})
            raise LLMError("Completion returned no choices", model=self._model)

        choice = response.choices[0]
        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=choice.message.content or "",
            model=self._model,
            tokens_input=getattr(usage, "prompt_tokens", 0) or 0,
            tokens_output=getattr(usage, "completion_tokens", 0) or 0,
            finish_reason=choice.finish_reason or "stop",
            raw_response=response,
        )
