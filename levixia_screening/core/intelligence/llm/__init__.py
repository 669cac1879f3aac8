# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""LLM client module using LiteLLM.

Example:
    >>> from levixia_screening.core.intelligence.llm import LLMClient
    >>> client = LLMClient()
    >>> response = await client.complete("Summarize", json_mode=True)
"""

from levixia_screening.core.intelligence.llm.client import (
    LLMClient,
    LLMError,
    LLMResponse,
)

__all__ = [
    "LLMClient",
    "LLMError",
    "LLMResponse",
]
