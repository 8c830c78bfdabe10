"""Abstract LLM client interface for provider-agnostic usage.

The orchestration layer only needs a single async call: prompt in, text out.
Concrete provider clients implement ``generate_completion`` and raise
``GenerationError`` on any failure.
"""

from __future__ import annotations

import abc
from typing import Any


class LLMClient(abc.ABC):
    """Abstract base class for all LLM clients.

    Concrete implementations accept a configuration object in their
    constructor (e.g. a ``GenerationConfig``).
    """

    def __init__(self, config: Any) -> None:
        self._config = config

    @abc.abstractmethod
    async def generate_completion(self, prompt: str, **kwargs: Any) -> str:
        """Generate a single completion for the provided prompt.

        Returns the generated text content from the provider.

        Raises:
            GenerationError: On network, quota or service failure.
        """

    async def close(self) -> None:
        """Release any network resources held by the client."""
