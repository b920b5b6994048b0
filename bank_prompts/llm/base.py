"""
Base classes for LLM clients in bank_prompts.
Defines the interface the prompt library hands rendered text to.
"""
from abc import ABC, abstractmethod
from typing import Optional


class TransportError(Exception):
    """
    Raised when an LLM client cannot produce a response.

    Covers network failures, provider error statuses and malformed
    responses. Clients do not retry; the error reaches the caller as is.
    """

    def __init__(
        self,
        message: str,
        provider: str = "",
        status_code: Optional[int] = None,
    ) -> None:
        self.provider = provider
        self.status_code = status_code

        prefix = f"[{provider}] " if provider else ""
        suffix = f" (status {status_code})" if status_code is not None else ""
        super().__init__(f"{prefix}{message}{suffix}")


class LLMClient(ABC):
    """
    Abstract base class for LLM clients.

    A client takes the rendered prompt text and returns the generated text.
    Retries, caching, batching and rate limiting are not part of this
    interface.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Client name."""
        ...

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Send a prompt to the LLM and get a response.

        Args:
            prompt: Rendered prompt text

        Returns:
            The generated text

        Raises:
            TransportError: If the call fails
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
