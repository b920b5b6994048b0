"""
OpenAI-compatible HTTP client for bank_prompts.
"""
import logging
import time
from typing import Any, Optional

import httpx

from ..constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
)
from .base import LLMClient, TransportError


logger = logging.getLogger(__name__)


class HTTPLLMClient(LLMClient):
    """
    Client for any provider exposing an OpenAI-style chat completions API.

    The rendered prompt is sent as a single user message. Any failure,
    whether network, HTTP status or an unexpected response body, is raised
    as TransportError.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs: Any
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            base_url: API base URL, without the /chat/completions suffix
            api_key: Bearer token, omitted from headers when not set
            model: Model ID to request
            temperature: Sampling temperature
            max_tokens: Completion token limit
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
            **kwargs: Ignored, accepted so the registry can pass shared settings
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout = timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "http"

    @property
    def model(self) -> str:
        """Current model."""
        return self._model

    def _build_headers(self) -> dict[str, str]:
        """Build request headers with authentication."""
        headers = {
            "Content-Type": "application/json",
        }
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def generate(self, prompt: str) -> str:
        """Send the prompt as a chat completion request."""
        payload = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }

        start_time = time.perf_counter()

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    f"{self._base_url}/chat/completions",
                    headers=self._build_headers(),
                    json=payload,
                    timeout=self._timeout
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Provider returned an error: {e.response.text[:200]}",
                provider=self.name,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}", provider=self.name) from e
        except ValueError as e:
            raise TransportError(f"Malformed response body: {e}", provider=self.name) from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise TransportError(
                f"Unexpected response shape: missing {e}", provider=self.name
            ) from e
        if not isinstance(content, str):
            raise TransportError("Response content is not text", provider=self.name)

        latency_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"Completion from {self._model} in {latency_ms:.0f} ms")
        return content

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self._model})"
