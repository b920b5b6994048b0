"""
Client registry for LLM clients in bank_prompts.
Handles registration and instantiation of clients by name.
"""
from dataclasses import asdict
from typing import Any, Dict, Optional, Type

from ..config import LLMConfig
from .base import LLMClient


class ClientRegistry:
    """
    Registry for LLM clients.

    Maps client names to classes and provides a factory for instantiation.
    """

    def __init__(self) -> None:
        self._clients: Dict[str, Type[LLMClient]] = {}
        self._register_default_clients()

    def _register_default_clients(self) -> None:
        """Register built-in clients."""
        from .mock import MockLLMClient
        from .openai_compat import HTTPLLMClient

        self.register("mock", MockLLMClient)
        self.register("http", HTTPLLMClient)

    def register(self, name: str, client_class: Type[LLMClient]) -> None:
        """
        Register a client class.

        Args:
            name: Client name/identifier
            client_class: Client class
        """
        self._clients[name.lower()] = client_class

    def unregister(self, name: str) -> bool:
        """
        Unregister a client.

        Args:
            name: Client name

        Returns:
            True if the client was unregistered
        """
        name = name.lower()
        if name in self._clients:
            del self._clients[name]
            return True
        return False

    def create(self, name: str, **kwargs: Any) -> Optional[LLMClient]:
        """
        Create a client instance.

        Args:
            name: Client name
            **kwargs: Arguments for the client constructor

        Returns:
            Client instance or None if not found
        """
        client_class = self._clients.get(name.lower())
        if client_class is None:
            return None
        return client_class(**kwargs)

    def list_clients(self) -> list[str]:
        """List registered client names."""
        return sorted(self._clients)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._clients


_registry: Optional[ClientRegistry] = None


def get_client_registry() -> ClientRegistry:
    """Get the shared client registry instance."""
    global _registry
    if _registry is None:
        _registry = ClientRegistry()
    return _registry


def create_client(
    config: LLMConfig,
    api_key: Optional[str] = None,
    registry: Optional[ClientRegistry] = None,
) -> Optional[LLMClient]:
    """
    Create the client named by an LLMConfig.

    Args:
        config: LLM configuration; its fields become constructor arguments
        api_key: Overrides config.api_key when given (e.g. from the environment)
        registry: Registry to use instead of the shared one

    Returns:
        Client instance or None if the configured client is not registered
    """
    registry = registry or get_client_registry()
    kwargs = asdict(config)
    name = kwargs.pop("client")
    kwargs["delay"] = kwargs.pop("mock_delay")
    if api_key:
        kwargs["api_key"] = api_key
    return registry.create(name, **kwargs)
