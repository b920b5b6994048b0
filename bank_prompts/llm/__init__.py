"""LLM client modules for bank_prompts."""
from .base import LLMClient, TransportError
from .mock import MockLLMClient
from .openai_compat import HTTPLLMClient
from .registry import ClientRegistry, get_client_registry, create_client

__all__ = [
    'LLMClient', 'TransportError',
    'MockLLMClient', 'HTTPLLMClient',
    'ClientRegistry', 'get_client_registry', 'create_client',
]
