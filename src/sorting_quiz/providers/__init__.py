"""
AI model providers for sorting-quiz

Supports multiple AI providers with a common interface.
Providers: OpenAI (GPT-4), DeepSeek, Claude (Anthropic), Mock
"""

from .base import (
    ModelProvider, ModelResponse, GatewayError, RateLimitError,
    AuthenticationError,
)
from .gpt import OpenAIProvider, DeepSeekProvider
from .claude import ClaudeProvider
from .mock import MockProvider

__all__ = [
    # Base classes and types
    "ModelProvider",
    "ModelResponse",
    "GatewayError",
    "RateLimitError",
    "AuthenticationError",
    # Providers
    "OpenAIProvider",
    "DeepSeekProvider",
    "ClaudeProvider",
    "MockProvider",
    "get_provider",
]


def get_provider(name: str, **kwargs) -> ModelProvider:
    """
    Factory function to get a provider by name.

    Args:
        name: Provider name ('openai', 'deepseek', 'claude', 'mock')
        **kwargs: Provider-specific options

    Returns:
        Configured ModelProvider instance

    Raises:
        ValueError: If provider name is unknown
    """
    providers = {
        "openai": OpenAIProvider,
        "deepseek": DeepSeekProvider,
        "claude": ClaudeProvider,
        "mock": MockProvider,
    }

    if name not in providers:
        raise ValueError(f"Unknown provider: {name}. Valid options: {list(providers.keys())}")

    return providers[name](**kwargs)
