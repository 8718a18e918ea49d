"""
Base protocol for AI model providers

Defines the interface the quiz uses to reach a text-generation model.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Any

RATE_LIMIT_PATTERN = re.compile(r"\brate[ _-]?limit|too many requests|\b429\b")
AUTH_PATTERN = re.compile(r"\bunauthori[sz]ed|\bauthentication|\bapi[ _-]?key\b|\b401\b")


class GatewayError(Exception):
    """Base exception for provider errors."""
    pass


class RateLimitError(GatewayError):
    """Rate limit exceeded."""
    pass


class AuthenticationError(GatewayError):
    """Authentication failed."""
    pass


@dataclass
class ModelResponse:
    """Response from an AI model."""
    content: str
    model: str
    provider: str
    usage: dict = field(default_factory=dict)
    raw_response: Optional[Any] = None

    @property
    def input_tokens(self) -> int:
        """Number of input tokens used."""
        return self.usage.get("input_tokens", 0)

    @property
    def output_tokens(self) -> int:
        """Number of output tokens used."""
        return self.usage.get("output_tokens", 0)

    @property
    def total_tokens(self) -> int:
        """Total tokens used."""
        return self.input_tokens + self.output_tokens


class ModelProvider(ABC):
    """
    Abstract base class for AI model providers.

    Providers implement generate() for a single prompt. The quiz never
    batches: each request makes at most two strictly sequential calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'openai', 'claude', 'deepseek')."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Default model ID for this provider."""
        pass

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = 512,
        temperature: float = 0.7,
        **kwargs
    ) -> ModelResponse:
        """
        Generate a response from the model.

        Args:
            prompt: The user prompt
            system: Optional system prompt
            model: Model ID (uses default if not specified)
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Provider-specific options

        Returns:
            ModelResponse with generated content

        Raises:
            GatewayError: On API errors
            RateLimitError: When rate limited
            AuthenticationError: On auth failures
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.default_model!r})"


def classify_error(provider_name: str, error: Exception) -> GatewayError:
    """
    Map an SDK exception onto the gateway error hierarchy.

    The HTTP status carried by openai/anthropic status errors decides
    first. Exceptions without one fall back to whole-word message matching.
    """
    status = getattr(error, "status_code", None)
    if status == 429:
        return RateLimitError(f"{provider_name} rate limit exceeded: {error}")
    if status in (401, 403):
        return AuthenticationError(f"{provider_name} authentication failed: {error}")
    if status is not None:
        return GatewayError(f"{provider_name} API error: {error}")

    error_str = str(error).lower()

    # Handle rate limiting
    if RATE_LIMIT_PATTERN.search(error_str):
        return RateLimitError(f"{provider_name} rate limit exceeded: {error}")

    # Handle auth errors
    if AUTH_PATTERN.search(error_str):
        return AuthenticationError(f"{provider_name} authentication failed: {error}")

    return GatewayError(f"{provider_name} API error: {error}")
