"""
Model Gateway - the one door between the quiz and a language model

Wraps a ModelProvider behind submit(prompt) -> text, retrying rate-limited
calls in a bounded loop with exponential backoff.
"""

import asyncio
import logging
from typing import Optional

from .config import config, RetryConfig
from .providers.base import ModelProvider, GatewayError, RateLimitError

logger = logging.getLogger(__name__)


class ModelGateway:
    """
    Text-in, text-out access to a model provider.

    Only RateLimitError is retried. Authentication and other provider
    errors propagate on the first failure.
    """

    def __init__(
        self,
        provider: ModelProvider,
        model: Optional[str] = None,
        retry: Optional[RetryConfig] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ):
        """
        Initialize gateway.

        Args:
            provider: AI model provider
            model: Optional model override (uses provider default if not specified)
            retry: Retry policy (defaults to config.retry)
            max_tokens: Max tokens per reply (defaults to config.models)
            temperature: Sampling temperature (defaults to config.models)
        """
        self.provider = provider
        self.model = model
        self.retry = retry or config.retry
        self.max_tokens = max_tokens if max_tokens is not None else config.models.max_tokens
        self.temperature = temperature if temperature is not None else config.models.temperature

    async def submit(self, prompt: str) -> str:
        """
        Send a prompt and return the model's raw text.

        Raises:
            RateLimitError: Still rate limited after max_retries retries
            GatewayError: Any other provider failure
        """
        attempt = 0
        while True:
            logger.debug(
                "Submitting prompt to %s (attempt %d):\n%s",
                self.provider.name, attempt + 1, prompt,
            )
            try:
                response = await self.provider.generate(
                    prompt,
                    model=self.model,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                )
            except RateLimitError as e:
                if attempt >= self.retry.max_retries:
                    logger.error(
                        "Rate limited by %s, giving up after %d retries: %s",
                        self.provider.name, attempt, e,
                    )
                    raise
                delay = self.retry.delay_for(attempt)
                logger.warning(
                    "Rate limited by %s, retrying in %.1fs (retry %d/%d)",
                    self.provider.name, delay, attempt + 1, self.retry.max_retries,
                )
                attempt += 1
                await asyncio.sleep(delay)
                continue
            except GatewayError as e:
                logger.error("Error calling %s: %s", self.provider.name, e)
                raise

            logger.info(
                "Response received from %s (%d tokens)",
                response.model, response.total_tokens,
            )
            logger.debug("Response from %s:\n%s", response.model, response.content)
            return response.content
