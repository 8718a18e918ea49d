"""
OpenAI provider implementation

GPT-4 via the official SDK, plus DeepSeek which speaks the same
chat-completions API.
"""

import os
from typing import Optional

from .base import ModelProvider, ModelResponse, GatewayError, AuthenticationError, classify_error


class OpenAIProvider(ModelProvider):
    """
    OpenAI chat-completions provider.

    API key is read from:
    1. Constructor argument
    2. OPENAI_API_KEY environment variable
    3. GPT4_API_KEY environment variable (older deployments)
    """

    BASE_URL: Optional[str] = None
    API_KEY_ENV = ("OPENAI_API_KEY", "GPT4_API_KEY")
    PROVIDER_NAME = "openai"
    DEFAULT_MODEL = "gpt-4"

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize provider.

        Args:
            api_key: API key (falls back to env vars)
            default_model: Default model to use
            base_url: API base URL (defaults to the vendor's API)
        """
        self._api_key = api_key or next(
            (os.getenv(var) for var in self.API_KEY_ENV if os.getenv(var)), None
        )
        self._default_model = default_model or self.DEFAULT_MODEL
        self._base_url = base_url or self.BASE_URL
        self._client = None

    def _get_client(self):
        """Lazy initialization of the async OpenAI client."""
        if self._client is None:
            if not self._api_key:
                raise AuthenticationError(
                    f"No {self.PROVIDER_NAME} API key provided. "
                    f"Set {self.API_KEY_ENV[0]} or pass api_key to constructor."
                )
            try:
                from openai import AsyncOpenAI
            except ImportError:
                raise GatewayError("openai package not installed. Run: pip install openai")
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
            )
        return self._client

    @property
    def name(self) -> str:
        return self.PROVIDER_NAME

    @property
    def default_model(self) -> str:
        return self._default_model

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
        """Generate a response using chat completions."""
        client = self._get_client()
        model = model or self._default_model

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            raise classify_error(self.PROVIDER_NAME, e) from e

        content = ""
        if response.choices and response.choices[0].message:
            content = response.choices[0].message.content or ""

        usage = {}
        if response.usage:
            usage = {
                "input_tokens": response.usage.prompt_tokens,
                "output_tokens": response.usage.completion_tokens,
            }

        return ModelResponse(
            content=content,
            model=response.model,
            provider=self.name,
            usage=usage,
            raw_response=response,
        )


class DeepSeekProvider(OpenAIProvider):
    """
    DeepSeek provider.

    Uses the OpenAI-compatible API. API key is read from DEEPSEEK_API_KEY.
    """

    BASE_URL = "https://api.deepseek.com"
    API_KEY_ENV = ("DEEPSEEK_API_KEY",)
    PROVIDER_NAME = "deepseek"
    DEFAULT_MODEL = "deepseek-chat"
