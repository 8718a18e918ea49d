"""
sorting-quiz configuration

Thresholds, retry policy, model choices, and server settings live here.
Environment variables override defaults for deployment flexibility.
"""

import os
from dataclasses import dataclass, field
from typing import Literal


@dataclass
class QuizConfig:
    """Decision loop behavior"""
    win_threshold: float = float(os.getenv("QUIZ_WIN_THRESHOLD", "0.8"))
    renormalize: bool = os.getenv("QUIZ_RENORMALIZE", "false").lower() == "true"


@dataclass
class RetryConfig:
    """How hard we retry a rate-limited model"""
    max_retries: int = int(os.getenv("AI_MAX_RETRIES", "3"))
    base_delay_seconds: float = float(os.getenv("AI_RETRY_DELAY", "1.0"))
    backoff_factor: float = float(os.getenv("AI_RETRY_BACKOFF", "2.0"))
    max_delay_seconds: float = float(os.getenv("AI_RETRY_MAX_DELAY", "30.0"))

    def delay_for(self, attempt: int) -> float:
        """Backoff delay before retry number `attempt` (0-indexed)."""
        delay = self.base_delay_seconds * (self.backoff_factor ** attempt)
        return min(delay, self.max_delay_seconds)


@dataclass
class ModelConfig:
    """AI model selection"""
    provider: Literal["openai", "deepseek", "claude", "mock"] = os.getenv("QUIZ_PROVIDER", "openai")
    model: str = os.getenv("QUIZ_MODEL", "")  # Empty = use provider default
    max_tokens: int = int(os.getenv("QUIZ_MAX_TOKENS", "512"))
    temperature: float = float(os.getenv("QUIZ_TEMPERATURE", "0.7"))

    # Default models per provider
    PROVIDER_DEFAULTS = {
        "openai": "gpt-4",
        "deepseek": "deepseek-chat",
        "claude": "claude-sonnet-4-20250514",
        "mock": "mock-model-v1",
    }

    def get_model(self) -> str:
        """Get model, falling back to provider default."""
        return self.model or self.PROVIDER_DEFAULTS.get(self.provider, "")


@dataclass
class ServerConfig:
    """HTTP server settings"""
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    request_timeout_seconds: float = float(os.getenv("REQUEST_TIMEOUT", "60.0"))


@dataclass
class LoggingConfig:
    """Log verbosity"""
    app_env: str = os.getenv("APP_ENV", "production")
    level_override: str = os.getenv("LOG_LEVEL", "")

    @property
    def level(self) -> str:
        """DEBUG in development, INFO elsewhere, unless LOG_LEVEL is set."""
        if self.level_override:
            return self.level_override.upper()
        return "DEBUG" if self.app_env == "development" else "INFO"


@dataclass
class Config:
    """Master config, import this"""
    quiz: QuizConfig = field(default_factory=QuizConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    models: ModelConfig = field(default_factory=ModelConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Quick presets
    @classmethod
    def fast_mode(cls) -> "Config":
        """For development/testing: no backoff sleeps, short timeout"""
        cfg = cls()
        cfg.retry.base_delay_seconds = 0.0
        cfg.retry.max_delay_seconds = 0.0
        cfg.server.request_timeout_seconds = 5.0
        return cfg

    @classmethod
    def offline_mode(cls) -> "Config":
        """No API key needed, scripted mock model"""
        cfg = cls()
        cfg.models.provider = "mock"
        return cfg


# Singleton
config = Config()
