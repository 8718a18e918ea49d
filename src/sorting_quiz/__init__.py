"""
sorting-quiz: adaptive LLM-driven quiz that sorts people into categories.

Asks one question at a time, keeps a running probability per category,
and stops once one category is clearly ahead.
"""

__version__ = "0.1.0"

from .config import config
from .errors import QuizError, MalformedResponseError, EmptyResponseError, ValidationError
from .gateway import ModelGateway
from .providers.base import GatewayError, RateLimitError
from .quiz import (
    Category,
    QuizState,
    Verdict,
    QuizOrchestrator,
    QuizStage,
)

__all__ = [
    # Config
    "config",
    # Errors
    "QuizError",
    "MalformedResponseError",
    "EmptyResponseError",
    "ValidationError",
    "GatewayError",
    "RateLimitError",
    # Gateway
    "ModelGateway",
    # Quiz
    "Category",
    "QuizState",
    "Verdict",
    "QuizOrchestrator",
    "QuizStage",
]
