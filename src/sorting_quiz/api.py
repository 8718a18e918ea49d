"""HTTP endpoint for the sorting quiz."""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .config import config
from .errors import QuizError
from .gateway import ModelGateway
from .logging_config import setup_logging
from .providers import get_provider
from .providers.base import GatewayError
from .quiz.orchestrator import QuizOrchestrator
from .quiz.schema import Category, QuizState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["quiz"])


class CategoryPayload(BaseModel):
    """One category as sent by the client."""

    name: str
    probability: float


class QuizStatePayload(BaseModel):
    """Client-held quiz state."""

    model_config = ConfigDict(populate_by_name=True)

    categories: List[CategoryPayload]
    current_question: Optional[str] = Field(default=None, alias="currentQuestion")
    current_category: Optional[str] = Field(default=None, alias="currentCategory")

    def to_state(self) -> QuizState:
        return QuizState(
            categories=[Category(name=c.name, probability=c.probability) for c in self.categories],
            current_question=self.current_question,
            current_category=self.current_category,
        )


class QuestionRequest(BaseModel):
    """Request payload for one quiz turn."""

    model_config = ConfigDict(populate_by_name=True)

    quiz_state: QuizStatePayload = Field(..., alias="quizState")
    answer: Optional[str] = Field(default=None, description="Answer to currentQuestion")


def build_orchestrator() -> QuizOrchestrator:
    """Orchestrator wired to the configured provider."""
    provider = get_provider(config.models.provider)
    gateway = ModelGateway(provider, model=config.models.model or None)
    return QuizOrchestrator(gateway)


def _error(message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=500)


@router.post("/question")
async def post_question(body: QuestionRequest, request: Request) -> JSONResponse:
    """Update probabilities from the answer, then return a verdict or the next question."""
    orchestrator: QuizOrchestrator = request.app.state.orchestrator
    timeout = request.app.state.request_timeout

    try:
        result = await asyncio.wait_for(
            orchestrator.advance(body.quiz_state.to_state(), body.answer),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.error("Quiz turn timed out after %.1fs", timeout)
        return _error(f"Model did not respond within {timeout:g}s")

    return JSONResponse(result.to_dict())


health_router = APIRouter(tags=["health"])


@health_router.get("/healthz")
async def healthz() -> dict:
    return {"ok": True}


def register_exception_handlers(app: FastAPI) -> None:
    """Translate quiz and gateway failures into {"error": ...} 500s."""

    @app.exception_handler(QuizError)
    async def _quiz_error_handler(_request: Request, exc: QuizError) -> JSONResponse:
        logger.error("Quiz turn failed: %s", exc, extra={"error_type": type(exc).__name__})
        return _error(str(exc))

    @app.exception_handler(GatewayError)
    async def _gateway_error_handler(_request: Request, exc: GatewayError) -> JSONResponse:
        logger.error("Model gateway failed: %s", exc, extra={"error_type": type(exc).__name__})
        return _error(str(exc))


def create_app(
    orchestrator: Optional[QuizOrchestrator] = None,
    request_timeout: Optional[float] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        orchestrator: Quiz orchestrator (defaults to one built from config)
        request_timeout: Per-request budget in seconds (defaults to config.server)
    """
    setup_logging()

    app = FastAPI(title="Sorting Quiz API")
    app.state.orchestrator = orchestrator or build_orchestrator()
    app.state.request_timeout = (
        request_timeout if request_timeout is not None else config.server.request_timeout_seconds
    )

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(router)
    return app
