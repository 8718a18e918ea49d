"""
Quiz Orchestrator

Runs one turn of the sorting quiz:
1. Update probabilities from the user's answer (when there is one)
2. Ask the model for the next question
3. Stop if a category has crossed the win threshold

Stateless: the caller's QuizState goes in, a new QuizState or a Verdict
comes out, and the input object is never modified.
"""

import logging
from enum import Enum
from typing import Optional, Union

from ..config import config
from ..gateway import ModelGateway
from .interpreter import parse_probability_update, parse_question_text
from .ledger import apply_update, find_winner, leading_category, renormalize as rescale, validate_categories
from .prompts import format_update_prompt, format_next_question_prompt
from .schema import QuizState, Verdict

logger = logging.getLogger(__name__)

QuizResult = Union[QuizState, Verdict]


class QuizStage(str, Enum):
    """Where a quiz is in its lifecycle."""
    AWAITING_FIRST_QUESTION = "awaiting_first_question"
    AWAITING_ANSWER = "awaiting_answer"
    UPDATING_PROBABILITIES = "updating_probabilities"
    SELECTING_NEXT_QUESTION = "selecting_next_question"
    RESOLVED = "resolved"


def stage_of(state: QuizState) -> QuizStage:
    """Lifecycle stage of a state as received from the client."""
    if state.current_category is None:
        return QuizStage.AWAITING_FIRST_QUESTION
    return QuizStage.AWAITING_ANSWER


class QuizOrchestrator:
    """
    Main orchestrator for the sorting quiz.

    Every failure (gateway, malformed reply, out-of-range probability)
    propagates and aborts the turn; there is no partial result.
    """

    def __init__(
        self,
        gateway: ModelGateway,
        threshold: Optional[float] = None,
        renormalize: Optional[bool] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            gateway: Model gateway used for both calls of a turn
            threshold: Win threshold (defaults to config.quiz.win_threshold)
            renormalize: Rescale probabilities to sum to 1 after each update
        """
        self.gateway = gateway
        self.threshold = threshold if threshold is not None else config.quiz.win_threshold
        self.renormalize = renormalize if renormalize is not None else config.quiz.renormalize

    async def advance(self, state: QuizState, answer: Optional[str] = None) -> QuizResult:
        """
        Run one request/response cycle.

        Args:
            state: Quiz state as sent by the client
            answer: The user's answer to state.current_question, if any

        Returns:
            Verdict if a category reached the threshold, otherwise a new
            QuizState carrying the next question

        Raises:
            ValidationError: Bad categories, or the model produced an
                out-of-range probability
            MalformedResponseError: Model reply could not be parsed
            GatewayError: Model could not be reached
        """
        validate_categories(state.categories)
        working = state.copy()
        logger.debug("Quiz turn starting at stage %s", stage_of(state).value)

        if state.current_category and answer and answer.strip():
            await self._update_probabilities(working, answer)

        question = await self._next_question(working)

        winner = find_winner(working.categories, self.threshold)
        if winner is not None:
            logger.info(
                "Quiz resolved: %s at %.2f",
                winner.name, winner.probability,
                extra={"stage": QuizStage.RESOLVED.value, "probabilities": working.probabilities},
            )
            return Verdict(winner=winner.name)

        working.current_question = question
        working.current_category = leading_category(working.categories).name
        logger.debug(
            "Quiz awaiting answer, framed around %s",
            working.current_category,
            extra={"stage": QuizStage.AWAITING_ANSWER.value},
        )
        return working

    async def _update_probabilities(self, working: QuizState, answer: str) -> None:
        """Ask the model to re-estimate probabilities from the answer."""
        logger.debug("Stage %s", QuizStage.UPDATING_PROBABILITIES.value)
        prompt = format_update_prompt(
            previous_category=working.current_category,
            user_answer=answer,
            categories=working.categories,
        )
        raw = await self.gateway.submit(prompt)
        updates = parse_probability_update(raw)

        categories = apply_update(working.categories, updates)
        if self.renormalize:
            categories = rescale(categories)

        ignored = sorted(set(updates) - {c.name for c in categories})
        if ignored:
            logger.warning("Model returned unknown categories, ignoring: %s", ignored)

        working.categories = categories
        logger.info(
            "Probabilities updated",
            extra={"probabilities": working.probabilities},
        )

    async def _next_question(self, working: QuizState) -> str:
        """Ask the model for the question that best splits the leaders."""
        logger.debug("Stage %s", QuizStage.SELECTING_NEXT_QUESTION.value)
        prompt = format_next_question_prompt(working.categories)
        raw = await self.gateway.submit(prompt)
        return parse_question_text(raw)
