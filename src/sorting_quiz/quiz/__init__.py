"""
Quiz system for sorting-quiz

Category ledger, prompt builder, response interpreter, and the
orchestrator that sequences them into one turn.
"""

from .schema import Category, QuizState, Verdict
from .ledger import apply_update, find_winner, leading_category, renormalize
from .prompts import format_update_prompt, format_next_question_prompt
from .interpreter import parse_probability_update, parse_question_text
from .orchestrator import QuizOrchestrator, QuizStage, QuizResult

__all__ = [
    "Category",
    "QuizState",
    "Verdict",
    "apply_update",
    "find_winner",
    "leading_category",
    "renormalize",
    "format_update_prompt",
    "format_next_question_prompt",
    "parse_probability_update",
    "parse_question_text",
    "QuizOrchestrator",
    "QuizStage",
    "QuizResult",
]
