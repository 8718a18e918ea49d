"""
Tests for prompt templates.
"""

from sorting_quiz.quiz.prompts import (
    format_categories,
    format_update_prompt,
    format_next_question_prompt,
)
from sorting_quiz.quiz.schema import Category


def categories():
    return [
        Category(name="Shape Rotator", probability=0.6),
        Category(name="Wordcel", probability=0.4),
    ]


class TestFormatCategories:
    """Tests for category serialization."""

    def test_basic(self):
        """Names are quoted, probabilities use repr."""
        assert format_categories(categories()) == '"Shape Rotator": 0.6, "Wordcel": 0.4'

    def test_awkward_names_escaped(self):
        """Quotes, commas and colons in names stay inside the string literal."""
        text = format_categories([Category(name='Say "hi", ok: yes', probability=1)])

        assert text == '"Say \\"hi\\", ok: yes": 1.0'

    def test_non_ascii_kept(self):
        """Unicode names are not \\u-escaped."""
        assert format_categories([Category(name="Café", probability=0.5)]) == '"Café": 0.5'


class TestUpdatePrompt:
    """Tests for the probability update prompt."""

    def test_contains_live_case(self):
        """Live case follows the worked examples."""
        prompt = format_update_prompt("Wordcel", "I like puzzles", categories())

        live = prompt.split("Next Scenario:")[1]
        assert 'Previous Category: "Wordcel"' in live
        assert 'User\'s Answer: "I like puzzles"' in live
        assert 'Categories: "Shape Rotator": 0.6, "Wordcel": 0.4' in live
        assert prompt.endswith("Response: ")

    def test_worked_examples_present(self):
        """Both fixed examples establish the JSON reply shape."""
        prompt = format_update_prompt("A", "x", categories())

        assert "Scenario 1:" in prompt
        assert "Scenario 2:" in prompt
        assert '{"Shape Rotator": 0.7, "Wordcel": 0.3}' in prompt
        assert '{"Shape Rotator": 0.2, "Wordcel": 0.8}' in prompt

    def test_answer_with_quotes_escaped(self):
        """An answer cannot close its own string literal."""
        prompt = format_update_prompt("A", 'I said "no"\nthen left', categories())

        assert 'User\'s Answer: "I said \\"no\\"\\nthen left"' in prompt

    def test_deterministic(self):
        """Same inputs, byte-identical prompt."""
        first = format_update_prompt("Wordcel", "I like puzzles", categories())
        second = format_update_prompt("Wordcel", "I like puzzles", categories())

        assert first == second


class TestNextQuestionPrompt:
    """Tests for the next question prompt."""

    def test_contains_distribution(self):
        prompt = format_next_question_prompt(categories())

        live = prompt.split("Next Scenario:")[1]
        assert 'Categories: "Shape Rotator": 0.6, "Wordcel": 0.4' in live
        assert "Previous Category" not in prompt

    def test_examples_are_questions(self):
        prompt = format_next_question_prompt(categories())

        assert '"Do you enjoy puzzles that involve manipulating shapes?"' in prompt
        assert '"How often do you read for pleasure?"' in prompt

    def test_deterministic(self):
        assert format_next_question_prompt(categories()) == format_next_question_prompt(categories())

    def test_order_matters(self):
        """List order is part of the input."""
        assert format_next_question_prompt(categories()) != format_next_question_prompt(
            list(reversed(categories()))
        )
