"""
Tests for quiz data structures.
"""

from sorting_quiz.quiz.schema import Category, QuizState, Verdict


class TestQuizState:
    """Tests for QuizState."""

    def test_from_dict_camel_case(self):
        """Wire keys are camelCase."""
        state = QuizState.from_dict({
            "categories": [{"name": "A", "probability": 0.5}],
            "currentQuestion": "Q?",
            "currentCategory": "A",
        })

        assert state.categories == [Category(name="A", probability=0.5)]
        assert state.current_question == "Q?"
        assert state.current_category == "A"

    def test_from_dict_defaults(self):
        state = QuizState.from_dict({"categories": []})

        assert state.current_question is None
        assert state.current_category is None

    def test_to_dict_keeps_nulls(self):
        data = QuizState(categories=[Category("A", 1.0)]).to_dict()

        assert data == {
            "categories": [{"name": "A", "probability": 1.0}],
            "currentQuestion": None,
            "currentCategory": None,
        }

    def test_copy_is_independent(self):
        """Changing the copy's categories leaves the original alone."""
        state = QuizState(categories=[Category("A", 0.5)])
        clone = state.copy()
        clone.categories[0].probability = 0.9

        assert state.categories[0].probability == 0.5


class TestVerdict:
    def test_to_dict(self):
        assert Verdict(winner="A").to_dict() == {"winner": "A"}
