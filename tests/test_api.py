"""
Tests for the HTTP endpoint.
"""

import pytest
from fastapi.testclient import TestClient

from sorting_quiz.api import create_app
from sorting_quiz.config import RetryConfig
from sorting_quiz.gateway import ModelGateway
from sorting_quiz.providers.base import RateLimitError, AuthenticationError
from sorting_quiz.providers.mock import MockProvider
from sorting_quiz.quiz.orchestrator import QuizOrchestrator

NO_WAIT = RetryConfig(max_retries=1, base_delay_seconds=0.0, backoff_factor=2.0, max_delay_seconds=0.0)

FIRST_REQUEST = {
    "quizState": {
        "categories": [{"name": "A", "probability": 0.5}, {"name": "B", "probability": 0.5}],
        "currentQuestion": None,
        "currentCategory": None,
    }
}


def client_for(provider: MockProvider, request_timeout: float = 5.0) -> TestClient:
    orchestrator = QuizOrchestrator(ModelGateway(provider, retry=NO_WAIT), threshold=0.8, renormalize=False)
    return TestClient(create_app(orchestrator=orchestrator, request_timeout=request_timeout))


class TestHealth:
    def test_healthz(self):
        resp = client_for(MockProvider()).get("/healthz")

        assert resp.status_code == 200
        assert resp.json() == {"ok": True}


class TestQuestionEndpoint:
    """End-to-end turns through POST /api/question."""

    def test_first_request(self):
        """No answer: state comes back with the question, probabilities unchanged."""
        client = client_for(MockProvider(fixed_response="Do you enjoy puzzles?"))

        resp = client.post("/api/question", json=FIRST_REQUEST)

        assert resp.status_code == 200
        assert resp.json() == {
            "categories": [{"name": "A", "probability": 0.5}, {"name": "B", "probability": 0.5}],
            "currentQuestion": "Do you enjoy puzzles?",
            "currentCategory": "A",
        }

    @pytest.mark.parametrize("question", ["Next?", "whatever", "{\"not\": \"a question\"}"])
    def test_second_request_winner(self, question):
        """Update crosses the threshold: verdict regardless of the question reply."""
        provider = MockProvider(responses=['{"A":0.85,"B":0.15}', question])
        client = client_for(provider)
        body = {
            "quizState": {
                "categories": [{"name": "A", "probability": 0.5}, {"name": "B", "probability": 0.5}],
                "currentQuestion": "Do you enjoy puzzles?",
                "currentCategory": "A",
            },
            "answer": "I like puzzles",
        }

        resp = client.post("/api/question", json=body)

        assert resp.status_code == 200
        assert resp.json() == {"winner": "A"}

    def test_missing_optional_fields(self):
        """currentQuestion/currentCategory may be omitted."""
        client = client_for(MockProvider(fixed_response="Q?"))
        body = {"quizState": {"categories": [{"name": "A", "probability": 0.5}]}}

        resp = client.post("/api/question", json=body)

        assert resp.status_code == 200
        assert resp.json()["currentQuestion"] == "Q?"

    def test_malformed_model_reply(self):
        provider = MockProvider(responses=["not json"])
        body = {
            "quizState": dict(FIRST_REQUEST["quizState"], currentCategory="A"),
            "answer": "yes",
        }

        resp = client_for(provider).post("/api/question", json=body)

        assert resp.status_code == 500
        assert "error" in resp.json()

    def test_out_of_range_model_reply(self):
        provider = MockProvider(responses=['{"A": 1.5}'])
        body = {
            "quizState": dict(FIRST_REQUEST["quizState"], currentCategory="A"),
            "answer": "yes",
        }

        resp = client_for(provider).post("/api/question", json=body)

        assert resp.status_code == 500
        assert "outside" in resp.json()["error"]

    def test_empty_question(self):
        resp = client_for(MockProvider(fixed_response="")).post("/api/question", json=FIRST_REQUEST)

        assert resp.status_code == 500
        assert resp.json() == {"error": "Model returned an empty question"}

    def test_rate_limit_exhausted(self):
        provider = MockProvider(errors=[RateLimitError("429")] * 3)

        resp = client_for(provider).post("/api/question", json=FIRST_REQUEST)

        assert resp.status_code == 500
        assert "429" in resp.json()["error"]

    def test_auth_failure(self):
        provider = MockProvider(errors=[AuthenticationError("no key")])

        resp = client_for(provider).post("/api/question", json=FIRST_REQUEST)

        assert resp.status_code == 500
        assert resp.json() == {"error": "no key"}

    def test_timeout(self):
        provider = MockProvider(fixed_response="Q?", delay_seconds=1.0)

        resp = client_for(provider, request_timeout=0.05).post("/api/question", json=FIRST_REQUEST)

        assert resp.status_code == 500
        assert "within" in resp.json()["error"]

    def test_bad_body(self):
        """Schema violations are rejected before the quiz runs."""
        provider = MockProvider(fixed_response="Q?")

        resp = client_for(provider).post("/api/question", json={"categories": []})

        assert resp.status_code == 422
        assert provider.call_count == 0

    def test_empty_categories(self):
        resp = client_for(MockProvider(fixed_response="Q?")).post(
            "/api/question", json={"quizState": {"categories": []}}
        )

        assert resp.status_code == 500
        assert resp.json() == {"error": "Quiz has no categories"}
