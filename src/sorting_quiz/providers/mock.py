"""
Mock provider for testing

Returns configurable responses without making API calls.
"""

import asyncio
import json
import re
from dataclasses import dataclass, field
from typing import Optional, List, Callable

from .base import ModelProvider, ModelResponse

# "Name": 0.5 pairs as rendered by the prompt builder
CATEGORY_PAIR = re.compile(r'("(?:[^"\\]|\\.)*"): (-?[0-9][0-9.eE+-]*)')

# How far the default update nudges the leading category
MOCK_NUDGE = 0.1


def parse_live_categories(prompt: str) -> List[tuple]:
    """
    Pull the live (name, probability) pairs out of a quiz prompt.

    The live case is always the last "Categories:" line; earlier ones
    belong to the worked examples.
    """
    lines = [line for line in prompt.splitlines() if line.strip().startswith("Categories:")]
    if not lines:
        return []
    return [
        (json.loads(name), float(value))
        for name, value in CATEGORY_PAIR.findall(lines[-1])
    ]


def generate_mock_update(prompt: str) -> dict:
    """
    Nudge the leading category up and the rest down.

    Repeated rounds always converge on a winner, which keeps the offline
    CLI loop finite.
    """
    categories = parse_live_categories(prompt)
    if not categories:
        return {}

    leader = max(categories, key=lambda c: c[1])[0]
    update = {}
    for name, probability in categories:
        if name == leader:
            update[name] = round(min(1.0, probability + MOCK_NUDGE), 4)
        else:
            update[name] = round(max(0.0, probability - MOCK_NUDGE), 4)
    return update


def generate_mock_question(prompt: str) -> str:
    """Ask about the leading category."""
    categories = parse_live_categories(prompt)
    if not categories:
        return "What do you enjoy doing on a free afternoon?"
    leader = max(categories, key=lambda c: c[1])[0]
    return f"Would you say {leader} describes how you spend a free afternoon?"


@dataclass
class MockProvider(ModelProvider):
    """
    Mock provider for testing.

    Replies come from, in order of precedence: `errors` (raised one per
    call until exhausted), `responses` (returned one per call until
    exhausted), `fixed_response`, `response_generator`, and finally a
    contextual default that understands the two quiz prompts.
    """

    _name: str = "mock"
    _default_model: str = "mock-model-v1"
    fixed_response: Optional[str] = None
    response_generator: Optional[Callable[[str], str]] = None
    responses: List[str] = field(default_factory=list)
    errors: List[Exception] = field(default_factory=list)
    delay_seconds: float = 0.0
    token_count: int = 100
    prompts: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self._name

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def call_count(self) -> int:
        return len(self.prompts)

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
        """Generate a mock response."""
        self.prompts.append(prompt)

        # Simulate delay
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        if self.errors:
            raise self.errors.pop(0)

        if self.responses:
            content = self.responses.pop(0)
        elif self.fixed_response is not None:
            content = self.fixed_response
        elif self.response_generator is not None:
            content = self.response_generator(prompt)
        else:
            content = self._default_response(prompt)

        return ModelResponse(
            content=content,
            model=model or self._default_model,
            provider=self.name,
            usage={
                "input_tokens": len(prompt.split()) * 2,
                "output_tokens": self.token_count,
            },
        )

    def _default_response(self, prompt: str) -> str:
        """
        Generate a contextual mock response based on prompt content.

        Update prompts carry a "Previous Category:" line; anything else is
        treated as a request for the next question.
        """
        if "previous category:" in prompt.lower():
            return json.dumps(generate_mock_update(prompt))
        return generate_mock_question(prompt)
