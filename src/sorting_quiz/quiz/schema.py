"""
Quiz data structures

Categories, the client-held quiz state, and the terminal verdict. The
wire format is camelCase JSON; attributes are snake_case.
"""

from dataclasses import dataclass, field, replace
from typing import Optional
import json


@dataclass
class Category:
    """A candidate classification and its current subjective probability."""
    name: str
    probability: float

    def to_dict(self) -> dict:
        return {"name": self.name, "probability": self.probability}

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        return cls(name=data["name"], probability=float(data["probability"]))


@dataclass
class QuizState:
    """
    Everything the server needs to run one turn.

    The server keeps nothing between requests; the client sends this back
    on every turn.
    """
    categories: list[Category] = field(default_factory=list)
    current_question: Optional[str] = None
    current_category: Optional[str] = None

    @property
    def probabilities(self) -> dict[str, float]:
        return {c.name: c.probability for c in self.categories}

    def copy(self) -> "QuizState":
        """Deep enough copy that updating the result never touches self."""
        return replace(self, categories=[replace(c) for c in self.categories])

    def to_dict(self) -> dict:
        return {
            "categories": [c.to_dict() for c in self.categories],
            "currentQuestion": self.current_question,
            "currentCategory": self.current_category,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuizState":
        return cls(
            categories=[Category.from_dict(c) for c in data.get("categories", [])],
            current_question=data.get("currentQuestion"),
            current_category=data.get("currentCategory"),
        )

    @classmethod
    def start(cls, names: list[str]) -> "QuizState":
        """Fresh quiz with probability split evenly across the names."""
        share = 1.0 / len(names) if names else 0.0
        return cls(categories=[Category(name=n, probability=share) for n in names])

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


@dataclass
class Verdict:
    """Terminal result naming the winning category."""
    winner: str

    def to_dict(self) -> dict:
        return {"winner": self.winner}
