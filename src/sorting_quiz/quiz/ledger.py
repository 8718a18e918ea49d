"""
Category ledger operations

Pure functions over a list of categories. None of them mutate their
input; callers get a fresh list back.
"""

import math
from dataclasses import replace
from typing import Mapping, Optional

from ..errors import ValidationError
from .schema import Category

DEFAULT_THRESHOLD = 0.8


def _check_probability(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Probability for {name!r} is not a number: {value!r}")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValidationError(f"Probability for {name!r} outside [0, 1]: {value!r}")
    return float(value)


def validate_categories(categories: list[Category]) -> None:
    """Reject empty, duplicated, or out-of-range category lists."""
    if not categories:
        raise ValidationError("Quiz has no categories")

    seen = set()
    for category in categories:
        if category.name in seen:
            raise ValidationError(f"Duplicate category name: {category.name!r}")
        seen.add(category.name)
        _check_probability(category.name, category.probability)


def apply_update(categories: list[Category], updates: Mapping[str, float]) -> list[Category]:
    """
    Apply a probability update.

    Every value is checked before anything changes, so a single bad value
    rejects the whole update. Keys with no matching category are ignored
    (but still validated).

    Raises:
        ValidationError: If any value is not a number in [0, 1]
    """
    checked = {name: _check_probability(name, value) for name, value in updates.items()}
    return [
        replace(c, probability=checked[c.name]) if c.name in checked else replace(c)
        for c in categories
    ]


def find_winner(
    categories: list[Category],
    threshold: float = DEFAULT_THRESHOLD,
) -> Optional[Category]:
    """First category, in list order, at or above the threshold."""
    return next((c for c in categories if c.probability >= threshold), None)


def leading_category(categories: list[Category]) -> Optional[Category]:
    """Highest probability; the earliest one wins a tie."""
    leader = None
    for category in categories:
        if leader is None or category.probability > leader.probability:
            leader = category
    return leader


def renormalize(categories: list[Category]) -> list[Category]:
    """Scale probabilities so they sum to 1. An all-zero ledger is left as is."""
    total = sum(c.probability for c in categories)
    if total <= 0:
        return [replace(c) for c in categories]
    return [replace(c, probability=c.probability / total) for c in categories]
