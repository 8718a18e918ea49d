"""
Response interpreter

Turns the model's free text into either a probability update or a
question. Anything that doesn't fit is rejected, never guessed at.
"""

import json
import re

from ..errors import MalformedResponseError, EmptyResponseError

JSON_OBJECT = re.compile(r'\{[\s\S]*\}')


def _decode_object(raw_text: str):
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError:
        pass

    # Models like to wrap JSON in prose or code fences
    json_match = JSON_OBJECT.search(raw_text)
    if json_match:
        try:
            return json.loads(json_match.group())
        except json.JSONDecodeError:
            pass

    raise MalformedResponseError(f"Model reply is not JSON: {raw_text[:200]!r}")


def parse_probability_update(raw_text: str) -> dict[str, float]:
    """
    Parse a flat {"category": probability} object.

    Range checking is left to the ledger; this only checks shape.

    Raises:
        MalformedResponseError: Not a JSON object, or a value is not a number
    """
    data = _decode_object(raw_text or "")

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object of probabilities, got {type(data).__name__}"
        )

    updates = {}
    for name, value in data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedResponseError(f"Probability for {name!r} is not a number: {value!r}")
        updates[name] = float(value)
    return updates


def parse_question_text(raw_text: str) -> str:
    """
    Clean up a question reply.

    Strips whitespace and one pair of wrapping double quotes, which the
    worked examples teach the model to add.

    Raises:
        EmptyResponseError: Nothing left after cleanup
    """
    text = (raw_text or "").strip()
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1].strip()
    if not text:
        raise EmptyResponseError("Model returned an empty question")
    return text
