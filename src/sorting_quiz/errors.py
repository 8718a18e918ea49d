"""
Exceptions raised by the quiz decision loop.

Provider and network failures live in providers.base (GatewayError and
friends); everything here is about what the model said, not whether it
could be reached.
"""


class QuizError(Exception):
    """Base exception for quiz errors."""
    pass


class MalformedResponseError(QuizError):
    """Model output did not have the expected shape."""
    pass


class EmptyResponseError(MalformedResponseError):
    """Model returned no usable text."""
    pass


class ValidationError(QuizError):
    """Quiz data is out of range or inconsistent."""
    pass
