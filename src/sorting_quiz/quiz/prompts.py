"""
Prompt templates for the sorting quiz

All prompt engineering lives here. Both prompts are few-shot: two fixed
worked examples establish the reply shape, then the live case follows.

Every piece of caller-supplied text is JSON-quoted, so the same inputs
always render the same prompt and a category name containing quotes,
commas or colons cannot break the "Categories:" line.
"""

import json

from .schema import Category

# =============================================================================
# PROBABILITY UPDATE PROMPT
# =============================================================================

UPDATE_PROMPT = """Given the following scenarios and responses, please generate the next scenario.
Reply with a JSON object mapping every category name to its new probability, and nothing else.

Scenario 1:
Previous Category: "Shape Rotator"
User's Answer: "I prefer triangles over squares"
Categories: "Shape Rotator": 0.6, "Wordcel": 0.4
Response: {{"Shape Rotator": 0.7, "Wordcel": 0.3}}

Scenario 2:
Previous Category: "Wordcel"
User's Answer: "I enjoy reading novels"
Categories: "Shape Rotator": 0.3, "Wordcel": 0.7
Response: {{"Shape Rotator": 0.2, "Wordcel": 0.8}}

Next Scenario:
Previous Category: {previous_category}
User's Answer: {user_answer}
Categories: {categories}
Response: """


# =============================================================================
# NEXT QUESTION PROMPT
# =============================================================================

NEXT_QUESTION_PROMPT = """Given the following scenarios and responses, please generate the next question.
Pick the question that best separates the categories whose probabilities are closest.
Reply with the question text only: no JSON, no explanation.

Scenario 1:
Categories: "Shape Rotator": 0.7, "Wordcel": 0.3
Response: "Do you enjoy puzzles that involve manipulating shapes?"

Scenario 2:
Categories: "Shape Rotator": 0.2, "Wordcel": 0.8
Response: "How often do you read for pleasure?"

Next Scenario:
Categories: {categories}
Response: """


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def quote(text: str) -> str:
    """JSON string literal, non-ASCII kept readable."""
    return json.dumps(text, ensure_ascii=False)


def format_categories(categories: list[Category]) -> str:
    """Render `"Name": 0.6, "Other": 0.4` in list order."""
    return ", ".join(
        f"{quote(c.name)}: {float(c.probability)!r}" for c in categories
    )


def format_update_prompt(
    previous_category: str,
    user_answer: str,
    categories: list[Category],
) -> str:
    """
    Format the probability update prompt.

    Args:
        previous_category: Category the answered question was framed around
        user_answer: The user's free-text answer
        categories: Current ledger

    Returns:
        Formatted prompt string
    """
    return UPDATE_PROMPT.format(
        previous_category=quote(previous_category),
        user_answer=quote(user_answer),
        categories=format_categories(categories),
    )


def format_next_question_prompt(categories: list[Category]) -> str:
    """Format the next-question prompt for the current distribution."""
    return NEXT_QUESTION_PROMPT.format(categories=format_categories(categories))
