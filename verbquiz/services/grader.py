# verbquiz/services/grader.py
from verbquiz.services.questions import QuestionState
from verbquiz.utils.labels import normalize_answer

CORRECT_TEXT = "Correct! 🎉"


def check(user_input: str, expected_answer: str) -> bool:
    """Case and surrounding-whitespace insensitive comparison"""
    return normalize_answer(user_input) == normalize_answer(expected_answer)


def feedback(q: QuestionState) -> str:
    """Result text for a checked question"""
    if q.correct:
        return CORRECT_TEXT
    return f"Incorrect. The correct answer is: {q.expected_answer}"
