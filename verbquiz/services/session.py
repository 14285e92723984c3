# verbquiz/services/session.py
import logging
from typing import Optional, Sequence

from verbquiz.services.grader import check, feedback
from verbquiz.services.loader import VerbRecord
from verbquiz.services.questions import NoVerbsAvailable, QuestionGenerator, QuestionState
from verbquiz.utils.labels import DETAIL_ROWS, prompt_for

logger = logging.getLogger(__name__)

AWAITING_INPUT = "awaiting_input"
CHECKED = "checked"


class PracticeSession:
    """Question state machine behind the window.

    The window only forwards events (typing, Check, Next verb) and renders
    what the session reports, so everything here runs without a display.
    A checked question can be submitted again; the latest input wins.
    """

    def __init__(self, verbs: Sequence[VerbRecord], generator: Optional[QuestionGenerator] = None):
        if not verbs:
            raise NoVerbsAvailable("the verb list is empty")
        self.verbs = tuple(verbs)
        self.generator = generator or QuestionGenerator()
        self.current: QuestionState = self.generator.next(self.verbs)

    @property
    def state(self) -> str:
        return CHECKED if self.current.checked else AWAITING_INPUT

    def prompt(self) -> str:
        q = self.current
        return prompt_for(q.verb.infinitive, q.mode.field)

    def set_input(self, text: str) -> None:
        self.current.user_input = text or ""

    def submit(self) -> bool:
        q = self.current
        q.correct = check(q.user_input, q.expected_answer)
        q.checked = True
        logger.debug(f"Checked {q.user_input!r} against {q.expected_answer!r}: {q.correct}")
        return q.correct

    def feedback(self) -> str:
        if not self.current.checked:
            return ""
        return feedback(self.current)

    def next_verb(self) -> QuestionState:
        self.current = self.generator.next(self.verbs)
        return self.current

    def details(self) -> list[tuple[str, str]]:
        verb = self.current.verb
        return [(label, getattr(verb, field)) for field, label in DETAIL_ROWS]
