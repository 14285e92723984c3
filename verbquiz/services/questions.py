# verbquiz/services/questions.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence
import logging
import random

from verbquiz.services.loader import VerbRecord

logger = logging.getLogger(__name__)


class NoVerbsAvailable(Exception):
    """The verb store is empty, so no question can be asked."""


class QuestionMode(Enum):
    TRANSLATE = "english"
    PRESENT = "present"
    PAST = "past"
    PAST_PARTICIPLE = "past_participle"

    @property
    def field(self) -> str:
        """VerbRecord field holding the expected answer"""
        return self.value


@dataclass
class QuestionState:
    verb: VerbRecord
    mode: QuestionMode
    expected_answer: str
    user_input: str = ""
    checked: bool = False
    correct: Optional[bool] = None


def make_question(verb: VerbRecord, mode: QuestionMode) -> QuestionState:
    """Fresh question for the verb, expected answer taken from the mode's field"""
    return QuestionState(verb=verb, mode=mode, expected_answer=getattr(verb, mode.field))


class QuestionGenerator:
    """Picks a random verb and question mode from its own random source."""

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def next(self, store: Sequence[VerbRecord]) -> QuestionState:
        if not store:
            raise NoVerbsAvailable("no verbs available to practice")
        verb = self.rng.choice(store)
        mode = self.rng.choice(list(QuestionMode))
        logger.debug(f"New question: {verb.infinitive} ({mode.name})")
        return make_question(verb, mode)
