"""Tests for question generation."""
import pytest

from verbquiz.services.questions import (
    NoVerbsAvailable,
    QuestionGenerator,
    QuestionMode,
    make_question,
)


@pytest.mark.parametrize(
    "mode, expected",
    [
        (QuestionMode.TRANSLATE, "to be"),
        (QuestionMode.PRESENT, "er"),
        (QuestionMode.PAST, "var"),
        (QuestionMode.PAST_PARTICIPLE, "været"),
    ],
)
def test_expected_answer_per_mode(be_verb, mode, expected):
    q = make_question(be_verb, mode)
    assert q.expected_answer == expected
    assert q.verb is be_verb
    assert q.user_input == ""
    assert q.checked is False
    assert q.correct is None


def test_next_picks_from_store(verbs):
    generator = QuestionGenerator(seed=7)
    for _ in range(50):
        q = generator.next(verbs)
        assert q.verb in verbs
        assert q.expected_answer == getattr(q.verb, q.mode.field)
        assert q.expected_answer


def test_next_covers_every_mode(verbs):
    generator = QuestionGenerator(seed=1)
    modes = {generator.next(verbs).mode for _ in range(200)}
    assert modes == set(QuestionMode)


def test_seed_is_reproducible(verbs):
    a = QuestionGenerator(seed=42)
    b = QuestionGenerator(seed=42)
    picks_a = [(q.verb, q.mode) for q in (a.next(verbs) for _ in range(10))]
    picks_b = [(q.verb, q.mode) for q in (b.next(verbs) for _ in range(10))]
    assert picks_a == picks_b


def test_next_on_empty_store():
    with pytest.raises(NoVerbsAvailable):
        QuestionGenerator().next([])


def test_empty_file_has_no_questions(write_verbs):
    from verbquiz.services.loader import load_verbs

    store = load_verbs(write_verbs([]))
    with pytest.raises(NoVerbsAvailable):
        QuestionGenerator().next(store)
