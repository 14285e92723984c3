"""Shared fixtures."""
import json

import pytest

from verbquiz.services.loader import VerbRecord

BE = {
    "infinitive": "at være",
    "present": "er",
    "past": "var",
    "past_participle": "været",
    "english": "to be",
}

HAVE = {
    "infinitive": "at have",
    "present": "har",
    "past": "havde",
    "past_participle": "haft",
    "english": "to have",
}


@pytest.fixture
def write_verbs(tmp_path):
    """Write a verb file and return its path. Strings are written as-is."""
    def _write(entries, name="verbs.json"):
        path = tmp_path / name
        if isinstance(entries, str):
            path.write_text(entries, encoding="utf-8")
        else:
            path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def be_verb() -> VerbRecord:
    return VerbRecord(**BE)


@pytest.fixture
def verbs() -> list[VerbRecord]:
    return [VerbRecord(**BE), VerbRecord(**HAVE)]
