# verbquiz/services/loader.py
from dataclasses import dataclass
from pathlib import Path
import json
import logging

logger = logging.getLogger(__name__)

VERB_FIELDS = ("infinitive", "present", "past", "past_participle", "english")


class LoadError(Exception):
    """Verb data file is missing or malformed."""


@dataclass(frozen=True)
class VerbRecord:
    infinitive: str
    present: str
    past: str
    past_participle: str
    english: str


def _parse_entry(path: Path, index: int, entry) -> VerbRecord:
    if not isinstance(entry, dict):
        raise LoadError(f"{path.name}: entry {index} is not an object")
    values = {}
    for name in VERB_FIELDS:
        if name not in entry:
            raise LoadError(f"{path.name}: entry {index} is missing '{name}'")
        value = entry[name]
        if not isinstance(value, str) or not value.strip():
            raise LoadError(f"{path.name}: entry {index} has an empty or non-text '{name}'")
        values[name] = value.strip()
    return VerbRecord(**values)


def load_verbs(path: Path) -> list[VerbRecord]:
    """Read the JSON verb file and return its records in file order."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise LoadError(f"cannot read verb file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"{path.name} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise LoadError(f"{path.name}: expected a list of verbs")

    verbs = [_parse_entry(path, i, entry) for i, entry in enumerate(data)]
    logger.info(f"Loaded {len(verbs)} verbs from {path}")
    return verbs
