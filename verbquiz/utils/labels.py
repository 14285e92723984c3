# verbquiz/utils/labels.py
PROMPT_FORMS = {
    "present": "present tense",
    "past": "past tense",
    "past_participle": "past participle",
}

# (field, label) rows of the verb details panel
DETAIL_ROWS = [
    ("infinitive", "Infinitive"),
    ("present", "Present"),
    ("past", "Past"),
    ("past_participle", "Past participle"),
    ("english", "English"),
]


def prompt_for(infinitive: str, field: str) -> str:
    """Question text for a verb asked in the given field"""
    if field == "english":
        return f"Translate to English: {infinitive}"
    return f"Conjugate '{infinitive}' in {PROMPT_FORMS[field]}"


def normalize_answer(s: str) -> str:
    """Trim surrounding whitespace and lowercase"""
    if not s:
        return ""
    return s.strip().lower()
