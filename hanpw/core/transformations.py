from __future__ import annotations

from hanpw.core.error_dialect import InvalidArgument

LEET_MAP: dict[str, str] = {
    "a": "4",
    "e": "3",
    "i": "1",
    "o": "0",
    "s": "5",
    "t": "7",
    "b": "8",
    "g": "9",
    "l": "1",
    "z": "2",
}

CASE_CHOICES = ("lowercase", "uppercase", "titlecase")


def leet_speak(text: str) -> str:
    return "".join(LEET_MAP.get(ch.lower(), ch) for ch in text)


def capitalize_first(word: str) -> str:
    """Uppercase the first character only; the rest is left as is."""
    if not word:
        return word
    return word[0].upper() + word[1:]


def transform_case(text: str, case: str) -> str:
    if case not in CASE_CHOICES:
        raise InvalidArgument(f"case must be one of: {', '.join(CASE_CHOICES)}")
    if not text:
        return text
    if case == "lowercase":
        return text.lower()
    if case == "uppercase":
        return text.upper()
    return text[0].upper() + text[1:].lower()
