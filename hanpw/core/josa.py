from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple, Union

from hanpw.core.error_dialect import InvalidArgument
from hanpw.core.hangul import TRAILING_RIEUL, syllable_indices


class JosaRelation(str, Enum):
    SUBJECT = "subject"
    OBJECT = "object"
    TOPIC = "topic"
    CONJUNCTIVE = "conjunctive"
    DIRECTIONAL = "directional"
    POSSESSIVE = "possessive"

    @classmethod
    def parse(cls, value: Union["JosaRelation", str]) -> "JosaRelation":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidArgument(f"josa relation must be a string, got {type(value).__name__}")
        key = value.strip().lower()
        key = _RELATION_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise InvalidArgument(f"unknown josa relation {value!r}; expected one of: {choices}") from exc


_RELATION_ALIASES: Dict[str, str] = {
    "and": "conjunctive",
    "direction": "directional",
}


class EndingClass(Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"
    # Final ㄹ; only the directional particle treats it differently.
    LIQUID = "liquid"


# Sino-Korean readings: 영 일 이 삼 사 오 육 칠 팔 구
DIGIT_ENDINGS: Dict[str, EndingClass] = {
    "0": EndingClass.CONSONANT,
    "1": EndingClass.LIQUID,
    "2": EndingClass.VOWEL,
    "3": EndingClass.CONSONANT,
    "4": EndingClass.VOWEL,
    "5": EndingClass.VOWEL,
    "6": EndingClass.CONSONANT,
    "7": EndingClass.LIQUID,
    "8": EndingClass.LIQUID,
    "9": EndingClass.VOWEL,
}

# relation -> (after vowel, after consonant, after ㄹ)
PARTICLES: Dict[JosaRelation, Tuple[str, str, str]] = {
    JosaRelation.SUBJECT: ("가", "이", "이"),
    JosaRelation.OBJECT: ("를", "을", "을"),
    JosaRelation.TOPIC: ("는", "은", "은"),
    JosaRelation.CONJUNCTIVE: ("와", "과", "과"),
    JosaRelation.DIRECTIONAL: ("로", "으로", "로"),
    JosaRelation.POSSESSIVE: ("의", "의", "의"),
}


def ending_class(word: str) -> EndingClass:
    if not word:
        return EndingClass.VOWEL
    last = word[-1]
    indices = syllable_indices(last)
    if indices is not None:
        trailing = indices[2]
        if trailing == 0:
            return EndingClass.VOWEL
        if trailing == TRAILING_RIEUL:
            return EndingClass.LIQUID
        return EndingClass.CONSONANT
    return DIGIT_ENDINGS.get(last, EndingClass.VOWEL)


def select_particle(word: str, relation: Union[JosaRelation, str]) -> str:
    after_vowel, after_consonant, after_liquid = PARTICLES[JosaRelation.parse(relation)]
    ending = ending_class(word)
    if ending is EndingClass.VOWEL:
        return after_vowel
    if ending is EndingClass.LIQUID:
        return after_liquid
    return after_consonant


def attach_josa(word: str, relation: Union[JosaRelation, str]) -> str:
    """Append the particle for `relation` that agrees with the word's final sound."""
    return word + select_particle(word, relation)
