"""Hangul syllable algebra and two-set keyboard romanization.

A precomposed syllable in U+AC00..U+D7A3 encodes (leading, vowel, trailing)
as ``0xAC00 + (leading * 21 + vowel) * 28 + trailing``. Trailing index 0
means the syllable has no final consonant.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from hanpw.core.error_dialect import InvalidArgument


HANGUL_BASE = 0xAC00
HANGUL_LAST = 0xD7A3
VOWEL_COUNT = 21
TRAILING_COUNT = 28

LEADING: Tuple[str, ...] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

VOWELS: Tuple[str, ...] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ",
    "ㅙ", "ㅚ", "ㅛ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ", "ㅣ",
)

TRAILING: Tuple[str, ...] = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ",
    "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

TRAILING_RIEUL = 8

_LEADING_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(LEADING)}
_VOWEL_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(VOWELS)}
_TRAILING_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(TRAILING)}

# Two-set (dubeolsik) layout. Compound vowels and compound finals are typed
# as two keys.
QWERTY_KEYS: Dict[str, str] = {
    # consonants
    "ㄱ": "r", "ㄲ": "R", "ㄴ": "s", "ㄷ": "e", "ㄸ": "E", "ㄹ": "f",
    "ㅁ": "a", "ㅂ": "q", "ㅃ": "Q", "ㅅ": "t", "ㅆ": "T", "ㅇ": "d",
    "ㅈ": "w", "ㅉ": "W", "ㅊ": "c", "ㅋ": "z", "ㅌ": "x", "ㅍ": "v", "ㅎ": "g",
    # vowels
    "ㅏ": "k", "ㅐ": "o", "ㅑ": "i", "ㅒ": "O", "ㅓ": "j", "ㅔ": "p",
    "ㅕ": "u", "ㅖ": "P", "ㅗ": "h", "ㅘ": "hk", "ㅙ": "ho", "ㅚ": "hl",
    "ㅛ": "y", "ㅜ": "n", "ㅝ": "nj", "ㅞ": "np", "ㅟ": "nl", "ㅠ": "b",
    "ㅡ": "m", "ㅢ": "ml", "ㅣ": "l",
    # compound finals
    "ㄳ": "rt", "ㄵ": "sw", "ㄶ": "sg", "ㄺ": "fr", "ㄻ": "fa", "ㄼ": "fq",
    "ㄽ": "ft", "ㄾ": "fx", "ㄿ": "fv", "ㅀ": "fg", "ㅄ": "qt",
}


def is_hangul_syllable(char: str) -> bool:
    return len(char) == 1 and HANGUL_BASE <= ord(char) <= HANGUL_LAST


def syllable_indices(char: str) -> Optional[Tuple[int, int, int]]:
    """(leading, vowel, trailing) table indices, or None for non-syllables."""
    if not is_hangul_syllable(char):
        return None
    offset = ord(char) - HANGUL_BASE
    trailing = offset % TRAILING_COUNT
    vowel = (offset // TRAILING_COUNT) % VOWEL_COUNT
    leading = offset // (TRAILING_COUNT * VOWEL_COUNT)
    return leading, vowel, trailing


def decompose(char: str) -> List[str]:
    """Split one syllable block into its jamo.

    Returns two jamo for open syllables and three when a final consonant is
    present. Characters outside the syllable block come back unchanged as a
    one-element list.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidArgument("decompose expects exactly one character")
    indices = syllable_indices(char)
    if indices is None:
        return [char]
    leading, vowel, trailing = indices
    out = [LEADING[leading], VOWELS[vowel]]
    if trailing > 0:
        out.append(TRAILING[trailing])
    return out


def compose(leading: str, vowel: str, trailing: str = "") -> str:
    li = _LEADING_INDEX.get(leading)
    vi = _VOWEL_INDEX.get(vowel)
    ti = _TRAILING_INDEX.get(trailing)
    if li is None or vi is None or ti is None:
        raise InvalidArgument(
            "invalid jamo for compose: leading=%r vowel=%r trailing=%r" % (leading, vowel, trailing)
        )
    return chr(HANGUL_BASE + (li * VOWEL_COUNT + vi) * TRAILING_COUNT + ti)


def romanize(text: str) -> str:
    """Keystrokes that type `text` on a two-set Korean keyboard."""
    out: List[str] = []
    for char in text:
        for jamo in decompose(char):
            out.append(QWERTY_KEYS.get(jamo, jamo))
    return "".join(out)
