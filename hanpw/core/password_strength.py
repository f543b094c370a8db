"""Heuristic strength scoring (0-4, zxcvbn-like labels, regex rules only)."""

from __future__ import annotations

import math
import re
from typing import List

from hanpw.core.models import StrengthReport

STRENGTH_LABELS = ("Very Weak", "Weak", "Fair", "Strong", "Very Strong")
STRENGTH_COLORS = ("red", "orange", "yellow", "lime", "green")

LENGTH_STEPS = (8, 12, 16, 20)
VARIETY_STEPS = (2, 3, 4)

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_OTHER_RE = re.compile(r"[^a-zA-Z0-9]")
_LETTERS_ONLY_RE = re.compile(r"^[a-zA-Z]+$")
_DIGITS_ONLY_RE = re.compile(r"^[0-9]+$")
_REPEAT_RE = re.compile(r"(.)\1{2,}")
_COMMON_PREFIX_RE = re.compile(r"^(123|abc|qwe|password|admin)", re.IGNORECASE)

# Search space per category: a-z, A-Z, 0-9, printable ASCII symbols.
_CATEGORY_SIZES = (26, 26, 10, 33)


def quality_from_entropy_bits(entropy_bits: float) -> str:
    if entropy_bits <= 0:
        return "bad"
    if entropy_bits < 40:
        return "poor"
    if entropy_bits < 75:
        return "weak"
    if entropy_bits < 100:
        return "good"
    return "excellent"


def _categories(password: str) -> tuple[bool, bool, bool, bool]:
    return (
        bool(_LOWER_RE.search(password)),
        bool(_UPPER_RE.search(password)),
        bool(_DIGIT_RE.search(password)),
        bool(_OTHER_RE.search(password)),
    )


def estimate_entropy_bits(password: str) -> float:
    pool = sum(size for present, size in zip(_categories(password), _CATEGORY_SIZES) if present)
    if not password or pool < 2:
        return 0.0
    return round(len(password) * math.log2(pool), 2)


def calculate_strength(password: str) -> StrengthReport:
    if not password:
        return StrengthReport(
            score=0,
            label=STRENGTH_LABELS[0],
            color=STRENGTH_COLORS[0],
            entropy=0.0,
            warnings=("password is empty",),
        )

    points = 0
    warnings: List[str] = []

    length = len(password)
    points += sum(1 for step in LENGTH_STEPS if length >= step)
    if length < LENGTH_STEPS[0]:
        warnings.append(f"shorter than {LENGTH_STEPS[0]} characters")

    variety = sum(_categories(password))
    points += sum(1 for step in VARIETY_STEPS if variety >= step)

    if _LETTERS_ONLY_RE.match(password):
        points -= 1
        warnings.append("contains only letters")
    if _DIGITS_ONLY_RE.match(password):
        points -= 2
        warnings.append("contains only digits")
    if _REPEAT_RE.search(password):
        points -= 1
        warnings.append("repeats a character three or more times in a row")
    if _COMMON_PREFIX_RE.match(password):
        points -= 2
        warnings.append("starts with a common pattern")

    score = max(0, min(4, points // 2))
    return StrengthReport(
        score=score,
        label=STRENGTH_LABELS[score],
        color=STRENGTH_COLORS[score],
        entropy=estimate_entropy_bits(password),
        warnings=tuple(warnings),
    )
