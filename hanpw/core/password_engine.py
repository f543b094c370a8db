#!/usr/bin/env python3
r"""
password_engine.py - constrained password / PIN composer (os.urandom)

Passwords are built from up to four character classes. Each enabled class
contributes its alphabet to a shared pool and a minimum number of characters
drawn from its own alphabet; the remainder is filled from the pool and the
whole sequence is shuffled so required characters carry no positional bias.
"""
from __future__ import annotations

from typing import List, Tuple

from hanpw.core.models import PIN_DEFAULT_LENGTH, PasswordSpec
from hanpw.core.secure_random import choice, shuffle


# ---------------- Character classes ----------------

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
UPPERCASE_NO_AMBIGUOUS = "ABCDEFGHJKMNPQRSTUVWXYZ"  # no I, L, O
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
LOWERCASE_NO_AMBIGUOUS = "abcdefghjkmnpqrstuvwxyz"  # no i, l, o
NUMBERS = "0123456789"
NUMBERS_NO_AMBIGUOUS = "23456789"  # no 0, 1
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

FALLBACK_ALPHABET = LOWERCASE_NO_AMBIGUOUS


def class_alphabets(spec: PasswordSpec) -> Tuple[Tuple[str, int], ...]:
    """(alphabet, minimum) for every enabled class, in composition order."""
    out: List[Tuple[str, int]] = []
    if spec.uppercase:
        out.append((UPPERCASE if spec.ambiguous else UPPERCASE_NO_AMBIGUOUS, spec.min_uppercase))
    if spec.lowercase:
        out.append((LOWERCASE if spec.ambiguous else LOWERCASE_NO_AMBIGUOUS, spec.min_lowercase))
    if spec.numbers:
        out.append((NUMBERS if spec.ambiguous else NUMBERS_NO_AMBIGUOUS, spec.min_numbers))
    if spec.special:
        out.append((SPECIAL, spec.min_special))
    return tuple(out)


def pool_alphabet(spec: PasswordSpec) -> str:
    pool = "".join(alphabet for alphabet, _ in class_alphabets(spec))
    return pool or FALLBACK_ALPHABET


# ---------------- Password mode ----------------

def generate_password(spec: PasswordSpec | None = None) -> str:
    if spec is None:
        spec = PasswordSpec()

    required: List[str] = []
    for alphabet, minimum in class_alphabets(spec):
        # Drawn from the class's own alphabet, not the pool.
        required.extend(choice(alphabet) for _ in range(max(0, minimum)))

    pool = pool_alphabet(spec)
    remaining = max(0, spec.length - len(required))
    filler = [choice(pool) for _ in range(remaining)]

    mixed = shuffle(required + filler)
    # Over-constrained specs keep the length and drop part of the guarantee.
    return "".join(mixed[: max(0, spec.length)])


# ---------------- PIN mode ----------------

def generate_pin(length: int = PIN_DEFAULT_LENGTH) -> str:
    return "".join(choice(NUMBERS) for _ in range(max(0, length)))
