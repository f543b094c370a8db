from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Tuple


PASSWORD_DEFAULT_LENGTH = 16
PASSWORD_DEFAULT_MIN_PER_CLASS = 1
PASSPHRASE_DEFAULT_WORDS = 4
PASSPHRASE_DEFAULT_SEPARATOR = "-"
PASSPHRASE_DEFAULT_LANGUAGE = "en"
PIN_DEFAULT_LENGTH = 4


@dataclass(frozen=True)
class PasswordSpec:
    length: int = PASSWORD_DEFAULT_LENGTH
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    special: bool = True
    # Include visually confusable characters (0, O, 1, l, I).
    ambiguous: bool = False
    min_uppercase: int = PASSWORD_DEFAULT_MIN_PER_CLASS
    min_lowercase: int = PASSWORD_DEFAULT_MIN_PER_CLASS
    min_numbers: int = PASSWORD_DEFAULT_MIN_PER_CLASS
    min_special: int = PASSWORD_DEFAULT_MIN_PER_CLASS


@dataclass(frozen=True)
class PassphraseSpec:
    num_words: int = PASSPHRASE_DEFAULT_WORDS
    word_separator: str = PASSPHRASE_DEFAULT_SEPARATOR
    capitalize: bool = True
    include_number: bool = True
    language: str = PASSPHRASE_DEFAULT_LANGUAGE
    romanize: bool = False
    use_josa: bool = False
    leet: bool = False
    wordlist: str = ""


@dataclass(frozen=True)
class StrengthReport:
    score: int
    label: str
    color: str
    entropy: float
    warnings: Tuple[str, ...] = ()

    def as_meta(self) -> str:
        return f"[strength={self.score} label={self.label} entropy={_format_bits(self.entropy)} bits]"


@dataclass(frozen=True)
class PasswordRequest:
    spec: PasswordSpec = field(default_factory=PasswordSpec)
    count: int = 1
    show_meta: bool = False


@dataclass(frozen=True)
class PassphraseRequest:
    spec: PassphraseSpec = field(default_factory=PassphraseSpec)
    count: int = 1
    show_meta: bool = False


@dataclass(frozen=True)
class PinRequest:
    length: int = PIN_DEFAULT_LENGTH
    count: int = 1


@dataclass(frozen=True)
class CredentialResult:
    outputs: Tuple[str, ...]
    strength_by_output: Tuple[StrengthReport, ...] = ()

    def as_lines(self, show_meta: bool = False) -> Tuple[str, ...]:
        if not show_meta or len(self.strength_by_output) != len(self.outputs):
            return self.outputs
        return tuple(
            f"{value}\t{report.as_meta()}"
            for value, report in zip(self.outputs, self.strength_by_output)
        )


def _format_bits(bits_value: float) -> str:
    if not math.isfinite(bits_value):
        return "unknown"
    rounded = round(bits_value, 3)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.3f}".rstrip("0").rstrip(".")
