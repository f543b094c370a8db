from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from hanpw.core.error_dialect import InvalidArgument
from hanpw.core.password_strength import calculate_strength


@dataclass(frozen=True)
class PasswordPolicy:
    min_length: int = 8
    # 0 disables the upper bound.
    max_length: int = 0
    require_uppercase: bool = False
    require_lowercase: bool = False
    require_numbers: bool = False
    require_special: bool = False
    min_score: int = 0
    forbid_whitespace: bool = False


@dataclass(frozen=True)
class PolicyResult:
    is_valid: bool
    errors: Tuple[str, ...] = ()


def _check_policy(policy: PasswordPolicy) -> None:
    if policy.min_length < 0:
        raise InvalidArgument("min_length must be >= 0")
    if policy.max_length < 0:
        raise InvalidArgument("max_length must be >= 0")
    if policy.max_length and policy.max_length < policy.min_length:
        raise InvalidArgument("max_length must be >= min_length")
    if not (0 <= policy.min_score <= 4):
        raise InvalidArgument("min_score must be within [0, 4]")


def validate_password(password: str, policy: PasswordPolicy | None = None) -> PolicyResult:
    if policy is None:
        policy = PasswordPolicy()
    _check_policy(policy)

    errors: List[str] = []
    if len(password) < policy.min_length:
        errors.append(f"must be at least {policy.min_length} characters")
    if policy.max_length and len(password) > policy.max_length:
        errors.append(f"must be at most {policy.max_length} characters")
    if policy.require_uppercase and not any("A" <= ch <= "Z" for ch in password):
        errors.append("must contain an uppercase letter")
    if policy.require_lowercase and not any("a" <= ch <= "z" for ch in password):
        errors.append("must contain a lowercase letter")
    if policy.require_numbers and not any(ch.isdigit() for ch in password):
        errors.append("must contain a number")
    if policy.require_special and not any(not ch.isalnum() and not ch.isspace() for ch in password):
        errors.append("must contain a special character")
    if policy.forbid_whitespace and any(ch.isspace() for ch in password):
        errors.append("must not contain whitespace")
    if policy.min_score:
        report = calculate_strength(password)
        if report.score < policy.min_score:
            errors.append(f"strength score {report.score} is below required {policy.min_score}")

    return PolicyResult(is_valid=not errors, errors=tuple(errors))
