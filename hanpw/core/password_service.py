from __future__ import annotations

from hanpw.core import password_engine as engine
from hanpw.core.error_dialect import InvalidArgument
from hanpw.core.models import CredentialResult, PasswordRequest, PinRequest
from hanpw.core.password_strength import calculate_strength
from hanpw.core.secure_random import assert_csprng_ready

MAX_COUNT = 512
MAX_PASSWORD_LENGTH = 4096
MAX_PIN_LENGTH = 64
MAX_TOTAL_CHARS = 4 * 1024 * 1024


def _require_count(count: int) -> None:
    if count <= 0:
        raise InvalidArgument("count must be > 0")
    if count > MAX_COUNT:
        raise InvalidArgument(f"count must be <= {MAX_COUNT}")


def _validate_password_request(request: PasswordRequest) -> None:
    _require_count(request.count)
    spec = request.spec
    if spec.length > MAX_PASSWORD_LENGTH:
        raise InvalidArgument(f"length must be <= {MAX_PASSWORD_LENGTH}")
    required = 0
    for name in ("min_uppercase", "min_lowercase", "min_numbers", "min_special"):
        value = getattr(spec, name)
        if value < 0:
            raise InvalidArgument(f"{name} must be >= 0")
        if value > MAX_PASSWORD_LENGTH:
            raise InvalidArgument(f"{name} must be <= {MAX_PASSWORD_LENGTH}")
        required += value
    if request.count * max(0, spec.length) > MAX_TOTAL_CHARS:
        raise InvalidArgument(
            f"projected password output is too large; reduce count/length (max total chars {MAX_TOTAL_CHARS})"
        )
    # Required characters are drawn in full before truncation to length.
    if request.count * required > MAX_TOTAL_CHARS:
        raise InvalidArgument(
            f"projected required characters are too many; reduce count/minimums (max total chars {MAX_TOTAL_CHARS})"
        )


def generate_passwords(request: PasswordRequest) -> CredentialResult:
    _validate_password_request(request)
    assert_csprng_ready()

    outputs = []
    strength = []
    for _ in range(request.count):
        generated = engine.generate_password(request.spec)
        outputs.append(generated)
        if request.show_meta:
            strength.append(calculate_strength(generated))
    return CredentialResult(outputs=tuple(outputs), strength_by_output=tuple(strength))


def generate_pins(request: PinRequest) -> CredentialResult:
    _require_count(request.count)
    if request.length <= 0:
        raise InvalidArgument("length must be > 0")
    if request.length > MAX_PIN_LENGTH:
        raise InvalidArgument(f"length must be <= {MAX_PIN_LENGTH}")
    assert_csprng_ready()
    return CredentialResult(outputs=tuple(engine.generate_pin(request.length) for _ in range(request.count)))
