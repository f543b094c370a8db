from __future__ import annotations

from hanpw.core import passphrase_engine as engine
from hanpw.core.error_dialect import InvalidArgument
from hanpw.core.models import CredentialResult, PassphraseRequest
from hanpw.core.password_service import MAX_COUNT
from hanpw.core.password_strength import calculate_strength
from hanpw.core.secure_random import assert_csprng_ready

MAX_WORDS = 64
MAX_SEPARATOR_LENGTH = 16


def _validate_passphrase_request(request: PassphraseRequest) -> None:
    if request.count <= 0:
        raise InvalidArgument("count must be > 0")
    if request.count > MAX_COUNT:
        raise InvalidArgument(f"count must be <= {MAX_COUNT}")
    spec = request.spec
    if spec.num_words <= 0:
        raise InvalidArgument("num_words must be > 0")
    if spec.num_words > MAX_WORDS:
        raise InvalidArgument(f"num_words must be <= {MAX_WORDS}")
    if len(spec.word_separator) > MAX_SEPARATOR_LENGTH:
        raise InvalidArgument(f"word_separator must be <= {MAX_SEPARATOR_LENGTH} characters")


def generate_passphrases(request: PassphraseRequest) -> CredentialResult:
    _validate_passphrase_request(request)
    assert_csprng_ready()

    # A custom word list file is read once per batch.
    words_pool = engine.resolve_wordlist(request.spec)

    outputs = []
    strength = []
    for _ in range(request.count):
        generated = engine.generate_passphrase(request.spec, words_pool=words_pool)
        outputs.append(generated)
        if request.show_meta:
            strength.append(calculate_strength(generated))
    return CredentialResult(outputs=tuple(outputs), strength_by_output=tuple(strength))
