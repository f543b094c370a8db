"""Credential engines, Hangul helpers, models, and service APIs for HanPw."""

from __future__ import annotations


def generate_password(spec=None):
    from hanpw.core.password_engine import generate_password as _generate_password

    return _generate_password(spec)


def generate_passphrase(spec=None):
    from hanpw.core.passphrase_engine import generate_passphrase as _generate_passphrase

    return _generate_passphrase(spec)


def generate_pin(length=4):
    from hanpw.core.password_engine import generate_pin as _generate_pin

    return _generate_pin(length)


def generate_passwords(request):
    from hanpw.core.password_service import generate_passwords as _generate_passwords

    return _generate_passwords(request)


def generate_passphrases(request):
    from hanpw.core.passphrase_service import generate_passphrases as _generate_passphrases

    return _generate_passphrases(request)


def attach_josa(word, relation):
    from hanpw.core.josa import attach_josa as _attach_josa

    return _attach_josa(word, relation)


def decompose(char):
    from hanpw.core.hangul import decompose as _decompose

    return _decompose(char)


def romanize(text):
    from hanpw.core.hangul import romanize as _romanize

    return _romanize(text)


def calculate_strength(password):
    from hanpw.core.password_strength import calculate_strength as _calculate_strength

    return _calculate_strength(password)


def validate_password(password, policy=None):
    from hanpw.core.password_policy import validate_password as _validate_password

    return _validate_password(password, policy)


def encrypt_text(plaintext, passphrase):
    from hanpw.core.export_crypto import encrypt_text as _encrypt_text

    return _encrypt_text(plaintext, passphrase)


def decrypt_text(serialized, passphrase):
    from hanpw.core.export_crypto import decrypt_text as _decrypt_text

    return _decrypt_text(serialized, passphrase)


__all__ = [
    "attach_josa",
    "calculate_strength",
    "decompose",
    "decrypt_text",
    "encrypt_text",
    "generate_passphrase",
    "generate_passphrases",
    "generate_password",
    "generate_passwords",
    "generate_pin",
    "romanize",
    "validate_password",
]
