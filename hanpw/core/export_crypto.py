from __future__ import annotations

import base64
import hashlib
import json

from Crypto.Cipher import AES

from hanpw.core.error_dialect import InvalidArgument, make_error
from hanpw.core.secure_random import secure_random_bytes

_HEADER = "HANPW-ENC-1"
_KDF = "pbkdf2-sha256"
_CIPHER = "aes-256-gcm"
KDF_ITERATIONS = 200_000
MAX_KDF_ITERATIONS = 5_000_000
_SALT_BYTES = 16
_NONCE_BYTES = 12
_KEY_BYTES = 32
_TAG_BYTES = 16


def _derive_key(passphrase: str, salt: bytes, iterations: int) -> bytes:
    if not passphrase:
        raise InvalidArgument("encryption passphrase is required")
    return hashlib.pbkdf2_hmac("sha256", passphrase.encode("utf-8"), salt, iterations, dklen=_KEY_BYTES)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _unb64(payload: dict, field: str, *, allow_empty: bool = False) -> bytes:
    value = payload.get(field)
    if not isinstance(value, str) or (not value and not allow_empty):
        raise make_error("invalid_ciphertext", f"invalid encrypted payload: missing {field}")
    try:
        return base64.b64decode(value.encode("ascii"), validate=True)
    except (ValueError, UnicodeError) as exc:
        raise make_error("invalid_ciphertext", f"invalid encrypted payload: bad {field}") from exc


def encrypt_text(plaintext: str, passphrase: str) -> str:
    salt = secure_random_bytes(_SALT_BYTES)
    nonce = secure_random_bytes(_NONCE_BYTES)
    key = _derive_key(passphrase, salt, KDF_ITERATIONS)

    cipher = AES.new(key, AES.MODE_GCM, nonce=nonce)
    ciphertext, tag = cipher.encrypt_and_digest(plaintext.encode("utf-8"))

    payload = {
        "v": 1,
        "kdf": _KDF,
        "iter": KDF_ITERATIONS,
        "cipher": _CIPHER,
        "salt_b64": _b64(salt),
        "nonce_b64": _b64(nonce),
        "ct_b64": _b64(ciphertext),
        "tag_b64": _b64(tag),
    }
    body = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return _HEADER + "\n" + body


def decrypt_text(serialized: str, passphrase: str) -> str:
    if not serialized.startswith(_HEADER + "\n"):
        raise make_error("invalid_ciphertext", "invalid encrypted payload header")

    body = serialized[len(_HEADER) + 1 :]
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise make_error("invalid_ciphertext", "invalid encrypted payload") from exc
    if not isinstance(payload, dict):
        raise make_error("invalid_ciphertext", "invalid encrypted payload")

    if payload.get("v") != 1 or payload.get("kdf") != _KDF or payload.get("cipher") != _CIPHER:
        raise make_error("invalid_ciphertext", "unsupported encrypted payload format")
    iterations = payload.get("iter")
    if isinstance(iterations, bool) or not isinstance(iterations, int) or not (0 < iterations <= MAX_KDF_ITERATIONS):
        raise make_error("invalid_ciphertext", "invalid encrypted payload: bad iter")

    salt = _unb64(payload, "salt_b64")
    nonce = _unb64(payload, "nonce_b64")
    ciphertext = _unb64(payload, "ct_b64", allow_empty=True)
    tag = _unb64(payload, "tag_b64")
    if len(nonce) != _NONCE_BYTES or len(tag) != _TAG_BYTES:
        raise make_error("invalid_ciphertext", "invalid encrypted payload: bad nonce or tag length")

    key = _derive_key(passphrase, salt, iterations)
    cipher = AES.new(key, AES.MODE_GCM, nonce=nonce)
    try:
        plaintext = cipher.decrypt_and_verify(ciphertext, tag)
    except ValueError as exc:
        raise make_error("decryption_failed", "decryption failed: wrong passphrase or tampered payload") from exc
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise make_error("decryption_failed", "decryption failed: invalid utf-8 payload") from exc
