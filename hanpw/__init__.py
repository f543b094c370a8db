"""HanPw: secure passwords, passphrases and PINs with Korean passphrase support."""

__version__ = "1.0.0"
