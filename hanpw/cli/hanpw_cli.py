#!/usr/bin/env python3
from __future__ import annotations

import sys

from hanpw.cli.passphrase_cli import main as passphrase_main
from hanpw.cli.pwgen_cli import main as password_main
from hanpw.cli.pwgen_cli import pin_main
from hanpw.cli.text_cli import main as text_main

_PASSWORD_ALIASES = frozenset({"password", "pass", "pw"})
_PASSPHRASE_ALIASES = frozenset({"passphrase", "phrase", "pp"})
_PIN_ALIASES = frozenset({"pin"})
_TEXT_COMMANDS = frozenset({"strength", "check", "romanize", "decompose", "josa", "leet", "case", "encrypt", "decrypt"})


def _print_help() -> None:
    print(
        "HanPw unified CLI\n"
        "\n"
        "Usage:\n"
        "  hanpw [password flags]\n"
        "  hanpw password [password flags]\n"
        "  hanpw passphrase [passphrase flags]\n"
        "  hanpw pin [-l LENGTH] [-n COUNT]\n"
        "  hanpw {strength,check,romanize,decompose,josa,leet,case,encrypt,decrypt} ...\n"
        "\n"
        "Examples:\n"
        "  hanpw -n 5 -l 24\n"
        "  hanpw passphrase --lang ko --josa --qwerty -s ' '\n"
        "  hanpw josa 서울 directional\n"
    )


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return password_main([])

    command = args[0].lower()
    tail = args[1:]

    if command in ("-h", "--help", "help"):
        _print_help()
        return 0
    if command in _PASSWORD_ALIASES:
        return password_main(tail)
    if command in _PASSPHRASE_ALIASES:
        return passphrase_main(tail)
    if command in _PIN_ALIASES:
        return pin_main(tail)
    if command in _TEXT_COMMANDS:
        return text_main([command, *tail])
    if command.startswith("-"):
        return password_main(args)
    print(
        f"unknown command: {args[0]!r}. Use 'hanpw --help' for usage.",
        file=sys.stderr,
    )
    return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
