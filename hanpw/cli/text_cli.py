#!/usr/bin/env python3
from __future__ import annotations

import argparse
import getpass
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Callable, Mapping

from hanpw.core.error_dialect import InvalidArgument, error_payload_from_exception, format_error_text
from hanpw.core.export_crypto import decrypt_text, encrypt_text
from hanpw.core.hangul import decompose, romanize
from hanpw.core.josa import JosaRelation, attach_josa
from hanpw.core.password_policy import PasswordPolicy, validate_password
from hanpw.core.password_strength import calculate_strength, quality_from_entropy_bits
from hanpw.core.transformations import CASE_CHOICES, leet_speak, transform_case

MAX_INPUT_BYTES = 1024 * 1024


def _read_text_file(path: str, label: str) -> str:
    p = Path(path).expanduser()
    try:
        st = p.stat()
    except FileNotFoundError as exc:
        raise InvalidArgument(f"{label} file not found: {p}") from exc
    except OSError as exc:
        raise InvalidArgument(f"unable to stat {label} file '{p}': {exc}") from exc
    if not p.is_file():
        raise InvalidArgument(f"{label} path is not a file: {p}")
    if st.st_size > MAX_INPUT_BYTES:
        raise InvalidArgument(f"{label} file too large: {p}")
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise InvalidArgument(f"unable to read {label} file '{p}': {exc}") from exc


def _read_passphrase(args: argparse.Namespace) -> str:
    if args.passphrase_file:
        passphrase = _read_text_file(args.passphrase_file, "passphrase").rstrip("\r\n")
    else:
        passphrase = getpass.getpass("passphrase: ")
    if not passphrase:
        raise InvalidArgument("passphrase is empty")
    return passphrase


def _read_input(args: argparse.Namespace) -> str:
    if args.input:
        return _read_text_file(args.input, "input")
    return sys.stdin.read()


def _emit_json(payload: Mapping[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def _cmd_strength(args: argparse.Namespace) -> int:
    report = calculate_strength(args.password)
    if args.json:
        payload = asdict(report)
        payload["warnings"] = list(report.warnings)
        _emit_json(payload)
        return 0
    print(f"score={report.score} label={report.label} color={report.color}")
    print(f"entropy={report.entropy} bits quality={quality_from_entropy_bits(report.entropy)}")
    for warning in report.warnings:
        print(f"warning: {warning}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    policy = PasswordPolicy(
        min_length=args.min_length,
        max_length=args.max_length,
        require_uppercase=args.require_upper,
        require_lowercase=args.require_lower,
        require_numbers=args.require_numbers,
        require_special=args.require_special,
        min_score=args.min_score,
        forbid_whitespace=args.forbid_whitespace,
    )
    result = validate_password(args.password, policy)
    if args.json:
        _emit_json({"is_valid": result.is_valid, "errors": list(result.errors)})
    else:
        print("valid" if result.is_valid else "invalid")
        for error in result.errors:
            print(f"error: {error}")
    return 0 if result.is_valid else 1


def _cmd_romanize(args: argparse.Namespace) -> int:
    print(romanize(args.text))
    return 0


def _cmd_decompose(args: argparse.Namespace) -> int:
    for char in args.text:
        print(f"{char}\t{' '.join(decompose(char))}")
    return 0


def _cmd_josa(args: argparse.Namespace) -> int:
    print(attach_josa(args.word, args.relation))
    return 0


def _cmd_leet(args: argparse.Namespace) -> int:
    print(leet_speak(args.text))
    return 0


def _cmd_case(args: argparse.Namespace) -> int:
    print(transform_case(args.text, args.case))
    return 0


def _cmd_encrypt(args: argparse.Namespace) -> int:
    plaintext = _read_input(args)
    print(encrypt_text(plaintext, _read_passphrase(args)))
    return 0


def _cmd_decrypt(args: argparse.Namespace) -> int:
    serialized = _read_input(args).strip()
    sys.stdout.write(decrypt_text(serialized, _read_passphrase(args)))
    return 0


def _add_crypto_io(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--in", dest="input", default="", help="read input from this file instead of stdin")
    parser.add_argument(
        "--passphrase-file",
        default="",
        help="read the passphrase from this file (prompted when omitted)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hanpw", description="HanPw text utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("strength", help="heuristic strength score for a password")
    p.add_argument("password")
    p.add_argument("--json", action="store_true", help="print a JSON object")
    p.set_defaults(handler=_cmd_strength)

    p = sub.add_parser("check", help="validate a password against a policy")
    p.add_argument("password")
    p.add_argument("--min-length", type=int, default=8)
    p.add_argument("--max-length", type=int, default=0, help="0 disables the upper bound")
    p.add_argument("--require-upper", action="store_true")
    p.add_argument("--require-lower", action="store_true")
    p.add_argument("--require-numbers", action="store_true")
    p.add_argument("--require-special", action="store_true")
    p.add_argument("--min-score", type=int, default=0, help="minimum strength score (0-4)")
    p.add_argument("--forbid-whitespace", action="store_true")
    p.add_argument("--json", action="store_true", help="print a JSON object")
    p.set_defaults(handler=_cmd_check)

    p = sub.add_parser("romanize", help="Hangul to two-set keyboard keystrokes")
    p.add_argument("text")
    p.set_defaults(handler=_cmd_romanize)

    p = sub.add_parser("decompose", help="print the jamo of each character")
    p.add_argument("text")
    p.set_defaults(handler=_cmd_decompose)

    p = sub.add_parser("josa", help="attach a grammatical particle to a word")
    p.add_argument("word")
    p.add_argument("relation", help=", ".join(member.value for member in JosaRelation))
    p.set_defaults(handler=_cmd_josa)

    p = sub.add_parser("leet", help="leet-speak substitution")
    p.add_argument("text")
    p.set_defaults(handler=_cmd_leet)

    p = sub.add_parser("case", help="change letter case")
    p.add_argument("text")
    p.add_argument("case", choices=CASE_CHOICES)
    p.set_defaults(handler=_cmd_case)

    p = sub.add_parser("encrypt", help="encrypt text with a passphrase (AES-256-GCM)")
    _add_crypto_io(p)
    p.set_defaults(handler=_cmd_encrypt)

    p = sub.add_parser("decrypt", help="decrypt text produced by 'encrypt'")
    _add_crypto_io(p)
    p.set_defaults(handler=_cmd_decrypt)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    handler: Callable[[argparse.Namespace], int] = args.handler
    try:
        return handler(args)
    except ValueError as exc:
        if getattr(args, "json", False):
            _emit_json(error_payload_from_exception(exc))
        else:
            print(format_error_text(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
