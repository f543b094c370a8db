#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from hanpw.core.error_dialect import format_error_text
from hanpw.core.models import (
    PASSWORD_DEFAULT_LENGTH,
    PASSWORD_DEFAULT_MIN_PER_CLASS,
    PIN_DEFAULT_LENGTH,
    PasswordRequest,
    PasswordSpec,
    PinRequest,
)
from hanpw.core.password_service import generate_passwords, generate_pins


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Password generator with per-class minimums (os.urandom)")

    parser.add_argument("-l", "--length", type=int, default=PASSWORD_DEFAULT_LENGTH, help="password length")
    parser.add_argument("-n", "--count", type=int, default=1, help="number of outputs to print")

    # Character classes
    parser.add_argument("--no-upper", action="store_true", help="exclude uppercase letters")
    parser.add_argument("--no-lower", action="store_true", help="exclude lowercase letters")
    parser.add_argument("--no-numbers", action="store_true", help="exclude digits")
    parser.add_argument("--no-special", action="store_true", help="exclude special characters")
    parser.add_argument(
        "--ambiguous",
        action="store_true",
        help="allow visually ambiguous characters (0, O, 1, l, I)",
    )

    # Minimums
    parser.add_argument("--min-upper", type=int, default=PASSWORD_DEFAULT_MIN_PER_CLASS, help="minimum uppercase")
    parser.add_argument("--min-lower", type=int, default=PASSWORD_DEFAULT_MIN_PER_CLASS, help="minimum lowercase")
    parser.add_argument("--min-numbers", type=int, default=PASSWORD_DEFAULT_MIN_PER_CLASS, help="minimum digits")
    parser.add_argument("--min-special", type=int, default=PASSWORD_DEFAULT_MIN_PER_CLASS, help="minimum specials")

    parser.add_argument(
        "--show-meta",
        "--meta",
        action="store_true",
        help="Print strength score, label and estimated entropy per output.",
    )
    return parser.parse_args(argv)


def build_request(args: argparse.Namespace) -> PasswordRequest:
    spec = PasswordSpec(
        length=args.length,
        uppercase=not args.no_upper,
        lowercase=not args.no_lower,
        numbers=not args.no_numbers,
        special=not args.no_special,
        ambiguous=args.ambiguous,
        min_uppercase=args.min_upper,
        min_lowercase=args.min_lower,
        min_numbers=args.min_numbers,
        min_special=args.min_special,
    )
    return PasswordRequest(spec=spec, count=args.count, show_meta=args.show_meta)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        result = generate_passwords(build_request(args))
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2
    for line in result.as_lines(show_meta=args.show_meta):
        print(line)
    return 0


def parse_pin_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hanpw pin", description="Numeric PIN generator (os.urandom)")
    parser.add_argument("-l", "--length", type=int, default=PIN_DEFAULT_LENGTH, help="PIN length")
    parser.add_argument("-n", "--count", type=int, default=1, help="number of PINs to print")
    return parser.parse_args(argv)


def pin_main(argv: list[str] | None = None) -> int:
    args = parse_pin_args(argv)
    try:
        result = generate_pins(PinRequest(length=args.length, count=args.count))
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2
    for line in result.as_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
