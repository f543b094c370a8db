#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from hanpw.core.error_dialect import format_error_text
from hanpw.core.models import (
    PASSPHRASE_DEFAULT_LANGUAGE,
    PASSPHRASE_DEFAULT_SEPARATOR,
    PASSPHRASE_DEFAULT_WORDS,
    PassphraseRequest,
    PassphraseSpec,
)
from hanpw.core.passphrase_service import generate_passphrases
from hanpw.core.wordlists import LANGUAGES


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dictionary passphrase generator (os.urandom)")

    parser.add_argument("-w", "--words", type=int, default=PASSPHRASE_DEFAULT_WORDS, help="number of words")
    parser.add_argument("-n", "--count", type=int, default=1, help="number of outputs to print")
    parser.add_argument(
        "-s",
        "--separator",
        default=PASSPHRASE_DEFAULT_SEPARATOR,
        help=f"separator between words (default: {PASSPHRASE_DEFAULT_SEPARATOR})",
    )
    parser.add_argument(
        "--lang",
        "--language",
        dest="language",
        default=PASSPHRASE_DEFAULT_LANGUAGE,
        help=f"built-in word list language tag, e.g. ko-KR ({', '.join(LANGUAGES)})",
    )
    parser.add_argument("--wordlist", default="", help="path to a custom newline-separated word list")
    parser.add_argument("--no-capitalize", action="store_true", help="keep words in their dictionary case")
    parser.add_argument("--no-number", action="store_true", help="do not append a digit to a random word")

    # Korean options
    parser.add_argument("--josa", action="store_true", help="(ko) attach grammatical particles to each word")
    parser.add_argument(
        "--qwerty",
        "--romanize",
        dest="romanize",
        action="store_true",
        help="(ko) convert words to two-set keyboard keystrokes",
    )

    parser.add_argument("--leet", action="store_true", help="apply leet substitutions to every word")
    parser.add_argument(
        "--show-meta",
        "--meta",
        action="store_true",
        help="Print strength score, label and estimated entropy per output.",
    )
    return parser.parse_args(argv)


def build_request(args: argparse.Namespace) -> PassphraseRequest:
    spec = PassphraseSpec(
        num_words=args.words,
        word_separator=args.separator,
        capitalize=not args.no_capitalize,
        include_number=not args.no_number,
        language=args.language,
        romanize=args.romanize,
        use_josa=args.josa,
        leet=args.leet,
        wordlist=args.wordlist,
    )
    return PassphraseRequest(spec=spec, count=args.count, show_meta=args.show_meta)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        result = generate_passphrases(build_request(args))
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2
    for line in result.as_lines(show_meta=args.show_meta):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
