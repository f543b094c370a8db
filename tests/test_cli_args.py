from __future__ import annotations

import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from hanpw.cli.hanpw_cli import main as hanpw_main
from hanpw.cli.passphrase_cli import build_request as build_passphrase_request
from hanpw.cli.passphrase_cli import main as passphrase_main
from hanpw.cli.passphrase_cli import parse_args as parse_passphrase_args
from hanpw.cli.pwgen_cli import build_request as build_password_request
from hanpw.cli.pwgen_cli import main as password_main
from hanpw.cli.pwgen_cli import parse_args as parse_password_args
from hanpw.cli.text_cli import main as text_main


def _run(func, argv: list[str]) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        rc = func(argv)
    return rc, stdout.getvalue(), stderr.getvalue()


class PasswordCliTests(unittest.TestCase):
    def test_password_cli_defaults(self) -> None:
        request = build_password_request(parse_password_args([]))
        self.assertEqual(request.count, 1)
        self.assertEqual(request.spec.length, 16)
        self.assertTrue(request.spec.special)
        self.assertFalse(request.spec.ambiguous)
        self.assertFalse(request.show_meta)

    def test_password_cli_class_flags(self) -> None:
        args = parse_password_args(["--no-special", "--ambiguous", "--min-upper", "3", "--meta"])
        request = build_password_request(args)
        self.assertFalse(request.spec.special)
        self.assertTrue(request.spec.ambiguous)
        self.assertEqual(request.spec.min_uppercase, 3)
        self.assertTrue(request.show_meta)

    def test_password_cli_prints_count_lines(self) -> None:
        rc, out, _ = _run(password_main, ["-n", "3", "-l", "10"])
        self.assertEqual(rc, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(all(len(line) == 10 for line in lines))

    def test_password_cli_hard_fails_on_invalid_count(self) -> None:
        rc, out, err = _run(password_main, ["-n", "0"])
        self.assertEqual(rc, 2)
        self.assertEqual(out, "")
        self.assertIn("invalid_argument: count must be > 0", err)


class PassphraseCliTests(unittest.TestCase):
    def test_passphrase_cli_korean_flags(self) -> None:
        args = parse_passphrase_args(["--lang", "ko", "--josa", "--qwerty", "-s", " ", "-w", "5"])
        request = build_passphrase_request(args)
        self.assertEqual(request.spec.language, "ko")
        self.assertTrue(request.spec.use_josa)
        self.assertTrue(request.spec.romanize)
        self.assertEqual(request.spec.word_separator, " ")
        self.assertEqual(request.spec.num_words, 5)

    def test_passphrase_cli_output(self) -> None:
        rc, out, _ = _run(passphrase_main, ["-w", "3", "-n", "2", "--no-number", "-s", " "])
        self.assertEqual(rc, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 2)
        for line in lines:
            self.assertEqual(len(line.split(" ")), 3)

    def test_passphrase_cli_accepts_regional_language_tags(self) -> None:
        self.assertEqual(parse_passphrase_args(["--lang", "ko-KR"]).language, "ko-KR")
        rc, out, _ = _run(passphrase_main, ["--lang", "ko-KR", "-w", "2", "--no-number"])
        self.assertEqual(rc, 0)
        self.assertEqual(len(out.strip().split("-")), 2)

    def test_passphrase_cli_reports_unknown_language(self) -> None:
        rc, out, err = _run(passphrase_main, ["--lang", "tlh"])
        self.assertEqual(rc, 2)
        self.assertEqual(out, "")
        self.assertIn("unknown_dictionary: no word list for language 'tlh'", err)

    def test_passphrase_cli_reports_missing_wordlist(self) -> None:
        rc, _, err = _run(passphrase_main, ["--wordlist", ".tmp_missing_hanpw_cli_words.txt"])
        self.assertEqual(rc, 2)
        self.assertTrue(err.startswith("unknown_dictionary:"))


class TextCliTests(unittest.TestCase):
    def test_strength_json(self) -> None:
        rc, out, _ = _run(text_main, ["strength", "password123", "--json"])
        self.assertEqual(rc, 0)
        payload = json.loads(out)
        self.assertEqual(set(payload), {"score", "label", "color", "entropy", "warnings"})
        self.assertIn("starts with a common pattern", payload["warnings"])

    def test_check_exit_codes(self) -> None:
        rc, out, _ = _run(text_main, ["check", "abc"])
        self.assertEqual(rc, 1)
        self.assertIn("must be at least 8 characters", out)
        rc, out, _ = _run(text_main, ["check", "abcdefgh", "--json"])
        self.assertEqual(rc, 0)
        self.assertEqual(json.loads(out), {"is_valid": True, "errors": []})

    def test_check_invalid_policy_json_error(self) -> None:
        rc, out, _ = _run(text_main, ["check", "abc", "--min-score", "9", "--json"])
        self.assertEqual(rc, 2)
        self.assertEqual(json.loads(out)["error"]["code"], "invalid_argument")

    def test_hangul_commands(self) -> None:
        self.assertEqual(_run(text_main, ["romanize", "홍길동"])[1], "ghdrlfehd\n")
        self.assertEqual(_run(text_main, ["josa", "서울", "directional"])[1], "서울로\n")
        self.assertEqual(_run(text_main, ["decompose", "한a"])[1], "한\tㅎ ㅏ ㄴ\na\ta\n")

    def test_unknown_relation_is_reported(self) -> None:
        rc, _, err = _run(text_main, ["josa", "서울", "vocative"])
        self.assertEqual(rc, 2)
        self.assertIn("invalid_argument: unknown josa relation", err)

    def test_leet_and_case(self) -> None:
        self.assertEqual(_run(text_main, ["leet", "leet"])[1], "1337\n")
        self.assertEqual(_run(text_main, ["case", "hELLO", "titlecase"])[1], "Hello\n")

    def test_encrypt_decrypt_with_files(self) -> None:
        plain_path = Path(".tmp_test_hanpw_cli_plain.txt")
        secret_path = Path(".tmp_test_hanpw_cli_secret.txt")
        cipher_path = Path(".tmp_test_hanpw_cli_cipher.txt")
        try:
            plain_path.write_text("비밀 secret\n", encoding="utf-8", newline="\n")
            secret_path.write_text("hunter2\n", encoding="utf-8", newline="\n")
            rc, out, _ = _run(text_main, ["encrypt", "--in", str(plain_path), "--passphrase-file", str(secret_path)])
            self.assertEqual(rc, 0)
            self.assertTrue(out.startswith("HANPW-ENC-1\n"))
            cipher_path.write_text(out, encoding="utf-8", newline="\n")
            rc, out, _ = _run(text_main, ["decrypt", "--in", str(cipher_path), "--passphrase-file", str(secret_path)])
            self.assertEqual(rc, 0)
            self.assertEqual(out, "비밀 secret\n")
        finally:
            for path in (plain_path, secret_path, cipher_path):
                try:
                    path.unlink()
                except OSError:
                    pass

    def test_unreadable_input_file_is_a_coded_error(self) -> None:
        with patch.object(Path, "stat", side_effect=PermissionError("denied")):
            rc, out, err = _run(text_main, ["encrypt", "--in", "locked.txt", "--passphrase-file", "pw.txt"])
        self.assertEqual(rc, 2)
        self.assertEqual(out, "")
        self.assertIn("invalid_argument: unable to stat input file", err)

    def test_decrypt_reads_stdin_and_prompts(self) -> None:
        with patch("sys.stdin", io.StringIO("garbage")), patch("getpass.getpass", return_value="pw"):
            rc, _, err = _run(text_main, ["decrypt"])
        self.assertEqual(rc, 2)
        self.assertIn("invalid_ciphertext", err)


class HanPwCliTests(unittest.TestCase):
    def test_hanpw_cli_defaults_to_password_mode(self) -> None:
        rc, out, _ = _run(hanpw_main, ["-n", "2", "-l", "12"])
        self.assertEqual(rc, 0)
        self.assertEqual([len(line) for line in out.splitlines()], [12, 12])

    def test_hanpw_cli_routes_subcommands(self) -> None:
        rc, out, _ = _run(hanpw_main, ["pin", "-l", "6"])
        self.assertEqual(rc, 0)
        self.assertRegex(out, r"^\d{6}\n$")
        rc, out, _ = _run(hanpw_main, ["pp", "--lang", "ko", "-w", "2", "--no-number"])
        self.assertEqual(rc, 0)
        self.assertEqual(len(out.strip().split("-")), 2)
        rc, out, _ = _run(hanpw_main, ["josa", "바다", "object"])
        self.assertEqual(out, "바다를\n")

    def test_hanpw_cli_help(self) -> None:
        rc, out, _ = _run(hanpw_main, ["--help"])
        self.assertEqual(rc, 0)
        self.assertIn("HanPw unified CLI", out)

    def test_hanpw_cli_unknown_command(self) -> None:
        rc, _, err = _run(hanpw_main, ["frobnicate"])
        self.assertEqual(rc, 2)
        self.assertIn("unknown command: 'frobnicate'", err)


if __name__ == "__main__":
    unittest.main()
