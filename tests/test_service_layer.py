from __future__ import annotations

import unittest
from unittest.mock import patch

from hanpw import core
from hanpw.core.error_dialect import EntropyUnavailable, InvalidArgument, format_error_text
from hanpw.core.models import PassphraseRequest, PassphraseSpec, PasswordRequest, PasswordSpec, PinRequest
from hanpw.core.passphrase_service import MAX_WORDS, generate_passphrases
from hanpw.core.password_service import MAX_COUNT, MAX_PASSWORD_LENGTH, generate_passwords, generate_pins


class ServiceLayerTests(unittest.TestCase):
    def test_password_service_generates_expected_count(self) -> None:
        result = generate_passwords(PasswordRequest(spec=PasswordSpec(length=12), count=4))
        self.assertEqual(len(result.outputs), 4)
        for value in result.outputs:
            self.assertEqual(len(value), 12)
        self.assertEqual(result.strength_by_output, ())
        self.assertEqual(result.as_lines(show_meta=True), result.outputs)

    def test_password_service_count_validation(self) -> None:
        with self.assertRaisesRegex(ValueError, "count must be > 0"):
            generate_passwords(PasswordRequest(count=0))
        with self.assertRaisesRegex(ValueError, f"count must be <= {MAX_COUNT}"):
            generate_passwords(PasswordRequest(count=MAX_COUNT + 1))

    def test_password_service_length_and_minimum_validation(self) -> None:
        with self.assertRaisesRegex(InvalidArgument, "length must be <="):
            generate_passwords(PasswordRequest(spec=PasswordSpec(length=MAX_PASSWORD_LENGTH + 1)))
        with self.assertRaisesRegex(InvalidArgument, "min_special must be >= 0"):
            generate_passwords(PasswordRequest(spec=PasswordSpec(min_special=-1)))

    def test_password_service_bounds_class_minimums(self) -> None:
        with patch("hanpw.core.password_service.engine.generate_password") as mocked:
            with self.assertRaisesRegex(InvalidArgument, f"min_uppercase must be <= {MAX_PASSWORD_LENGTH}"):
                generate_passwords(PasswordRequest(spec=PasswordSpec(length=16, min_uppercase=10**9), count=512))
            spec = PasswordSpec(
                length=16,
                min_uppercase=MAX_PASSWORD_LENGTH,
                min_lowercase=MAX_PASSWORD_LENGTH,
                min_numbers=1,
            )
            with self.assertRaisesRegex(InvalidArgument, "required characters are too many"):
                generate_passwords(PasswordRequest(spec=spec, count=MAX_COUNT))
        mocked.assert_not_called()

    def test_password_service_keeps_truncation_for_large_minimums(self) -> None:
        result = generate_passwords(PasswordRequest(spec=PasswordSpec(length=8, min_numbers=100)))
        self.assertEqual(len(result.outputs[0]), 8)

    def test_password_service_meta_lines(self) -> None:
        result = generate_passwords(PasswordRequest(spec=PasswordSpec(length=20), count=2, show_meta=True))
        self.assertEqual(len(result.strength_by_output), 2)
        for line in result.as_lines(show_meta=True):
            value, meta = line.split("\t")
            self.assertEqual(len(value), 20)
            self.assertRegex(meta, r"^\[strength=\d label=[A-Za-z ]+ entropy=[\d.]+ bits\]$")
        self.assertEqual(result.as_lines(), result.outputs)

    def test_pin_service(self) -> None:
        result = generate_pins(PinRequest(length=6, count=3))
        self.assertEqual(len(result.outputs), 3)
        for pin in result.outputs:
            self.assertRegex(pin, r"^\d{6}$")
        with self.assertRaisesRegex(InvalidArgument, "length must be > 0"):
            generate_pins(PinRequest(length=0))

    def test_passphrase_service(self) -> None:
        request = PassphraseRequest(spec=PassphraseSpec(num_words=3, language="ko", use_josa=True), count=5)
        result = generate_passphrases(request)
        self.assertEqual(len(result.outputs), 5)
        for value in result.outputs:
            self.assertEqual(len(value.split("-")), 3)

    def test_passphrase_service_validation(self) -> None:
        with self.assertRaisesRegex(InvalidArgument, "num_words must be > 0"):
            generate_passphrases(PassphraseRequest(spec=PassphraseSpec(num_words=0)))
        with self.assertRaisesRegex(InvalidArgument, f"num_words must be <= {MAX_WORDS}"):
            generate_passphrases(PassphraseRequest(spec=PassphraseSpec(num_words=MAX_WORDS + 1)))
        with self.assertRaisesRegex(InvalidArgument, "word_separator"):
            generate_passphrases(PassphraseRequest(spec=PassphraseSpec(word_separator="-" * 17)))

    def test_passphrase_service_reads_wordlist_once(self) -> None:
        with patch("hanpw.core.passphrase_engine.load_wordlist", return_value=("kiwi",)) as mocked:
            result = generate_passphrases(
                PassphraseRequest(
                    spec=PassphraseSpec(num_words=2, include_number=False, wordlist="words.txt"),
                    count=4,
                )
            )
        mocked.assert_called_once_with("words.txt")
        self.assertEqual(result.outputs, ("Kiwi-Kiwi",) * 4)

    def test_entropy_failure_surfaces_as_coded_error(self) -> None:
        with patch("hanpw.core.secure_random.os.urandom", side_effect=OSError("rng unavailable")):
            with self.assertRaises(EntropyUnavailable) as ctx:
                generate_passwords(PasswordRequest())
        self.assertTrue(format_error_text(ctx.exception).startswith("entropy_unavailable: OS CSPRNG failure"))

    def test_core_facade_delegates(self) -> None:
        self.assertEqual(len(core.generate_password(PasswordSpec(length=9))), 9)
        self.assertEqual(len(core.generate_pin(5)), 5)
        self.assertEqual(core.attach_josa("바다", "object"), "바다를")
        self.assertEqual(core.decompose("한"), ["ㅎ", "ㅏ", "ㄴ"])
        self.assertEqual(core.romanize("안녕"), "dkssud")
        self.assertEqual(core.calculate_strength("").score, 0)
        self.assertFalse(core.validate_password("abc").is_valid)
        self.assertEqual(core.decrypt_text(core.encrypt_text("x", "p"), "p"), "x")


if __name__ == "__main__":
    unittest.main()
