r"""
passphrase_engine.py - dictionary passphrases with Korean particle and keyboard support

Steps, in order: draw words with replacement, capitalize (non-Korean), inject
one digit, attach Josa particles (Korean), romanize to two-set keystrokes and
capitalize (Korean), leet substitution, join.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from hanpw.core.error_dialect import InvalidArgument, UnknownDictionary
from hanpw.core.hangul import romanize
from hanpw.core.josa import JosaRelation, attach_josa
from hanpw.core.models import PassphraseSpec
from hanpw.core.secure_random import uniform
from hanpw.core.transformations import capitalize_first, leet_speak
from hanpw.core.wordlists import get_wordlist, load_wordlist, normalize_language

KOREAN = "ko"

JOSA_CYCLE: Tuple[JosaRelation, ...] = (
    JosaRelation.SUBJECT,
    JosaRelation.OBJECT,
    JosaRelation.CONJUNCTIVE,
    JosaRelation.DIRECTIONAL,
    JosaRelation.TOPIC,
    JosaRelation.POSSESSIVE,
)


def resolve_wordlist(spec: PassphraseSpec) -> Tuple[str, ...]:
    if spec.wordlist.strip():
        return load_wordlist(spec.wordlist)
    return get_wordlist(spec.language)


def relation_for_index(index: int) -> JosaRelation:
    return JOSA_CYCLE[index % len(JOSA_CYCLE)]


def generate_passphrase(
    spec: PassphraseSpec | None = None,
    *,
    words_pool: Sequence[str] | None = None,
) -> str:
    if spec is None:
        spec = PassphraseSpec()

    if words_pool is None:
        words_pool = resolve_wordlist(spec)
    if not words_pool:
        raise UnknownDictionary("word list is empty")
    if spec.num_words < 1:
        raise InvalidArgument("num_words must be > 0")

    korean = normalize_language(spec.language) == KOREAN

    words: List[str] = []
    for _ in range(spec.num_words):
        word = words_pool[uniform(len(words_pool))]
        if spec.capitalize and not korean:
            word = capitalize_first(word)
        words.append(word)

    if spec.include_number:
        idx = uniform(len(words))
        words[idx] = words[idx] + str(uniform(10))

    if korean and spec.use_josa:
        words = [attach_josa(word, relation_for_index(i)) for i, word in enumerate(words)]

    if korean and spec.romanize:
        words = [romanize(word) for word in words]
        # Hangul has no letter case; capitalize the keystrokes instead.
        if spec.capitalize:
            words = [capitalize_first(word) for word in words]

    if spec.leet:
        words = [leet_speak(word) for word in words]

    return spec.word_separator.join(words)
