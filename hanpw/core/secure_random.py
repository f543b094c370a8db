"""Unbiased sampling and shuffling on top of the OS CSPRNG (os.urandom)."""

from __future__ import annotations

import os
from typing import Iterable, List, TypeVar

from hanpw.core.error_dialect import EntropyUnavailable, InvalidArgument

T = TypeVar("T")

_UINT32_SPACE = 1 << 32
_DRAW_BYTES = 4


def secure_random_bytes(n: int) -> bytes:
    try:
        data = os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"OS CSPRNG failure requesting {n} byte(s): {exc}") from exc
    if len(data) != n:
        raise EntropyUnavailable(f"OS CSPRNG returned unexpected byte count ({len(data)} != {n})")
    return data


def assert_csprng_ready() -> None:
    """Fail fast when the entropy source cannot produce a single block."""
    secure_random_bytes(16)


def uniform(n: int) -> int:
    """Return an integer in [0, n) with exactly equal probability.

    Draws 32-bit little-endian words and rejects the tail above the largest
    multiple of n, so no residue is favoured (no modulo bias).
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"sampling bound must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidArgument(f"sampling bound must be >= 1, got {n}")
    if n == 1:
        return 0
    if n > _UINT32_SPACE:
        raise InvalidArgument(f"sampling bound must be <= 2**32, got {n}")

    limit = _UINT32_SPACE - (_UINT32_SPACE % n)
    while True:
        r = int.from_bytes(secure_random_bytes(_DRAW_BYTES), "little", signed=False)
        if r < limit:
            return r % n


def choice(seq: str) -> str:
    if not seq:
        raise InvalidArgument("cannot choose from an empty alphabet")
    return seq[uniform(len(seq))]


def shuffle(items: Iterable[T]) -> List[T]:
    """Fisher-Yates shuffle of a copy of `items`."""
    arr = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = uniform(i + 1)
        arr[i], arr[j] = arr[j], arr[i]
    return arr
