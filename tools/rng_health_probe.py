#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from pathlib import Path
import sys
from typing import Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hanpw.core.secure_random import assert_csprng_ready, secure_random_bytes, uniform


def chi_square_statistic(counts: Sequence[int]) -> float:
    total = sum(counts)
    if not counts or total <= 0:
        raise ValueError("counts must be non-empty with a positive total")
    expected = total / len(counts)
    return sum((observed - expected) ** 2 / expected for observed in counts)


def chi_square_critical(df: int, z: float) -> float:
    # Wilson-Hilferty approximation of the chi-square upper quantile.
    if df <= 0:
        raise ValueError("degrees of freedom must be > 0")
    k = 2.0 / (9.0 * df)
    return df * (1.0 - k + z * math.sqrt(k)) ** 3


def _run_byte_probe(*, samples: int, chunk_bytes: int, min_ones_ratio: float, max_ones_ratio: float) -> float:
    if samples <= 0:
        raise ValueError("samples must be > 0")
    if chunk_bytes <= 0:
        raise ValueError("chunk-bytes must be > 0")
    if not (0.0 <= min_ones_ratio <= 1.0 and 0.0 <= max_ones_ratio <= 1.0 and min_ones_ratio < max_ones_ratio):
        raise ValueError("ones-ratio bounds must satisfy 0 <= min < max <= 1")

    total_one_bits = 0
    total_bits = samples * chunk_bytes * 8
    for _ in range(samples):
        block = secure_random_bytes(chunk_bytes)
        total_one_bits += sum(byte.bit_count() for byte in block)

    ones_ratio = total_one_bits / total_bits
    if ones_ratio < min_ones_ratio or ones_ratio > max_ones_ratio:
        raise RuntimeError(
            f"RNG health probe failed: one-bit ratio {ones_ratio:.6f} outside [{min_ones_ratio:.6f}, {max_ones_ratio:.6f}]"
        )
    return ones_ratio


def _run_sampler_probe(*, draws: int, bound: int, z: float) -> tuple[float, float]:
    if bound < 2:
        raise ValueError("bound must be >= 2")
    if draws < bound * 5:
        raise ValueError("draws must be at least 5x bound for a meaningful chi-square test")

    counts = [0] * bound
    for _ in range(draws):
        counts[uniform(bound)] += 1

    statistic = chi_square_statistic(counts)
    critical = chi_square_critical(bound - 1, z)
    if statistic > critical:
        raise RuntimeError(
            f"RNG health probe failed: uniform({bound}) chi-square {statistic:.3f} exceeds {critical:.3f}"
        )
    return statistic, critical


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Local health probe for the OS CSPRNG and the unbiased index sampler. "
            "This is a sanity check, not a cryptographic certification."
        )
    )
    parser.add_argument("--samples", type=int, default=4096, help="Number of random blocks to sample (default: 4096).")
    parser.add_argument("--chunk-bytes", type=int, default=32, help="Bytes per sampled block (default: 32).")
    parser.add_argument("--min-ones-ratio", type=float, default=0.47, help="Minimum one-bit ratio (default: 0.47).")
    parser.add_argument("--max-ones-ratio", type=float, default=0.53, help="Maximum one-bit ratio (default: 0.53).")
    parser.add_argument("--draws", type=int, default=60000, help="uniform() draws for the chi-square test.")
    parser.add_argument("--bound", type=int, default=60, help="Sampling bound n for uniform(n) (default: 60).")
    parser.add_argument("--z", type=float, default=4.0, help="Chi-square critical z-score (default: 4.0).")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        assert_csprng_ready()
        ones_ratio = _run_byte_probe(
            samples=args.samples,
            chunk_bytes=args.chunk_bytes,
            min_ones_ratio=args.min_ones_ratio,
            max_ones_ratio=args.max_ones_ratio,
        )
        statistic, critical = _run_sampler_probe(draws=args.draws, bound=args.bound, z=args.z)
    except (RuntimeError, ValueError) as exc:
        print(f"[rng] probe failed: {exc}", file=sys.stderr)
        return 1

    print(f"[rng] samples={args.samples} chunk_bytes={args.chunk_bytes}")
    print(f"[rng] one_bit_ratio={ones_ratio:.6f}")
    print(f"[rng] uniform({args.bound}) draws={args.draws} chi2={statistic:.3f} (critical={critical:.3f})")
    print("[rng] probe ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
