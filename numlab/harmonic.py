"""Harmonic sums split across worker processes."""

from __future__ import annotations

import argparse
from concurrent.futures import ProcessPoolExecutor


def harmonic_sum(start: int, end: int) -> float:
    """Sum of ``1/i`` for ``start <= i < end``."""
    total = 0.0
    for i in range(start, end):
        total += 1.0 / i
    return total


def parallel_harmonic_sum(nterms: int, nworkers: int = 1) -> float:
    """Harmonic sum split into ``nworkers`` equal chunks of ``nterms // nworkers`` terms.

    Terms left over by the integer division are not summed.
    """
    if nworkers < 1:
        raise ValueError("need at least one worker")
    chunk = nterms // nworkers
    starts = [1 + chunk * i for i in range(nworkers)]
    ends = [1 + chunk * (i + 1) for i in range(nworkers)]
    with ProcessPoolExecutor(max_workers=nworkers) as pool:
        return sum(pool.map(harmonic_sum, starts, ends))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Harmonic sum on several processes.")
    parser.add_argument("-terms", type=lambda s: int(float(s)), default=int(1e9))
    parser.add_argument("-threads", type=int, default=1)
    args = parser.parse_args(argv)
    print(f"terms: {args.terms}")
    print(f"threads: {args.threads}")
    total = parallel_harmonic_sum(args.terms, args.threads)
    print(f"total sum={total:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())