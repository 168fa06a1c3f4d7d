"""Tabulate sine and cosine of numbers read from a file."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator
from contextlib import ExitStack


def tabulate(values: Iterable[float]) -> Iterator[str]:
    """Yield ``"x sin(x) cos(x)"`` for each value."""
    for x in values:
        yield f"{x:g} {math.sin(x):g} {math.cos(x):g}"


def _numbers(text: str) -> Iterator[float]:
    for token in text.split():
        try:
            yield float(token)
        except ValueError:
            return


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Tabulate sin and cos of numbers in a file.")
    parser.add_argument("--input", default="")
    parser.add_argument("--output", default="")
    args = parser.parse_args(argv)

    with ExitStack() as stack:
        source = target = None
        try:
            source = stack.enter_context(open(args.input))
        except OSError:
            pass
        try:
            target = stack.enter_context(open(args.output, "w"))
        except OSError:
            pass
        if source is None or target is None:
            print(f"Error opening files: {args.input}{args.output}", file=sys.stderr)
            return 1
        for line in tabulate(_numbers(source.read())):
            target.write(line + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())