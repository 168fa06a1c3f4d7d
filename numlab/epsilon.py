"""Machine epsilon and the pitfalls of comparing floating-point numbers."""

from __future__ import annotations

import argparse
import struct
import sys

_WORD = {True: "true", False: "false"}


def _to_float32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


def float_epsilon() -> float:
    """Machine epsilon of single precision, found by halving."""
    f = 1.0
    while _to_float32(1.0 + f) != 1.0:
        f /= 2.0
    return f * 2.0


def double_epsilon() -> float:
    """Machine epsilon of double precision, found by halving."""
    d = 1.0
    while 1.0 + d != 1.0:
        d /= 2.0
    return d * 2.0


def approx(a, b, acc: float = 1e-9, eps: float = 1e-9) -> bool:
    """True if ``a`` and ``b`` agree within absolute ``acc`` or relative ``eps``."""
    absolute = abs(a - b)
    if absolute <= acc:
        return True
    scale = max(abs(a), abs(b))
    return scale > 0 and absolute / scale <= eps


def report() -> str:
    """Text of the epsilon experiments."""
    lines = ["-----------PART 1------------"]
    lines.append(f"float eps={float_epsilon():g}")
    lines.append(f"double eps={double_epsilon():g}")
    lines.append(f"{_to_float32(2.0 ** -23):g}")
    lines.append(f"{sys.float_info.epsilon:g}")
    lines.append(f"Calculated epsilon double (2^-52)={2.0 ** -52:g}")
    lines.append(f"Calculated epsilon float (2^-23)={2.0 ** -23:g}")

    lines.append("-----------PART 2------------")
    tiny = 2.0 ** -52 / 2
    a = 1 + tiny + tiny
    b = tiny + tiny + 1
    lines.append(f"a==b ? {_WORD[a == b]}")
    lines.append(f"a>1  ? {_WORD[a > 1]}")
    lines.append(f"b>1  ? {_WORD[b > 1]}")
    lines.append(f"tiny={tiny:.17f}")
    lines.append(f"1+tiny+tiny={a:.17f}")
    lines.append(f"tiny+tiny+1={b:.17f}")

    lines.append("-----------PART 3------------")
    d1 = 0.1 + 0.1 + 0.1 + 0.1 + 0.1 + 0.1 + 0.1 + 0.1
    d2 = 8 * 0.1
    lines.append(f"d1==d2? {_WORD[d1 == d2]}")
    lines.append(f"d1={d1:.17f}")
    lines.append(f"d2={d2:.17f}")
    lines.append(f"d1==d2? {int(approx(d1, d2))}")
    return "\n".join(lines)


def main(argv=None) -> int:
    argparse.ArgumentParser(description="Machine epsilon experiments.").parse_args(argv)
    print(report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())