"""Small numeric helpers: clamping, linear interpolation and range mapping."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit ``value`` to the closed interval [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between ``a`` and ``b`` by factor ``t``."""
    return a + t * (b - a)


def map_range(
    value: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Map ``value`` from [in_min, in_max] onto [out_min, out_max]."""
    if in_max == in_min:
        raise ValueError("input range must not be empty")
    t = (value - in_min) / (in_max - in_min)
    return lerp(out_min, out_max, t)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a short demonstration of the helpers."""
    parser = argparse.ArgumentParser(description="Demonstrate the math helpers.")
    parser.parse_args(argv)
    print(f"Clamped Value: {clamp(5.5, 0.0, 10.0):g}")
    print(f"Lerped Value: {lerp(2.0, 8.0, 0.25):g}")
    print(f"Mapped Value: {map_range(5.0, 0.0, 10.0, 100.0, 200.0):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())