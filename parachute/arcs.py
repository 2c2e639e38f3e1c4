"""Arc-run compression for ring digit strings.

A ring's digit string is read as a circle: digit i covers the angular
range [i * arc_size, (i + 1) * arc_size) with arc_size = 2*pi / N.
Instead of drawing one wedge per "1" digit, every maximal run of 1s is
merged into a single (start, end) angle pair. This keeps the drawn
shape count low and avoids seams between neighbouring digits.
"""

from __future__ import annotations

import math

from .errors import ConfigError, DegenerateRingError


def compute_arcs(bits: str) -> list[tuple[float, float]]:
    """Convert a ring digit string into arc angle pairs.

    The scan runs one position past the end (index N aliases index 0), so
    a run that reaches the end of the string is closed at exactly 2*pi.

    Args:
        bits: Ring digits, '0' or '1' only.

    Returns:
        List of (start_angle, end_angle) pairs in radians, in ring order.
        All-ones gives [(0.0, 2*pi)]; no ones gives [].

    Raises:
        DegenerateRingError: If bits is empty.
        ConfigError: If bits contains anything other than '0' and '1'.
    """
    num_arcs = len(bits)
    if num_arcs == 0:
        raise DegenerateRingError("Cannot compute arcs for an empty ring")
    invalid = set(bits) - {"0", "1"}
    if invalid:
        raise ConfigError(f"Invalid binary digits in ring: {''.join(sorted(invalid))!r}")

    arc_size = 2 * math.pi / num_arcs
    arcs: list[tuple[float, float]] = []

    start_angle = 0.0
    in_run = False
    for i in range(num_arcs + 1):
        x = i % num_arcs
        if bits[x] == "1" and not in_run:
            start_angle = arc_size * i
            in_run = True
        elif (bits[x] == "0" or x == 0) and in_run:
            arcs.append((start_angle, arc_size * i))
            in_run = False

    return arcs
