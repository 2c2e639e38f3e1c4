#!/usr/bin/env python3
"""Basic usage example for Parachute.

Demonstrates encoding messages into ring digits, compressing them into
arcs, rendering the Perseverance parachute pattern and decoding a ring
back to its message.

Usage:
    python examples/basic_usage.py
"""

import sys
import os

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parachute.arcs import compute_arcs
from parachute.decoder import decode_ring_bits
from parachute.encoder import clamp_digit_width, compute_min_digit_width, encode_ring
from parachute.presets import PERSEVERANCE_RINGS
from parachute.renderer import render_png, render_svg
from parachute.ring import PatternSpec, RingSpec


def example_single_ring():
    """Encode one ring and show its digits and arcs."""
    print("=" * 60)
    print("Example 1: Single Ring")
    print("=" * 60)

    spec = RingSpec("mighty", False, 8, 7, 3, 0, 0)
    bits = encode_ring(spec)
    arcs = compute_arcs(bits)
    print(f"  Message:     {spec.message!r}")
    print(f"  Min digits:  {compute_min_digit_width(spec.message, spec.is_unicode)}")
    print(f"  Ring digits: {bits}")
    print(f"  Digits:      {len(bits)} (total slots {spec.total_slots})")
    print(f"  Arcs:        {len(arcs)} (instead of {bits.count('1')} single-digit wedges)")
    print()


def example_perseverance_pattern():
    """Render the first three rings of the Perseverance parachute."""
    print("=" * 60)
    print("Example 2: Perseverance Parachute")
    print("=" * 60)

    pattern = PatternSpec(rings=PERSEVERANCE_RINGS)
    svg = render_svg(pattern)
    png = render_png(pattern)
    print(f"  Rings:       {[ring.message for ring in pattern.rings]}")
    print(f"  SVG length:  {len(svg)} chars")
    print(f"  PNG size:    {len(png)} bytes")
    print()


def example_unicode_ring():
    """Encode a Unicode message, raising the digit width to fit."""
    print("=" * 60)
    print("Example 3: Unicode Ring")
    print("=" * 60)

    spec = clamp_digit_width(RingSpec("세계", True, 2, 7, 4, 0, 0))
    bits = encode_ring(spec)
    print(f"  Digit width: {spec.digit_width}")
    print(f"  Ring digits: {bits}")
    print()


def example_decode():
    """Decode each parachute ring back to its message."""
    print("=" * 60)
    print("Example 4: Decode")
    print("=" * 60)

    for spec in PERSEVERANCE_RINGS:
        message = decode_ring_bits(
            encode_ring(spec),
            char_count=spec.char_count,
            digit_width=spec.digit_width,
            padding_length=spec.padding_length,
            char_offset=spec.char_offset,
            digit_offset=spec.digit_offset,
        )
        print(f"  Offset {spec.char_offset:3d}: {message!r}")
    print()


if __name__ == "__main__":
    example_single_ring()
    example_perseverance_pattern()
    example_unicode_ring()
    example_decode()
    print("All examples completed successfully.")
