"""Message encoder for binary message rings.

Converts a RingSpec into the ring's final binary digit string.

Encoding algorithm:
1. Pad the message with spaces (or truncate it) to char_count characters
2. Encode each character (see codec.letter_to_num) and write it in binary
3. Blanks (code 0) become a solid run of 1s, other codes are left-padded
   with 0s to digit_width
4. Append padding_length filler digits to each slot. The filler is '0',
   except after a blank that is not the last slot, where it is '1' so the
   solid run continues through the gap
5. Rotate the slots left by char_offset, then join them
6. Rotate the joined string left by digit_offset

Also builds the RenderPlan for a whole pattern: digits, arcs and ring
radii for every ring.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

import structlog

from .arcs import compute_arcs
from .bits import append_chars, find_min_digits, num_to_bin, pad_binary
from .codec import BLANK_CODE, letter_to_num
from .errors import ConfigError, DegenerateRingError
from .ring import PatternSpec, RenderPlan, RingPlan, RingSpec

logger = structlog.get_logger(__name__)

S = TypeVar("S", str, list)

FILLER_DIGIT = "0"
BLANK_DIGIT = "1"


def apply_offset(seq: S, offset: int) -> S:
    """Rotate a string or list left by `offset` positions.

    Negative offsets rotate right. The offset is reduced modulo the
    sequence length, so rotating by the full length is the identity.

    Args:
        seq: String or list to rotate.
        offset: Number of positions to rotate left.

    Returns:
        Rotated copy of the same type. Empty input is returned as is.
    """
    if not seq:
        return seq
    offset %= len(seq)
    return seq[offset:] + seq[:offset]


def compute_min_digit_width(message: str, parse_as_unicode: bool) -> int:
    """Minimum digit width for a message, used to validate user input."""
    return find_min_digits(message, parse_as_unicode)


def validate_ring(spec: RingSpec) -> None:
    """Check that a ring can be encoded without losing information.

    Raises:
        DegenerateRingError: If the ring has no digit positions.
        ConfigError: If any count is negative, digit_width or
            padding_length is zero, or digit_width is too small for the
            encoded characters.
    """
    for name in ("char_count", "digit_width", "padding_length"):
        value = getattr(spec, name)
        if value < 0:
            raise ConfigError(f"{name} must be >= 0, got {value}")

    if spec.total_slots == 0:
        raise DegenerateRingError(
            f"Ring has no digit positions (char_count={spec.char_count}, "
            f"digit_width={spec.digit_width}, padding_length={spec.padding_length})"
        )

    # Blank and padding handling is only defined for non-empty digits and padding
    if spec.digit_width == 0:
        raise ConfigError("digit_width must be at least 1")
    if spec.padding_length == 0:
        raise ConfigError("padding_length must be at least 1")

    min_width = find_min_digits(spec.message[: spec.char_count], spec.is_unicode)
    if spec.digit_width < min_width:
        raise ConfigError(
            f"digit_width {spec.digit_width} is too small for message "
            f"{spec.message!r} (minimum {min_width})"
        )


def encode_ring(spec: RingSpec) -> str:
    """Encode a ring's message as its final binary digit string.

    Args:
        spec: Ring specification.

    Returns:
        Digit string of exactly spec.total_slots characters.

    Raises:
        ConfigError: If the spec is invalid (see validate_ring).
        DegenerateRingError: If the ring has no digit positions.
    """
    validate_ring(spec)

    message = spec.message
    if len(message) < spec.char_count:
        message = append_chars(message, " ", spec.char_count - len(message))
    message = message[: spec.char_count]

    last_index = spec.char_count - 1
    slots: list[str] = []
    for i, letter in enumerate(message):
        code = letter_to_num(letter, spec.is_unicode)
        is_blank = code == BLANK_CODE

        if is_blank:
            digits = BLANK_DIGIT * spec.digit_width
        else:
            digits = pad_binary(num_to_bin(code), spec.digit_width)

        filler = BLANK_DIGIT if is_blank and i < last_index else FILLER_DIGIT
        slots.append(append_chars(digits, filler, spec.padding_length))

    bits = "".join(apply_offset(slots, spec.char_offset))
    bits = apply_offset(bits, spec.digit_offset)

    logger.debug(
        "ring_encoded",
        char_count=spec.char_count,
        digit_width=spec.digit_width,
        total_slots=len(bits),
        char_offset=spec.char_offset,
        digit_offset=spec.digit_offset,
    )

    return bits


# Public entry point name used by callers building their own render loop
compute_ring_bits = encode_ring


def clamp_digit_width(spec: RingSpec) -> RingSpec:
    """Return a copy of spec with digit_width raised to the message's minimum."""
    min_width = compute_min_digit_width(spec.message, spec.is_unicode)
    if spec.digit_width >= min_width:
        return spec
    logger.debug("digit_width_clamped", old=spec.digit_width, new=min_width)
    return replace(spec, digit_width=min_width)


def compute_ring_bands(
    ring_count: int,
    inner_radius: float,
    outer_radius: float,
    ring_overlap: float,
) -> list[tuple[float, float]]:
    """Split the pattern band into one (inner, outer) radius pair per ring.

    Every ring except the outermost extends by ring_overlap so that
    neighbouring rings meet without a visible gap.
    """
    width = outer_radius - inner_radius
    bands: list[tuple[float, float]] = []
    for i in range(ring_count):
        overlap = 0.0 if i == ring_count - 1 else ring_overlap
        ring_inner = inner_radius + width * i / ring_count
        ring_outer = inner_radius + width * (i + 1) / ring_count + overlap
        bands.append((ring_inner, ring_outer))
    return bands


def compute_render_plan(pattern: PatternSpec) -> RenderPlan:
    """Compute everything needed to draw a pattern.

    Args:
        pattern: Pattern specification.

    Returns:
        RenderPlan with one RingPlan per ring, innermost first.

    Raises:
        ConfigError: If the pattern geometry or any ring is invalid.
        DegenerateRingError: If any ring has no digit positions.
    """
    if pattern.size <= 0:
        raise ConfigError(f"size must be positive, got {pattern.size}")
    if not 0 <= pattern.inner_radius < pattern.outer_radius:
        raise ConfigError(
            f"Radii must satisfy 0 <= inner < outer, got "
            f"inner={pattern.inner_radius} outer={pattern.outer_radius}"
        )

    bands = compute_ring_bands(
        len(pattern.rings),
        pattern.inner_radius,
        pattern.outer_radius,
        pattern.ring_overlap,
    )

    ring_plans: list[RingPlan] = []
    for spec, (ring_inner, ring_outer) in zip(pattern.rings, bands):
        bits = encode_ring(spec)
        ring_plans.append(
            RingPlan(
                bits=bits,
                arcs=compute_arcs(bits),
                inner_radius=ring_inner,
                outer_radius=ring_outer,
                min_digit_width=compute_min_digit_width(spec.message, spec.is_unicode),
            )
        )

    plan = RenderPlan(
        size=pattern.size,
        center=pattern.center,
        pattern_color=pattern.pattern_color,
        background_color=pattern.background_color,
        rings=ring_plans,
    )

    logger.debug("render_plan_computed", ring_count=len(ring_plans), arc_count=plan.arc_count)
    return plan
