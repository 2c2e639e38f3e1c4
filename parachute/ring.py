"""Value objects for ring patterns.

A pattern is a stack of concentric rings inside a square canvas. Each
ring encodes one message, described by a RingSpec. The encoder turns a
PatternSpec into a RenderPlan, which holds everything the renderer needs
to draw: per-ring digit strings, arc angles and radii.

All objects here are immutable and rebuilt on every render.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Pattern defaults (canvas in pixels)
DEFAULT_SIZE = 600
DEFAULT_INNER_RADIUS = 75.0
DEFAULT_OUTER_RADIUS = 300.0
DEFAULT_RING_OVERLAP = 0.7  # extra outer radius to hide seams between rings
DEFAULT_PATTERN_COLOR = "#FF4700"
DEFAULT_BACKGROUND_COLOR = "#ffffff"


@dataclass(frozen=True)
class RingSpec:
    """The message encoded in a single ring and how it is laid out.

    Attributes:
        message: Raw message text.
        is_unicode: True to encode code points, False for alphabet order.
        char_count: Number of character slots (message is truncated or
            padded with spaces to this length).
        digit_width: Binary digits allocated to each character.
        padding_length: Filler digits appended after each character.
        char_offset: Left rotation of the ring, in character slots.
        digit_offset: Left rotation of the ring, in digits.
    """

    message: str
    is_unicode: bool = False
    char_count: int = 8
    digit_width: int = 7
    padding_length: int = 3
    char_offset: int = 0
    digit_offset: int = 0

    @property
    def slot_length(self) -> int:
        """Digits per character slot, padding included."""
        return self.digit_width + self.padding_length

    @property
    def total_slots(self) -> int:
        """Total digit positions in the ring."""
        return self.char_count * self.slot_length

    @classmethod
    def empty(cls) -> RingSpec:
        """A blank ring: 8 Latin characters, 7 digits each, padding of 3."""
        return cls("", False, 8, 7, 3, 0, 0)


@dataclass(frozen=True)
class PatternSpec:
    """A full pattern: rings plus canvas geometry and colors.

    Rings are stacked from the inner radius outwards, ring 0 innermost.

    Attributes:
        rings: Ring specs, innermost first.
        size: Canvas side length in pixels (square).
        inner_radius: Radius where the innermost ring starts.
        outer_radius: Radius where the outermost ring ends.
        ring_overlap: Extra outer radius for every ring but the last.
        pattern_color: Fill color for the arcs.
        background_color: Fill color for the background disc.
    """

    rings: tuple[RingSpec, ...] = ()
    size: int = DEFAULT_SIZE
    inner_radius: float = DEFAULT_INNER_RADIUS
    outer_radius: float = DEFAULT_OUTER_RADIUS
    ring_overlap: float = DEFAULT_RING_OVERLAP
    pattern_color: str = DEFAULT_PATTERN_COLOR
    background_color: str = DEFAULT_BACKGROUND_COLOR

    @property
    def center(self) -> tuple[float, float]:
        return (self.size / 2.0, self.size / 2.0)


@dataclass(frozen=True)
class RingPlan:
    """Everything needed to draw one ring.

    Attributes:
        bits: Final ring digit string (after offsets).
        arcs: (start, end) angle pairs in radians, one per run of 1s.
        inner_radius: Inner radius of the ring band in pixels.
        outer_radius: Outer radius of the ring band in pixels.
        min_digit_width: Smallest digit width the ring's message allows.
    """

    bits: str
    arcs: list[tuple[float, float]]
    inner_radius: float
    outer_radius: float
    min_digit_width: int


@dataclass(frozen=True)
class RenderPlan:
    """Precomputed drawing instructions for a whole pattern."""

    size: int
    center: tuple[float, float]
    pattern_color: str
    background_color: str
    rings: list[RingPlan] = field(default_factory=list)

    @property
    def arc_count(self) -> int:
        """Total number of wedges to draw."""
        return sum(len(ring.arcs) for ring in self.rings)
