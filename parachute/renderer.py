"""SVG and PNG rendering for binary message ring patterns.

Draws a RenderPlan onto a draw surface. A draw surface needs three
operations:

- clear(): drop everything drawn so far
- draw_background_disc(color): fill the disc that fits the canvas
- draw_wedge(center, inner_radius, outer_radius, start_angle,
  end_angle, color): fill an annular wedge

Angles are in radians and grow clockwise on screen (y axis points
down), with 0 pointing right. A wedge runs along the outer radius from
start to end, then back along the inner radius from end to start.

DrawSurface spells out that contract and SvgSurface is the built-in
surface. PNG output is rasterised from the SVG with CairoSVG.
"""

from __future__ import annotations

import math
from typing import Protocol
from xml.sax.saxutils import quoteattr

import structlog

from .arcs import compute_arcs
from .encoder import compute_render_plan
from .ring import PatternSpec, RenderPlan

logger = structlog.get_logger(__name__)

# Sweeps this close to a full turn are drawn as a closed annulus
FULL_TURN_EPSILON = 1e-9


class DrawSurface(Protocol):
    """Anything a render plan can be drawn onto."""

    def clear(self) -> None: ...

    def draw_background_disc(self, color: str) -> None: ...

    def draw_wedge(
        self,
        center: tuple[float, float],
        inner_radius: float,
        outer_radius: float,
        start_angle: float,
        end_angle: float,
        color: str,
    ) -> None: ...


def _point(cx: float, cy: float, radius: float, angle: float) -> str:
    return f"{cx + radius * math.cos(angle):.3f},{cy + radius * math.sin(angle):.3f}"


def _annulus_path(cx: float, cy: float, inner_radius: float, outer_radius: float) -> str:
    """Path for a full ring: outer circle clockwise, inner circle counter-clockwise."""
    parts = [
        f"M {_point(cx, cy, outer_radius, 0.0)}",
        f"A {outer_radius:.3f} {outer_radius:.3f} 0 1 1 {_point(cx, cy, outer_radius, math.pi)}",
        f"A {outer_radius:.3f} {outer_radius:.3f} 0 1 1 {_point(cx, cy, outer_radius, 0.0)}",
        "Z",
    ]
    if inner_radius > 0:
        parts += [
            f"M {_point(cx, cy, inner_radius, 0.0)}",
            f"A {inner_radius:.3f} {inner_radius:.3f} 0 1 0 "
            f"{_point(cx, cy, inner_radius, math.pi)}",
            f"A {inner_radius:.3f} {inner_radius:.3f} 0 1 0 {_point(cx, cy, inner_radius, 0.0)}",
            "Z",
        ]
    return " ".join(parts)


def wedge_path(
    center: tuple[float, float],
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
) -> str:
    """Build the SVG path data for an annular wedge.

    Args:
        center: (x, y) centre of the ring in pixels.
        inner_radius: Inner radius in pixels.
        outer_radius: Outer radius in pixels.
        start_angle: Start angle in radians.
        end_angle: End angle in radians (>= start_angle).

    Returns:
        SVG path "d" attribute value.
    """
    cx, cy = center
    sweep = end_angle - start_angle
    if sweep >= 2 * math.pi - FULL_TURN_EPSILON:
        return _annulus_path(cx, cy, inner_radius, outer_radius)

    large_arc = 1 if sweep > math.pi else 0
    return " ".join(
        [
            f"M {_point(cx, cy, outer_radius, start_angle)}",
            f"A {outer_radius:.3f} {outer_radius:.3f} 0 {large_arc} 1 "
            f"{_point(cx, cy, outer_radius, end_angle)}",
            f"L {_point(cx, cy, inner_radius, end_angle)}",
            f"A {inner_radius:.3f} {inner_radius:.3f} 0 {large_arc} 0 "
            f"{_point(cx, cy, inner_radius, start_angle)}",
            "Z",
        ]
    )


class SvgSurface:
    """DrawSurface that collects SVG elements.

    Attributes:
        size: Canvas side length in pixels (square).
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self._elements: list[str] = []

    @property
    def element_count(self) -> int:
        return len(self._elements)

    def clear(self) -> None:
        self._elements = []

    def draw_background_disc(self, color: str) -> None:
        half = self.size / 2.0
        self._elements.append(
            f'  <circle cx="{half:.1f}" cy="{half:.1f}" r="{half:.1f}" '
            f'fill={quoteattr(color)} class="background"/>'
        )

    def draw_wedge(
        self,
        center: tuple[float, float],
        inner_radius: float,
        outer_radius: float,
        start_angle: float,
        end_angle: float,
        color: str,
    ) -> None:
        d = wedge_path(center, inner_radius, outer_radius, start_angle, end_angle)
        self._elements.append(
            f'  <path d="{d}" fill={quoteattr(color)} fill-rule="evenodd" class="arc"/>'
        )

    def to_svg(self) -> str:
        """Return the complete SVG document."""
        header = (
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {self.size} {self.size}" '
            f'width="{self.size}" height="{self.size}">'
        )
        return "\n".join([header, *self._elements, "</svg>"])


def draw_binary_ring(
    surface: DrawSurface,
    center: tuple[float, float],
    inner_radius: float,
    outer_radius: float,
    bits: str,
    color: str,
) -> int:
    """Draw one ring's digit string as wedges, one per run of 1s.

    Returns:
        Number of wedges drawn.
    """
    arcs = compute_arcs(bits)
    for start_angle, end_angle in arcs:
        surface.draw_wedge(center, inner_radius, outer_radius, start_angle, end_angle, color)
    return len(arcs)


def draw_plan(plan: RenderPlan, surface: DrawSurface) -> None:
    """Draw a render plan onto any draw surface.

    The background disc goes first. Rings are drawn outermost first so
    the overlap of each inner ring sits on top of its neighbour.
    """
    surface.clear()
    surface.draw_background_disc(plan.background_color)
    for ring in reversed(plan.rings):
        for start_angle, end_angle in ring.arcs:
            surface.draw_wedge(
                plan.center,
                ring.inner_radius,
                ring.outer_radius,
                start_angle,
                end_angle,
                plan.pattern_color,
            )


def render_svg(pattern: PatternSpec) -> str:
    """Render a ring pattern as an SVG string.

    Args:
        pattern: Pattern specification.

    Returns:
        Complete SVG document as a string.

    Raises:
        ConfigError: If the pattern or any of its rings is invalid.
        DegenerateRingError: If any ring has no digit positions.
    """
    plan = compute_render_plan(pattern)
    surface = SvgSurface(plan.size)
    draw_plan(plan, surface)
    svg_content = surface.to_svg()

    logger.debug(
        "svg_rendered",
        ring_count=len(plan.rings),
        arc_count=plan.arc_count,
        size=plan.size,
    )

    return svg_content


def render_png(pattern: PatternSpec) -> bytes:
    """Render a ring pattern as a PNG image.

    Generates SVG first, then converts to PNG via CairoSVG.

    Args:
        pattern: Pattern specification.

    Returns:
        PNG image bytes.
    """
    import cairosvg

    svg = render_svg(pattern)
    png_bytes = cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        output_width=pattern.size,
        output_height=pattern.size,
    )

    logger.debug("png_rendered", size=pattern.size, bytes=len(png_bytes))
    return png_bytes
