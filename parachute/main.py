"""Parachute microservice -- FastAPI application.

Endpoints:
    POST /encode        -- Render a ring pattern to PNG
    POST /encode/svg    -- Render a ring pattern to SVG
    POST /ring          -- Encode a single ring to digits and arc angles
    POST /decode        -- Decode ring digits back to a message
    GET  /presets       -- List available ring presets
    GET  /health        -- Health check
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from .arcs import compute_arcs
from .decoder import decode_ring_bits
from .encoder import compute_min_digit_width, encode_ring
from .presets import PERSEVERANCE_RINGS, PRESETS, select_preset
from .renderer import render_png, render_svg
from .ring import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_INNER_RADIUS,
    DEFAULT_OUTER_RADIUS,
    DEFAULT_PATTERN_COLOR,
    DEFAULT_RING_OVERLAP,
    DEFAULT_SIZE,
    PatternSpec,
    RingSpec,
)

structlog.configure(
    processors=[
        structlog.dev.ConsoleRenderer(),
    ],
)

logger = structlog.get_logger(__name__)

VERSION = "0.1.0"

# Hex colors (#rgb, #rgba, #rrggbb, #rrggbbaa) or SVG color names
COLOR_PATTERN = r"^(#([0-9A-Fa-f]{3,4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})|[A-Za-z]+)$"

app = FastAPI(
    title="parachute",
    description="Circular binary message ring encoder (Perseverance parachute style)",
    version=VERSION,
)


# --------------------------------------------------------------------------
# Request / Response models
# --------------------------------------------------------------------------


class RingRequest(BaseModel):
    """One ring of a pattern."""

    message: str = Field(
        default="",
        description="Message to encode in the ring",
        examples=["mighty"],
    )
    is_unicode: bool = Field(
        default=False,
        description="Encode Unicode code points instead of alphabet positions",
    )
    char_count: int = Field(default=8, ge=0, description="Number of character slots")
    digit_width: int = Field(default=7, ge=0, description="Binary digits per character")
    padding_length: int = Field(default=3, ge=0, description="Filler digits per character")
    char_offset: int = Field(default=0, description="Ring rotation in character slots")
    digit_offset: int = Field(default=0, description="Ring rotation in digits")

    def to_spec(self) -> RingSpec:
        return RingSpec(
            message=self.message,
            is_unicode=self.is_unicode,
            char_count=self.char_count,
            digit_width=self.digit_width,
            padding_length=self.padding_length,
            char_offset=self.char_offset,
            digit_offset=self.digit_offset,
        )


def _default_rings() -> list[RingRequest]:
    return [
        RingRequest(
            message=spec.message,
            is_unicode=spec.is_unicode,
            char_count=spec.char_count,
            digit_width=spec.digit_width,
            padding_length=spec.padding_length,
            char_offset=spec.char_offset,
            digit_offset=spec.digit_offset,
        )
        for spec in PERSEVERANCE_RINGS
    ]


class PatternRequest(BaseModel):
    """Request body for /encode and /encode/svg."""

    rings: list[RingRequest] = Field(
        default_factory=_default_rings,
        description="Rings to draw, innermost first",
    )
    preset: str | None = Field(
        default=None,
        description="Preset name; replaces `rings` when given",
        examples=["perseverance"],
    )
    size: int = Field(
        default=DEFAULT_SIZE,
        ge=64,
        le=2048,
        description="Output image size in pixels (square)",
    )
    inner_radius: float = Field(default=DEFAULT_INNER_RADIUS, ge=0)
    outer_radius: float = Field(default=DEFAULT_OUTER_RADIUS, gt=0)
    ring_overlap: float = Field(default=DEFAULT_RING_OVERLAP, ge=0)
    pattern_color: str = Field(
        default=DEFAULT_PATTERN_COLOR,
        pattern=COLOR_PATTERN,
        description="Arc fill color (hex or color name)",
    )
    background_color: str = Field(
        default=DEFAULT_BACKGROUND_COLOR,
        pattern=COLOR_PATTERN,
        description="Background disc color (hex or color name)",
    )

    def to_pattern(self) -> PatternSpec:
        if self.preset is not None:
            rings = select_preset(self.preset)
        else:
            rings = tuple(ring.to_spec() for ring in self.rings)
        return PatternSpec(
            rings=rings,
            size=self.size,
            inner_radius=self.inner_radius,
            outer_radius=self.outer_radius,
            ring_overlap=self.ring_overlap,
            pattern_color=self.pattern_color,
            background_color=self.background_color,
        )


class RingResponse(BaseModel):
    """Response body for /ring."""

    bits: str = Field(description="Final ring digit string")
    arcs: list[tuple[float, float]] = Field(description="Arc (start, end) angles in radians")
    total_slots: int = Field(description="Number of digit positions in the ring")
    min_digit_width: int = Field(description="Smallest digit width the message allows")


class DecodeRequest(BaseModel):
    """Request body for /decode."""

    bits: str = Field(..., description="Ring digit string", examples=["0000011000"])
    is_unicode: bool = False
    char_count: int = Field(..., ge=0)
    digit_width: int = Field(..., ge=0)
    padding_length: int = Field(..., ge=0)
    char_offset: int = 0
    digit_offset: int = 0


class DecodeResponse(BaseModel):
    """Response body for /decode."""

    message: str


class PresetsResponse(BaseModel):
    """Response body for /presets."""

    presets: list[str]


class HealthResponse(BaseModel):
    """Response body for /health."""

    status: str
    service: str
    version: str


# --------------------------------------------------------------------------
# Endpoints
# --------------------------------------------------------------------------


@app.post(
    "/encode",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "PNG ring pattern"},
        422: {"description": "Invalid input"},
    },
)
async def encode_png(request: PatternRequest) -> Response:
    """Render a ring pattern as a PNG image."""
    try:
        png_bytes = render_png(request.to_pattern())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_png_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    return Response(content=png_bytes, media_type="image/png")


@app.post(
    "/encode/svg",
    response_class=Response,
    responses={
        200: {
            "content": {"image/svg+xml": {}},
            "description": "SVG ring pattern",
        },
        422: {"description": "Invalid input"},
    },
)
async def encode_svg_endpoint(request: PatternRequest) -> Response:
    """Render a ring pattern as an SVG image."""
    try:
        svg_content = render_svg(request.to_pattern())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_svg_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    return Response(content=svg_content, media_type="image/svg+xml")


@app.post("/ring", response_model=RingResponse)
async def ring_endpoint(request: RingRequest) -> RingResponse:
    """Encode a single ring and return its digits and arc angles."""
    spec = request.to_spec()
    try:
        bits = encode_ring(spec)
        arcs = compute_arcs(bits)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return RingResponse(
        bits=bits,
        arcs=arcs,
        total_slots=spec.total_slots,
        min_digit_width=compute_min_digit_width(spec.message, spec.is_unicode),
    )


@app.post("/decode", response_model=DecodeResponse)
async def decode_endpoint(request: DecodeRequest) -> DecodeResponse:
    """Decode a ring digit string back to its message."""
    try:
        message = decode_ring_bits(
            request.bits,
            char_count=request.char_count,
            digit_width=request.digit_width,
            padding_length=request.padding_length,
            char_offset=request.char_offset,
            digit_offset=request.digit_offset,
            is_unicode=request.is_unicode,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return DecodeResponse(message=message)


@app.get("/presets", response_model=PresetsResponse)
async def list_presets() -> PresetsResponse:
    """List available ring presets."""
    return PresetsResponse(presets=list(PRESETS.keys()))


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker and load balancer probes."""
    return HealthResponse(
        status="healthy",
        service="parachute",
        version=VERSION,
    )
