"""Error types raised by the ring encoding pipeline.

All of them derive from ValueError so callers that already treat
ValueError as "bad input" keep working.
"""

from __future__ import annotations


class RingError(ValueError):
    """Base class for ring configuration errors."""


class ConfigError(RingError):
    """A ring or pattern parameter cannot be encoded as given.

    Raised for example when the digit width is too small for the
    message's highest character code.
    """


class DegenerateRingError(RingError):
    """A ring has no digit positions (total slots is zero)."""
