"""Named ring presets.

Each preset is a tuple of RingSpecs that can be dropped straight into a
PatternSpec. The "perseverance" preset reproduces the first three rings
of the Perseverance rover parachute, which spell "dare mighty things".
"""

from __future__ import annotations

from .ring import RingSpec

PERSEVERANCE_RINGS: tuple[RingSpec, ...] = (
    RingSpec("dare", False, 8, 7, 3, 0, 0),
    RingSpec("mighty", False, 8, 7, 3, 4, 0),
    RingSpec("things", False, 8, 7, 3, -2, 0),
)

PRESETS: dict[str, tuple[RingSpec, ...]] = {
    "perseverance": PERSEVERANCE_RINGS,
    "empty": (RingSpec.empty(),),
}


def select_preset(preset_name: str) -> tuple[RingSpec, ...]:
    """Select a ring preset by name.

    Args:
        preset_name: Preset name (perseverance, empty).

    Returns:
        Tuple of RingSpecs for the preset.

    Raises:
        ValueError: If preset_name is not recognized.
    """
    if preset_name not in PRESETS:
        valid = ", ".join(PRESETS.keys())
        raise ValueError(f"Unknown preset '{preset_name}'. Valid presets: {valid}")
    return PRESETS[preset_name]
