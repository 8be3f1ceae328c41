"""Fractal noise configuration and named presets.

A :class:`FractalConfig` bundles every parameter of one fractal
composer so callers (and the CLI) can pass a single object around.

Usage
-----
>>> from perlinoise.presets import evaluate, RIDGED_MOUNTAINS
>>> evaluate(RIDGED_MOUNTAINS, 0.3, 1.7, 0.0)

Custom configurations are plain dataclasses::

    config = FractalConfig(kind="fbm", octaves=4, frequency=0.25)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .fractal import fbm_noise3, ridge_noise3, turbulence_noise3

FRACTAL_KINDS = ("fbm", "ridge", "turbulence")


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FractalConfig:
    """All tuneable parameters for one fractal noise evaluation.

    Attributes
    ----------
    kind : str
        ``"fbm"``, ``"ridge"`` or ``"turbulence"``.
    octaves : int
        Number of noise layers.
    lacunarity : float
        Frequency multiplier between octaves.
    gain : float
        Amplitude multiplier between octaves.
    offset : float
        Ridge offset.  Ignored by fbm and turbulence.
    frequency : float
        Base spatial frequency; coordinates are multiplied by it before
        sampling.
    amplitude : float
        Output scale applied to the fractal sum.
    """

    kind: str = "fbm"
    octaves: int = 6
    lacunarity: float = 2.0
    gain: float = 0.5
    offset: float = 1.0
    frequency: float = 1.0
    amplitude: float = 1.0

    def __post_init__(self) -> None:
        if self.kind not in FRACTAL_KINDS:
            raise ValueError(
                f"Unknown fractal kind: {self.kind!r} "
                f"(expected one of {', '.join(FRACTAL_KINDS)})"
            )
        if self.octaves < 0:
            raise ValueError("octaves must be >= 0")


def evaluate(config: FractalConfig, x: float, y: float, z: float) -> float:
    """Evaluate the fractal described by *config* at ``(x, y, z)``."""
    fx = x * config.frequency
    fy = y * config.frequency
    fz = z * config.frequency
    if config.kind == "ridge":
        value = ridge_noise3(
            fx, fy, fz,
            config.lacunarity, config.gain, config.offset, config.octaves,
        )
    elif config.kind == "turbulence":
        value = turbulence_noise3(fx, fy, fz, config.lacunarity, config.gain, config.octaves)
    else:
        value = fbm_noise3(fx, fy, fz, config.lacunarity, config.gain, config.octaves)
    return value * config.amplitude


def as_noise_fn(config: FractalConfig) -> Callable[[float, float, float], float]:
    """Bind *config* into a ``(x, y, z) → float`` callable."""
    def _fn(x: float, y: float, z: float) -> float:
        return evaluate(config, x, y, z)

    return _fn


# ═══════════════════════════════════════════════════════════════════
# Preset configs
# ═══════════════════════════════════════════════════════════════════

SMOOTH_HILLS = FractalConfig(
    kind="fbm",
    octaves=4,
    lacunarity=2.0,
    gain=0.45,
    frequency=0.5,
)

RIDGED_MOUNTAINS = FractalConfig(
    kind="ridge",
    octaves=6,
    lacunarity=2.0,
    gain=0.5,
    offset=1.0,
    frequency=1.0,
)

CLOUDS = FractalConfig(
    kind="fbm",
    octaves=8,
    lacunarity=2.0,
    gain=0.55,
    frequency=1.0,
)

MARBLE = FractalConfig(
    kind="turbulence",
    octaves=5,
    lacunarity=2.1,
    gain=0.5,
    frequency=2.0,
)

PRESETS: Dict[str, FractalConfig] = {
    "smooth_hills": SMOOTH_HILLS,
    "ridged_mountains": RIDGED_MOUNTAINS,
    "clouds": CLOUDS,
    "marble": MARBLE,
}


def get_preset(name: str) -> FractalConfig:
    """Look up a preset by (case-insensitive) name."""
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown preset: {name!r} (available: {', '.join(sorted(PRESETS))})"
        ) from None
