"""Noise ↔ array bridge — sample noise functions onto regular grids.

The kernel in :mod:`noise` evaluates one point at a time.  This module
evaluates any ``(x, y, z) → float`` callable over a regular grid and
collects the results into ``float32`` numpy arrays, ready for
rendering or for use as heightmaps and textures.

Functions
---------
- :func:`sample_field` — 2-D slice at fixed ``z``, shape ``(height, width)``
- :func:`sample_volume` — 3-D block, shape ``(depth, height, width)``
- :func:`tileable_field` — one full wrap period per axis, tiles seamlessly
- :func:`normalize_field` — rescale a field to ``[lo, hi]``
- :func:`field_stats` — min / max / mean / std summary
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

import numpy as np

from .noise import noise3_seed
from .tables import TABLE_SIZE

logger = logging.getLogger(__name__)

NoiseFn = Callable[[float, float, float], float]


def _check_size(**sizes: int) -> None:
    for name, value in sizes.items():
        if value < 1:
            raise ValueError(f"{name} must be >= 1, got {value}")


# ═══════════════════════════════════════════════════════════════════
# Sampling
# ═══════════════════════════════════════════════════════════════════

def sample_field(
    noise_fn: NoiseFn,
    width: int,
    height: int,
    *,
    scale: float = 1.0 / 32.0,
    z: float = 0.0,
    origin: Tuple[float, float] = (0.0, 0.0),
) -> np.ndarray:
    """Evaluate *noise_fn* over a ``width × height`` grid at depth *z*.

    Parameters
    ----------
    noise_fn : callable
        A function ``(x, y, z) → float``, typically a closure over one of
        the :mod:`noise` or :mod:`fractal` functions with parameters
        baked in (see :func:`~presets.as_noise_fn`).
    width, height : int
        Number of samples per axis.
    scale : float
        Distance in noise space between neighbouring samples.
    z : float
        The fixed third coordinate of the slice.
    origin : tuple of float
        Noise-space coordinate of sample ``[0, 0]``.

    Returns
    -------
    np.ndarray
        ``float32`` array of shape ``(height, width)`` where
        ``field[row, col] = noise_fn(ox + col*scale, oy + row*scale, z)``.
    """
    _check_size(width=width, height=height)
    if scale <= 0:
        raise ValueError("scale must be > 0")

    ox, oy = origin
    field = np.empty((height, width), dtype=np.float32)
    for row in range(height):
        y = oy + row * scale
        for col in range(width):
            field[row, col] = noise_fn(ox + col * scale, y, z)
    logger.debug("sampled %dx%d field at z=%s, scale=%s", width, height, z, scale)
    return field


def sample_volume(
    noise_fn: NoiseFn,
    width: int,
    height: int,
    depth: int,
    *,
    scale: float = 1.0 / 32.0,
    origin: Tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> np.ndarray:
    """Evaluate *noise_fn* over a 3-D block.

    The 3-D analogue of :func:`sample_field`: slice ``k`` of the result
    equals ``sample_field(noise_fn, width, height, scale=scale,
    z=oz + k*scale, origin=(ox, oy))``.

    Returns
    -------
    np.ndarray
        ``float32`` array of shape ``(depth, height, width)``.
    """
    _check_size(width=width, height=height, depth=depth)
    ox, oy, oz = origin
    volume = np.empty((depth, height, width), dtype=np.float32)
    for k in range(depth):
        volume[k] = sample_field(
            noise_fn, width, height,
            scale=scale, z=oz + k * scale, origin=(ox, oy),
        )
    return volume


def tileable_field(
    width: int,
    height: int,
    *,
    period: int = 4,
    z: float = 0.0,
    seed: int = 0,
) -> np.ndarray:
    """Sample a texture that tiles seamlessly in both directions.

    Uses :func:`~noise.noise3_seed` with ``x_wrap = y_wrap = period`` and
    spreads exactly one period across the *width* and *height* samples,
    so the left edge continues the right edge (and top the bottom).

    Parameters
    ----------
    width, height : int
        Texture size in samples.
    period : int
        Lattice cells per tile; a power of two in ``1..256``.
    z : float
        Slice depth (animate it for evolving textures).
    seed : int
        Noise variation (low 8 bits).
    """
    _check_size(width=width, height=height)
    if period < 1 or period > TABLE_SIZE or period & (period - 1):
        raise ValueError(f"period must be a power of two in 1..{TABLE_SIZE}, got {period}")

    sx = period / width
    sy = period / height
    field = np.empty((height, width), dtype=np.float32)
    for row in range(height):
        for col in range(width):
            field[row, col] = noise3_seed(col * sx, row * sy, z, period, period, 0, seed)
    logger.debug("sampled %dx%d tileable field, period=%d", width, height, period)
    return field


# ═══════════════════════════════════════════════════════════════════
# Post-processing
# ═══════════════════════════════════════════════════════════════════

def normalize_field(field: np.ndarray, lo: float = 0.0, hi: float = 1.0) -> np.ndarray:
    """Linearly rescale *field* so its values span ``[lo, hi]``.

    A constant field maps to the midpoint ``(lo + hi) / 2``.  Returns a
    new ``float32`` array; *field* is not modified.
    """
    if hi < lo:
        raise ValueError(f"hi must be >= lo, got lo={lo}, hi={hi}")
    data = np.asarray(field, dtype=np.float32)
    fmin = float(data.min())
    fmax = float(data.max())
    if fmax == fmin:
        return np.full(data.shape, (lo + hi) / 2.0, dtype=np.float32)
    out = (data - fmin) / (fmax - fmin) * (hi - lo) + lo
    return out.astype(np.float32)


def field_stats(field: np.ndarray) -> Dict[str, float]:
    """Summary statistics of a sampled field."""
    data = np.asarray(field, dtype=np.float64)
    return {
        "min": float(data.min()),
        "max": float(data.max()),
        "mean": float(data.mean()),
        "std": float(data.std()),
    }
