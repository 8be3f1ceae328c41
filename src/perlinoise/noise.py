"""Lattice gradient noise — Perlin's revised (2002) noise in 3-D.

The kernel maps a continuous ``(x, y, z)`` point to its unit lattice
cell, hashes the eight corners through :data:`~tables.PERMUTATION`,
picks a gradient per corner and blends the eight gradient dot products
with a quintic fade.  Samples are zero at every integer lattice point.

All arithmetic runs on ``numpy.float32`` scalars in a fixed operation
order, so results bit-match other single-precision implementations of
the same tables.  Inputs may be any real numbers; outputs are Python
floats holding the exact float32 result.

Functions
---------
- :func:`noise3` — noise with power-of-two wrapping, seed 0
- :func:`noise3_seed` — as :func:`noise3`, selecting one of 256 variations
- :func:`noise3_wrap_nonpow2` — wrapping at arbitrary positive periods
- :func:`lerp`, :func:`fade`, :func:`fastfloor`, :func:`grad` — helpers
"""

from __future__ import annotations

import math

import numpy as np

from .tables import GRADIENT_BASIS, GRADIENT_INDEX, PERMUTATION, TABLE_SIZE

_f32 = np.float32

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


# ═══════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════

def lerp(a, b, t):
    """Linear interpolation ``a + (b - a) * t``."""
    return a + (b - a) * t


def fade(t):
    """Quintic smoothstep ``6t^5 - 15t^4 + 10t^3``."""
    return ((t * 6 - 15) * t + 10) * t * t * t


def _wrap_int32(value: int) -> int:
    return (value - _INT32_MIN) % 2 ** 32 + _INT32_MIN


def fastfloor(a) -> int:
    """Floor *a* toward negative infinity, as a 32-bit integer.

    Plain ``int()`` truncates toward zero, which is wrong for negative
    coordinates.  Conversion follows 32-bit semantics: NaN becomes 0,
    values beyond the int32 range saturate, and the final ``- 1``
    wraps around like machine integer arithmetic.
    """
    a = float(a)
    if math.isnan(a):
        return 0
    ai = int(min(max(a, _INT32_MIN), _INT32_MAX))
    if a < ai:
        ai = _wrap_int32(ai - 1)
    return ai


def grad(grad_idx: int, x, y, z):
    """Dot product of gradient *grad_idx* with the offset ``(x, y, z)``."""
    gx, gy, gz = GRADIENT_BASIS[grad_idx]
    return gx * x + gy * y + gz * z


# ═══════════════════════════════════════════════════════════════════
# Cell interpolation
# ═══════════════════════════════════════════════════════════════════

def _interpolate_cell(
    x, y, z,
    y0: int, y1: int,
    z0: int, z1: int,
    r0: int, r1: int,
):
    """Blend the eight corner gradients of one lattice cell.

    *x, y, z* are the float32 offsets inside the cell, *r0* / *r1* the
    hashed x-corners and *y0..z1* the wrapped corner coordinates.
    """
    u = fade(x)
    v = fade(y)
    w = fade(z)

    r00 = PERMUTATION[r0 + y0]
    r01 = PERMUTATION[r0 + y1]
    r10 = PERMUTATION[r1 + y0]
    r11 = PERMUTATION[r1 + y1]

    n000 = grad(GRADIENT_INDEX[r00 + z0], x, y, z)
    n001 = grad(GRADIENT_INDEX[r00 + z1], x, y, z - 1)
    n010 = grad(GRADIENT_INDEX[r01 + z0], x, y - 1, z)
    n011 = grad(GRADIENT_INDEX[r01 + z1], x, y - 1, z - 1)
    n100 = grad(GRADIENT_INDEX[r10 + z0], x - 1, y, z)
    n101 = grad(GRADIENT_INDEX[r10 + z1], x - 1, y, z - 1)
    n110 = grad(GRADIENT_INDEX[r11 + z0], x - 1, y - 1, z)
    n111 = grad(GRADIENT_INDEX[r11 + z1], x - 1, y - 1, z - 1)

    n00 = lerp(n000, n001, w)
    n01 = lerp(n010, n011, w)
    n10 = lerp(n100, n101, w)
    n11 = lerp(n110, n111, w)

    n0 = lerp(n00, n01, v)
    n1 = lerp(n10, n11, v)

    return lerp(n0, n1, u)


def _noise3_internal(x, y, z, x_wrap: int, y_wrap: int, z_wrap: int, seed: int):
    """Power-of-two wrapping sampler on float32 inputs; returns float32."""
    x_mask = (x_wrap - 1) & 255
    y_mask = (y_wrap - 1) & 255
    z_mask = (z_wrap - 1) & 255
    px = fastfloor(x)
    py = fastfloor(y)
    pz = fastfloor(z)
    x0, x1 = px & x_mask, (px + 1) & x_mask
    y0, y1 = py & y_mask, (py + 1) & y_mask
    z0, z1 = pz & z_mask, (pz + 1) & z_mask

    seed &= 0xFF
    r0 = PERMUTATION[x0 + seed]
    r1 = PERMUTATION[x1 + seed]

    return _interpolate_cell(
        x - _f32(px), y - _f32(py), z - _f32(pz),
        y0, y1, z0, z1, r0, r1,
    )


# ═══════════════════════════════════════════════════════════════════
# Public samplers
# ═══════════════════════════════════════════════════════════════════

def noise3(
    x: float,
    y: float,
    z: float,
    x_wrap: int = 0,
    y_wrap: int = 0,
    z_wrap: int = 0,
) -> float:
    """Sample 3-D gradient noise at ``(x, y, z)``.

    Adjacent values are continuous, but the field decorrelates with
    period 1: integer lattice points always sample to ``0.0``.

    Parameters
    ----------
    x, y, z : float
        Sample coordinates.  Any real value, including negatives.
    x_wrap, y_wrap, z_wrap : int
        Wrap period per axis.  Must be a power of two, or 0 for "don't
        care".  The field always repeats every 256 regardless.  Other
        values are accepted but give a field that does not tile.

    Returns
    -------
    float
        A value in approximately ``[-1, 1]``.
    """
    return float(_noise3_internal(
        _f32(x), _f32(y), _f32(z), int(x_wrap), int(y_wrap), int(z_wrap), 0,
    ))


def noise3_seed(
    x: float,
    y: float,
    z: float,
    x_wrap: int = 0,
    y_wrap: int = 0,
    z_wrap: int = 0,
    seed: int = 0,
) -> float:
    """As :func:`noise3`, but *seed* selects one of 256 noise variations.

    Only the low 8 bits of *seed* are used, so ``seed`` and
    ``seed + 256`` give the same field.
    """
    return float(_noise3_internal(
        _f32(x), _f32(y), _f32(z),
        int(x_wrap), int(y_wrap), int(z_wrap), int(seed),
    ))


def noise3_wrap_nonpow2(
    x: float,
    y: float,
    z: float,
    x_wrap: int = 0,
    y_wrap: int = 0,
    z_wrap: int = 0,
    seed: int = 0,
) -> float:
    """Sample noise that wraps at arbitrary periods.

    Wrapping uses true modulo rather than a bit mask, so any positive
    period tiles (0 means 256).  The seed is applied in a second
    permutation pass after the coordinate lookup, so for power-of-two
    periods this field is *not* the same as :func:`noise3_seed`.

    Periods above 256 still repeat at their own length, but the tables
    themselves repeat every 256 cells, so the field inside one period
    is not unique beyond that.

    Raises
    ------
    ValueError
        If a wrap period is negative.
    """
    periods = []
    for name, wrap in (("x_wrap", x_wrap), ("y_wrap", y_wrap), ("z_wrap", z_wrap)):
        wrap = int(wrap)
        if wrap < 0:
            raise ValueError(f"{name} must be >= 0, got {wrap}")
        periods.append(wrap if wrap != 0 else TABLE_SIZE)
    x_period, y_period, z_period = periods

    x, y, z = _f32(x), _f32(y), _f32(z)
    px = fastfloor(x)
    py = fastfloor(y)
    pz = fastfloor(z)
    # Python's % already lands in [0, period) for a positive period.
    x0 = px % x_period
    y0 = py % y_period
    z0 = pz % z_period
    x1 = (x0 + 1) % x_period
    y1 = (y0 + 1) % y_period
    z1 = (z0 + 1) % z_period

    # Table entries repeat every 256, so masking keeps indices in range
    # without changing any lookup for periods up to 256.
    seed = int(seed) & 0xFF
    r0 = PERMUTATION[PERMUTATION[x0 & 255] + seed]
    r1 = PERMUTATION[PERMUTATION[x1 & 255] + seed]

    return float(_interpolate_cell(
        x - _f32(px), y - _f32(py), z - _f32(pz),
        y0 & 255, y1 & 255, z0 & 255, z1 & 255, r0, r1,
    ))
