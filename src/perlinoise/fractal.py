"""Fractal sums of :mod:`noise` — ridged, fBm and turbulence.

Each composer samples the base noise once per octave at a growing
frequency and shrinking amplitude::

    frequency *= lacunarity
    amplitude *= gain

Octave ``i`` uses noise seed ``i & 0xFF``, which decorrelates the
octaves even though they share one set of tables.  Outputs are not
normalised; with ``gain < 1`` they stay bounded, otherwise they can grow
with the octave count.

Typical starting values: ``octaves=6``, ``lacunarity≈2.0`` (exactly 2.0
keeps the sum tileable), ``gain=0.5``, ``offset=1.0`` for ridges.

Functions
---------
- :func:`ridge_noise3` — ``(offset − |noise|)²`` weighted by the previous octave
- :func:`fbm_noise3` — fractal Brownian motion, plain weighted sum
- :func:`turbulence_noise3` — weighted sum of ``|noise|``
"""

from __future__ import annotations

import numpy as np

from .noise import _noise3_internal

_f32 = np.float32


def ridge_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float = 2.0,
    gain: float = 0.5,
    offset: float = 1.0,
    octaves: int = 6,
) -> float:
    """Ridged multifractal noise.

    Each octave's signal is ``r = (offset − |noise|)²``, so zero
    crossings of the base noise become ridges.  The signal is weighted by
    the previous octave's ``r`` (starting at 1.0), concentrating detail
    on the ridges.  Amplitude starts at 0.5.

    Parameters
    ----------
    x, y, z : float
        Sample coordinates.
    lacunarity : float
        Frequency multiplier between octaves.
    gain : float
        Amplitude multiplier between octaves.
    offset : float
        Ridge height; larger values invert the ridges further.
    octaves : int
        Number of noise layers.  0 or fewer gives ``0.0``.
    """
    x, y, z = _f32(x), _f32(y), _f32(z)
    lacunarity, gain, offset = _f32(lacunarity), _f32(gain), _f32(offset)
    frequency = _f32(1.0)
    prev = _f32(1.0)
    amplitude = _f32(0.5)
    total = _f32(0.0)

    for i in range(int(octaves)):
        r = _noise3_internal(x * frequency, y * frequency, z * frequency, 0, 0, 0, i)
        r = offset - abs(r)
        r = r * r
        total += r * amplitude * prev
        prev = r
        frequency *= lacunarity
        amplitude *= gain
    return float(total)


def fbm_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float = 2.0,
    gain: float = 0.5,
    octaves: int = 6,
) -> float:
    """Fractal Brownian motion — octaves summed with decaying amplitude.

    Amplitude starts at 1.0.  With ``gain=0.5`` the result stays
    roughly within ``[-2, 2]``.
    """
    x, y, z = _f32(x), _f32(y), _f32(z)
    lacunarity, gain = _f32(lacunarity), _f32(gain)
    frequency = _f32(1.0)
    amplitude = _f32(1.0)
    total = _f32(0.0)

    for i in range(int(octaves)):
        total += _noise3_internal(
            x * frequency, y * frequency, z * frequency, 0, 0, 0, i,
        ) * amplitude
        frequency *= lacunarity
        amplitude *= gain
    return float(total)


def turbulence_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float = 2.0,
    gain: float = 0.5,
    octaves: int = 6,
) -> float:
    """Turbulence — octaves of ``|noise * amplitude|`` summed.

    Always non-negative (for finite input).  Amplitude starts at 1.0.
    """
    x, y, z = _f32(x), _f32(y), _f32(z)
    lacunarity, gain = _f32(lacunarity), _f32(gain)
    frequency = _f32(1.0)
    amplitude = _f32(1.0)
    total = _f32(0.0)

    for i in range(int(octaves)):
        r = _noise3_internal(
            x * frequency, y * frequency, z * frequency, 0, 0, 0, i,
        ) * amplitude
        total += abs(r)
        frequency *= lacunarity
        amplitude *= gain
    return float(total)
