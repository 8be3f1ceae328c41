"""Fixed lookup tables for the lattice noise kernel.

Every value here is load-bearing: a single changed entry changes every
noise sample downstream.  The tables are written once as 256 entries
and duplicated end-to-end at import time so that ``table[i + j]`` with
``i, j`` in ``0..255`` never needs a second wrap.

- :data:`PERMUTATION` — a permutation of ``0..255`` hashing lattice
  coordinates (and the seed) into corner indices.
- :data:`GRADIENT_INDEX` — maps a hashed corner to one of the 12
  :data:`GRADIENT_BASIS` vectors.  Perlin's 12 gradients split 16 slots
  unevenly (1/16 vs 2/16); this table evens that out to 5/64 vs 6/64.
"""

from __future__ import annotations

from typing import Tuple

TABLE_SIZE = 256

# Signed-byte literals; entries are masked with ``& 0xFF`` below.
_PERMUTATION_BYTES: Tuple[int, ...] = (
    23, 125, -95, 52, 103, 117, 70, 37, -9, 101, -53, -87, 124, 126, 44, 123,
    -104, -18, -111, 45, -85, 114, -3, 10, -64, -120, 4, -99, -7, 30, 35, 72,
    -81, 63, 77, 90, -75, 16, 96, 111, -123, 104, 75, -94, 93, 56, 66, -16,
    8, 50, 84, -27, 49, -46, -83, -17, -115, 1, 87, 18, 2, -58, -113, 57,
    -31, -96, 58, -39, -88, -50, -11, -52, -57, 6, 73, 60, 20, -26, -45, -23,
    94, -56, 88, 9, 74, -101, 33, 15, -37, -126, -30, -54, 83, -20, 42, -84,
    -91, -38, 55, -34, 46, 107, 98, -102, 109, 67, -60, -78, 127, -98, 13, -13,
    65, 79, -90, -8, 25, -32, 115, 80, 68, 51, -72, -128, -24, -48, -105, 122,
    26, -44, 105, 43, -77, -43, -21, -108, -110, 89, 14, -61, 28, 78, 112, 76,
    -6, 47, 24, -5, -116, 108, -70, -66, -28, -86, -73, -117, 39, -68, -12, -10,
    -124, 48, 119, -112, -76, -118, -122, -63, 82, -74, 120, 121, 86, -36, -47, 3,
    91, -15, -107, 85, -51, -106, 113, -40, 31, 100, 41, -92, -79, -42, -103, -25,
    38, 71, -71, -82, 97, -55, 29, 95, 7, 92, 54, -2, -65, 118, 34, -35,
    -125, 11, -93, 99, -22, 81, -29, -109, -100, -80, 17, -114, 69, 12, 110, 62,
    27, -1, 0, -62, 59, 116, -14, -4, 19, 21, -69, 53, -49, -127, 64, -121,
    61, 40, -89, -19, 102, -33, 106, -97, -59, -67, -41, -119, 36, 32, 22, 5,
)

_GRADIENT_INDEX_BYTES: Tuple[int, ...] = (
    7, 9, 5, 0, 11, 1, 6, 9, 3, 9, 11, 1, 8, 10, 4, 7,
    8, 6, 1, 5, 3, 10, 9, 10, 0, 8, 4, 1, 5, 2, 7, 8,
    7, 11, 9, 10, 1, 0, 4, 7, 5, 0, 11, 6, 1, 4, 2, 8,
    8, 10, 4, 9, 9, 2, 5, 7, 9, 1, 7, 2, 2, 6, 11, 5,
    5, 4, 6, 9, 0, 1, 1, 0, 7, 6, 9, 8, 4, 10, 3, 1,
    2, 8, 8, 9, 10, 11, 5, 11, 11, 2, 6, 10, 3, 4, 2, 4,
    9, 10, 3, 2, 6, 3, 6, 10, 5, 3, 4, 10, 11, 2, 9, 11,
    1, 11, 10, 4, 9, 4, 11, 0, 4, 11, 4, 0, 0, 0, 7, 6,
    10, 4, 1, 3, 11, 5, 3, 4, 2, 9, 1, 3, 0, 1, 8, 0,
    6, 7, 8, 7, 0, 4, 6, 10, 8, 2, 3, 11, 11, 8, 0, 2,
    4, 8, 3, 0, 0, 10, 6, 1, 2, 2, 4, 5, 6, 0, 1, 3,
    11, 9, 5, 5, 9, 6, 9, 8, 3, 8, 1, 8, 9, 6, 9, 11,
    10, 7, 5, 6, 5, 9, 1, 3, 7, 0, 2, 10, 11, 2, 6, 1,
    3, 11, 7, 7, 2, 1, 7, 3, 0, 8, 1, 1, 5, 0, 6, 10,
    11, 11, 0, 2, 7, 0, 10, 8, 3, 5, 7, 1, 11, 1, 0, 7,
    9, 0, 11, 5, 10, 3, 2, 3, 5, 9, 7, 9, 8, 4, 6, 5,
)

PERMUTATION: Tuple[int, ...] = tuple(b & 0xFF for b in _PERMUTATION_BYTES) * 2
GRADIENT_INDEX: Tuple[int, ...] = _GRADIENT_INDEX_BYTES * 2

GRADIENT_BASIS: Tuple[Tuple[int, int, int], ...] = (
    (1, 1, 0),
    (-1, 1, 0),
    (1, -1, 0),
    (-1, -1, 0),
    (1, 0, 1),
    (-1, 0, 1),
    (1, 0, -1),
    (-1, 0, -1),
    (0, 1, 1),
    (0, -1, 1),
    (0, 1, -1),
    (0, -1, -1),
)
