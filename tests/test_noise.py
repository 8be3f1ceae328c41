"""Tests for noise.py — lattice samplers and helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from perlinoise.noise import (
    fade,
    fastfloor,
    grad,
    lerp,
    noise3,
    noise3_seed,
    noise3_wrap_nonpow2,
)


# ═══════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════


class TestHelpers:
    def test_lerp_endpoints(self):
        assert lerp(2.0, 5.0, 0.0) == 2.0
        assert lerp(2.0, 5.0, 1.0) == 5.0
        assert lerp(2.0, 5.0, 0.5) == 3.5

    def test_fade_endpoints_and_midpoint(self):
        assert fade(0.0) == 0.0
        assert fade(1.0) == 1.0
        assert fade(0.5) == 0.5

    def test_fade_keeps_float32(self):
        assert isinstance(fade(np.float32(0.3)), np.float32)

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0),
        (-0.0, 0),
        (1.5, 1),
        (1.0, 1),
        (-1.0, -1),
        (-1.5, -2),
        (-0.25, -1),
        (255.99, 255),
    ])
    def test_fastfloor(self, value, expected):
        assert fastfloor(value) == expected

    def test_fastfloor_nan_is_zero(self):
        assert fastfloor(float("nan")) == 0

    def test_fastfloor_saturates(self):
        assert fastfloor(float("inf")) == 2 ** 31 - 1
        assert fastfloor(1e12) == 2 ** 31 - 1
        assert fastfloor(-(2.0 ** 31)) == -(2 ** 31)

    def test_grad_dot_product(self):
        # basis[0] = (1, 1, 0), basis[11] = (0, -1, -1)
        assert grad(0, 0.25, 0.5, 0.75) == 0.75
        assert grad(11, 0.25, 0.5, 0.75) == -1.25

    def test_grad_zero_offset(self):
        assert all(grad(i, 0.0, 0.0, 0.0) == 0.0 for i in range(12))


# ═══════════════════════════════════════════════════════════════════
# noise3 / noise3_seed
# ═══════════════════════════════════════════════════════════════════

# Reference outputs at half-integer points, where every intermediate
# value is exact in single precision.
GOLDEN_SEED_0 = [
    ((0.5, 0.5, 0.5), -0.5),
    ((1.5, 0.5, 0.5), -0.375),
    ((0.5, 1.5, 0.5), 0.0),
    ((0.5, 0.5, 1.5), -0.25),
    ((-0.5, -0.5, -0.5), 0.5),
    ((2.5, 3.5, 4.5), 0.0),
    ((-1.5, 2.5, -3.5), -0.125),
    ((10.5, 20.5, 30.5), -0.125),
    ((0.5, 0.0, 0.0), 0.25),
    ((0.0, 0.5, 0.0), -0.5),
]

GOLDEN_SEEDED = [
    ((0.5, 0.5, 0.5), 1, -0.375),
    ((0.5, 0.5, 0.5), 2, 0.25),
    ((0.5, 0.5, 0.5), 3, -0.125),
    ((0.5, 0.5, 0.5), 7, 0.25),
    ((1.5, 0.5, 0.5), 1, 0.25),
    ((-0.5, -0.5, -0.5), 1, 0.625),
    ((-0.5, -0.5, -0.5), 7, -0.125),
    ((2.5, 3.5, 4.5), 1, -0.125),
    ((-1.5, 2.5, -3.5), 1, -0.375),
    ((-1.5, 2.5, -3.5), 7, 0.125),
    ((10.5, 20.5, 30.5), 7, -0.375),
    ((0.0, 0.5, 0.0), 7, 0.5),
]


class TestNoise3:
    def test_returns_float(self):
        assert isinstance(noise3(0.3, 0.7, 1.1), float)

    @pytest.mark.parametrize("point, expected", GOLDEN_SEED_0)
    def test_known_values(self, point, expected):
        assert noise3(*point) == expected

    def test_determinism(self):
        a = noise3(1.23, -4.56, 7.89)
        b = noise3(1.23, -4.56, 7.89)
        assert a == b

    @pytest.mark.parametrize("point", [
        (0, 0, 0), (1, 2, 3), (-1, -7, 4), (255, 256, -256), (1000, -1000, 17),
    ])
    def test_zero_at_lattice_points(self, point):
        assert noise3(*point) == 0.0

    def test_output_bounded(self):
        vals = [
            noise3(x * 0.37, y * 0.29, z * 0.41)
            for x in range(-10, 10) for y in range(-10, 10) for z in range(3)
        ]
        assert all(-1.01 <= v <= 1.01 for v in vals), (
            f"min={min(vals):.4f}, max={max(vals):.4f}"
        )
        assert len(set(vals)) > 100

    def test_result_is_single_precision(self):
        v = noise3(0.3, 0.7, 1.1)
        assert float(np.float32(v)) == v

    def test_inputs_are_rounded_to_single_precision(self):
        assert noise3(0.1, 0.2, 0.3) == noise3(
            float(np.float32(0.1)), float(np.float32(0.2)), float(np.float32(0.3)),
        )

    def test_continuity(self):
        """Tiny steps in input give tiny steps in output."""
        base = noise3(3.25, 1.75, 0.5)
        near = noise3(3.25 + 1e-3, 1.75, 0.5)
        assert abs(base - near) < 0.01

    def test_always_repeats_every_256(self):
        for x, y, z in [(0.375, 1.25, 2.5), (-3.125, 0.75, 9.5)]:
            assert noise3(x, y, z) == noise3(x + 256, y, z)
            assert noise3(x, y, z) == noise3(x, y - 256, z + 512)

    def test_nan_propagates(self):
        assert math.isnan(noise3(float("nan"), 0.5, 0.5))


class TestNoise3Seed:
    def test_seed_zero_matches_noise3(self):
        for x, y, z in [(0.3, 0.7, 1.1), (-2.6, 4.4, 0.05), (10.5, 20.5, 30.5)]:
            assert noise3_seed(x, y, z, 0, 0, 0, 0) == noise3(x, y, z, 0, 0, 0)

    @pytest.mark.parametrize("point, seed, expected", GOLDEN_SEEDED)
    def test_known_values(self, point, seed, expected):
        assert noise3_seed(*point, 0, 0, 0, seed) == expected

    def test_only_low_eight_bits_used(self):
        p = (0.3, 0.7, 1.1)
        assert noise3_seed(*p, seed=257) == noise3_seed(*p, seed=1)
        assert noise3_seed(*p, seed=-1) == noise3_seed(*p, seed=255)
        assert noise3_seed(*p, seed=256) == noise3(*p)

    def test_different_seeds_differ(self):
        vals = {noise3_seed(0.3, 0.7, 1.1, seed=s) for s in range(16)}
        assert len(vals) > 8


# ═══════════════════════════════════════════════════════════════════
# Power-of-two wrapping
# ═══════════════════════════════════════════════════════════════════


class TestPow2Wrap:
    @pytest.mark.parametrize("wrap", [1, 2, 4, 8, 16, 64, 256])
    def test_periodic_along_each_axis(self, wrap):
        x, y, z = 0.375, 1.625, 2.125
        base = noise3(x, y, z, wrap, wrap, wrap)
        assert noise3(x + wrap, y, z, wrap, wrap, wrap) == base
        assert noise3(x, y + wrap, z, wrap, wrap, wrap) == base
        assert noise3(x, y, z - wrap, wrap, wrap, wrap) == base
        assert noise3(x + 3 * wrap, y - 2 * wrap, z + wrap, wrap, wrap, wrap) == base

    def test_per_axis_wrap_is_independent(self):
        x, y, z = 0.375, 1.625, 2.125
        base = noise3(x, y, z, 4, 0, 0)
        assert noise3(x + 4, y, z, 4, 0, 0) == base
        assert noise3(x, y + 4, z, 4, 0, 0) != base

    def test_known_values(self):
        assert noise3(-0.5, -0.5, -0.5, 4, 4, 4) == 0.0
        assert noise3(2.5, 3.5, 4.5, 4, 4, 4) == -0.25
        assert noise3(-1.5, 2.5, -3.5, 4, 4, 4) == 0.375

    def test_wrap_inside_cell_matches_unwrapped(self):
        """Inside [0, wrap - 1) no corner wraps, so the field is unchanged."""
        assert noise3(0.5, 0.5, 0.5, 4, 4, 4) == noise3(0.5, 0.5, 0.5)
        assert noise3(1.5, 0.5, 0.5, 4, 4, 4) == noise3(1.5, 0.5, 0.5)

    def test_zero_means_full_period(self):
        assert noise3(0.3, 0.7, 1.1, 0, 0, 0) == noise3(0.3, 0.7, 1.1, 256, 256, 256)

    def test_non_pow2_accepted(self):
        """Non-power-of-two periods do not tile here, but never raise."""
        assert isinstance(noise3(0.3, 0.7, 1.1, 3, 5, 7), float)


# ═══════════════════════════════════════════════════════════════════
# Modulo wrapping
# ═══════════════════════════════════════════════════════════════════


class TestNoise3WrapNonPow2:
    @pytest.mark.parametrize("point, wraps, seed, expected", [
        ((0.5, 0.5, 0.5), (0, 0, 0), 0, 0.0),
        ((1.5, 0.5, 0.5), (0, 0, 0), 0, -0.5),
        ((0.5, 1.5, 0.5), (0, 0, 0), 0, -0.125),
        ((0.5, 0.5, 1.5), (0, 0, 0), 0, -0.25),
        ((-1.5, 2.5, -3.5), (3, 3, 3), 0, 0.5),
        ((-0.5, -0.5, -0.5), (3, 3, 3), 0, 0.125),
        ((10.5, 20.5, 30.5), (5, 5, 5), 2, 0.125),
        ((-0.5, -0.5, -0.5), (5, 5, 5), 2, -0.5),
        ((2.5, 3.5, 4.5), (4, 4, 4), 0, 0.125),
    ])
    def test_known_values(self, point, wraps, seed, expected):
        assert noise3_wrap_nonpow2(*point, *wraps, seed) == expected

    @pytest.mark.parametrize("wrap", [3, 5, 6, 7, 100, 255])
    def test_periodic(self, wrap):
        x, y, z = 0.375, 1.625, 2.125
        base = noise3_wrap_nonpow2(x, y, z, wrap, wrap, wrap, 9)
        assert noise3_wrap_nonpow2(x + wrap, y, z, wrap, wrap, wrap, 9) == base
        assert noise3_wrap_nonpow2(x, y - wrap, z, wrap, wrap, wrap, 9) == base
        assert noise3_wrap_nonpow2(x, y, z + 2 * wrap, wrap, wrap, wrap, 9) == base

    def test_negative_coordinates_wrap_into_range(self):
        assert noise3_wrap_nonpow2(-2.25, 0.5, 0.5, 3, 0, 0) == noise3_wrap_nonpow2(
            0.75, 0.5, 0.5, 3, 0, 0,
        )

    def test_zero_at_lattice_points(self):
        assert noise3_wrap_nonpow2(4, -2, 7, 3, 5, 6, 11) == 0.0

    def test_differs_from_mask_sampler_for_pow2(self):
        """The seed is applied after the coordinate lookup, so even for
        power-of-two periods this is a different field from noise3."""
        assert noise3_wrap_nonpow2(0.5, 0.5, 0.5, 4, 4, 4, 0) == 0.0
        assert noise3(0.5, 0.5, 0.5, 4, 4, 4) == -0.5
        assert noise3_wrap_nonpow2(2.5, 3.5, 4.5, 4, 4, 4, 0) != noise3(2.5, 3.5, 4.5, 4, 4, 4)

    def test_only_low_eight_bits_of_seed(self):
        p = (0.3, 0.7, 1.1, 6, 6, 6)
        assert noise3_wrap_nonpow2(*p, 258) == noise3_wrap_nonpow2(*p, 2)

    @pytest.mark.parametrize("wraps", [(-1, 0, 0), (0, -3, 0), (0, 0, -256)])
    def test_negative_wrap_raises(self, wraps):
        with pytest.raises(ValueError, match="must be >= 0"):
            noise3_wrap_nonpow2(0.5, 0.5, 0.5, *wraps)

    @pytest.mark.parametrize("wrap", [257, 300, 511, 1000])
    def test_periods_above_256_repeat(self, wrap):
        x, y, z = 250.375, 1.625, 2.125
        base = noise3_wrap_nonpow2(x, y, z, wrap, wrap, wrap, 5)
        assert noise3_wrap_nonpow2(x + wrap, y, z, wrap, wrap, wrap, 5) == base
        assert noise3_wrap_nonpow2(x, y + wrap, z, wrap, wrap, wrap, 5) == base
        assert noise3_wrap_nonpow2(x, y, z - wrap, wrap, wrap, wrap, 5) == base

    def test_period_300_known_values(self):
        assert noise3_wrap_nonpow2(0.3, 0.7, 1.1, 300, 0, 0) == float(np.float32(0.114358485))
        assert noise3_wrap_nonpow2(250.375, 0.7, 1.1, 300, 0, 0) == float(np.float32(-0.393426925))
        assert noise3_wrap_nonpow2(550.375, 0.7, 1.1, 300, 0, 0) == float(np.float32(-0.393426925))

    def test_large_periods_stay_defined_on_lattice(self):
        assert noise3_wrap_nonpow2(700, 400, 900, 1000, 1000, 1000, 9) == 0.0


# ═══════════════════════════════════════════════════════════════════
# Single-precision reference values
# ═══════════════════════════════════════════════════════════════════

# Reference outputs at points whose coordinates are not short binary
# fractions.  Computing in double precision and rounding once at the
# end gives a different float32 for several of these (0.3, 0.7, 1.1
# at seed 0, the wrap-8 point and the wrap-5/7/3 point among them).
GOLDEN_F32_SEEDED = [
    ((0.3, 0.7, 1.1), (0, 0, 0), 0, -0.279338032),
    ((0.3, 0.7, 1.1), (0, 0, 0), 13, 0.126503244),
    ((-2.6, 4.4, 0.05), (0, 0, 0), 0, -0.109186098),
    ((12.34, -5.67, 8.9), (0, 0, 0), 200, 0.534382582),
    ((-0.1, -0.2, -0.3), (8, 8, 8), 0, 0.303517699),
]

GOLDEN_F32_NONPOW2 = [
    ((0.3, 0.7, 1.1), (0, 0, 0), 13, -0.353040993),
    ((-7.3, 2.2, 19.9), (5, 7, 3), 77, -0.0392506421),
]


class TestSinglePrecision:
    @pytest.mark.parametrize("point, wraps, seed, expected", GOLDEN_F32_SEEDED)
    def test_noise3_seed(self, point, wraps, seed, expected):
        assert noise3_seed(*point, *wraps, seed) == float(np.float32(expected))

    @pytest.mark.parametrize("point, wraps, seed, expected", GOLDEN_F32_NONPOW2)
    def test_noise3_wrap_nonpow2(self, point, wraps, seed, expected):
        assert noise3_wrap_nonpow2(*point, *wraps, seed) == float(np.float32(expected))

    def test_noise3_matches_seed_zero_reference(self):
        assert noise3(0.3, 0.7, 1.1) == float(np.float32(-0.279338032))
