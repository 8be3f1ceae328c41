"""perlinoise — deterministic 3-D gradient noise and fractal sums.

Public API is organised into layers:

- **Kernel** — lookup tables and the lattice noise samplers
- **Fractal** — ridged, fBm and turbulence composers
- **Configuration** — fractal configs and presets
- **Fields** — sampling onto numpy arrays
- **Rendering** — PNG output (requires matplotlib)
"""

# ── Kernel ──────────────────────────────────────────────────────────
from .tables import GRADIENT_BASIS, GRADIENT_INDEX, PERMUTATION, TABLE_SIZE
from .noise import (
    fade,
    fastfloor,
    grad,
    lerp,
    noise3,
    noise3_seed,
    noise3_wrap_nonpow2,
)

# ── Fractal ─────────────────────────────────────────────────────────
from .fractal import fbm_noise3, ridge_noise3, turbulence_noise3

# ── Configuration ───────────────────────────────────────────────────
from .presets import (
    FractalConfig,
    evaluate,
    as_noise_fn,
    get_preset,
    PRESETS,
    SMOOTH_HILLS,
    RIDGED_MOUNTAINS,
    CLOUDS,
    MARBLE,
)

# ── Fields ──────────────────────────────────────────────────────────
from .field import (
    sample_field,
    sample_volume,
    tileable_field,
    normalize_field,
    field_stats,
)

# ── Rendering (requires matplotlib) ────────────────────────────────
from .render import render_field_png

__all__ = [
    # Kernel
    "GRADIENT_BASIS",
    "GRADIENT_INDEX",
    "PERMUTATION",
    "TABLE_SIZE",
    "fade",
    "fastfloor",
    "grad",
    "lerp",
    "noise3",
    "noise3_seed",
    "noise3_wrap_nonpow2",
    # Fractal
    "fbm_noise3",
    "ridge_noise3",
    "turbulence_noise3",
    # Configuration
    "FractalConfig",
    "evaluate",
    "as_noise_fn",
    "get_preset",
    "PRESETS",
    "SMOOTH_HILLS",
    "RIDGED_MOUNTAINS",
    "CLOUDS",
    "MARBLE",
    # Fields
    "sample_field",
    "sample_volume",
    "tileable_field",
    "normalize_field",
    "field_stats",
    # Rendering
    "render_field_png",
]
