"""PNG rendering of sampled noise fields.

Requires matplotlib, which is imported lazily so the noise kernel stays
importable without it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np

logger = logging.getLogger(__name__)


def _ensure_mpl():
    """Lazy-import matplotlib; raise helpful error if missing."""
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for rendering. "
            "Install with `pip install matplotlib`."
        ) from exc


def render_field_png(
    field: np.ndarray,
    output_path: Union[str, Path],
    *,
    cmap: str = "gray",
    dpi: int = 100,
    title: Optional[str] = None,
    vmin: Optional[float] = None,
    vmax: Optional[float] = None,
) -> Path:
    """Render a 2-D *field* to a PNG image.

    Parameters
    ----------
    field : np.ndarray
        2-D array, e.g. from :func:`~field.sample_field`.
    output_path : str or Path
        Destination file.  Parent directories are created.
    cmap : str
        Matplotlib colour map name (``"gray"``, ``"terrain"``, ...).
    dpi : int
        Output resolution.  The figure is sized so each sample is one
        pixel at this resolution.
    title : str, optional
        Plot title.
    vmin, vmax : float, optional
        Manual value range for colour mapping; defaults to the field's
        own min / max.

    Returns
    -------
    Path
        The written file.
    """
    data = np.asarray(field)
    if data.ndim != 2:
        raise ValueError(f"field must be 2-D, got shape {data.shape}")
    plt = _ensure_mpl()

    height, width = data.shape
    fig, ax = plt.subplots(figsize=(max(width / dpi, 1.0), max(height / dpi, 1.0)))
    ax.imshow(data, cmap=cmap, vmin=vmin, vmax=vmax, interpolation="nearest", origin="upper")
    ax.axis("off")
    if title:
        ax.set_title(title, fontsize=10)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
    logger.info("wrote %s (%dx%d, cmap=%s)", output_path, width, height, cmap)
    return output_path
