"""perlinoise command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .noise import noise3_seed, noise3_wrap_nonpow2
from .presets import FRACTAL_KINDS, FractalConfig, PRESETS, as_noise_fn, evaluate, get_preset

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="perlinoise", description="Perlin noise CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sample = sub.add_parser("sample", help="Sample base noise at one point")
    sample.add_argument("x", type=float)
    sample.add_argument("y", type=float)
    sample.add_argument("z", type=float)
    sample.add_argument("--wrap", type=int, nargs=3, default=[0, 0, 0],
                        metavar=("WX", "WY", "WZ"))
    sample.add_argument("--seed", type=int, default=0)
    sample.add_argument("--nonpow2", action="store_true",
                        help="Use modulo wrapping (any non-negative period)")

    fractal = sub.add_parser("fractal", help="Sample fractal noise at one point")
    fractal.add_argument("x", type=float)
    fractal.add_argument("y", type=float)
    fractal.add_argument("z", type=float)
    _add_fractal_args(fractal)

    render = sub.add_parser("render", help="Render a noise field to PNG (or .npy)")
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--width", type=int, default=256)
    render.add_argument("--height", type=int, default=256)
    render.add_argument("--scale", type=float, default=1.0 / 32.0)
    render.add_argument("--z", type=float, default=0.0)
    render.add_argument("--tileable", type=int, metavar="PERIOD",
                        help="Render seamlessly tiling base noise with this period")
    render.add_argument("--seed", type=int, default=0)
    render.add_argument("--cmap", default="gray")
    render.add_argument("--dpi", type=int, default=100)
    _add_fractal_args(render)

    return parser


def _add_fractal_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--kind", choices=FRACTAL_KINDS, default="fbm")
    parser.add_argument("--preset", choices=sorted(PRESETS),
                        help="Start from a named preset (overrides --kind)")
    parser.add_argument("--octaves", type=int)
    parser.add_argument("--lacunarity", type=float)
    parser.add_argument("--gain", type=float)
    parser.add_argument("--offset", type=float)


def _config_from_args(args) -> FractalConfig:
    config = get_preset(args.preset) if args.preset else FractalConfig(kind=args.kind)
    overrides = {
        name: getattr(args, name)
        for name in ("octaves", "lacunarity", "gain", "offset")
        if getattr(args, name) is not None
    }
    if overrides:
        config = replace(config, **overrides)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "sample":
            _cmd_sample(args)
        elif args.command == "fractal":
            _cmd_fractal(args)
        elif args.command == "render":
            _cmd_render(args)
    except (ValueError, KeyError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_sample(args) -> None:
    wx, wy, wz = args.wrap
    if args.nonpow2:
        value = noise3_wrap_nonpow2(args.x, args.y, args.z, wx, wy, wz, args.seed)
    else:
        value = noise3_seed(args.x, args.y, args.z, wx, wy, wz, args.seed)
    print(repr(value))


def _cmd_fractal(args) -> None:
    config = _config_from_args(args)
    logger.debug("fractal config: %s", config)
    print(repr(evaluate(config, args.x, args.y, args.z)))


def _cmd_render(args) -> None:
    from .field import sample_field, tileable_field

    if args.tileable is not None:
        field = tileable_field(
            args.width, args.height, period=args.tileable, z=args.z, seed=args.seed,
        )
    else:
        config = _config_from_args(args)
        logger.debug("fractal config: %s", config)
        field = sample_field(
            as_noise_fn(config), args.width, args.height, scale=args.scale, z=args.z,
        )

    output_path = Path(args.output_path)
    if output_path.suffix == ".npy":
        import numpy as np

        output_path.parent.mkdir(parents=True, exist_ok=True)
        np.save(output_path, field)
    else:
        from .render import render_field_png

        render_field_png(field, output_path, cmap=args.cmap, dpi=args.dpi)
    print(f"Saved {output_path}")


if __name__ == "__main__":
    raise SystemExit(main())
