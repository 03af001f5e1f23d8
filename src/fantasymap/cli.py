"""Command-line interface for map generation."""

import argparse
import logging
import time
from pathlib import Path

import structlog
from PIL import Image
from pydantic import ValidationError

from .config import MapConfig, find_config, list_configs, load_config
from .raster import Raster, Seeds

DEFAULT_ELEVATION_SEED = 13
DEFAULT_MOISTURE_SEED = 259


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a fantasy island map from two seeds"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Preset name or TOML path (presets: {', '.join(list_configs()) or 'none'})",
    )
    parser.add_argument(
        "--elevation-seed",
        type=int,
        default=DEFAULT_ELEVATION_SEED,
        help=f"Elevation seed (default: {DEFAULT_ELEVATION_SEED})",
    )
    parser.add_argument(
        "--moisture-seed",
        type=int,
        default=DEFAULT_MOISTURE_SEED,
        help=f"Moisture seed (default: {DEFAULT_MOISTURE_SEED})",
    )
    parser.add_argument(
        "--random-seeds",
        action="store_true",
        help="Draw both seeds at random (overrides --*-seed)",
    )
    parser.add_argument(
        "--width", type=int, default=None, help="Map width (overrides config)"
    )
    parser.add_argument(
        "--height", type=int, default=None, help="Map height (overrides config)"
    )
    parser.add_argument(
        "--shadow",
        type=int,
        default=0,
        metavar="N",
        help="Apply relief shadow N times (default: 0)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="fantasy_map.png",
        help="Output PNG path (default: fantasy_map.png)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def _resolve_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> MapConfig:
    try:
        config = load_config(find_config(args.config)) if args.config else MapConfig()
        overrides = {
            key: value
            for key, value in (("width", args.width), ("height", args.height))
            if value is not None
        }
        if overrides:
            config = MapConfig.model_validate(config.model_dump() | overrides)
    except (FileNotFoundError, ValidationError) as e:
        parser.error(str(e))
    return config


def save_png(raster: Raster, path: Path) -> None:
    """Write the raster's RGBA pixels to a PNG file."""
    image = Image.frombytes("RGBA", (raster.width, raster.height), raster.pixels())
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for map generation."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger = structlog.get_logger()

    if args.shadow < 0:
        parser.error("--shadow must be >= 0")

    config = _resolve_config(parser, args)

    if args.random_seeds:
        seeds = Seeds.random()
    else:
        try:
            seeds = Seeds(elevation=args.elevation_seed, moisture=args.moisture_seed)
        except ValidationError as e:
            parser.error(str(e))

    print(f"Elevation seed: {seeds.elevation}")
    print(f"Moisture seed: {seeds.moisture}")

    raster = Raster(config)

    start_time = time.time()
    raster.generate(seeds)
    for _ in range(args.shadow):
        raster.apply_shadow()
    gen_time = time.time() - start_time

    output_path = Path(args.output)
    save_png(raster, output_path)

    logger.info(
        "map_saved",
        path=str(output_path),
        width=config.width,
        height=config.height,
        seconds=round(gen_time, 2),
    )


if __name__ == "__main__":
    main()
