"""Command-line interface for noise map generation."""

import argparse
import logging
import time
from pathlib import Path

import numpy as np
import structlog

from .config import Config, load_config
from .exceptions import ConfigError, InvalidParametersError
from .generator import generate_noise_map
from .validation import generate_noise_map_strict


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the noisemap command."""
    parser = argparse.ArgumentParser(
        description="Generate a seeded multi-octave noise map and summarize it"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a TOML config file with a [noise] table",
    )
    parser.add_argument("--width", type=int, default=None, help="Map width")
    parser.add_argument("--height", type=int, default=None, help="Map height")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--scale", type=float, default=None, help="Noise scale")
    parser.add_argument(
        "--octaves", type=int, default=None, help="Number of octaves"
    )
    parser.add_argument(
        "--persistence",
        type=float,
        default=None,
        help="Amplitude multiplier per octave",
    )
    parser.add_argument(
        "--lacunarity",
        type=float,
        default=None,
        help="Frequency multiplier per octave",
    )
    parser.add_argument(
        "--offset-x", type=float, default=None, help="Sample offset on x"
    )
    parser.add_argument(
        "--offset-y", type=float, default=None, help="Sample offset on y"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject out-of-range parameters instead of clamping them",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for noise map generation."""
    args = build_parser().parse_args(argv)

    # Configure structlog
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

    if args.config:
        try:
            config = load_config(Path(args.config))
        except ConfigError as e:
            logger.error("config_error", error=str(e))
            raise SystemExit(1)
        logger.info("config_loaded", path=args.config)
    else:
        config = Config()

    # Apply CLI overrides
    offset = None
    if args.offset_x is not None or args.offset_y is not None:
        base_x, base_y = config.noise.offset
        offset = (
            args.offset_x if args.offset_x is not None else base_x,
            args.offset_y if args.offset_y is not None else base_y,
        )
    config = config.with_overrides(
        width=args.width,
        height=args.height,
        seed=args.seed,
        scale=args.scale,
        octaves=args.octaves,
        persistence=args.persistence,
        lacunarity=args.lacunarity,
        offset=offset,
    )
    params = config.noise

    print(
        f"Generating {params.width}x{params.height} noise map with seed {params.seed}"
    )

    start_time = time.time()
    if args.strict:
        try:
            noise_map = generate_noise_map_strict(params)
        except InvalidParametersError as e:
            logger.error("invalid_parameters", errors=e.result.errors)
            raise SystemExit(1)
    else:
        noise_map = generate_noise_map(params)
    gen_time = time.time() - start_time

    print(f"Shape: {noise_map.shape[0]}x{noise_map.shape[1]}")
    print(
        f"Min: {noise_map.min():.4f}  Max: {noise_map.max():.4f}  "
        f"Mean: {np.mean(noise_map):.4f}  Std: {np.std(noise_map):.4f}"
    )
    print(f"Generation complete in {gen_time:.3f}s")


if __name__ == "__main__":
    main()
