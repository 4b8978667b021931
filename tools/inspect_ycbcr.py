"""
Inspect how YCbCr triples are stored after clamping.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from ycbcr import YCbCrColor, vector_to_channels

CHANNEL_NAMES = ("Y", "Cb", "Cr")
DEFAULT_LOG_LEVEL = "INFO"


def set_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "--color",
        type=float,
        nargs=3,
        action="append",
        metavar=("Y", "CB", "CR"),
        help="YCbCr triple to inspect, may be given several times.",
    )
    parser.add_argument(
        "--yaml_path",
        type=str,
        default="./config/inspect/default.yaml",
        help="yaml with default args (colors, log_level)",
    )
    parser.add_argument("--log_level", type=str, help="logging level, e.g. INFO or DEBUG")
    return parser


def add_yaml_to_args(args):
    defaults = {}
    if args.yaml_path and os.path.exists(args.yaml_path):
        with open(args.yaml_path, "r") as f:
            defaults = yaml.safe_load(f) or {}
    else:
        logging.warning(f"yaml not found, using command line only: {args.yaml_path}")
    defaults.update({k: v for k, v in args.__dict__.items() if v is not None})
    args.__dict__ = defaults
    return args


def set_log_level(level):
    level = str(level or DEFAULT_LOG_LEVEL).upper()
    try:
        logging.getLogger().setLevel(level)
    except ValueError:
        logging.error(f"invalid log_level {level!r}, keeping {DEFAULT_LOG_LEVEL}")
        logging.getLogger().setLevel(DEFAULT_LOG_LEVEL)


def inspect_colors(colors):
    results = []
    for raw in colors:
        try:
            channels = vector_to_channels(raw)
            color = YCbCrColor(*channels)
        except (TypeError, ValueError) as e:
            logging.error(f"skipping color entry {raw!r}: {e}")
            continue
        logging.info(str(color))
        for name, before, after in zip(CHANNEL_NAMES, channels, color.as_tuple()):
            if before != after:
                logging.warning(f"{name} clamped: {before} -> {after}")
        results.append(color)
    return results


def main(argv=None):
    logging.basicConfig(level=DEFAULT_LOG_LEVEL)
    parser = argparse.ArgumentParser(description=sys.argv[0])
    parser = set_args(parser)
    args = parser.parse_args(argv)
    args = add_yaml_to_args(args)
    set_log_level(args.__dict__.get("log_level"))
    colors = args.__dict__.get("colors") or []
    colors = list(colors) + list(args.__dict__.get("color") or [])
    if not colors:
        logging.info("no colors given")
    inspect_colors(colors)
    return 0


if __name__ == "__main__":
    sys.exit(main())
