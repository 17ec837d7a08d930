"""Command-line interface for digitring.

Provides the `digitring` command with subcommands for:
- Showing a decimal number as a ring of base-3 digits
- Converting it to the scale base
- Computing the residue of two numbers
- Saving a number to a file in canonical decimal form
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import colorlogging

from digitring.config import DEFAULT_CONFIG, RingConfig, load_config
from digitring.errors import DigitRingError
from digitring.ring import DigitRing
from digitring.storage import load_ring, save_ring

logger = logging.getLogger(__name__)


def _source_ring(args: argparse.Namespace, config: RingConfig) -> DigitRing:
    """Build the input ring from a VALUE argument or a --file option."""
    if args.file:
        return load_ring(args.file, config.base)
    return DigitRing.from_decimal(args.value or "", config.base)


def _print_ring(label: str, ring: DigitRing) -> None:
    print(f"{label:<8} {ring}")
    print(f"{'decimal':<8} {ring.to_decimal_string()}")


def cmd_show(args: argparse.Namespace, config: RingConfig) -> int:
    """Show a number as a ring."""
    ring = _source_ring(args, config)
    _print_ring("digits", ring)
    return 0


def cmd_scale(args: argparse.Namespace, config: RingConfig) -> int:
    """Show a number converted to the scale base."""
    ring = _source_ring(args, config)
    scaled = ring.change_scale(config.scale_base)
    logger.debug("Converted %s to %s", ring, scaled)
    _print_ring("scaled", scaled)
    return 0


def cmd_mod(args: argparse.Namespace, config: RingConfig) -> int:
    """Show the residue of two numbers."""
    dividend = DigitRing.from_decimal(args.dividend, config.base)
    divisor = DigitRing.from_decimal(args.divisor, config.base)
    _print_ring("residue", dividend.additional_operation(divisor))
    return 0


def cmd_save(args: argparse.Namespace, config: RingConfig) -> int:
    """Save a number to a file."""
    ring = DigitRing.from_decimal(args.value, config.base)
    save_ring(ring, args.output)
    logger.info("Saved %s to %s", ring.to_decimal_string(), args.output)
    return 0


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "value",
        nargs="?",
        help="Decimal number (optional leading '+')",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="Read the decimal number from this file instead",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="digitring",
        description="Circular digit lists with base conversions",
    )
    parser.add_argument(
        "--config",
        help="Path to digitring.yaml configuration",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # show command
    show_parser = subparsers.add_parser("show", help="Show a number as digits")
    _add_source_arguments(show_parser)
    show_parser.set_defaults(func=cmd_show)

    # scale command
    scale_parser = subparsers.add_parser(
        "scale", help="Convert a number to the scale base"
    )
    _add_source_arguments(scale_parser)
    scale_parser.set_defaults(func=cmd_scale)

    # mod command
    mod_parser = subparsers.add_parser("mod", help="Residue of two numbers")
    mod_parser.add_argument("dividend", help="Decimal dividend")
    mod_parser.add_argument("divisor", help="Decimal divisor")
    mod_parser.set_defaults(func=cmd_mod)

    # save command
    save_parser = subparsers.add_parser("save", help="Save a number to a file")
    save_parser.add_argument("value", help="Decimal number")
    save_parser.add_argument("output", type=Path, help="Target file")
    save_parser.set_defaults(func=cmd_save)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    colorlogging.configure()
    logging.getLogger().setLevel("DEBUG" if args.verbose else config.log_level)

    try:
        return args.func(args, config)
    except DigitRingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
