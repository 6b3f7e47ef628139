"""
Command-line interface for SkewT Charts package.

Provides argparse-based CLI with subcommands for rendering a diagram from a
profile file and for querying interpolated values at a height.

Usage:
    skewt-charts render --input sounding.json --output skewt.png
    skewt-charts render --input sounding.csv --output skewt.png --min-height 500 --max-height 4500
    skewt-charts query --input sounding.json --height 1500
"""

import argparse
import sys
from typing import Optional, Sequence

from .api import create_diagram, query_profile
from .config import Config
from .exceptions import SkewTChartsError
from .logging_config import setup_logging
from .profile import load_profile
from .rendering.annotations import format_level_readout


def setup_logging_from_args(args: argparse.Namespace) -> None:
    """
    Configure logging based on command-line arguments.

    Args:
        args: Parsed command-line arguments with verbose, quiet, log_file
    """
    if getattr(args, 'quiet', False):
        verbosity = -1  # WARNING
    elif getattr(args, 'verbose', False):
        verbosity = 1  # DEBUG
    else:
        verbosity = 0  # INFO

    setup_logging(verbosity=verbosity, log_file=getattr(args, 'log_file', None))


def load_config(config_path: Optional[str]) -> Config:
    """
    Load configuration from file, or defaults when no path is given.

    Raises:
        SkewTChartsError: If the file cannot be loaded
    """
    if config_path is None:
        return Config()

    try:
        return Config.load_from_file(config_path)
    except (OSError, ValueError, TypeError) as e:
        raise SkewTChartsError(f"Error loading config from {config_path}: {e}") from e


def _height_range(args: argparse.Namespace):
    if args.min_height is None and args.max_height is None:
        return None
    if args.min_height is None or args.max_height is None:
        raise SkewTChartsError("--min-height and --max-height must be given together")
    return args.min_height, args.max_height


def cmd_render(args: argparse.Namespace) -> int:
    """Handle 'render' subcommand."""
    print(f"Rendering Skew-T diagram from: {args.input}")

    try:
        config = load_config(args.config)
        if args.dpi:
            config.default_dpi = args.dpi
        if args.background_color:
            config.background_color = args.background_color

        profile = load_profile(args.input)
        output_path = create_diagram(
            profile,
            output_path=args.output,
            config=config,
            height_range=_height_range(args),
        )

        print(f"Success! Diagram saved to: {output_path}")
        return 0

    except SkewTChartsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_query(args: argparse.Namespace) -> int:
    """Handle 'query' subcommand."""
    try:
        profile = load_profile(args.input)
        readout = format_level_readout(query_profile(profile, args.height))
    except SkewTChartsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Height:    {readout['height']}")
    print(f"Pressure:  {readout['pressure']}")
    print(f"Temp:      {readout['temperature']}")
    print(f"Dewpoint:  {readout['dewpoint']}")
    print(f"Wind:      {readout['wind']}")
    print(f"Direction: {readout['wind_direction']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="skewt-charts",
        description="Render Skew-T Log-P diagrams from sounding profiles",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    def _add_common_args(p: argparse.ArgumentParser, suppress: bool = False) -> None:
        # Subcommand copies leave flags given before the subcommand untouched
        flag_default = argparse.SUPPRESS if suppress else False
        path_default = argparse.SUPPRESS if suppress else None
        p.add_argument(
            "-v", "--verbose",
            action="store_true",
            default=flag_default,
            help="Enable DEBUG logging"
        )
        p.add_argument(
            "-q", "--quiet",
            action="store_true",
            default=flag_default,
            help="Suppress INFO logging (WARNING+ only)"
        )
        p.add_argument(
            "--log-file",
            type=str,
            default=path_default,
            help="Also write logs to this file"
        )

    _add_common_args(parser)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ========================================================================
    # render subcommand
    # ========================================================================
    parser_render = subparsers.add_parser(
        "render",
        help="Render a Skew-T diagram to an image file"
    )
    _add_common_args(parser_render, suppress=True)
    parser_render.add_argument(
        "--input",
        type=str,
        required=True,
        help="Profile file (.json or .csv)"
    )
    parser_render.add_argument(
        "--output",
        type=str,
        required=True,
        help="Output image path (e.g. skewt.png)"
    )
    parser_render.add_argument(
        "--min-height",
        type=float,
        default=None,
        help="Lower bound of the height axis in meters"
    )
    parser_render.add_argument(
        "--max-height",
        type=float,
        default=None,
        help="Upper bound of the height axis in meters"
    )
    parser_render.add_argument(
        "--config",
        type=str,
        help="Config file path (YAML/JSON)"
    )
    parser_render.add_argument(
        "--dpi",
        type=int,
        help="Output resolution (overrides config)"
    )
    parser_render.add_argument(
        "--background-color",
        type=str,
        default=None,
        help="Figure background color (Matplotlib color spec, e.g. '#ffffff' or 'white')"
    )
    parser_render.set_defaults(func=cmd_render)

    # ========================================================================
    # query subcommand
    # ========================================================================
    parser_query = subparsers.add_parser(
        "query",
        help="Print interpolated sounding values at a height"
    )
    _add_common_args(parser_query, suppress=True)
    parser_query.add_argument(
        "--input",
        type=str,
        required=True,
        help="Profile file (.json or .csv)"
    )
    parser_query.add_argument(
        "--height",
        type=float,
        required=True,
        help="Height in meters"
    )
    parser_query.set_defaults(func=cmd_query)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    setup_logging_from_args(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
