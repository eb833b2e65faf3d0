#!/usr/bin/env python3
"""
showcase CLI entry point.

Usage:
    showcase                    # List projects and experience entries
    showcase --projects         # List projects only
    showcase --experience       # List experience entries only
    showcase --json             # Print the content snapshot as JSON
    showcase --export out.json  # Write the content snapshot to a file
    showcase --init             # Initialize local config
    showcase --config           # Show configuration and settings
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from showcase.config import Settings, init_local_config, load_settings
from showcase.content import PortfolioCatalog


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="showcase",
        description="showcase - portfolio content discovery",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize local configuration in ./.showcase",
    )

    # What to show
    parser.add_argument(
        "--projects",
        action="store_true",
        help="List projects only",
    )

    parser.add_argument(
        "--experience",
        action="store_true",
        help="List experience entries only",
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show content counts",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the content snapshot as JSON",
    )

    parser.add_argument(
        "--export",
        type=str,
        metavar="PATH",
        help="Write the content snapshot as JSON to PATH (file or directory)",
    )

    # Options
    parser.add_argument(
        "-p",
        "--path",
        type=str,
        help="Public directory holding the content roots (default: ./public)",
    )

    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort entries and files by name",
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Plain text output without Rich formatting",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--config",
        action="store_true",
        help="Show configuration locations and exit",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    return parser.parse_args(argv)


def apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line arguments to settings."""
    if getattr(args, "verbose", False):
        settings.verbose = True

    path_arg = getattr(args, "path", None)
    if path_arg is not None:
        settings.public_dir = Path(path_arg).resolve()

    if getattr(args, "sort", False):
        settings.sort_entries = True

    return settings


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def show_version() -> None:
    """Show version information."""
    from showcase import __version__

    print(f"showcase version {__version__}")


def run_listing(args: argparse.Namespace, settings: Settings) -> int:
    """Scan the content roots and print or export the result."""
    from showcase.display import (
        display_experiences,
        display_projects,
        display_stats,
        get_console,
        set_theme,
    )

    set_theme(settings.color_theme)
    catalog = PortfolioCatalog.from_settings(settings)
    use_rich = not args.plain

    try:
        if args.export:
            path = catalog.export(Path(args.export))
            print(f"Exported content snapshot to {path}")
            return 0

        if args.json:
            print(json.dumps(catalog.snapshot(), indent=2, ensure_ascii=False))
            return 0

        show_all = not (args.projects or args.experience or args.stats)
        if args.projects or show_all:
            display_projects(
                catalog.list_projects(),
                use_rich=use_rich,
                empty_hint=_relative_hint(settings, settings.projects_root),
            )
        if args.experience or show_all:
            display_experiences(
                catalog.list_experiences(),
                use_rich=use_rich,
                empty_hint=_relative_hint(settings, settings.experience_root),
            )
        if args.stats:
            display_stats(catalog.get_stats(), use_rich=use_rich)
    except OSError as e:
        if use_rich:
            get_console().print(f"[error]Error reading content: {e}[/error]")
        else:
            print(f"Error reading content: {e}", file=sys.stderr)
        return 1

    return 0


def _relative_hint(settings: Settings, root: str) -> str:
    """Content root path as shown in the empty-section placeholder."""
    root_dir = settings.public_dir / root
    try:
        return str(root_dir.relative_to(settings.base_dir))
    except ValueError:
        return str(root_dir)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.version:
        show_version()
        return 0

    settings = load_settings()
    settings = apply_args_to_settings(args, settings)
    configure_logging(settings.verbose)

    if args.init:
        return 0 if init_local_config() else 1

    if args.config:
        from showcase.display import display_config, set_theme

        set_theme(settings.color_theme)
        display_config(settings, use_rich=not args.plain)
        return 0

    return run_listing(args, settings)


if __name__ == "__main__":
    sys.exit(main())
