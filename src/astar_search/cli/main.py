"""Main CLI entry point for astar-search."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='astar-search',
        description='A* path finding over text tile maps',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  astar-search solve maps/demo.txt                  # Find a path on a map
  astar-search solve map.txt --connectivity 8       # Allow diagonal moves
  astar-search -c search.use_heuristic=false solve map.txt
  astar-search config show                          # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        action='append',
        help='Configuration override, may be repeated (e.g., grid.connectivity=8)'
    )

    parser.add_argument(
        '--config-dir',
        type=str,
        help='Directory holding config.yaml (default: the packaged conf/)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Find a minimum-cost path on a map',
        description='Find a minimum-cost path from s to g on a text tile map'
    )

    solve_parser.add_argument(
        'map_file',
        type=str,
        help='Path to the map file'
    )

    solve_parser.add_argument(
        '--connectivity',
        type=int,
        choices=[4, 8],
        help='Neighbourhood size (default: from configuration)'
    )

    solve_parser.add_argument(
        '--no-heuristic',
        action='store_true',
        help='Ignore the heuristic (uniform-cost search)'
    )

    solve_parser.add_argument(
        '--random-ties',
        action='store_true',
        help='Do not break equal-cost ties by insertion order'
    )

    solve_parser.add_argument(
        '--no-color',
        action='store_true',
        help='Render the map without ANSI colours'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect the engine configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
