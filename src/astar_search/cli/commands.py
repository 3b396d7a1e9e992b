"""CLI command implementations."""

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from astar_search.config import (
    load_config, validate_config, search_config_from, ConfigValidationError
)
from astar_search.grid import GridSpace
from astar_search.integration.io import load_grid_file
from astar_search.search.astar import AStarSearcher, SearchResult

from .utils import save_results, format_duration

logger = logging.getLogger(__name__)


def build_overrides(args) -> List[str]:
    """Translate solve options into Hydra overrides.

    Explicit ``--config`` overrides come last so they win.
    """
    overrides = []
    if getattr(args, 'connectivity', None) is not None:
        overrides.append(f"grid.connectivity={args.connectivity}")
    if getattr(args, 'no_heuristic', False):
        overrides.append("search.use_heuristic=false")
    if getattr(args, 'random_ties', False):
        overrides.append("search.deterministic_ties=false")
    if getattr(args, 'no_color', False):
        overrides.append("render.color=false")
    overrides.extend(getattr(args, 'config', None) or [])
    return overrides


def _apply_config_log_level(args, config) -> None:
    # Verbosity flags take precedence over the configured level
    if getattr(args, 'verbose', 0) or getattr(args, 'quiet', False):
        return
    level = OmegaConf.select(config, 'logging.level', default=None)
    if level:
        logging.getLogger().setLevel(str(level).upper())


def result_to_dict(result: Optional[SearchResult], map_file: str) -> Dict[str, Any]:
    """JSON-ready summary of a search outcome."""
    if result is None:
        return {'success': False, 'map_file': map_file, 'error': 'no path found'}
    return {
        'success': True,
        'map_file': map_file,
        'path': [list(coord) for coord in result.path],
        'cost': result.cost,
        'expansion_count': result.expansion_count,
        'statistics': result.statistics.to_dict() if result.statistics else {}
    }


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        config = load_config(overrides=build_overrides(args),
                             config_dir=getattr(args, 'config_dir', None))
        _apply_config_log_level(args, config)

        logger.info(f"Loading map from {args.map_file}")
        grid = load_grid_file(args.map_file)
        space = GridSpace(grid, connectivity=int(config.grid.connectivity))
        searcher = AStarSearcher(search_config_from(config))

        print(f"from: {grid.start} -> to: {grid.goal}")

        start_time = time.perf_counter()
        result = searcher.search(space)
        total_time = time.perf_counter() - start_time

        if getattr(args, 'output', None):
            save_results(result_to_dict(result, str(args.map_file)), args.output)
            logger.info(f"Results saved to {args.output}")

        if result is None:
            print("couldn't find goal")
            return 1

        painted = grid.with_path(result.path)
        print(painted.to_color_string() if config.render.color else painted.to_string())

        if not getattr(args, 'quiet', False):
            print(f"\nMap: {Path(args.map_file).name}")
            print(f"cost: {result.cost}")
            print(f"path length: {result.length}")
            print(f"expanded: {result.expansion_count}")
            print(f"Total time: {format_duration(total_time)}")

        return 0

    except Exception as e:
        logger.error(f"Solve command failed: {e}")
        return 1


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    config_dir = getattr(args, 'config_dir', None)
    overrides = getattr(args, 'config', None) or []
    try:
        if args.config_action == 'show':
            config = load_config(overrides=overrides, config_dir=config_dir)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = load_config(overrides=overrides, config_dir=config_dir, validate=False)
                validate_config(config)
                print("✅ Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"❌ Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
