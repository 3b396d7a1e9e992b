"""Configuration validation for the A* engine."""

import logging
from typing import Any
from omegaconf import DictConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def _require_bool(section: str, key: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ConfigValidationError(f"{section}.{key} must be a boolean, got {value!r}")


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_grid_config(config.get('grid', {}))
        validate_render_config(config.get('render', {}))
        validate_logging_config(config.get('logging', {}))

        logger.debug("Configuration validation passed")

    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    for key in ('use_heuristic', 'deterministic_ties'):
        if key in search_config:
            _require_bool('search', key, search_config[key])

    interval = search_config.get('log_interval', 1000)
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 0:
        raise ConfigValidationError(
            f"search.log_interval must be a non-negative integer, got {interval!r}"
        )


def validate_grid_config(grid_config: DictConfig) -> None:
    """Validate grid configuration section.

    Args:
        grid_config: Grid configuration section
    """
    if not grid_config:
        return

    connectivity = grid_config.get('connectivity', 4)
    if connectivity not in [4, 8]:
        raise ConfigValidationError(
            f"grid.connectivity must be 4 or 8, got {connectivity}"
        )


def validate_render_config(render_config: DictConfig) -> None:
    if not render_config:
        return

    if 'color' in render_config:
        _require_bool('render', 'color', render_config['color'])


def validate_logging_config(logging_config: DictConfig) -> None:
    if not logging_config:
        return

    level = logging_config.get('level', 'WARNING')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
