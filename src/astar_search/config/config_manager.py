"""Configuration manager using Hydra for hierarchical configuration."""

import logging
from typing import Any, Dict, List, Optional, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf, open_dict
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from astar_search.search.astar import SearchConfig

from .validators import validate_config

logger = logging.getLogger(__name__)

# Global configuration instance
_global_config: Optional[DictConfig] = None


def default_config_dir() -> Path:
    """The ``conf`` directory shipped inside the package."""
    return Path(__file__).parent.parent / "conf"


class ConfigManager:
    """Loads, validates and edits the engine configuration through Hydra."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory. If None, uses default.
        """
        if config_dir is None:
            config_dir = default_config_dir()

        self.config_dir = Path(config_dir).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        logger.debug(f"Configuration manager initialized with config_dir: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose the configuration and apply command-line style overrides.

        Args:
            config_name: Name of the main config file (without .yaml)
            overrides: Overrides such as ``search.use_heuristic=false``
            validate: Whether to validate the configuration

        Returns:
            Loaded configuration
        """
        GlobalHydra.instance().clear()

        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=overrides or [])
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

        if validate:
            validate_config(cfg)

        self.config = cfg

        global _global_config
        _global_config = cfg

        logger.info(f"Configuration loaded: {config_name}")
        if overrides:
            logger.info(f"Applied overrides: {overrides}")

        return cfg

    def get_config(self) -> Optional[DictConfig]:
        return self.config

    def _require_config(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config

    def update_config(self, updates: Dict[str, Any]) -> None:
        """Apply several dotted-key updates at once."""
        config = self._require_config()
        with open_dict(config):
            for key, value in updates.items():
                OmegaConf.update(config, key, value)

        logger.info(f"Configuration updated with: {updates}")

    def save_config(self, output_path: Union[str, Path]) -> None:
        """Write the current configuration as YAML."""
        config = self._require_config()

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(config, output_path)

        logger.info(f"Configuration saved to: {output_path}")

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Get a parameter by dotted key, e.g. ``search.use_heuristic``."""
        return OmegaConf.select(self._require_config(), key, default=default)

    def set_parameter(self, key: str, value: Any) -> None:
        config = self._require_config()
        with open_dict(config):
            OmegaConf.update(config, key, value)

        logger.debug(f"Parameter set: {key} = {value}")


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load configuration and make it the global configuration.

    Args:
        config_name: Name of the main config file
        overrides: List of configuration overrides
        config_dir: Path to configuration directory
        validate: Whether to validate the configuration

    Returns:
        Loaded configuration
    """
    manager = ConfigManager(config_dir)
    return manager.load_config(config_name, overrides, validate)


def get_config() -> Optional[DictConfig]:
    """Get the global configuration, or None if nothing was loaded yet."""
    return _global_config


def get_parameter(key: str, default: Any = None) -> Any:
    """Get a parameter from the global configuration."""
    config = get_config()
    if config is None:
        logger.warning("No global configuration loaded")
        return default
    return OmegaConf.select(config, key, default=default)


def search_config_from(config: Optional[DictConfig]) -> SearchConfig:
    """Build a SearchConfig from the ``search`` section of a configuration.

    Keys missing from the configuration keep their SearchConfig defaults.
    """
    defaults = SearchConfig()
    if config is None:
        return defaults

    search_cfg = config.get('search') or {}
    return SearchConfig(
        use_heuristic=bool(search_cfg.get('use_heuristic', defaults.use_heuristic)),
        deterministic_ties=bool(search_cfg.get('deterministic_ties', defaults.deterministic_ties)),
        log_interval=int(search_cfg.get('log_interval', defaults.log_interval))
    )
