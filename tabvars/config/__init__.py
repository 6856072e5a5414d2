"""
Configuration management for tabvars
"""

import yaml
from pathlib import Path
from typing import Dict, List, Any, Optional

from ..exceptions import ConfigError


CONFIG_FILE_NAME = "defaults.yaml"

DEFAULT_CONFIG_DIR = Path(__file__).parent


class ConfigLoader:
    """Loads and manages tabvars configuration"""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration loader

        Args:
            config_dir: Directory containing defaults.yaml (package directory if None)
        """
        self.config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR

        config_file = self.config_dir / CONFIG_FILE_NAME
        if not config_file.exists():
            raise ConfigError(f"Configuration not found: {config_file}")

        try:
            with open(config_file, 'r', encoding="utf-8") as f:
                self.config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e

        if not isinstance(self.config, dict):
            raise ConfigError(f"Configuration in {config_file} must be a mapping")

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.config.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Configuration section '{name}' must be a mapping")
        return section

    def get_important_variables(self) -> List[str]:
        """Get the list of variables displayed in script mode"""
        names = self.config.get("important_variables") or []
        if not isinstance(names, list):
            raise ConfigError("'important_variables' must be a list")
        return [str(name) for name in names]

    def get_cache_file_name(self) -> str:
        """Get the cache file name looked for in candidate directories"""
        return str(self._section("cache").get("file_name", "CMakeCache.txt"))

    def get_candidate_subdirs(self) -> List[str]:
        """Get candidate directories, relative to the project root, in search order"""
        subdirs = self._section("cache").get("candidate_subdirs", ["build", "."])
        if not isinstance(subdirs, list):
            raise ConfigError("'cache.candidate_subdirs' must be a list")
        return [str(subdir) for subdir in subdirs]

    def get_min_width(self) -> int:
        """Get the minimum width of the name column"""
        return self._get_int("min_width", 30)

    def get_indent(self) -> int:
        """Get the number of spaces in front of every row"""
        return self._get_int("indent", 0)

    def _get_int(self, key: str, default: int) -> int:
        value = self._section("table").get(key, default)
        try:
            value = int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"'table.{key}' must be an integer, got {value!r}") from e
        if value < 0:
            raise ConfigError(f"'table.{key}' must not be negative")
        return value

    def get_option(self, key: str, default: Any = None) -> Any:
        """
        Get a top-level option

        Args:
            key: Option key
            default: Default value if not found

        Returns:
            Option value
        """
        return self.config.get(key, default)
