"""
Level Loader - YAML level loading with Pydantic validation.

Levels live as ``<level_id>.yaml`` files in the levels directory and are
validated against ``LevelConfig``.

Examples:
    >>> loader = LevelLoader()
    >>> level = loader.load_level("classic")
    >>> level.name
    'Classic'
    >>> loader.list_available_levels()
    ['classic']
"""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import ValidationError

from crossing.logging import get_logger
from games.BugCrossing import config
from models import LevelConfig

log = get_logger('level_loader')


class LevelLoader:
    """Loads and validates level configurations from YAML files.

    Attributes:
        levels_dir: Path to the directory containing level YAML files
    """

    def __init__(self, levels_dir: Optional[Path] = None):
        """Initialize the level loader.

        Args:
            levels_dir: Optional custom path to the levels directory.
                        Defaults to the levels shipped with the game.
        """
        self.levels_dir = Path(levels_dir) if levels_dir is not None else config.LEVELS_DIR

    def load_level(self, level_id: str) -> LevelConfig:
        """Load and validate a level by id.

        Args:
            level_id: The ID of the level to load (without .yaml extension)

        Returns:
            Validated LevelConfig instance

        Raises:
            FileNotFoundError: If the level YAML file doesn't exist
            ValueError: If the YAML content is invalid
            yaml.YAMLError: If the YAML syntax is malformed
        """
        yaml_path = self.levels_dir / f"{level_id}.yaml"

        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Level '{level_id}' not found. "
                f"Expected file: {yaml_path}"
            )

        return self.load_file(yaml_path)

    def load_file(self, path: Union[str, Path]) -> LevelConfig:
        """Load and validate a level from an explicit YAML path.

        An empty file yields the default level.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML content is invalid
            yaml.YAMLError: If the YAML syntax is malformed
        """
        yaml_path = Path(path)

        if not yaml_path.is_file():
            raise FileNotFoundError(f"Level file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Failed to parse YAML file '{yaml_path}': {e}"
            ) from e

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ValueError(
                f"Invalid level configuration in '{yaml_path}': expected a mapping"
            )

        try:
            level = LevelConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(
                f"Invalid level configuration in '{yaml_path}':\n{e}"
            ) from e

        log.info("Loaded level '%s' from %s", level.name, yaml_path)
        return level

    def list_available_levels(self) -> List[str]:
        """List all available level IDs, sorted alphabetically."""
        if not self.levels_dir.is_dir():
            return []
        return sorted(path.stem for path in self.levels_dir.glob("*.yaml"))

    def level_exists(self, level_id: str) -> bool:
        """Check if a level with the given ID exists."""
        return (self.levels_dir / f"{level_id}.yaml").is_file()
