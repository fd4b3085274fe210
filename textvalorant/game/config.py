"""
Configuration loader for match settings.

This module handles loading and validating the YAML configuration file. A
missing file yields the built-in defaults; anything present is validated.
"""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..core.data import GameMode
from ..core.errors import ConfigError
from .ai import PolicyType

DEFAULT_CONFIG_PATH = "assets/config/game.yaml"


@dataclass
class GameConfig:
    """Tunable match settings."""
    starting_health: int = 100
    starting_armor: int = 0
    unrated_credits: int = 200
    default_credits: int = 0
    opponent_credits: int = 200
    opponent_name: str = "Opponent"
    agents_file: str = "assets/data/agents.txt"
    weapons_file: str = "assets/data/weapons.txt"
    opponent_policy: str = "RANDOM"
    seed: Optional[int] = None
    debug: bool = False
    max_log_messages: int = 1000

    def starting_credits(self, mode: GameMode) -> int:
        """Human starting credits for a mode; only Unrated grants credits."""
        if mode == GameMode.UNRATED:
            return self.unrated_credits
        return self.default_credits

    def validate(self) -> None:
        """Check types and ranges.

        Raises:
            ConfigError: If any value is out of range or of the wrong type
        """
        int_fields = (
            "starting_health", "starting_armor", "unrated_credits",
            "default_credits", "opponent_credits", "max_log_messages",
        )
        for name in int_fields:
            value = getattr(self, name)
            # bool is an int subclass, reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigError(f"{name} must be non-negative, got {value}")
        if self.starting_health == 0:
            raise ConfigError("starting_health must be positive")
        if self.max_log_messages == 0:
            raise ConfigError("max_log_messages must be positive")

        for name in ("opponent_name", "agents_file", "weapons_file", "opponent_policy"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{name} must be a non-empty string")
        if self.opponent_policy.strip().upper() not in PolicyType.__members__:
            choices = ", ".join(PolicyType.__members__)
            raise ConfigError(f"opponent_policy must be one of {choices}, got {self.opponent_policy!r}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer or null, got {self.seed!r}")
        if not isinstance(self.debug, bool):
            raise ConfigError(f"debug must be true or false, got {self.debug!r}")

    def resolve_path(self, path: str, base_dir: Optional[Path] = None) -> Path:
        """Resolve a data path relative to the packaged assets root unless absolute."""
        if os.path.isabs(path):
            return Path(path)
        return (base_dir or package_root()) / path


def package_root() -> Path:
    """Directory that holds the bundled assets folder."""
    return Path(__file__).parent.parent


def load_config(config_path: Optional[Union[str, Path]] = None) -> GameConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file; relative paths resolve against the
            package directory. None loads DEFAULT_CONFIG_PATH.

    Returns:
        GameConfig with file values over defaults

    Raises:
        ConfigError: If the file is unreadable, malformed or has unknown keys
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH)
    if not path.is_absolute():
        path = package_root() / path

    if not path.exists():
        return GameConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    return config_from_dict(data, source=str(path))


def config_from_dict(data: Any, source: str = "<dict>") -> GameConfig:
    """Build and validate a GameConfig from parsed YAML data."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config root in {source} must be a mapping")

    section = data.get('game', data)
    if not isinstance(section, dict):
        raise ConfigError(f"'game' section in {source} must be a mapping")

    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {source}: {', '.join(unknown)}")

    config = GameConfig(**section)
    config.validate()
    return config
