"""Agent and weapon name sources.

Names are read once at startup from plain text files (one name per line) or
from YAML lists. An empty or missing source is fatal: without agents there is
no opponent to build.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

import numpy as np
import yaml

from ..core.data import WeaponType
from ..core.errors import RosterError


def load_names(path: Union[str, Path]) -> list[str]:
    """Load an ordered list of names.

    Args:
        path: Text file with one name per line, or a .yaml/.yml file holding a
            list of strings

    Returns:
        Names in file order with surrounding whitespace stripped

    Raises:
        RosterError: If the file is missing, unreadable or yields no names
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise RosterError(f"Name source not found: {path}") from None
    except OSError as e:
        raise RosterError(f"Cannot read name source {path}: {e}") from e

    if path.suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise RosterError(f"Invalid YAML in {path}: {e}") from e
        if data is None:
            data = []
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise RosterError(f"{path} must contain a list of names")
        names = [item.strip() for item in data if item.strip()]
    else:
        names = [line.strip() for line in content.splitlines() if line.strip()]

    if not names:
        raise RosterError(f"Name source is empty: {path}")
    return names


def _check_unique(names: Sequence[str], kind: str) -> None:
    if not names:
        raise RosterError(f"No {kind} available")
    seen = set()
    for name in names:
        if name in seen:
            raise RosterError(f"Duplicate {kind} name: {name!r}")
        seen.add(name)


@dataclass(frozen=True)
class Roster:
    """Validated agent and weapon names for one session."""
    agents: tuple[str, ...]
    weapons: tuple[str, ...]

    def __post_init__(self):
        _check_unique(self.agents, "agent")
        _check_unique(self.weapons, "weapon")
        for name in self.weapons:
            try:
                WeaponType.from_name(name)
            except ValueError:
                raise RosterError(f"Weapon {name!r} is not in the catalog") from None

    @classmethod
    def from_names(cls, agents: Sequence[str], weapons: Sequence[str]) -> "Roster":
        return cls(agents=tuple(agents), weapons=tuple(weapons))

    @classmethod
    def from_files(cls, agents_path: Union[str, Path], weapons_path: Union[str, Path]) -> "Roster":
        return cls.from_names(load_names(agents_path), load_names(weapons_path))

    def agent_at(self, index: int) -> str:
        """Agent by 0-based index; raises IndexError when out of range."""
        if not 0 <= index < len(self.agents):
            raise IndexError(f"Agent index {index} out of range")
        return self.agents[index]

    def random_agent(self, rng: np.random.Generator) -> str:
        """Uniformly random agent from the roster."""
        return self.agents[int(rng.integers(len(self.agents)))]

    def weapon_types(self) -> list[WeaponType]:
        return [WeaponType.from_name(name) for name in self.weapons]
