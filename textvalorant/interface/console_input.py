"""
Console input channel for the human side.

Menus are printed as 1-based numbered lists and read one line at a time. Any
out-of-range or non-numeric answer becomes ``None``; the match treats that as a
consumed no-op turn rather than asking again.
"""
from typing import Callable, Optional, Sequence

import numpy as np

from ..core.data import (
    ActionType,
    Direction,
    GameMode,
    WeaponType,
    ACTION_TYPE_NAMES,
    DIRECTION_NAMES,
    GAME_MODE_NAMES,
    get_weapon_info,
    purchasable_weapons,
)
from ..core.engine import ActionRequest
from ..game.entities import Combatant
from ..game.roster import Roster


def parse_selection(raw: str, option_count: int) -> Optional[int]:
    """Turn a 1-based menu answer into a 0-based index, or None if unusable."""
    try:
        choice = int(raw.strip())
    except ValueError:
        return None
    if 1 <= choice <= option_count:
        return choice - 1
    return None


class ConsoleInput:
    """Reads menu selections for the human player."""

    def __init__(
        self,
        read_line: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        weapons: Optional[Sequence[WeaponType]] = None,
    ):
        self.read_line = read_line or input
        self.write = write or print
        self.weapons = list(weapons) if weapons is not None else purchasable_weapons()
        self.last_raw = ""

    def select(self, title: str, options: Sequence[str]) -> Optional[int]:
        """Show a numbered menu and return the chosen 0-based index or None."""
        self.write(title)
        for idx, option in enumerate(options, start=1):
            self.write(f"{idx}. {option}")
        self.last_raw = self.read_line("> ")
        return parse_selection(self.last_raw, len(options))

    def prompt_name(self) -> str:
        name = self.read_line("Enter your name: ").strip()
        return name or "Player"

    def choose_mode(self) -> Optional[GameMode]:
        modes = list(GameMode)
        index = self.select("Choose a mode:", [GAME_MODE_NAMES[mode] for mode in modes])
        return modes[index] if index is not None else None

    def choose_agent(self, roster: Roster, rng: np.random.Generator) -> str:
        """Pick an agent; an invalid answer falls back to a random agent."""
        index = self.select("Choose an agent:", roster.agents)
        if index is None:
            agent = roster.random_agent(rng)
            self.write(f"Invalid choice! {agent} was assigned at random.")
            return agent
        return roster.agent_at(index)

    def choose_action(self) -> Optional[ActionType]:
        actions = list(ActionType)
        index = self.select("\nChoose an action:", [ACTION_TYPE_NAMES[a] for a in actions])
        return actions[index] if index is not None else None

    def choose_direction(self) -> Optional[Direction]:
        directions = list(Direction)
        index = self.select("Choose a direction:", [DIRECTION_NAMES[d] for d in directions])
        return directions[index] if index is not None else None

    def choose_weapon(self) -> Optional[WeaponType]:
        labels = []
        for weapon in self.weapons:
            info = get_weapon_info(weapon)
            labels.append(f"{info.name} ({info.min_damage}-{info.max_damage} dmg, {info.cost} credits)")
        index = self.select("Available weapons:", labels)
        return self.weapons[index] if index is not None else None

    def decide(self, actor: Combatant, target: Combatant) -> ActionRequest:
        """Collect a full request for the human's turn."""
        action_type = self.choose_action()
        if action_type is None:
            return ActionRequest.invalid(self.last_raw)
        if action_type is ActionType.MOVE:
            direction = self.choose_direction()
            return ActionRequest(action_type, direction=direction, raw_input=self.last_raw)
        if action_type is ActionType.PURCHASE:
            weapon = self.choose_weapon()
            return ActionRequest(action_type, weapon=weapon, raw_input=self.last_raw)
        return ActionRequest.shoot()
