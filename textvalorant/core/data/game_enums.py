"""Centralized game enums and constants.

This module contains all core game enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class Side(Enum):
    """The two sides of a duel."""
    HUMAN = 0
    OPPONENT = 1


class GameMode(Enum):
    """Match modes offered at startup."""
    UNRATED = auto()
    COMPETITIVE = auto()
    TEAM_DEATH_MATCH = auto()


class ActionType(Enum):
    """The three things a combatant can do on its turn."""
    MOVE = auto()
    SHOOT = auto()
    PURCHASE = auto()


class WeaponType(Enum):
    """Weapons available in the catalog."""
    PISTOL = auto()
    RIFLE = auto()
    SHOTGUN = auto()

    @classmethod
    def from_name(cls, name: str) -> "WeaponType":
        """Resolve a display name such as "Rifle" to its weapon type.

        Raises:
            ValueError: If the name does not match any weapon
        """
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown weapon: {name!r}") from None


class Direction(Enum):
    """Unit movement directions as (dx, dy) offsets."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MatchState(Enum):
    """States of the match loop."""
    IN_PROGRESS = auto()
    HUMAN_WINS = auto()
    OPPONENT_WINS = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not MatchState.IN_PROGRESS


class PurchaseRejection(Enum):
    """Reasons a purchase leaves state untouched."""
    INSUFFICIENT_FUNDS = auto()
    INVALID_SELECTION = auto()


# Convenience mappings for display
GAME_MODE_NAMES = {
    GameMode.UNRATED: "Unrated",
    GameMode.COMPETITIVE: "Competitive",
    GameMode.TEAM_DEATH_MATCH: "Team Death Match",
}

ACTION_TYPE_NAMES = {
    ActionType.MOVE: "Move",
    ActionType.SHOOT: "Shoot",
    ActionType.PURCHASE: "Purchase Weapon",
}

WEAPON_NAMES = {
    WeaponType.PISTOL: "Pistol",
    WeaponType.RIFLE: "Rifle",
    WeaponType.SHOTGUN: "Shotgun",
}

DIRECTION_NAMES = {
    Direction.UP: "Up",
    Direction.DOWN: "Down",
    Direction.LEFT: "Left",
    Direction.RIGHT: "Right",
}
