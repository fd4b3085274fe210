"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: Vector2 positions
- game_enums.py: Centralized enums for sides, modes, actions and weapons
- game_info.py: Static weapon catalog
"""

from .data_structures import Vector2, ORIGIN
from .game_enums import (
    Side,
    GameMode,
    ActionType,
    WeaponType,
    Direction,
    MatchState,
    PurchaseRejection,
    GAME_MODE_NAMES,
    ACTION_TYPE_NAMES,
    WEAPON_NAMES,
    DIRECTION_NAMES,
)
from .game_info import WeaponInfo, WEAPON_DATA, STARTING_WEAPON, get_weapon_info, purchasable_weapons

__all__ = [
    "Vector2",
    "ORIGIN",
    "Side",
    "GameMode",
    "ActionType",
    "WeaponType",
    "Direction",
    "MatchState",
    "PurchaseRejection",
    "GAME_MODE_NAMES",
    "ACTION_TYPE_NAMES",
    "WEAPON_NAMES",
    "DIRECTION_NAMES",
    "WeaponInfo",
    "WEAPON_DATA",
    "STARTING_WEAPON",
    "get_weapon_info",
    "purchasable_weapons",
]
