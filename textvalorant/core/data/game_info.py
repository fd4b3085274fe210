"""Static lookup tables for weapons.

The weapon catalog is fixed at build time. Every ``WeaponType`` member has an
entry, so damage and cost lookups never fall through to a default.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .game_enums import WeaponType, WEAPON_NAMES


@dataclass(frozen=True)
class WeaponInfo:
    """Static information about a weapon."""
    name: str
    min_damage: int
    max_damage: int
    cost: int

    @property
    def damage_range(self) -> tuple[int, int]:
        """Inclusive (min, max) damage bounds."""
        return (self.min_damage, self.max_damage)

    def get_display_properties(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "damage": f"{self.min_damage}-{self.max_damage}",
            "cost": self.cost,
        }


STARTING_WEAPON = WeaponType.PISTOL

# Centralized data for all weapons, in menu order
WEAPON_DATA: Dict[WeaponType, WeaponInfo] = {
    WeaponType.PISTOL: WeaponInfo(
        name=WEAPON_NAMES[WeaponType.PISTOL],
        min_damage=10,
        max_damage=20,
        cost=50,
    ),
    WeaponType.RIFLE: WeaponInfo(
        name=WEAPON_NAMES[WeaponType.RIFLE],
        min_damage=20,
        max_damage=30,
        cost=100,
    ),
    WeaponType.SHOTGUN: WeaponInfo(
        name=WEAPON_NAMES[WeaponType.SHOTGUN],
        min_damage=5,
        max_damage=15,
        cost=50,
    ),
}


def get_weapon_info(weapon: WeaponType) -> WeaponInfo:
    """Get the catalog entry for a weapon."""
    return WEAPON_DATA[weapon]


def purchasable_weapons() -> list[WeaponType]:
    """Weapons in the order the shop menu lists them."""
    return list(WEAPON_DATA)
