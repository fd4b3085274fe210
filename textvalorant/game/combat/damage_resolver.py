"""
Damage resolution for shots.

This module rolls weapon damage, applies flat armor mitigation and lowers the
target's health. It is the only place in the game where health goes down.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from ...core.data import WeaponType, get_weapon_info

if TYPE_CHECKING:
    from ..entities.combatant import Combatant


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the match-wide random source.

    Every random draw in a match goes through one generator that is passed in
    explicitly. A seed makes the whole match reproducible.
    """
    return np.random.default_rng(seed)


def mitigate(raw_damage: int, armor: int) -> int:
    """Raw damage minus armor, floored at zero."""
    return max(0, raw_damage - armor)


@dataclass(frozen=True)
class AttackResult:
    """Result of a single resolved shot."""
    weapon: WeaponType
    raw_damage: int
    damage_dealt: int
    target_health: int

    @property
    def target_defeated(self) -> bool:
        return self.target_health == 0


class DamageResolver:
    """Rolls and applies weapon damage using an injected generator."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def roll_damage(self, weapon: WeaponType) -> int:
        """Draw a uniform integer from the weapon's inclusive damage range."""
        info = get_weapon_info(weapon)
        return int(self.rng.integers(info.min_damage, info.max_damage, endpoint=True))

    def resolve_attack(self, attacker: "Combatant", target: "Combatant") -> AttackResult:
        """
        Resolve one shot from attacker at target.

        Each call makes a fresh draw. The target's health is mutated in place.

        Args:
            attacker: The combatant firing; its equipped weapon sets the range
            target: The combatant being hit

        Returns:
            AttackResult with the raw roll and the mitigated damage dealt
        """
        raw_damage = self.roll_damage(attacker.weapon)
        damage_dealt = target.take_damage(raw_damage)
        return AttackResult(
            weapon=attacker.weapon,
            raw_damage=raw_damage,
            damage_dealt=damage_dealt,
            target_health=target.health,
        )

    def damage_range(self, attacker: "Combatant", target: "Combatant") -> tuple[int, int]:
        """Min and max mitigated damage attacker can deal to target, for forecasts."""
        low, high = get_weapon_info(attacker.weapon).damage_range
        return mitigate(low, target.armor), mitigate(high, target.armor)
