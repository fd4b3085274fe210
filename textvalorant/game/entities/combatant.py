"""
Combatant entity holding one side's mutable combat state.

Two combatants are built at match start and mutated in place until the match
loop exits. Health, armor and credits use saturating arithmetic on every
decrement, so none of them can go negative.
"""
from dataclasses import dataclass, field

from ...core.data import Vector2, ORIGIN, Side, WeaponType, STARTING_WEAPON, get_weapon_info

STARTING_HEALTH = 100
STARTING_ARMOR = 0


@dataclass(eq=False)
class Combatant:
    """One side of a duel."""
    name: str
    agent: str
    side: Side
    credits: int = 0
    health: int = STARTING_HEALTH
    armor: int = STARTING_ARMOR
    position: Vector2 = field(default_factory=lambda: ORIGIN)
    weapon: WeaponType = STARTING_WEAPON

    def __post_init__(self):
        if self.credits < 0:
            raise ValueError(f"credits must be non-negative, got {self.credits}")
        if self.health < 0:
            raise ValueError(f"health must be non-negative, got {self.health}")
        if self.armor < 0:
            raise ValueError(f"armor must be non-negative, got {self.armor}")
        if not isinstance(self.weapon, WeaponType):
            raise TypeError(f"weapon must be a WeaponType, got {self.weapon!r}")

    def __setattr__(self, key, value):
        # name is fixed once the dataclass __init__ has set it
        if key == "name" and "name" in self.__dict__:
            raise AttributeError("Combatant name cannot be changed")
        super().__setattr__(key, value)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def is_defeated(self) -> bool:
        return self.health == 0

    @property
    def weapon_name(self) -> str:
        return get_weapon_info(self.weapon).name

    def take_damage(self, damage: int) -> int:
        """Apply raw damage after flat armor mitigation.

        Args:
            damage: Raw rolled damage

        Returns:
            Mitigated damage, never negative and never above the raw value
        """
        mitigated = max(0, damage - self.armor)
        self.health = max(0, self.health - mitigated)
        return mitigated

    def move_by(self, dx: int, dy: int) -> Vector2:
        """Shift position by (dx, dy) and return the previous position."""
        previous = self.position
        self.position = previous + Vector2(dx, dy)
        return previous

    def can_afford(self, cost: int) -> bool:
        return self.credits >= cost

    def spend(self, cost: int) -> None:
        """Deduct credits, saturating at zero."""
        self.credits = max(0, self.credits - cost)

    def equip(self, weapon: WeaponType) -> None:
        if not isinstance(weapon, WeaponType):
            raise TypeError(f"weapon must be a WeaponType, got {weapon!r}")
        self.weapon = weapon

    def __str__(self) -> str:
        return f"{self.name} ({self.agent})"
