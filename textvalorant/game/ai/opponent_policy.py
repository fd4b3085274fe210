"""Opponent policy strategy classes.

This module implements the Strategy design pattern for the non-human side.
A policy turns the current situation into an ``ActionRequest``.

The shipped ``RandomPolicy`` is deliberately non-strategic: it ignores health,
credits and position and picks among the three actions uniformly. A
state-aware policy can be added as another ``OpponentPolicy`` subclass.
"""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from ...core.data import ActionType, Direction, WeaponType, purchasable_weapons
from ...core.engine import ActionRequest

if TYPE_CHECKING:
    from ..entities.combatant import Combatant


class PolicyType(Enum):
    """Available opponent policies."""
    RANDOM = auto()


class OpponentPolicy(ABC):
    """Abstract base class for opponent policies."""

    def __init__(self, rng: np.random.Generator, weapons: Optional[Sequence[WeaponType]] = None):
        self.rng = rng
        self.weapons = list(weapons) if weapons is not None else purchasable_weapons()

    @abstractmethod
    def choose_action(self) -> ActionType:
        """Choose which kind of action to take this turn."""

    @abstractmethod
    def decide(self, actor: "Combatant", target: "Combatant") -> ActionRequest:
        """Build a complete request for this turn.

        Args:
            actor: The opponent combatant
            target: The human combatant

        Returns:
            ActionRequest with any direction or weapon already chosen
        """

    @abstractmethod
    def get_policy_name(self) -> str:
        """Get the name of this policy."""


class RandomPolicy(OpponentPolicy):
    """Uniform random choice over actions, directions and weapons."""

    ACTION_TYPES = tuple(ActionType)
    DIRECTIONS = tuple(Direction)

    def choose_action(self) -> ActionType:
        return self.ACTION_TYPES[int(self.rng.integers(len(self.ACTION_TYPES)))]

    def choose_direction(self) -> Direction:
        return self.DIRECTIONS[int(self.rng.integers(len(self.DIRECTIONS)))]

    def choose_weapon(self) -> WeaponType:
        return self.weapons[int(self.rng.integers(len(self.weapons)))]

    def decide(self, actor: "Combatant", target: "Combatant") -> ActionRequest:
        action_type = self.choose_action()
        if action_type is ActionType.MOVE:
            return ActionRequest.move(self.choose_direction())
        if action_type is ActionType.PURCHASE:
            return ActionRequest.purchase(self.choose_weapon())
        return ActionRequest.shoot()

    def get_policy_name(self) -> str:
        return "Random"


def create_opponent_policy(
    policy_type: PolicyType,
    rng: np.random.Generator,
    weapons: Optional[Sequence[WeaponType]] = None,
) -> OpponentPolicy:
    """Factory function to create opponent policy instances.

    Args:
        policy_type: Which policy to build
        rng: Shared match generator
        weapons: Weapons the policy may purchase; defaults to the full catalog

    Raises:
        ValueError: If policy_type is not supported
    """
    if policy_type == PolicyType.RANDOM:
        return RandomPolicy(rng, weapons)
    raise ValueError(f"Unsupported policy type: {policy_type}")
