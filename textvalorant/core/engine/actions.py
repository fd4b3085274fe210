"""Action system for turn-based duels.

This module defines the three actions a combatant can take on its turn and the
dispatcher that maps a chosen ``ActionType`` to its implementation. Human and
opponent turns go through the same dispatcher, so an action behaves the same
whoever initiated it.

Actions never print. They mutate the combatants and report through the event
emitter carried by the ``ActionContext``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Optional

from ..data import (
    ActionType,
    Direction,
    WeaponType,
    PurchaseRejection,
    ACTION_TYPE_NAMES,
    get_weapon_info,
)
from ..events.events import (
    GameEvent,
    CombatantMoved,
    ShotFired,
    WeaponPurchased,
    PurchaseRejected,
    InvalidSelection,
    LogMessage,
)

if TYPE_CHECKING:
    from ...game.entities.combatant import Combatant
    from ...game.combat.damage_resolver import DamageResolver


class ActionResult(Enum):
    """Results of action execution."""

    SUCCESS = auto()  # Action completed and changed state
    FAILED = auto()  # Action was legal but could not happen (insufficient funds)
    INVALID = auto()  # Selection was unusable; turn consumed as a no-op


@dataclass(frozen=True)
class ActionRequest:
    """A resolved choice for one turn.

    ``action_type`` is None when the menu selection itself was invalid. Move
    needs a ``direction`` and Purchase needs a ``weapon``; a missing detail marks
    the request invalid for that action.
    """

    action_type: Optional[ActionType]
    direction: Optional[Direction] = None
    weapon: Optional[WeaponType] = None
    raw_input: str = ""

    @classmethod
    def invalid(cls, raw_input: str = "") -> "ActionRequest":
        return cls(action_type=None, raw_input=raw_input)

    @classmethod
    def move(cls, direction: Optional[Direction]) -> "ActionRequest":
        return cls(action_type=ActionType.MOVE, direction=direction)

    @classmethod
    def shoot(cls) -> "ActionRequest":
        return cls(action_type=ActionType.SHOOT)

    @classmethod
    def purchase(cls, weapon: Optional[WeaponType]) -> "ActionRequest":
        return cls(action_type=ActionType.PURCHASE, weapon=weapon)


@dataclass
class ActionContext:
    """Collaborators an action needs while executing."""

    resolver: "DamageResolver"
    emit: Callable[[GameEvent], None]
    turn: int = 0

    def log(self, message: str, category: str = "BATTLE", level: str = "INFO", source: str = "Action") -> None:
        self.emit(LogMessage(turn=self.turn, message=message, category=category, level=level, source=source))


class Action(ABC):
    """Base class for all turn actions."""

    action_type: ActionType

    @property
    def name(self) -> str:
        return ACTION_TYPE_NAMES[self.action_type]

    @abstractmethod
    def execute(
        self,
        actor: "Combatant",
        target: "Combatant",
        request: ActionRequest,
        context: ActionContext,
    ) -> ActionResult:
        """Execute the action.

        Args:
            actor: Combatant taking the turn
            target: The other combatant
            request: The resolved choice, including any direction or weapon
            context: Resolver, event emitter and turn number

        Returns:
            Result of the action execution
        """

    def _reject_selection(self, actor: "Combatant", request: ActionRequest,
                          context: ActionContext, menu: str) -> ActionResult:
        context.emit(InvalidSelection(
            turn=context.turn,
            actor=actor,
            menu=menu,
            raw_input=request.raw_input,
            action=self.action_type,
        ))
        context.log(f"{actor.name} made an invalid {menu} choice", "INPUT", "WARNING", self.name)
        return ActionResult.INVALID


class MoveAction(Action):
    """Shift the actor's position by one unit step."""

    action_type = ActionType.MOVE

    def execute(self, actor, target, request, context):
        if request.direction is None:
            return self._reject_selection(actor, request, context, "direction")

        previous = actor.move_by(request.direction.dx, request.direction.dy)
        context.emit(CombatantMoved(
            turn=context.turn,
            actor=actor,
            from_position=previous,
            to_position=actor.position,
        ))
        context.log(f"{actor.name} moved {previous} -> {actor.position}", "MOVEMENT", source=self.name)
        return ActionResult.SUCCESS


class ShootAction(Action):
    """Fire the equipped weapon at the other combatant."""

    action_type = ActionType.SHOOT

    def execute(self, actor, target, request, context):
        result = context.resolver.resolve_attack(actor, target)
        context.emit(ShotFired(
            turn=context.turn,
            attacker=actor,
            target=target,
            weapon=result.weapon,
            raw_damage=result.raw_damage,
            damage_dealt=result.damage_dealt,
            target_health=result.target_health,
        ))
        context.log(
            f"{actor.name} -> {target.name} ({result.damage_dealt} damage, "
            f"rolled {result.raw_damage}, {target.name} at {result.target_health} HP)",
            "BATTLE",
            source=self.name,
        )
        return ActionResult.SUCCESS


class PurchaseAction(Action):
    """Buy and equip a weapon from the catalog."""

    action_type = ActionType.PURCHASE

    def execute(self, actor, target, request, context):
        if request.weapon is None:
            context.emit(PurchaseRejected(
                turn=context.turn,
                actor=actor,
                reason=PurchaseRejection.INVALID_SELECTION,
            ))
            return self._reject_selection(actor, request, context, "weapon")

        info = get_weapon_info(request.weapon)
        if not actor.can_afford(info.cost):
            context.emit(PurchaseRejected(
                turn=context.turn,
                actor=actor,
                reason=PurchaseRejection.INSUFFICIENT_FUNDS,
                weapon=request.weapon,
            ))
            context.log(
                f"{actor.name} cannot afford {info.name} ({actor.credits}/{info.cost} credits)",
                "ECONOMY",
                source=self.name,
            )
            return ActionResult.FAILED

        actor.spend(info.cost)
        actor.equip(request.weapon)
        context.emit(WeaponPurchased(
            turn=context.turn,
            actor=actor,
            weapon=request.weapon,
            cost=info.cost,
            credits_left=actor.credits,
        ))
        context.log(f"{actor.name} bought {info.name} for {info.cost}", "ECONOMY", source=self.name)
        return ActionResult.SUCCESS


# Registry used by the dispatcher; one entry per ActionType
ACTIONS: dict[ActionType, Action] = {
    ActionType.MOVE: MoveAction(),
    ActionType.SHOOT: ShootAction(),
    ActionType.PURCHASE: PurchaseAction(),
}


def get_action(action_type: ActionType) -> Action:
    """Look up the implementation for an action type."""
    return ACTIONS[action_type]


def execute_action(
    request: ActionRequest,
    actor: "Combatant",
    target: "Combatant",
    context: ActionContext,
) -> ActionResult:
    """Dispatch a turn's request to the matching action.

    An invalid top-level selection consumes the turn without touching state.
    """
    if request.action_type is None:
        context.emit(InvalidSelection(
            turn=context.turn,
            actor=actor,
            menu="action",
            raw_input=request.raw_input,
        ))
        context.log(f"{actor.name} made an invalid action choice", "INPUT", "WARNING", "Dispatcher")
        return ActionResult.INVALID

    return get_action(request.action_type).execute(actor, target, request, context)
