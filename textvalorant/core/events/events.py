"""Match events and their types.

This module defines all events that match components publish and subscribe to.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- All events carry the match turn number they happened on
- Events use proper enums instead of magic strings
- The engine reports through events and never prints
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

from ..data import Side, ActionType, WeaponType, GameMode, MatchState, PurchaseRejection

if TYPE_CHECKING:
    from ..data import Vector2
    from ...game.entities.combatant import Combatant


class EventType(Enum):
    """Types of match events that components can subscribe to."""
    # Match lifecycle
    MATCH_STARTED = auto()
    MATCH_ENDED = auto()
    TURN_STARTED = auto()

    # Actions
    COMBATANT_MOVED = auto()
    SHOT_FIRED = auto()
    WEAPON_PURCHASED = auto()
    PURCHASE_REJECTED = auto()
    INVALID_SELECTION = auto()

    # Logging
    LOG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all match events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class MatchStarted(GameEvent):
    """Event emitted once both combatants exist and the loop is about to run."""
    mode: GameMode
    human: "Combatant"
    opponent: "Combatant"

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.MATCH_STARTED)


@dataclass(frozen=True)
class MatchEnded(GameEvent):
    """Event emitted when a terminal state is reached."""
    state: MatchState
    winner: "Combatant"
    loser: "Combatant"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.MATCH_ENDED)


@dataclass(frozen=True)
class TurnStarted(GameEvent):
    """Event emitted before a side acts."""
    side: Side
    actor: "Combatant"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.TURN_STARTED)


@dataclass(frozen=True)
class CombatantMoved(GameEvent):
    """Event emitted after a move; actor.position holds the destination."""
    actor: "Combatant"
    from_position: "Vector2"
    to_position: "Vector2"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBATANT_MOVED)


@dataclass(frozen=True)
class ShotFired(GameEvent):
    """Event emitted after a shot has been resolved."""
    attacker: "Combatant"
    target: "Combatant"
    weapon: WeaponType
    raw_damage: int
    damage_dealt: int
    target_health: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SHOT_FIRED)


@dataclass(frozen=True)
class WeaponPurchased(GameEvent):
    """Event emitted after a successful purchase."""
    actor: "Combatant"
    weapon: WeaponType
    cost: int
    credits_left: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.WEAPON_PURCHASED)


@dataclass(frozen=True)
class PurchaseRejected(GameEvent):
    """Event emitted when a purchase leaves state unchanged."""
    actor: "Combatant"
    reason: PurchaseRejection
    weapon: Optional[WeaponType] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PURCHASE_REJECTED)


@dataclass(frozen=True)
class InvalidSelection(GameEvent):
    """Event emitted when a turn is consumed by an unusable menu choice."""
    actor: "Combatant"
    menu: str
    raw_input: str = ""
    action: Optional[ActionType] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.INVALID_SELECTION)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event for log messages routed to the LogManager."""
    message: str
    category: str = "SYSTEM"
    level: str = "INFO"
    source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event asking the LogManager to write its buffer to disk."""
    directory: str = "logs"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)
