"""Event system for publisher-subscriber communication.

This package contains the complete event-driven architecture:
- event_manager.py: Publisher-subscriber event routing and coordination
- events.py: Event definitions for inter-component communication
"""

from .event_manager import EventManager, EventPriority, QueuedEvent
from .events import (
    GameEvent,
    EventType,
    MatchStarted,
    MatchEnded,
    TurnStarted,
    CombatantMoved,
    ShotFired,
    WeaponPurchased,
    PurchaseRejected,
    InvalidSelection,
    LogMessage,
    LogSaveRequested,
)

__all__ = [
    "EventManager",
    "EventPriority",
    "QueuedEvent",
    "GameEvent",
    "EventType",
    "MatchStarted",
    "MatchEnded",
    "TurnStarted",
    "CombatantMoved",
    "ShotFired",
    "WeaponPurchased",
    "PurchaseRejected",
    "InvalidSelection",
    "LogMessage",
    "LogSaveRequested",
]
