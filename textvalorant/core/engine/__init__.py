"""Turn engine.

- actions.py: Move, Shoot and Purchase actions plus the dispatcher
"""

from .actions import (
    Action,
    ActionContext,
    ActionRequest,
    ActionResult,
    MoveAction,
    ShootAction,
    PurchaseAction,
    ACTIONS,
    get_action,
    execute_action,
)

__all__ = [
    "Action",
    "ActionContext",
    "ActionRequest",
    "ActionResult",
    "MoveAction",
    "ShootAction",
    "PurchaseAction",
    "ACTIONS",
    "get_action",
    "execute_action",
]
