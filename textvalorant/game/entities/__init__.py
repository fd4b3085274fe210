"""Match entities.

- combatant.py: Combatant state for one side of a duel
"""

from .combatant import Combatant, STARTING_HEALTH, STARTING_ARMOR

__all__ = [
    "Combatant",
    "STARTING_HEALTH",
    "STARTING_ARMOR",
]
