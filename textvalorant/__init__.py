"""Text Valorant: a two-combatant, turn-based text duel."""

__version__ = "0.1.0"
