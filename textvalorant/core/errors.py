"""Exception types raised by the game.

Only setup problems are errors. Bad menu input and unaffordable purchases are
ordinary turn outcomes and never raise.
"""


class TextValorantError(Exception):
    """Base class for all game errors."""


class RosterError(TextValorantError):
    """Agent or weapon name source is missing, empty or malformed."""


class ConfigError(TextValorantError):
    """Configuration file could not be parsed or failed validation."""
