"""Console interface: menus, input parsing and status output."""

from .console_input import ConsoleInput, parse_selection
from .status_renderer import StatusRenderer, ConsoleReporter

__all__ = [
    "ConsoleInput",
    "parse_selection",
    "StatusRenderer",
    "ConsoleReporter",
]
