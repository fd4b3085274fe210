"""Match support managers.

- log_manager.py: Categorized, filterable match log fed by LogMessage events
"""

from .log_manager import LogManager, LogCategory, LogLevel, LogEntry

__all__ = [
    "LogManager",
    "LogCategory",
    "LogLevel",
    "LogEntry",
]
