"""Battle managers.

- log_manager.py: Categorised log buffer fed by LogMessage events
"""

from .log_manager import LogCategory, LogEntry, LogLevel, LogManager

__all__ = [
    "LogCategory",
    "LogEntry",
    "LogLevel",
    "LogManager",
]
