"""
Log management for battle messages and debugging.

This module provides centralized logging with categorization and filtering.
Components never print diagnostics themselves; they publish LogMessage
events and the LogManager collects them from the event bus.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.events import EventManager


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # System messages (initialization, loading, etc.)
    BATTLE = auto()     # Combat-related messages
    ROSTER = auto()     # Roster loading and validation
    CONFIG = auto()     # Rule configuration messages
    DEBUG = auto()
    WARNING = auto()
    ERROR = auto()


_CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.ROSTER: "RST",
    LogCategory.CONFIG: "CFG",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class LogEntry:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{_CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogManager:
    """Collects categorised log messages from the event bus."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager to receive LogMessage events from
            max_messages: Maximum number of messages to keep in the buffer
            default_level: Minimum level returned by get_messages
        """
        self.messages: deque[LogEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager

        self._setup_event_subscriptions()

    def _setup_event_subscriptions(self) -> None:
        from ...core.events import EventType

        self.event_manager.subscribe(
            EventType.LOG_MESSAGE,
            self._handle_log_message_event,
            subscriber_name="LogManager.log_message"
        )
        self.event_manager.subscribe(
            EventType.DEBUG_MESSAGE,
            self._handle_debug_message_event,
            subscriber_name="LogManager.debug_message"
        )

    def _handle_log_message_event(self, event) -> None:
        """Store a LogMessage event, mapping its strings onto enums."""
        from ...core.events import LogMessage
        if not isinstance(event, LogMessage):
            return

        try:
            category = LogCategory[event.category.upper()]
        except (KeyError, AttributeError):
            category = LogCategory.SYSTEM

        try:
            level = LogLevel[event.level.upper()]
        except (KeyError, AttributeError):
            level = LogLevel.INFO

        self.log(event.message, category, level)

    def _handle_debug_message_event(self, event) -> None:
        from ...core.events import DebugMessage
        if isinstance(event, DebugMessage):
            self.log(f"[{event.source}] {event.message}", LogCategory.DEBUG, LogLevel.DEBUG)

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM,
            level: LogLevel = LogLevel.INFO) -> None:
        """Add a message to the log.

        Messages below the current level are still buffered so a saved log
        file has everything.
        """
        self.messages.append(LogEntry(text=text, category=category, level=level))

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def battle(self, text: str) -> None:
        self.log(text, LogCategory.BATTLE)

    def roster(self, text: str) -> None:
        self.log(text, LogCategory.ROSTER)

    def config(self, text: str) -> None:
        self.log(text, LogCategory.CONFIG)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG, LogLevel.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING, LogLevel.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR, LogLevel.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogEntry]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = [msg for msg in self.messages
                        if msg.category in self.enabled_categories
                        and msg.level.value >= self.log_level.value]

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def clear(self) -> None:
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def save_log_to_file(self, log_dir: str = "logs") -> Optional[str]:
        """Save all buffered messages to a timestamped log file.

        Returns:
            Path of the written file, or None if it could not be written
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = os.path.join(log_dir, f"battle_{timestamp}.log")

        try:
            os.makedirs(log_dir, exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Cybertron Battle Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                for msg in self.messages:
                    timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                    f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Battle log saved to {filepath}")
        return filepath
