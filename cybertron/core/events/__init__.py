"""Event system for publisher-subscriber communication.

This package contains the event-driven plumbing of the battle system:
- event_manager.py: First-in first-out publish/subscribe bus
- events.py: Event definitions for battle progress and logging
"""

from .event_manager import EventManager, EventSubscriber
from .events import (
    GameEvent,
    EventType,
    BattleStarted,
    ByeAwarded,
    RoundResolved,
    BattleEnded,
    LogMessage,
    DebugMessage,
)

__all__ = [
    "EventManager",
    "EventSubscriber",
    "GameEvent",
    "EventType",
    "BattleStarted",
    "ByeAwarded",
    "RoundResolved",
    "BattleEnded",
    "LogMessage",
    "DebugMessage",
]
