"""Battle events and logging events.

This module defines the events the battle orchestrator publishes while it
resolves a battle, plus the logging events consumed by the LogManager.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- All events carry the battle round they belong to (0 before the first round)
- Events use proper enums instead of magic strings
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ..data import BattleOutcome, Team

if TYPE_CHECKING:
    from ...game.entities.transformer import Transformer


class EventType(Enum):
    """Types of events that managers can subscribe to."""
    # Battle Events
    BATTLE_STARTED = auto()
    BYE_AWARDED = auto()
    ROUND_RESOLVED = auto()
    BATTLE_ENDED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all events."""
    battle_round: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class BattleStarted(GameEvent):
    """Event emitted once the teams are split and seeded."""
    autobots: tuple["Transformer", ...]
    decepticons: tuple["Transformer", ...]

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.BATTLE_STARTED)


@dataclass(frozen=True)
class ByeAwarded(GameEvent):
    """Event emitted when a transformer survives without fighting."""
    transformer: "Transformer"
    team: Team

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BYE_AWARDED)


@dataclass(frozen=True)
class RoundResolved(GameEvent):
    """Event emitted after each autobot/decepticon pairing is decided."""
    autobot: "Transformer"
    decepticon: "Transformer"
    outcome: BattleOutcome

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ROUND_RESOLVED)


@dataclass(frozen=True)
class BattleEnded(GameEvent):
    """Event emitted when a battle produces its final outcome."""
    outcome: Optional[BattleOutcome]
    rounds_played: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_ENDED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: str
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)
