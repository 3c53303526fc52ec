"""
Event bus connecting the battle orchestrator to whoever is listening.

The orchestrator publishes events while it resolves a battle; nothing is
delivered until the caller drains the queue with `process_events`, so a
battle always finishes before any listener runs.
"""

from collections import defaultdict, deque
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


EventSubscriber = Callable[["GameEvent"], None]


class EventManager:
    """First-in first-out publish/subscribe bus."""

    def __init__(self, enable_debug_logging: bool = False):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Report every publish and delivery to the debug callback
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[tuple[str, EventSubscriber]]] = defaultdict(list)
        self._universal_subscribers: list[tuple[str, EventSubscriber]] = []
        self._pending: deque[tuple["GameEvent", str]] = deque()

        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        self._debug_callback = callback

    def _debug_log(self, message: str, force: bool = False) -> None:
        if self._debug_callback and (force or self.enable_debug_logging):
            self._debug_callback(f"[EVENT] {message}")

    @staticmethod
    def _display_name(subscriber: EventSubscriber, subscriber_name: Optional[str]) -> str:
        return subscriber_name or getattr(subscriber, '__name__', 'anonymous')

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Deliver events of one type to `subscriber`."""
        name = self._display_name(subscriber, subscriber_name)
        self._subscribers[event_type].append((name, subscriber))
        self._debug_log(f"Subscribed {name} to {event_type.name} events")

    def subscribe_all(self, subscriber: EventSubscriber, subscriber_name: Optional[str] = None) -> None:
        """Deliver every event to `subscriber`, after the typed subscribers."""
        name = self._display_name(subscriber, subscriber_name)
        self._universal_subscribers.append((name, subscriber))
        self._debug_log(f"Subscribed {name} to ALL events")

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Queue an event until the next `process_events` call."""
        source = source or "unknown"
        self._pending.append((event, source))
        self._debug_log(f"Published {event.__class__.__name__} from {source} (round {event.battle_round})")

    def process_events(self) -> int:
        """Deliver queued events in publish order.

        Events published by a subscriber are delivered in the same call.

        Returns:
            Number of events delivered
        """
        delivered = 0
        while self._pending:
            event, source = self._pending.popleft()
            self._deliver(event, source)
            delivered += 1
        return delivered

    def _deliver(self, event: "GameEvent", source: str) -> None:
        recipients = self._subscribers.get(event.event_type, []) + self._universal_subscribers
        for name, subscriber in list(recipients):
            try:
                subscriber(event)
            except Exception as e:
                # One broken listener must not starve the rest
                self._debug_log(
                    f"Subscriber {name} failed on {event.__class__.__name__} from {source}: {e}",
                    force=True,
                )
