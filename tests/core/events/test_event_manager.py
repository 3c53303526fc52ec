"""
Tests for the event bus.
"""
from unittest.mock import Mock

from cybertron.core.data import BattleOutcome, Team
from cybertron.core.events import BattleEnded, ByeAwarded, EventManager, EventType, LogMessage


def ended(battle_round=1):
    return BattleEnded(battle_round=battle_round, outcome=BattleOutcome.TIE, rounds_played=battle_round)


class TestSubscription:
    """Test who receives which events."""

    def test_typed_subscriber_only_gets_its_type(self, event_manager, autobot):
        subscriber = Mock()
        event_manager.subscribe(EventType.BATTLE_ENDED, subscriber)

        event_manager.publish(ByeAwarded(battle_round=0, transformer=autobot, team=Team.AUTOBOTS))
        event_manager.publish(ended())
        event_manager.process_events()

        subscriber.assert_called_once()
        assert subscriber.call_args.args[0].event_type == EventType.BATTLE_ENDED

    def test_universal_subscriber_gets_everything(self, event_manager, autobot):
        received = []
        event_manager.subscribe_all(received.append)

        event_manager.publish(ByeAwarded(battle_round=0, transformer=autobot, team=Team.AUTOBOTS))
        event_manager.publish(ended())

        assert event_manager.process_events() == 2
        assert [e.event_type for e in received] == [EventType.BYE_AWARDED, EventType.BATTLE_ENDED]

    def test_typed_subscribers_run_before_universal(self, event_manager):
        calls = []
        event_manager.subscribe_all(lambda e: calls.append("all"))
        event_manager.subscribe(EventType.BATTLE_ENDED, lambda e: calls.append("typed"))

        event_manager.publish(ended())
        event_manager.process_events()

        assert calls == ["typed", "all"]


class TestProcessing:
    """Test queue draining."""

    def test_nothing_delivered_before_processing(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.BATTLE_ENDED, subscriber)

        event_manager.publish(ended())

        subscriber.assert_not_called()
        assert event_manager.process_events() == 1
        assert event_manager.process_events() == 0

    def test_publish_order_kept(self, event_manager):
        rounds = []
        event_manager.subscribe(EventType.BATTLE_ENDED, lambda e: rounds.append(e.battle_round))

        for battle_round in (3, 1, 2):
            event_manager.publish(ended(battle_round))
        event_manager.process_events()

        assert rounds == [3, 1, 2]

    def test_events_published_by_subscribers_are_delivered(self, event_manager):
        messages = []

        def announce(event):
            event_manager.publish(LogMessage(battle_round=event.battle_round, message="battle over",
                                             category="BATTLE", level="INFO", source="test"))

        event_manager.subscribe(EventType.BATTLE_ENDED, announce)
        event_manager.subscribe(EventType.LOG_MESSAGE, messages.append)
        event_manager.publish(ended())

        assert event_manager.process_events() == 2
        assert [m.message for m in messages] == ["battle over"]

    def test_failing_subscriber_does_not_block_others(self):
        manager = EventManager()
        debug_lines = []
        manager.set_debug_callback(debug_lines.append)
        received = []

        def broken(event):
            raise RuntimeError("listener failed")

        manager.subscribe(EventType.BATTLE_ENDED, broken, subscriber_name="Broken")
        manager.subscribe(EventType.BATTLE_ENDED, received.append)
        manager.publish(ended())
        manager.process_events()

        assert len(received) == 1
        assert len(debug_lines) == 1
        assert "Broken" in debug_lines[0]
        assert "listener failed" in debug_lines[0]


class TestDebugLogging:

    def test_quiet_by_default(self, event_manager):
        debug_lines = []
        event_manager.set_debug_callback(debug_lines.append)

        event_manager.subscribe(EventType.BATTLE_ENDED, lambda e: None)
        event_manager.publish(ended())
        event_manager.process_events()

        assert debug_lines == []

    def test_traces_subscriptions_and_publishes(self):
        manager = EventManager(enable_debug_logging=True)
        debug_lines = []
        manager.set_debug_callback(debug_lines.append)

        manager.subscribe(EventType.BATTLE_ENDED, lambda e: None, subscriber_name="Listener")
        manager.publish(ended(2), source="Orchestrator")

        assert debug_lines == [
            "[EVENT] Subscribed Listener to BATTLE_ENDED events",
            "[EVENT] Published BattleEnded from Orchestrator (round 2)",
        ]
