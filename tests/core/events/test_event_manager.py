"""
Unit tests for the EventManager publish/subscribe bus.
"""

from unittest.mock import Mock

from textvalorant.core.events import (
    EventManager,
    EventPriority,
    EventType,
    LogMessage,
    LogSaveRequested,
)


def _log(turn=0, message="hello"):
    return LogMessage(turn=turn, message=message)


class TestSubscription:

    def test_subscriber_receives_processed_event(self, event_manager):
        handler = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, handler)

        event = _log()
        event_manager.publish(event)
        handler.assert_not_called()

        assert event_manager.process_events() == 1
        handler.assert_called_once_with(event)

    def test_subscriber_ignores_other_types(self, event_manager):
        handler = Mock()
        event_manager.subscribe(EventType.MATCH_ENDED, handler)
        event_manager.publish(_log())
        event_manager.process_events()
        handler.assert_not_called()

    def test_universal_subscriber(self, event_manager):
        handler = Mock()
        event_manager.subscribe_all(handler)
        event_manager.publish(_log())
        event_manager.publish(LogSaveRequested(turn=0))
        event_manager.process_events()
        assert handler.call_count == 2

    def test_unsubscribe(self, event_manager):
        handler = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, handler)
        assert event_manager.unsubscribe(EventType.LOG_MESSAGE, handler) is True
        assert event_manager.unsubscribe(EventType.LOG_MESSAGE, handler) is False

        event_manager.publish(_log())
        event_manager.process_events()
        handler.assert_not_called()

    def test_unsubscribe_all(self, event_manager):
        handler = Mock()
        event_manager.subscribe_all(handler)
        assert event_manager.unsubscribe_all(handler) is True
        assert event_manager.unsubscribe_all(handler) is False


class TestProcessing:

    def test_same_priority_keeps_publish_order(self, event_manager):
        seen = []
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda e: seen.append(e.message))
        for text in ("first", "second", "third"):
            event_manager.publish(_log(message=text))
        event_manager.process_events()
        assert seen == ["first", "second", "third"]

    def test_higher_priority_first(self, event_manager):
        seen = []
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda e: seen.append(e.message))
        event_manager.publish(_log(message="low"), priority=EventPriority.LOW)
        event_manager.publish(_log(message="high"), priority=EventPriority.HIGH)
        event_manager.process_events()
        assert seen == ["high", "low"]

    def test_max_events_requeues_remainder(self, event_manager):
        for i in range(3):
            event_manager.publish(_log(message=str(i)))
        assert event_manager.process_events(max_events=2) == 2
        assert event_manager.has_queued_events()
        assert event_manager.process_events() == 1
        assert not event_manager.has_queued_events()

    def test_publish_immediate_skips_queue(self, event_manager):
        handler = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, handler)
        event_manager.publish_immediate(_log())
        handler.assert_called_once()
        assert not event_manager.has_queued_events()

    def test_failing_subscriber_does_not_block_others(self):
        manager = EventManager(enable_debug_logging=True)
        debug_lines = []
        manager.set_debug_callback(debug_lines.append)

        def broken(event):
            raise RuntimeError("boom")

        good = Mock()
        manager.subscribe(EventType.LOG_MESSAGE, broken)
        manager.subscribe(EventType.LOG_MESSAGE, good)
        manager.publish(_log())
        manager.process_events()

        good.assert_called_once()
        assert manager.get_statistics()['subscriber_errors'] == 1
        assert any("boom" in line for line in debug_lines)

    def test_clear_queue(self, event_manager):
        event_manager.publish(_log())
        event_manager.publish(_log())
        assert event_manager.clear_queue() == 2
        assert event_manager.process_events() == 0


class TestDiagnostics:

    def test_statistics(self, event_manager):
        event_manager.subscribe(EventType.LOG_MESSAGE, Mock())
        event_manager.publish(_log())
        stats = event_manager.get_statistics()
        assert stats['events_published'] == 1
        assert stats['events_queued'] == 1
        assert stats['subscribers_count'] == 1

        event_manager.process_events()
        assert event_manager.get_statistics()['events_processed'] == 1

    def test_recent_events(self, event_manager):
        event_manager.publish(_log(turn=3), source="test")
        event_manager.process_events()
        recent = event_manager.get_recent_events()
        assert recent[-1]['event_type'] == "LogMessage"
        assert recent[-1]['turn'] == 3
        assert recent[-1]['source'] == "test"

    def test_shutdown_clears_everything(self, event_manager):
        handler = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, handler)
        event_manager.publish(_log())
        event_manager.shutdown()
        assert event_manager.process_events() == 0
        event_manager.publish(_log())
        event_manager.process_events()
        handler.assert_not_called()
