"""
Tests for the event channel
"""

import logging

from wordmorph.core.events import ChannelEvent, EventChannel


class TestSubscriptions:
    def test_typed_and_wildcard(self, channel):
        typed, every = [], []
        channel.subscribe(typed.append, "a")
        channel.subscribe(every.append)
        channel.publish("a", 1)
        channel.publish("b", 2)
        assert [e.data for e in typed] == [1]
        assert [e.data for e in every] == [1, 2]

    def test_unsubscribe_handle(self, channel):
        seen = []
        unsubscribe = channel.subscribe(seen.append, "a")
        assert channel.subscriber_count("a") == 1
        unsubscribe()
        unsubscribe()
        channel.publish("a")
        assert seen == []
        assert channel.subscriber_count("a") == 0

    def test_unsubscribe_during_dispatch(self, channel):
        seen = []

        def once(event):
            seen.append(event)
            channel.unsubscribe(once, "a")

        channel.subscribe(once, "a")
        channel.publish("a")
        channel.publish("a")
        assert len(seen) == 1

    def test_clear(self, channel):
        channel.subscribe(lambda e: None)
        channel.publish("a")
        channel.clear()
        assert channel.subscriber_count() == 0
        assert channel.recent() == []


class TestPublish:
    def test_event_fields(self, channel, clock):
        event = channel.publish("a", {"x": 1})
        assert isinstance(event, ChannelEvent)
        assert event.event_type == "a"
        assert event.data == {"x": 1}
        assert event.timestamp == clock()

    def test_failing_subscriber_is_logged(self, channel, caplog):
        seen = []

        def broken(event):
            raise RuntimeError("boom")

        channel.subscribe(broken, "a")
        channel.subscribe(seen.append, "a")
        with caplog.at_level(logging.ERROR, logger="wordmorph.core.events"):
            channel.publish("a")
        assert len(seen) == 1
        assert "boom" in caplog.text

    def test_recent(self, channel):
        channel.publish("a", 1)
        channel.publish("b", 2)
        channel.publish("a", 3)
        assert [e.data for e in channel.recent()] == [1, 2, 3]
        assert [e.data for e in channel.recent("a")] == [1, 3]

    def test_history_bounded(self, clock):
        channel = EventChannel(clock=clock, history_size=2)
        for n in range(5):
            channel.publish("a", n)
        assert [e.data for e in channel.recent()] == [3, 4]

    def test_history_disabled(self, clock):
        channel = EventChannel(clock=clock, history_size=0)
        channel.publish("a")
        assert channel.recent() == []
