"""Shared fixtures for wordmorph tests."""

import pytest

from wordmorph.core.events import EventChannel


class ManualClock:
    """Seconds clock that only moves when told to."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now

    def advance_ms(self, ms):
        return self.advance(ms / 1000.0)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def channel(clock):
    return EventChannel(clock=clock)


@pytest.fixture
def recorder(channel):
    """List that collects every event published on ``channel``."""
    events = []
    channel.subscribe(events.append)
    return events
