"""wordmorph Event Channel.

A small publish/subscribe channel passed explicitly to the components
of one session. Each session owns its own channel, so several sessions
can run side by side without hearing each other.

Subscribers register for one event type or for everything. A
subscriber that raises is logged and skipped; the remaining
subscribers still receive the event.

BUILD ID: events_v1.0
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional

logger = logging.getLogger(__name__)


# ============================================================================
# EVENT TYPES
# ============================================================================

class EventType:
    """Event type constants for channel subscriptions."""
    # Inbound (host -> manager)
    WORD_SUBMITTED = "word:submitted"
    ANTICIPATION_START = "anticipation:start"
    ANTICIPATION_END = "anticipation:end"
    CONSTELLATION_SELECT = "constellation:select"
    HISTORY_BACK = "history:back"
    HISTORY_FORWARD = "history:forward"
    RESET = "reset"

    # Outbound (manager -> host)
    PARAMETERS_UPDATED = "parameters:updated"
    TARGETS_SET = "targets:set"
    ANTICIPATION_ACTIVE = "anticipation:active"
    ANTICIPATION_CLEARED = "anticipation:cleared"
    BLEND_START = "blend:start"
    BLEND_COMPLETE = "blend:complete"
    PARAMETERS_JUMPED = "parameters:jumped"
    HISTORY_NAVIGATED = "history:navigated"
    PARAMETERS_RESET = "parameters:reset"

    # Engine
    WORD_PROCESSED = "word:processed"


class ChannelEvent:
    """Payload delivered to subscribers.

    Attributes:
        event_type: One of the EventType constants (or any custom string).
        data: Event payload, shape depends on the event type.
        timestamp: Clock reading when the event was published.
    """

    __slots__ = ("event_type", "data", "timestamp")

    def __init__(self, event_type: str, data: Any = None, timestamp: float = 0.0) -> None:
        self.event_type = event_type
        self.data = data
        self.timestamp = timestamp

    def __repr__(self) -> str:
        return f"ChannelEvent({self.event_type!r})"


Subscriber = Callable[[ChannelEvent], None]


# ============================================================================
# CHANNEL
# ============================================================================

class EventChannel:
    """Synchronous in-process event channel.

    Parameters
    ----------
    clock : callable, optional
        Zero-argument callable returning seconds, used to timestamp events.
    history_size : int
        Number of recent events kept for inspection (0 disables).
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None,
                 history_size: int = 100) -> None:
        self._clock = clock or time.monotonic
        self._subscribers: Dict[str, List[Subscriber]] = {}
        self._history: Deque[ChannelEvent] = deque(maxlen=history_size or None)
        self._record = history_size > 0

    # ---- Subscriptions ------------------------------------------------------

    def subscribe(self, callback: Subscriber, event_type: Optional[str] = None) -> Callable[[], None]:
        """Subscribe to channel events.

        If ``event_type`` is None, the callback receives all events.
        Returns a function that removes the subscription.
        """
        key = event_type or "__all__"
        self._subscribers.setdefault(key, []).append(callback)
        return lambda: self.unsubscribe(callback, event_type)

    def unsubscribe(self, callback: Subscriber, event_type: Optional[str] = None) -> None:
        """Remove a previously registered callback."""
        key = event_type or "__all__"
        listeners = self._subscribers.get(key, [])
        if callback in listeners:
            listeners.remove(callback)

    def subscriber_count(self, event_type: Optional[str] = None) -> int:
        return len(self._subscribers.get(event_type or "__all__", []))

    def clear(self) -> None:
        """Drop every subscription and the recent-event history."""
        self._subscribers.clear()
        self._history.clear()

    # ---- Publishing ---------------------------------------------------------

    def publish(self, event_type: str, data: Any = None) -> ChannelEvent:
        """Build an event and dispatch it to all matching subscribers."""
        event = ChannelEvent(event_type, data, self._clock())
        if self._record:
            self._history.append(event)
        # Copies so subscribers may unsubscribe during dispatch
        for cb in list(self._subscribers.get(event_type, [])):
            try:
                cb(event)
            except Exception:
                logger.exception("Error in channel subscriber for %s", event_type)
        for cb in list(self._subscribers.get("__all__", [])):
            try:
                cb(event)
            except Exception:
                logger.exception("Error in channel subscriber (__all__)")
        return event

    def recent(self, event_type: Optional[str] = None) -> List[ChannelEvent]:
        """Recently published events, oldest first."""
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.event_type == event_type]
