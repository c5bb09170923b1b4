"""
Event management for decoupled observation of creatures.

Creatures and combat actions publish events onto a first-in first-out
queue; observers such as the log manager receive them when the owner of
the bus calls process_events(). A failing observer never affects the
publisher or the other observers.
"""

import threading
from collections import defaultdict, deque
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


EventSubscriber = Callable[["GameEvent"], None]


class EventManager:
    """Central event bus for creature observers."""

    def __init__(self, enable_debug_logging: bool = False):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Whether to report routine bus activity
                (subscriptions, deliveries) through the debug callback.
                Subscriber failures are always reported.
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)
        self._universal_subscribers: list[EventSubscriber] = []

        # (event, source) pairs in publication order
        self._event_queue: deque[tuple["GameEvent", str]] = deque()

        self._lock = threading.RLock()
        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set the callback that receives debug and subscriber error messages."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def _report_failure(self, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback function to handle events
            subscriber_name: Optional name for debugging
        """
        with self._lock:
            self._subscribers[event_type].append(subscriber)

        subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {subscriber_display} to {event_type.name} events")

    def subscribe_all(
        self,
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to all events (universal subscriber)."""
        with self._lock:
            self._universal_subscribers.append(subscriber)

        subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {subscriber_display} to ALL events")

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Queue an event for delivery on the next process_events() call.

        Args:
            event: The event to publish
            source: Optional source identifier for debugging
        """
        source = source or "unknown"
        with self._lock:
            self._event_queue.append((event, source))

        self._debug_log(f"Published {event.__class__.__name__} from {source}")

    def process_events(self) -> int:
        """Deliver every queued event in publication order.

        Events published by subscribers while the queue is drained are
        delivered in the same call.

        Returns:
            Number of events delivered
        """
        processed_count = 0
        while True:
            with self._lock:
                if not self._event_queue:
                    return processed_count
                event, source = self._event_queue.popleft()

            self._deliver(event, source)
            processed_count += 1

    def _deliver(self, event: "GameEvent", source: str) -> None:
        with self._lock:
            subscribers = list(self._subscribers.get(event.event_type, []))
            subscribers.extend(self._universal_subscribers)

        self._debug_log(f"Processing {event.__class__.__name__} from {source}")

        for subscriber in subscribers:
            try:
                subscriber(event)
            except Exception as e:
                self._report_failure(
                    f"Error in subscriber {getattr(subscriber, '__name__', 'anonymous')} "
                    f"handling {event.__class__.__name__}: {e}"
                )
