"""
Broadcast EventBus implementation.

This module provides the server-side implementation of the EventBus protocol.
Each subscriber owns a bounded queue; publishing never waits on subscribers.
"""

import asyncio
import logging
import threading
from types import TracebackType

from config.defaults import DEFAULT_EVENT_BUFFER_SIZE
from core import MutationEvent, PublishResult, StreamLagError

logger = logging.getLogger(__name__)


class Subscription:
    """
    Receiving end of a BroadcastEventBus subscription.

    Holds at most ``buffer_size`` unread events. When a new event arrives on
    a full buffer the oldest unread one is discarded and counted; the next
    receive() reports the gap by raising StreamLagError, after which
    delivery resumes from the oldest retained event.
    """

    def __init__(self, bus: "BroadcastEventBus", buffer_size: int) -> None:
        self._bus = bus
        self._queue: asyncio.Queue[MutationEvent] = asyncio.Queue(maxsize=buffer_size)
        self._missed = 0
        self.closed = False

    def _deliver(self, event: MutationEvent) -> None:
        if self._queue.full():
            self._queue.get_nowait()
            if self._missed == 0:
                logger.warning("Subscriber buffer full, dropping oldest unread events")
            self._missed += 1
        self._queue.put_nowait(event)

    @property
    def pending(self) -> int:
        """Number of buffered, unread events."""
        return self._queue.qsize()

    async def receive(self) -> MutationEvent:
        """
        Wait for the next event, in publish order.

        Raises:
            StreamLagError: If events were dropped since the last receive
        """
        if self._missed:
            missed, self._missed = self._missed, 0
            raise StreamLagError(missed)
        return await self._queue.get()

    def close(self) -> None:
        """Detach from the bus. Buffered events are discarded."""
        if not self.closed:
            self.closed = True
            self._bus.unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class BroadcastEventBus:
    """
    EventBus implementation that fans every event out to all subscribers.

    Subscribers only see events published after they subscribed. The
    subscriber registry is guarded by a lock and publish iterates over a
    snapshot, so subscribe/unsubscribe may race with publish safely.
    """

    def __init__(self, buffer_size: int = DEFAULT_EVENT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.buffer_size = buffer_size
        self._subscribers: list[Subscription] = []
        self._lock = threading.Lock()

    def publish(self, event: MutationEvent) -> PublishResult:
        """
        Publish an event to all current subscribers.

        Returns:
            PublishResult with the number of subscribers reached. Zero is a
            valid outcome, not an error.
        """
        with self._lock:
            subscribers = tuple(self._subscribers)
        for subscription in subscribers:
            subscription._deliver(event)
        return PublishResult(delivered=len(subscribers))

    def subscribe(self) -> Subscription:
        """
        Create a new subscription.

        Returns:
            A Subscription that will receive all subsequently published events
        """
        subscription = Subscription(self, self.buffer_size)
        with self._lock:
            self._subscribers.append(subscription)
            count = len(self._subscribers)
        logger.debug("Subscriber added (%d active)", count)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """
        Remove a subscription.

        Args:
            subscription: The subscription to remove
        """
        with self._lock:
            if subscription in self._subscribers:
                self._subscribers.remove(subscription)
            count = len(self._subscribers)
        subscription.closed = True
        logger.debug("Subscriber removed (%d active)", count)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)
