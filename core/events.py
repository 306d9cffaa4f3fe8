"""
Event types and EventBus protocol.

The EventBus is an abstract interface that core uses to publish mutation
notifications. The server layer provides the broadcast implementation.
"""

from enum import Enum
from typing import Protocol

from pydantic import BaseModel


class MutationKind(str, Enum):
    """Kind of change applied to a plugin record."""

    CREATE = "Create"
    DELETE = "Delete"


class MutationEvent(BaseModel):
    """Notification that a plugin record was created or deleted.

    Carries only the kind and the affected id; subscribers that need the
    full record re-query the store.
    """

    mutation_kind: MutationKind
    id: int

    def to_json(self) -> str:
        """Compact JSON encoding used on the wire."""
        return self.model_dump_json()


class PublishResult(BaseModel):
    """Outcome of a publish: how many subscribers received the event."""

    delivered: int

    @property
    def has_listeners(self) -> bool:
        return self.delivered > 0


class EventBus(Protocol):
    """Abstract interface for publishing events."""

    def publish(self, event: MutationEvent) -> PublishResult:
        """Publish an event to all subscribers."""
        ...


class NullEventBus:
    """No-op EventBus implementation for testing."""

    def publish(self, event: MutationEvent) -> PublishResult:
        """Discard the event."""
        return PublishResult(delivered=0)
