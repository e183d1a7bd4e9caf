"""Typed publish/subscribe channels for entity-local events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

Callback = Callable[[Any], None]


class SubscriptionList:
    """Callbacks for one event type, each under a numeric subscription id."""

    def __init__(self) -> None:
        self._next_id = 0
        self._callbacks: dict[int, Callback] = {}

    def add_subscriber(self, callback: Callback) -> int:
        """Register ``callback`` and return its subscription id."""
        subscription_id = self._next_id
        self._callbacks[subscription_id] = callback
        self._next_id += 1
        return subscription_id

    def remove_all_subscribers(self) -> None:
        """Drop every registered callback."""
        self._callbacks.clear()

    def remove_subscriber(self, subscription_id: int) -> None:
        """Drop the callback registered under ``subscription_id``."""
        try:
            del self._callbacks[subscription_id]
        except KeyError:
            raise KeyError(f"invalid subscription id {subscription_id}") from None

    def invoke(self, event: Any) -> None:
        """Call every registered callback with ``event``."""
        for callback in list(self._callbacks.values()):
            callback(event)

    def __len__(self) -> int:
        return len(self._callbacks)


class EventChannel:
    """Routes published events to the subscribers of their exact type."""

    def __init__(self, *event_types: type) -> None:
        self._subscriptions: dict[type, SubscriptionList] = {t: SubscriptionList() for t in event_types}

    @property
    def event_types(self) -> Iterable[type]:
        return tuple(self._subscriptions)

    def _list_for(self, event_type: type) -> SubscriptionList:
        try:
            return self._subscriptions[event_type]
        except KeyError:
            raise KeyError(f"{event_type.__name__} is not an event type of this channel") from None

    def subscribe(self, event_type: type, callback: Callback) -> int:
        """Register ``callback`` for ``event_type`` and return its subscription id."""
        return self._list_for(event_type).add_subscriber(callback)

    def unsubscribe(self, event_type: type, subscription_id: int | None = None) -> None:
        """Remove one subscriber of ``event_type``, or all of them when no id is given."""
        subscribers = self._list_for(event_type)
        if subscription_id is None:
            subscribers.remove_all_subscribers()
        else:
            subscribers.remove_subscriber(subscription_id)

    def publish(self, event: Any) -> None:
        """Deliver ``event`` to the subscribers of its type."""
        self._list_for(type(event)).invoke(event)


@dataclass
class EntityEventManager:
    """The event channel owned by a single entity."""

    events: EventChannel = field(default_factory=EventChannel)