"""
Notifications for observers of the ledger.

An event is a type plus a flat list of (key, value) string attributes. The service only needs something to emit to (EventSink);
EventManager is the in-process implementation that keeps the emitted events around in order.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)

EVENT_TYPE_MESSAGE = "message"
ATTRIBUTE_KEY_MODULE = "module"
ATTRIBUTE_KEY_ACTION = "action"
MODULE_NAME = "checkers"

# Game creation
STORED_GAME_EVENT_KEY = "NewGameCreated"
STORED_GAME_EVENT_CREATOR = "Creator"
STORED_GAME_EVENT_INDEX = "Index"
STORED_GAME_EVENT_RED = "Red"
STORED_GAME_EVENT_BLACK = "Black"

# Move played
PLAY_MOVE_EVENT_KEY = "MovePlayed"
PLAY_MOVE_EVENT_CREATOR = "Creator"
PLAY_MOVE_EVENT_ID_VALUE = "IdValue"
PLAY_MOVE_EVENT_CAPTURED_X = "CapturedX"
PLAY_MOVE_EVENT_CAPTURED_Y = "CapturedY"
PLAY_MOVE_EVENT_WINNER = "Winner"

Attribute = tuple[str, str]


@dataclass(frozen=True)
class Event:
    type: str
    attributes: list[Attribute] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        """Value of the first attribute with the given key"""
        return next((value for attr_key, value in self.attributes if attr_key == key), None)


def message_event(action: str, *attributes: Attribute) -> Event:
    """Events emitted by this module always lead with the module name and the action."""
    return Event(
        type=EVENT_TYPE_MESSAGE,
        attributes=[
            (ATTRIBUTE_KEY_MODULE, MODULE_NAME),
            (ATTRIBUTE_KEY_ACTION, action),
            *attributes,
        ],
    )


class EventSink(Protocol):
    def emit(self, event: Event) -> None: ...


class EventManager:
    """Collects events in the order they were emitted"""

    def __init__(self) -> None:
        self._events: list[Event] = []

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    def emit(self, event: Event) -> None:
        logger.debug("Event emitted: %s %s", event.type, event.attributes)
        self._events.append(event)

    def clear(self) -> None:
        self._events.clear()
