"""Event system for publisher-subscriber communication.

This package contains the event-driven observability layer:
- event_manager.py: Publisher-subscriber event routing
- events.py: Event definitions published by creatures and combat actions
"""

from .event_manager import EventManager
from .events import (
    GameEvent,
    EventType,
    CreatureCreated,
    CreatureDamaged,
    CreatureHealed,
    CreatureDefeated,
    ResourceChanged,
    ActionPerformed,
    ActionFailed,
)

__all__ = [
    "EventManager",
    "GameEvent",
    "EventType",
    "CreatureCreated",
    "CreatureDamaged",
    "CreatureHealed",
    "CreatureDefeated",
    "ResourceChanged",
    "ActionPerformed",
    "ActionFailed",
]
