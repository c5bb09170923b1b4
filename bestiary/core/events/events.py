"""Creature events and their types.

This module defines the events that creatures and combat actions publish
so that observers (such as the log manager) can follow what happens
without the creatures depending on them.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- Events use proper enums instead of magic strings
- Keep event types focused and avoid over-granular events
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

from ..data import ActionType, ResourceType

if TYPE_CHECKING:
    from ...game.entities.creature import Creature


class EventType(Enum):
    """Types of events that observers can subscribe to."""
    # Creature lifecycle
    CREATURE_CREATED = auto()
    CREATURE_DAMAGED = auto()
    CREATURE_HEALED = auto()
    CREATURE_DEFEATED = auto()
    
    # Resources
    RESOURCE_CHANGED = auto()
    
    # Combat
    ACTION_PERFORMED = auto()
    ACTION_FAILED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all events."""
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class CreatureCreated(GameEvent):
    """Event emitted when a creature passes validation and is constructed."""
    creature: "Creature"
    
    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.CREATURE_CREATED)


@dataclass(frozen=True)
class CreatureDamaged(GameEvent):
    """Event emitted after a creature takes damage."""
    creature: "Creature"
    amount: int
    health_before: int
    health_after: int
    
    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.CREATURE_DAMAGED)


@dataclass(frozen=True)
class CreatureHealed(GameEvent):
    """Event emitted after a creature is healed."""
    creature: "Creature"
    amount: int
    health_before: int
    health_after: int
    
    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.CREATURE_HEALED)


@dataclass(frozen=True)
class CreatureDefeated(GameEvent):
    """Event emitted when a creature's health drops to zero."""
    creature: "Creature"
    
    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.CREATURE_DEFEATED)


@dataclass(frozen=True)
class ResourceChanged(GameEvent):
    """Event emitted when a variant's resource value changes."""
    creature: "Creature"
    resource_type: ResourceType
    before: int
    after: int
    
    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.RESOURCE_CHANGED)


@dataclass(frozen=True)
class ActionPerformed(GameEvent):
    """Event emitted when a combat action completes."""
    actor: "Creature"
    target: "Creature"
    action_type: ActionType
    damage: int
    
    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ACTION_PERFORMED)


@dataclass(frozen=True)
class ActionFailed(GameEvent):
    """Event emitted when a combat action is rejected before any mutation."""
    actor: "Creature"
    action_type: ActionType
    reason: str
    
    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ACTION_FAILED)
