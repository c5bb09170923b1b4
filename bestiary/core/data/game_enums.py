"""Centralized creature enums and constants.

This module contains all core enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class CreatureKind(Enum):
    """Closed set of creature variants."""
    CREATURE = auto()
    DRAGON = auto()
    ELF = auto()
    ORC = auto()


class ResourceType(Enum):
    """Secondary resources carried by creature variants."""
    FIRE_POWER = auto()
    MANA = auto()
    RAGE = auto()


class ResourceFlow(Enum):
    """How a combat action moves its resource."""
    SPEND = auto()   # Action consumes the resource (Dragon, Elf)
    BUILD = auto()   # Action accumulates the resource (Orc)


class ActionType(Enum):
    """Combat actions, one per variant."""
    BREATHE_FIRE = auto()
    CAST_SPELL = auto()
    BERSERK = auto()


class ComponentType(Enum):
    """Component types making up a creature entity."""
    IDENTITY = auto()
    HEALTH = auto()
    RESOURCE = auto()


# Health bounds shared by every creature
MIN_HEALTH = 1      # A creature cannot be born dead
MAX_HEALTH = 100
DEAD_HEALTH = 0


CREATURE_KIND_NAMES = {
    CreatureKind.CREATURE: "Creature",
    CreatureKind.DRAGON: "Dragon",
    CreatureKind.ELF: "Elf",
    CreatureKind.ORC: "Orc",
}

RESOURCE_TYPE_NAMES = {
    ResourceType.FIRE_POWER: "FirePower",
    ResourceType.MANA: "Mana",
    ResourceType.RAGE: "Rage",
}

ACTION_TYPE_NAMES = {
    ActionType.BREATHE_FIRE: "Breathe Fire",
    ActionType.CAST_SPELL: "Cast Spell",
    ActionType.BERSERK: "Berserk",
}

COMPONENT_TYPE_NAMES = {
    ComponentType.IDENTITY: "Identity",
    ComponentType.HEALTH: "Health",
    ComponentType.RESOURCE: "Resource",
}
