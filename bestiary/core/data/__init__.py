"""Core data definitions.

This package contains fundamental enums and helpers:
- game_enums.py: Centralized enums for creature kinds, resources, actions, components
- dates.py: Birth date normalization and age calculation
"""

from .game_enums import (
    CreatureKind,
    ResourceType,
    ResourceFlow,
    ActionType,
    ComponentType,
    MIN_HEALTH,
    MAX_HEALTH,
    DEAD_HEALTH,
    CREATURE_KIND_NAMES,
    RESOURCE_TYPE_NAMES,
    ACTION_TYPE_NAMES,
    COMPONENT_TYPE_NAMES,
)
from .dates import DateLike, MIN_AGE_YEARS, to_date, is_in_future, calculate_age_years

__all__ = [
    "CreatureKind",
    "ResourceType",
    "ResourceFlow",
    "ActionType",
    "ComponentType",
    "MIN_HEALTH",
    "MAX_HEALTH",
    "DEAD_HEALTH",
    "CREATURE_KIND_NAMES",
    "RESOURCE_TYPE_NAMES",
    "ACTION_TYPE_NAMES",
    "COMPONENT_TYPE_NAMES",
    "DateLike",
    "MIN_AGE_YEARS",
    "to_date",
    "is_in_future",
    "calculate_age_years",
]
