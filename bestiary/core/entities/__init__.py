"""Entity system foundation.

This package contains the component container used by every creature:
- components.py: Base Component and Entity classes plus component errors
"""

from .components import (
    Component,
    Entity,
    ComponentError,
    MissingComponentError,
    DuplicateComponentError,
)

__all__ = [
    "Component",
    "Entity",
    "ComponentError",
    "MissingComponentError",
    "DuplicateComponentError",
]
