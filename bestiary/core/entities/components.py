"""Component-based entity system for creatures.

This module provides the foundation for a classical component system where
entities are composed of discrete, focused components that handle specific
aspects of creature state (identity, health, secondary resource).
"""

from abc import ABC, abstractmethod
from typing import Optional
import uuid

from ..data.game_enums import COMPONENT_TYPE_NAMES, ComponentType


class Component(ABC):
    """Base class for all components in the system.
    
    Components represent specific aspects of an entity (identity, health,
    resource) and contain both data and methods related to that aspect.
    """
    
    def __init__(self, entity: "Entity"):
        """Initialize component with reference to owning entity.
        
        Args:
            entity: The entity this component belongs to
        """
        self.entity = entity
    
    @abstractmethod
    def get_component_type(self) -> ComponentType:
        """Get the type identifier for this component."""
        pass


class Entity:
    """Container for components that together define a creature.
    
    An entity is a unique ID plus a collection of components keyed by
    their type. At most one component of each type may be attached.
    """
    
    def __init__(self, entity_id: Optional[str] = None):
        """Initialize entity with unique ID and empty component collection."""
        self.entity_id: str = entity_id or str(uuid.uuid4())
        self.components: dict[ComponentType, Component] = {}
    
    def add_component(self, component: Component) -> None:
        """Add a component to this entity.
        
        Args:
            component: The component to add
            
        Raises:
            DuplicateComponentError: If a component of this type already exists
        """
        component_type = component.get_component_type()
        if component_type in self.components:
            raise DuplicateComponentError(self.entity_id, component_type)
        
        self.components[component_type] = component
    
    def get_component(self, component_type: ComponentType) -> Optional[Component]:
        """Get a component by type, or None if it is not attached."""
        return self.components.get(component_type)
    
    def require_component(self, component_type: ComponentType) -> Component:
        """Get a component by type, raising an error if it doesn't exist.
        
        Args:
            component_type: Type of the component to retrieve
            
        Returns:
            The component
            
        Raises:
            MissingComponentError: If the component doesn't exist
        """
        component = self.components.get(component_type)
        if component is None:
            raise MissingComponentError(self.entity_id, component_type)
        return component
    
    def has_component(self, component_type: ComponentType) -> bool:
        """Check if this entity has a specific component."""
        return component_type in self.components
    
    def get_all_components(self) -> dict[ComponentType, Component]:
        """Get a copy of all components on this entity."""
        return self.components.copy()


class ComponentError(Exception):
    """Base exception for component system errors."""
    pass


class MissingComponentError(ComponentError):
    """Raised when trying to access a component that doesn't exist."""
    
    def __init__(self, entity_id: str, component_type: ComponentType):
        super().__init__(f"Entity {entity_id} missing component: {COMPONENT_TYPE_NAMES[component_type]}")
        self.entity_id = entity_id
        self.component_type = component_type


class DuplicateComponentError(ComponentError):
    """Raised when trying to add a component that already exists."""
    
    def __init__(self, entity_id: str, component_type: ComponentType):
        super().__init__(f"Entity {entity_id} already has component: {COMPONENT_TYPE_NAMES[component_type]}")
        self.entity_id = entity_id
        self.component_type = component_type
