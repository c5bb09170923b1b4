"""Creature entities.

This package contains creature definitions and component implementations:
- components.py: Identity, Health and Resource components
- creature.py: Creature and its Dragon, Elf and Orc variants
- creature_templates.py: Variant resource and action tuning loaded from YAML
"""

from .components import IdentityComponent, HealthComponent, ResourceComponent
from .creature import Creature, Dragon, Elf, Orc
from .creature_templates import (
    ActionProfile,
    CreatureTemplate,
    CREATURE_TEMPLATES,
    load_creature_templates,
    get_template,
    create_creature_entity,
)

__all__ = [
    "IdentityComponent",
    "HealthComponent",
    "ResourceComponent",
    "Creature",
    "Dragon",
    "Elf",
    "Orc",
    "ActionProfile",
    "CreatureTemplate",
    "CREATURE_TEMPLATES",
    "load_creature_templates",
    "get_template",
    "create_creature_entity",
]
