"""Creature variant templates for component initialization.

This module defines how each creature variant is configured: which resource
it carries, the bounds of that resource, and the tuning of its combat action.
Templates are loaded from a YAML file shipped with the package and converted
to data structures keyed by CreatureKind.
"""

import os
from dataclasses import dataclass
from typing import Optional

import yaml

from ...core.data import (
    ActionType,
    CreatureKind,
    DateLike,
    ResourceFlow,
    ResourceType,
)
from ...core.entities import Entity
from ...core.errors import InvalidArgumentError
from ...core.validation import validate_date_of_birth, validate_name
from .components import HealthComponent, IdentityComponent, ResourceComponent


@dataclass(frozen=True)
class ActionProfile:
    """Tuning for a variant's combat action.

    `amount` is spent for SPEND actions and gained for BUILD actions.
    When `empowered_damage` is set, it replaces `damage` whenever the
    resource value after the action exceeds `empowered_threshold`.
    """

    action_type: ActionType
    flow: ResourceFlow
    required: int
    amount: int
    damage: int
    empowered_damage: Optional[int] = None
    empowered_threshold: Optional[int] = None

    @property
    def resource_delta(self) -> int:
        """Signed change applied to the resource by one action."""
        return -self.amount if self.flow == ResourceFlow.SPEND else self.amount

    def damage_for(self, resource_after: int) -> int:
        """Get the damage dealt given the resource value after the action."""
        if (
            self.empowered_damage is not None
            and self.empowered_threshold is not None
            and resource_after > self.empowered_threshold
        ):
            return self.empowered_damage
        return self.damage


@dataclass(frozen=True)
class CreatureTemplate:
    """Template for a creature variant's resource and action."""

    kind: CreatureKind
    resource_type: ResourceType
    resource_min: int
    resource_max: int
    action: ActionProfile


def _templates_path() -> str:
    """Get the path of the bundled creature templates file."""
    # bestiary/game/entities -> bestiary
    current_dir = os.path.dirname(os.path.abspath(__file__))
    package_root = os.path.dirname(os.path.dirname(current_dir))
    return os.path.join(
        package_root, "assets", "data", "creatures", "creature_templates.yaml"
    )


def _lookup(enum_class, name):
    """Look up an enum member by name, raising ValueError for unknown names."""
    try:
        return enum_class[name]
    except KeyError:
        raise ValueError(f"Unknown {enum_class.__name__} name: {name}") from None


def _parse_action(action_data: dict) -> ActionProfile:
    return ActionProfile(
        action_type=_lookup(ActionType, action_data["type"]),
        flow=_lookup(ResourceFlow, action_data["flow"]),
        required=int(action_data["required"]),
        amount=int(action_data["amount"]),
        damage=int(action_data["damage"]),
        empowered_damage=action_data.get("empowered_damage"),
        empowered_threshold=action_data.get("empowered_threshold"),
    )


def load_creature_templates(yaml_path: Optional[str] = None) -> dict[CreatureKind, CreatureTemplate]:
    """Load creature templates from a YAML file.

    Args:
        yaml_path: File to load, defaults to the bundled templates

    Returns:
        Dictionary mapping CreatureKind enums to CreatureTemplate objects

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If a required key is missing
        ValueError: If a kind, resource, action or flow name is unknown
    """
    yaml_path = yaml_path or _templates_path()

    try:
        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Creature templates file not found: {yaml_path}")

    templates = {}
    try:
        for kind_name, template_data in data["creature_templates"].items():
            kind = _lookup(CreatureKind, kind_name)
            resource_data = template_data["resource"]
            templates[kind] = CreatureTemplate(
                kind=kind,
                resource_type=_lookup(ResourceType, resource_data["type"]),
                resource_min=int(resource_data["min"]),
                resource_max=int(resource_data["max"]),
                action=_parse_action(template_data["action"]),
            )
    except (KeyError, TypeError) as e:
        raise KeyError(f"Invalid template structure in {yaml_path}: {e}")
    except ValueError as e:
        raise ValueError(f"{e} in {yaml_path}")

    return templates


# Load templates from YAML file
CREATURE_TEMPLATES: dict[CreatureKind, CreatureTemplate] = load_creature_templates()


def get_template(kind: CreatureKind) -> CreatureTemplate:
    """Get the template for a creature variant.

    Raises:
        KeyError: If the kind has no template (plain creatures carry no resource)
    """
    if kind not in CREATURE_TEMPLATES:
        raise KeyError(f"No template found for creature kind: {kind}")

    return CREATURE_TEMPLATES[kind]


def create_creature_entity(
    name: str,
    date_of_birth: DateLike,
    health: int,
    kind: CreatureKind = CreatureKind.CREATURE,
    resource: Optional[int] = None,
) -> Entity:
    """Create a validated creature entity with all of its components.

    Every argument is checked before the entity is returned, so a partially
    built creature never escapes.

    Args:
        name: Non-blank display name
        date_of_birth: Birth date, not in the future
        health: Initial health (1..100)
        kind: Creature variant
        resource: Initial resource value, required for variants and
            rejected for plain creatures

    Returns:
        Entity with Identity, Health and (for variants) Resource components

    Raises:
        InvalidArgumentError: If any argument is invalid
    """
    validated_name = validate_name(name)
    birth = validate_date_of_birth(date_of_birth)

    if kind == CreatureKind.CREATURE and resource is not None:
        raise InvalidArgumentError("A plain creature carries no resource.", argument="resource")

    entity = Entity()
    entity.add_component(IdentityComponent(entity, validated_name, birth, kind))
    entity.add_component(HealthComponent(entity, health))

    if kind != CreatureKind.CREATURE:
        template = get_template(kind)
        entity.add_component(ResourceComponent(
            entity,
            template.resource_type,
            resource,  # type: ignore[arg-type]  # None is rejected by range validation
            template.resource_min,
            template.resource_max,
        ))

    return entity
