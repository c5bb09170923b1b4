"""
Combat action resolution.

This module applies variant combat actions: it validates the target, checks
and updates the actor's resource under the actor's lock, then hands the
damage to the target's own take_damage. Either the whole sequence happens
or, when the resource check fails, nothing changes.
"""

from dataclasses import dataclass
from typing import Any, Callable

from ...core.data import ACTION_TYPE_NAMES, ActionType, CreatureKind, CREATURE_KIND_NAMES
from ...core.errors import InsufficientResourceError, InvalidArgumentError
from ...core.events import ActionFailed, ActionPerformed, ResourceChanged
from ..entities.creature import Creature
from ..entities.creature_templates import get_template


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a completed combat action."""
    actor: Creature
    target: Creature
    action_type: ActionType
    damage: int               # Damage the action inflicted on the target
    damage_dealt: int         # Health the target actually lost
    resource_before: int
    resource_after: int

    @property
    def target_defeated(self) -> bool:
        return not self.target.is_alive


def validate_target(target: Any) -> Creature:
    """Ensure the action target is a creature.

    Raises:
        InvalidArgumentError: If target is None or not a Creature
    """
    if target is None:
        raise InvalidArgumentError("Target must not be None.", argument="target")
    if not isinstance(target, Creature):
        raise InvalidArgumentError(
            f"Target must be a Creature, got {type(target).__name__}",
            argument="target",
        )
    return target


def _resolve(actor: Creature, target: Creature, expected_kind: CreatureKind) -> ActionResult:
    validate_target(target)
    if not isinstance(actor, Creature) or actor.kind != expected_kind:
        raise InvalidArgumentError(
            f"Actor must be a {CREATURE_KIND_NAMES[expected_kind]}",
            argument="actor",
        )

    profile = get_template(expected_kind).action
    action_name = ACTION_TYPE_NAMES[profile.action_type].lower()

    try:
        before, after = actor.resource.commit(profile.required, profile.resource_delta, action_name)
    except InsufficientResourceError as e:
        actor.emit(ActionFailed(actor=actor, action_type=profile.action_type, reason=str(e)))
        raise

    if after != before:
        actor.emit(ResourceChanged(
            creature=actor,
            resource_type=actor.resource.resource_type,
            before=before,
            after=after,
        ))

    damage = profile.damage_for(after)
    damage_dealt = target.take_damage(damage)

    actor.emit(ActionPerformed(
        actor=actor,
        target=target,
        action_type=profile.action_type,
        damage=damage,
    ))

    return ActionResult(
        actor=actor,
        target=target,
        action_type=profile.action_type,
        damage=damage,
        damage_dealt=damage_dealt,
        resource_before=before,
        resource_after=after,
    )


def breathe_fire(dragon: Creature, target: Creature) -> ActionResult:
    """Dragon spends 10 fire power to deal 20 damage.

    Raises:
        InvalidArgumentError: If target is not a creature or actor is not a dragon
        LowFirePowerError: If fire power is below 10
    """
    return _resolve(dragon, target, CreatureKind.DRAGON)


def cast_spell(elf: Creature, target: Creature) -> ActionResult:
    """Elf spends 5 mana to deal 10 damage.

    Raises:
        InvalidArgumentError: If target is not a creature or actor is not an elf
        LowManaError: If mana is below 5
    """
    return _resolve(elf, target, CreatureKind.ELF)


def berserk(orc: Creature, target: Creature) -> ActionResult:
    """Orc needs 5 rage, gains 5 (capped at 30), then deals 30 damage above 20 rage or 15 otherwise.

    Raises:
        InvalidArgumentError: If target is not a creature or actor is not an orc
        LowRageError: If rage is below 5
    """
    return _resolve(orc, target, CreatureKind.ORC)


ActionHandler = Callable[[Creature, Creature], ActionResult]

ACTION_HANDLERS: dict[CreatureKind, ActionHandler] = {
    CreatureKind.DRAGON: breathe_fire,
    CreatureKind.ELF: cast_spell,
    CreatureKind.ORC: berserk,
}


def perform_action(actor: Creature, target: Creature) -> ActionResult:
    """Run the actor's combat action against `target`, whatever its variant.

    Raises:
        InvalidArgumentError: If the actor has no combat action or the target is invalid
        InsufficientResourceError: If the actor cannot afford its action
    """
    if not isinstance(actor, Creature):
        raise InvalidArgumentError("Actor must be a Creature.", argument="actor")

    handler = ACTION_HANDLERS.get(actor.kind)
    if handler is None:
        raise InvalidArgumentError(
            f"{actor.name} ({CREATURE_KIND_NAMES[actor.kind]}) has no combat action",
            argument="actor",
        )
    return handler(actor, target)
