"""Component-based creatures.

This module provides the Creature class and its three variants. A creature
is an Entity plus components:
- Identity: name, birth date and variant kind
- Health: bounded life total
- Resource: the variant's secondary counter (Dragon, Elf and Orc only)

Variants add a resource property and a combat action on top of the plain
creature API; the actions themselves live in `game.combat.actions` and are
dispatched on the creature's kind, so any variant can be handled through a
plain Creature reference.
"""

from datetime import date
from typing import Optional, TYPE_CHECKING, cast

from ...core.data import ComponentType, CreatureKind, DateLike
from ...core.events import (
    CreatureCreated,
    CreatureDamaged,
    CreatureDefeated,
    CreatureHealed,
    EventManager,
    GameEvent,
    ResourceChanged,
)
from .components import HealthComponent, IdentityComponent, ResourceComponent
from .creature_templates import create_creature_entity

if TYPE_CHECKING:
    from ..combat.actions import ActionResult


class Creature:
    """A named creature with a birth date and bounded health.

    Property Access Patterns:
    1. **Core properties**: creature.name, creature.health, creature.is_alive
    2. **Component access**: creature.identity.kind, creature.vitality.current

    Examples:
        goblin = Creature("Snik", date(2001, 4, 2), 40)
        goblin.take_damage(15)
        goblin.heal(5)
        print(goblin.summary())
    """

    kind: CreatureKind = CreatureKind.CREATURE

    def __init__(
        self,
        name: str,
        date_of_birth: DateLike,
        health: int,
        event_manager: Optional[EventManager] = None,
        *,
        resource: Optional[int] = None,
    ):
        """Initialize a creature.

        Args:
            name: Non-blank display name
            date_of_birth: Birth date, not in the future
            health: Initial health (1..100)
            event_manager: Optional bus that receives creature events
            resource: Initial resource value; variants pass theirs, plain
                creatures carry none

        Raises:
            InvalidArgumentError: If any argument is invalid
        """
        self.entity = create_creature_entity(name, date_of_birth, health, self.kind, resource)
        self.event_manager = event_manager
        self.emit(CreatureCreated(creature=self))

    def emit(self, event: GameEvent) -> None:
        """Publish an event if this creature is attached to an event manager."""
        if self.event_manager is not None:
            self.event_manager.publish(event, source=self.name)

    # ============== Core Properties ==============

    @property
    def creature_id(self) -> str:
        """Get unique creature ID."""
        return self.entity.entity_id

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def date_of_birth(self) -> date:
        """Get the birth date (an immutable value)."""
        return self.identity.date_of_birth

    @property
    def health(self) -> int:
        """Get current health (0..100)."""
        return self.vitality.current

    @property
    def is_alive(self) -> bool:
        """Check if creature is alive."""
        return self.vitality.is_alive()

    # ============== Components ==============

    @property
    def identity(self) -> IdentityComponent:
        """Identity component - name, birth date and kind."""
        return cast(IdentityComponent, self.entity.require_component(ComponentType.IDENTITY))

    @property
    def vitality(self) -> HealthComponent:
        """Health component - bounded life total."""
        return cast(HealthComponent, self.entity.require_component(ComponentType.HEALTH))

    @property
    def resource(self) -> ResourceComponent:
        """Resource component - only present on variants.

        Raises:
            MissingComponentError: On a plain creature
        """
        return cast(ResourceComponent, self.entity.require_component(ComponentType.RESOURCE))

    @property
    def has_resource(self) -> bool:
        return self.entity.has_component(ComponentType.RESOURCE)

    # ============== Operations ==============

    def take_damage(self, amount: int) -> int:
        """Reduce health by `amount`, never below zero.

        Args:
            amount: Non-negative damage

        Returns:
            Actual damage dealt (may be less due to overkill prevention)

        Raises:
            InvalidDamageError: If amount is negative
        """
        before, after = self.vitality.take_damage(amount)
        self.emit(CreatureDamaged(creature=self, amount=amount, health_before=before, health_after=after))
        if before > 0 and after == 0:
            self.emit(CreatureDefeated(creature=self))
        return before - after

    def heal(self, amount: int) -> int:
        """Increase health by `amount`, never above 100.

        Returns:
            Actual healing done (may be less due to the health cap)

        Raises:
            InvalidHealError: If amount is negative
        """
        before, after = self.vitality.heal(amount)
        self.emit(CreatureHealed(creature=self, amount=amount, health_before=before, health_after=after))
        return after - before

    def age_years(self, today: Optional[date] = None) -> int:
        """Get age in whole years, as of `today` (defaults to the current date)."""
        return self.identity.get_age_years(today or date.today())

    def summary(self, today: Optional[date] = None) -> str:
        """Get a one-line description of the creature.

        Fields, in order: type tag, name, birth date, age, health and, for
        variants, the resource.
        """
        text = (
            f"Class={self.identity.get_kind_name()}, "
            f"Name={self.name}, "
            f"DOB={self.date_of_birth.isoformat()}, "
            f"AgeYears={self.age_years(today)}, "
            f"Health={self.health}"
        )
        if self.has_resource:
            resource = self.resource
            text += f", {resource.get_resource_name()}={resource.current}"
        return text

    def _restore_resource(self, amount: int) -> int:
        before, after = self.resource.restore(amount)
        if after != before:
            self.emit(ResourceChanged(
                creature=self,
                resource_type=self.resource.resource_type,
                before=before,
                after=after,
            ))
        return after

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, health={self.health})"


class Dragon(Creature):
    """A creature with fire power (0..100) that can breathe fire."""

    kind = CreatureKind.DRAGON

    def __init__(
        self,
        name: str,
        date_of_birth: DateLike,
        health: int,
        fire_power: int,
        event_manager: Optional[EventManager] = None,
    ):
        super().__init__(name, date_of_birth, health, event_manager, resource=fire_power)

    @property
    def fire_power(self) -> int:
        return self.resource.current

    def breathe_fire(self, target: Creature) -> "ActionResult":
        """Spend 10 fire power to deal 20 damage to `target`.

        Raises:
            InvalidArgumentError: If target is not a creature
            LowFirePowerError: If fire power is below 10
        """
        from ..combat.actions import breathe_fire
        return breathe_fire(self, target)

    def restore_fire_power(self, amount: int) -> int:
        """Add fire power, capped at 100. Returns the new fire power."""
        return self._restore_resource(amount)


class Elf(Creature):
    """A creature with mana (0..50) that can cast spells."""

    kind = CreatureKind.ELF

    def __init__(
        self,
        name: str,
        date_of_birth: DateLike,
        health: int,
        mana: int,
        event_manager: Optional[EventManager] = None,
    ):
        super().__init__(name, date_of_birth, health, event_manager, resource=mana)

    @property
    def mana(self) -> int:
        return self.resource.current

    def cast_spell(self, target: Creature) -> "ActionResult":
        """Spend 5 mana to deal 10 damage to `target`.

        Raises:
            InvalidArgumentError: If target is not a creature
            LowManaError: If mana is below 5
        """
        from ..combat.actions import cast_spell
        return cast_spell(self, target)

    def restore_mana(self, amount: int) -> int:
        """Add mana, capped at 50. Returns the new mana."""
        return self._restore_resource(amount)


class Orc(Creature):
    """A creature with rage (0..30) that can go berserk."""

    kind = CreatureKind.ORC

    def __init__(
        self,
        name: str,
        date_of_birth: DateLike,
        health: int,
        rage: int,
        event_manager: Optional[EventManager] = None,
    ):
        super().__init__(name, date_of_birth, health, event_manager, resource=rage)

    @property
    def rage(self) -> int:
        return self.resource.current

    def berserk(self, target: Creature) -> "ActionResult":
        """Gain 5 rage (capped at 30), then hit `target` for 30 if rage is above 20, else 15.

        Raises:
            InvalidArgumentError: If target is not a creature
            LowRageError: If rage is below 5
        """
        from ..combat.actions import berserk
        return berserk(self, target)
