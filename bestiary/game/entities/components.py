"""Creature components.

This module contains the concrete component implementations for creatures:
Identity (who the creature is), Health (bounded life total) and Resource
(the bounded secondary counter carried by Dragons, Elves and Orcs).

Health and Resource each guard their counter with a re-entrant lock so a
read-check-write sequence on one creature is atomic with respect to other
mutators of the same creature.
"""

import threading
from datetime import date
from typing import TYPE_CHECKING

from ...core.data import (
    ComponentType,
    CreatureKind,
    ResourceType,
    CREATURE_KIND_NAMES,
    RESOURCE_TYPE_NAMES,
    DEAD_HEALTH,
    MAX_HEALTH,
    MIN_HEALTH,
    calculate_age_years,
)
from ...core.entities import Component
from ...core.errors import (
    INSUFFICIENT_RESOURCE_ERRORS,
    InvalidDamageError,
    InvalidHealError,
)
from ...core.validation import validate_in_range, validate_int, validate_non_negative

if TYPE_CHECKING:
    from ...core.entities import Entity


class IdentityComponent(Component):
    """Component for identity and classification.

    Holds the creature's name, birth date and variant kind. All three are
    fixed at construction; the birth date is a `datetime.date`, which is
    immutable, so handing it out never exposes internal state.
    """

    def __init__(self, entity: "Entity", name: str, date_of_birth: date, kind: CreatureKind):
        """Initialize identity component.

        Args:
            entity: The entity this component belongs to
            name: Validated display name
            date_of_birth: Validated, normalized birth date
            kind: Creature variant
        """
        super().__init__(entity)
        self._name = name
        self._date_of_birth = date_of_birth
        self._kind = kind

    def get_component_type(self) -> ComponentType:
        return ComponentType.IDENTITY

    @property
    def name(self) -> str:
        return self._name

    @property
    def date_of_birth(self) -> date:
        return self._date_of_birth

    @property
    def kind(self) -> CreatureKind:
        return self._kind

    def get_kind_name(self) -> str:
        """Get the human-readable variant name used as the summary type tag."""
        return CREATURE_KIND_NAMES[self._kind]

    def get_age_years(self, today: date) -> int:
        """Get the creature's age in whole years as of `today`."""
        return calculate_age_years(self._date_of_birth, today)


class HealthComponent(Component):
    """Component for life and death management.

    Health starts in [MIN_HEALTH, MAX_HEALTH] and afterwards only moves
    through take_damage and heal, which clamp to [DEAD_HEALTH, MAX_HEALTH].
    """

    def __init__(self, entity: "Entity", health: int):
        """Initialize health component.

        Args:
            entity: The entity this component belongs to
            health: Initial health (MIN_HEALTH..MAX_HEALTH)

        Raises:
            InvalidArgumentError: If health is out of range
        """
        super().__init__(entity)
        self._hp = validate_in_range(health, MIN_HEALTH, MAX_HEALTH, "health")
        self._lock = threading.RLock()

    def get_component_type(self) -> ComponentType:
        return ComponentType.HEALTH

    @property
    def current(self) -> int:
        return self._hp

    def is_alive(self) -> bool:
        """Check if the creature is alive (health above zero)."""
        return self._hp > DEAD_HEALTH

    def take_damage(self, amount: int) -> tuple[int, int]:
        """Apply damage, clamping health at DEAD_HEALTH.

        Args:
            amount: Non-negative damage to apply

        Returns:
            Tuple of (health before, health after)

        Raises:
            InvalidDamageError: If amount is negative
        """
        validate_int(amount, "amount")
        if amount < 0:
            raise InvalidDamageError(amount)

        with self._lock:
            before = self._hp
            self._hp = max(DEAD_HEALTH, self._hp - amount)
            return before, self._hp

    def heal(self, amount: int) -> tuple[int, int]:
        """Apply healing, clamping health at MAX_HEALTH.

        Args:
            amount: Non-negative healing to apply

        Returns:
            Tuple of (health before, health after)

        Raises:
            InvalidHealError: If amount is negative
        """
        validate_int(amount, "amount")
        if amount < 0:
            raise InvalidHealError(amount)

        with self._lock:
            before = self._hp
            self._hp = min(MAX_HEALTH, self._hp + amount)
            return before, self._hp


class ResourceComponent(Component):
    """Component for a variant's bounded secondary resource.

    Fire power, mana and rage all behave the same way: an integer in
    [minimum, maximum] that combat actions spend or build and restoration
    tops up. Every update is clamped to the bounds.
    """

    def __init__(self, entity: "Entity", resource_type: ResourceType, value: int, minimum: int, maximum: int):
        """Initialize resource component.

        Args:
            entity: The entity this component belongs to
            resource_type: Which resource this is
            value: Initial value (minimum..maximum)
            minimum: Lower bound
            maximum: Upper bound

        Raises:
            InvalidArgumentError: If value is out of range
        """
        super().__init__(entity)
        self.resource_type = resource_type
        self.minimum = minimum
        self.maximum = maximum
        self._value = validate_in_range(value, minimum, maximum, self.get_resource_name())
        self._lock = threading.RLock()

    def get_component_type(self) -> ComponentType:
        return ComponentType.RESOURCE

    def get_resource_name(self) -> str:
        return RESOURCE_TYPE_NAMES[self.resource_type]

    @property
    def current(self) -> int:
        return self._value

    def _clamp(self, value: int) -> int:
        return max(self.minimum, min(self.maximum, value))

    def commit(self, required: int, delta: int, action_name: str = "act") -> tuple[int, int]:
        """Atomically check the action threshold and apply a resource change.

        Nothing changes when the threshold is not met.

        Args:
            required: Minimum value needed before the change
            delta: Signed change (negative to spend, positive to build)
            action_name: Action name used in the error message

        Returns:
            Tuple of (value before, value after)

        Raises:
            InsufficientResourceError: The variant-specific subclass when
                the current value is below `required`
        """
        with self._lock:
            if self._value < required:
                error_class = INSUFFICIENT_RESOURCE_ERRORS[self.resource_type]
                raise error_class(self._value, required, action_name)

            before = self._value
            self._value = self._clamp(self._value + delta)
            return before, self._value

    def restore(self, amount: int) -> tuple[int, int]:
        """Add to the resource, clamping at the maximum.

        Returns:
            Tuple of (value before, value after)

        Raises:
            InvalidArgumentError: If amount is negative
        """
        validate_non_negative(amount, "amount")

        with self._lock:
            before = self._value
            self._value = self._clamp(self._value + amount)
            return before, self._value
