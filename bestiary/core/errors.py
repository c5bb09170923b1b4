"""Error taxonomy for creature construction, mutation and combat.

Validation failures are raised at the earliest check and surfaced to the
direct caller. Two families exist:

- InvalidArgumentError: the caller passed something malformed (blank name,
  future birth date, out-of-range health or resource, negative amount,
  missing target). InvalidDamageError and InvalidHealError keep their own
  kind for diagnostics while remaining InvalidArgumentErrors.
- InsufficientResourceError: a well-formed action the actor cannot afford
  right now. One subclass per resource so callers can react differently.
"""

from typing import Optional

from .data.game_enums import ResourceType, RESOURCE_TYPE_NAMES


class BestiaryError(Exception):
    """Base exception for all creature errors."""
    pass


class InvalidArgumentError(BestiaryError, ValueError):
    """Raised when a constructor, mutator or action receives a malformed argument."""
    
    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class InvalidDamageError(InvalidArgumentError):
    """Raised when a negative damage amount is applied."""
    
    def __init__(self, amount: int):
        super().__init__(f"Damage cannot be negative: {amount}", argument="amount")
        self.amount = amount


class InvalidHealError(InvalidArgumentError):
    """Raised when a negative healing amount is applied."""
    
    def __init__(self, amount: int):
        super().__init__(f"Healing cannot be negative: {amount}", argument="amount")
        self.amount = amount


class InsufficientResourceError(BestiaryError):
    """Raised when an actor's resource is below an action's threshold."""
    
    resource_type: ResourceType
    
    def __init__(self, current: int, required: int, action_name: str = "act"):
        resource_name = RESOURCE_TYPE_NAMES[self.resource_type]
        super().__init__(
            f"Not enough {resource_name} to {action_name}. "
            f"{resource_name}={current} (requires {required})"
        )
        self.current = current
        self.required = required


class LowFirePowerError(InsufficientResourceError):
    """Raised when a dragon tries to breathe fire without enough fire power."""
    resource_type = ResourceType.FIRE_POWER


class LowManaError(InsufficientResourceError):
    """Raised when an elf tries to cast a spell without enough mana."""
    resource_type = ResourceType.MANA


class LowRageError(InsufficientResourceError):
    """Raised when an orc tries to go berserk without enough rage."""
    resource_type = ResourceType.RAGE


INSUFFICIENT_RESOURCE_ERRORS: dict[ResourceType, type[InsufficientResourceError]] = {
    ResourceType.FIRE_POWER: LowFirePowerError,
    ResourceType.MANA: LowManaError,
    ResourceType.RAGE: LowRageError,
}
