"""Combat system components.

This package contains the combat logic with clear separation of concerns:
- action_calculator.py: Read-only action forecasts
- actions.py: Actual resource updates and damage application
"""

from .action_calculator import ActionCalculator, ActionForecast
from .actions import (
    ActionResult,
    ACTION_HANDLERS,
    breathe_fire,
    cast_spell,
    berserk,
    perform_action,
    validate_target,
)

__all__ = [
    "ActionCalculator",
    "ActionForecast",
    "ActionResult",
    "ACTION_HANDLERS",
    "breathe_fire",
    "cast_spell",
    "berserk",
    "perform_action",
    "validate_target",
]
