"""
Action forecasting separate from actual combat resolution.

This module lets a caller see whether a creature can act and what its
action would do without touching any state.
"""

from dataclasses import dataclass
from typing import Optional

from ...core.data import ActionType
from ..entities.creature import Creature
from ..entities.creature_templates import CREATURE_TEMPLATES


@dataclass(frozen=True)
class ActionForecast:
    """Predicted outcome of an actor's next combat action."""
    action_type: ActionType
    can_act: bool
    required: int
    resource_before: int
    resource_after: int   # Unchanged when the action cannot be taken
    damage: int           # Zero when the action cannot be taken


class ActionCalculator:
    """Calculates action forecasts for creatures with a combat action."""

    @staticmethod
    def forecast(actor: Creature) -> Optional[ActionForecast]:
        """Predict the actor's next action.

        Args:
            actor: Any creature

        Returns:
            ActionForecast, or None for a creature without a combat action
        """
        template = CREATURE_TEMPLATES.get(actor.kind)
        if template is None:
            return None

        profile = template.action
        current = actor.resource.current

        if current < profile.required:
            return ActionForecast(
                action_type=profile.action_type,
                can_act=False,
                required=profile.required,
                resource_before=current,
                resource_after=current,
                damage=0,
            )

        after = max(template.resource_min, min(template.resource_max, current + profile.resource_delta))
        return ActionForecast(
            action_type=profile.action_type,
            can_act=True,
            required=profile.required,
            resource_before=current,
            resource_after=after,
            damage=profile.damage_for(after),
        )
