"""Bestiary: fantasy creatures with bounded resources and combat actions.

The package is split in two layers:
- core/: engine-agnostic foundations (enums, entity/component container, errors, events)
- game/: creature semantics (components, creatures, combat actions, logging)
"""

__version__ = "1.0.0"
