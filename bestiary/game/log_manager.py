"""
Log management for creature and combat messages.

This module provides centralized logging with categorization, filtering,
and bounded storage. Messages arrive through the event manager, so
creatures never depend on the log directly.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ..core.data import ACTION_TYPE_NAMES, RESOURCE_TYPE_NAMES
from ..core.events import (
    ActionFailed,
    ActionPerformed,
    CreatureCreated,
    CreatureDamaged,
    CreatureDefeated,
    CreatureHealed,
    EventType,
    ResourceChanged,
)

if TYPE_CHECKING:
    from ..core.events import EventManager, GameEvent


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Creature creation, log saves
    COMBAT = auto()     # Combat actions and failures
    HEALTH = auto()     # Damage, healing and defeat
    RESOURCE = auto()   # Fire power, mana and rage changes
    DEBUG = auto()      # Debug messages
    WARNING = auto()    # Warning messages
    ERROR = auto()      # Error messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.COMBAT: "CBT",
    LogCategory.HEALTH: "HP",
    LogCategory.RESOURCE: "RES",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Manages creature logging with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager the log listens to
            max_messages: Maximum number of messages to store in the buffer
            default_level: Default log level for filtering
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)  # All categories enabled by default
        self.event_manager = event_manager

        # Categories not listed here are INFO
        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.RESOURCE: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
        }

        self._setup_event_subscriptions()
        # Bus diagnostics, including subscriber failures, land in DEBUG
        self.event_manager.set_debug_callback(self.debug)

    def _setup_event_subscriptions(self) -> None:
        """Subscribe to every event the log turns into a message."""
        handlers = {
            EventType.CREATURE_CREATED: self._handle_creature_created,
            EventType.CREATURE_DAMAGED: self._handle_creature_damaged,
            EventType.CREATURE_HEALED: self._handle_creature_healed,
            EventType.CREATURE_DEFEATED: self._handle_creature_defeated,
            EventType.RESOURCE_CHANGED: self._handle_resource_changed,
            EventType.ACTION_PERFORMED: self._handle_action_performed,
            EventType.ACTION_FAILED: self._handle_action_failed,
        }
        for event_type, handler in handlers.items():
            self.event_manager.subscribe(
                event_type,
                handler,
                subscriber_name=f"LogManager.{event_type.name.lower()}"
            )

    def _handle_creature_created(self, event: "GameEvent") -> None:
        if isinstance(event, CreatureCreated):
            self.system(f"Created {event.creature.summary()}")

    def _handle_creature_damaged(self, event: "GameEvent") -> None:
        if isinstance(event, CreatureDamaged):
            self.health(
                f"{event.creature.name} takes {event.amount} damage "
                f"({event.health_before} -> {event.health_after})"
            )

    def _handle_creature_healed(self, event: "GameEvent") -> None:
        if isinstance(event, CreatureHealed):
            self.health(
                f"{event.creature.name} heals {event.amount} "
                f"({event.health_before} -> {event.health_after})"
            )

    def _handle_creature_defeated(self, event: "GameEvent") -> None:
        if isinstance(event, CreatureDefeated):
            self.health(f"{event.creature.name} has fallen")

    def _handle_resource_changed(self, event: "GameEvent") -> None:
        if isinstance(event, ResourceChanged):
            name = RESOURCE_TYPE_NAMES[event.resource_type]
            self.resource(f"{event.creature.name} {name}: {event.before} -> {event.after}")

    def _handle_action_performed(self, event: "GameEvent") -> None:
        if isinstance(event, ActionPerformed):
            action = ACTION_TYPE_NAMES[event.action_type]
            self.combat(f"{event.actor.name} uses {action} on {event.target.name} for {event.damage}")

    def _handle_action_failed(self, event: "GameEvent") -> None:
        if isinstance(event, ActionFailed):
            action = ACTION_TYPE_NAMES[event.action_type]
            self.warning(f"{event.actor.name} could not {action.lower()}: {event.reason}")

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log.

        Messages are always stored; filtering happens when they are read.
        """
        self.messages.append(LogMessage(text=text, category=category))

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def combat(self, text: str) -> None:
        self.log(text, LogCategory.COMBAT)

    def health(self, text: str) -> None:
        self.log(text, LogCategory.HEALTH)

    def resource(self, text: str) -> None:
        self.log(text, LogCategory.RESOURCE)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled,
                subject to the current log level)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = []
            for msg in self.messages:
                if msg.category not in self.enabled_categories:
                    continue

                message_level = self.category_levels.get(msg.category, LogLevel.INFO)
                if message_level.value < self.log_level.value:
                    continue

                filtered.append(msg)

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def get_formatted_messages(self, count: Optional[int] = None) -> list[str]:
        """Get recent messages formatted for display."""
        return [msg.format() for msg in self.get_messages(count)]

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently enabled."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)

    def save_log_to_file(self, log_dir: str = "logs") -> Optional[str]:
        """Save all messages to a timestamped log file.

        Args:
            log_dir: Directory to write into, created if missing

        Returns:
            Path of the written file, or None if saving failed
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(log_dir, f"log_{timestamp}.log")

        try:
            os.makedirs(log_dir, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Bestiary - Combat Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                else:
                    # Save every buffered message, ignoring the current filters
                    for msg in self.messages:
                        timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                        f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Log saved to {filepath}")
        return filepath
