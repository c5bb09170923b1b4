"""
Basic test fixtures for the bestiary test suite.

Provides creatures, an event bus and fixed dates shared across tests.
"""

import sys
import os
from datetime import date

import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from bestiary.core.events import EventManager
from bestiary.game.entities import Creature, Dragon, Elf, Orc


@pytest.fixture
def birth_date():
    """A birth date safely in the past."""
    return date(2000, 1, 15)


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def make_target(birth_date):
    """Factory for plain creatures with a given health."""
    def _make(health=100, name="Target"):
        return Creature(name, birth_date, health)
    return _make


@pytest.fixture
def target(make_target):
    """A plain creature at full health."""
    return make_target()


@pytest.fixture
def dragon(birth_date):
    return Dragon("Smolder", birth_date, 90, 50)


@pytest.fixture
def elf(birth_date):
    return Elf("Elowen", birth_date, 70, 20)


@pytest.fixture
def orc(birth_date):
    return Orc("Gruk", birth_date, 85, 10)
