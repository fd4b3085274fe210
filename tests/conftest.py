"""
Basic test fixtures for the text valorant test suite.

Provides seeded random sources, an event bus and fresh combatants.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from textvalorant.core.data import Side
from textvalorant.core.engine import ActionContext
from textvalorant.core.events import EventManager
from textvalorant.game.combat import DamageResolver, create_rng
from textvalorant.game.entities import Combatant


@pytest.fixture
def rng():
    """Seeded generator so failures reproduce."""
    return create_rng(1234)


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def human():
    return Combatant(name="Alice", agent="Jett", side=Side.HUMAN, credits=200)


@pytest.fixture
def opponent():
    return Combatant(name="Opponent", agent="Sage", side=Side.OPPONENT, credits=200)


@pytest.fixture
def resolver(rng):
    return DamageResolver(rng)


@pytest.fixture
def emitted():
    """List that collects events passed to an ActionContext."""
    return []


@pytest.fixture
def context(resolver, emitted):
    return ActionContext(resolver=resolver, emit=emitted.append, turn=1)
