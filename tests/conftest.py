"""
Basic test fixtures for the cybertron test suite.

Provides the reference transformers used across the fight scenarios.
"""

import os
import sys

import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from cybertron.core.events import EventManager
from cybertron.game.combat import CombatRules
from tests.builders import TransformerBuilder


@pytest.fixture
def autobot():
    """Ordinary autobot, rating 25."""
    return TransformerBuilder.autobot(
        "Dumbot", id="abc", rank=1, strength=2, intelligence=3, speed=4,
        endurance=5, courage=6, firepower=11, skill=8,
    )


@pytest.fixture
def decepticon():
    """Ordinary decepticon, rating 18."""
    return TransformerBuilder.decepticon(
        "Dumbicon", id="xyz", rank=1, strength=3, intelligence=3, speed=3,
        endurance=3, courage=6, firepower=6, skill=6,
    )


@pytest.fixture
def optimus_prime():
    return TransformerBuilder.autobot("Optimus Prime", id="aaa", rank=10)


@pytest.fixture
def predaking():
    return TransformerBuilder.decepticon("Predaking", id="zzz", rank=10)


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def default_rules():
    return CombatRules()


@pytest.fixture
def example_roster_path():
    return os.path.join(project_root, "assets", "rosters", "example_battle.yaml")
