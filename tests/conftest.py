"""Pytest configuration and fixtures."""
import logging
import random
import sys
from datetime import date
from pathlib import Path

# Add src and project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from duty_rota.engine.availability import AvailabilityIndex
from duty_rota.engine.workdays import working_days
from duty_rota.models.config import RotaConfig
from duty_rota.roster import Roster


class NoShuffleRandom(random.Random):
    """Random generator that keeps roster order, for predictable primary passes."""

    def shuffle(self, x, *args, **kwargs):
        return None


@pytest.fixture
def april_2024_days():
    """Working days of April 2024 (no exclusions): 22 weekdays."""
    return working_days(2024, 3, set())


@pytest.fixture
def sample_roster():
    """Create a sample roster for testing."""
    roster = Roster(["Alice", "Bob", "Charlie", "Diana", "Eve"])
    roster.set_unavailability("Bob", weekdays=[1])
    roster.set_unavailability("Diana", weekdays=[5])
    return roster


@pytest.fixture
def empty_availability():
    return AvailabilityIndex()


@pytest.fixture
def default_config():
    """Default generator configuration with a fixed seed."""
    return RotaConfig(seed=42)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def keep_order_rng():
    return NoShuffleRandom(7)


@pytest.fixture
def april_first():
    return date(2024, 4, 1)


@pytest.fixture(autouse=True)
def reset_log_handlers():
    """Drop handlers added by setup_logging so streams don't outlive a test."""
    yield
    logger = logging.getLogger("duty_rota")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
