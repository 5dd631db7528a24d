"""Pytest configuration and fixtures."""

import pytest

from workout_fatigue.clock import ManualClock
from workout_fatigue.config import Settings
from workout_fatigue.engine import FatigueEngine
from workout_fatigue.models import Difficulty, SetInput

# 2023-11-14, any fixed epoch works
START_MS = 1_700_000_000_000


@pytest.fixture
def clock():
    """Manual clock pinned to a fixed start time."""
    return ManualClock(start_ms=START_MS)


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def engine(clock, settings):
    """Fresh engine on the manual clock."""
    return FatigueEngine(clock=clock, settings=settings)


@pytest.fixture
def bench_press_set():
    """200 lbs x 8 reps bench press, 60s set after 120s rest."""
    return SetInput(
        muscle_group="Chest",
        difficulty=Difficulty.INTERMEDIATE,
        intensity=0.8,
        volume=200 * 8,
        duration_seconds=60,
        rest_seconds_since_previous=120,
    )
