"""Set builders shared by the tests."""

from workout_fatigue.models import Difficulty, SetInput


def make_set(muscle_group, difficulty=Difficulty.INTERMEDIATE, intensity=1.0,
             volume=1000, duration_seconds=60, rest_seconds=0):
    """Build a SetInput with unit factors unless overridden."""
    return SetInput(
        muscle_group=muscle_group,
        difficulty=difficulty,
        intensity=intensity,
        volume=volume,
        duration_seconds=duration_seconds,
        rest_seconds_since_previous=rest_seconds,
    )


def extreme_set(muscle_group, difficulty=Difficulty.ADVANCED):
    """A set that saturates every factor."""
    return make_set(
        muscle_group,
        difficulty=difficulty,
        intensity=1.0,
        volume=100000,
        duration_seconds=600,
        rest_seconds=0,
    )
