"""Fatigue data models: set inputs, per-muscle state and engine outputs."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


# =============================================================================
# Enums
# =============================================================================

class Difficulty(str, Enum):
    """Exercise difficulty, scales the per-set fatigue cost."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class IntensityAdjustment(str, Enum):
    """How to adjust training intensity given current fatigue."""
    REDUCE = "reduce"      # At least one muscle above the rest threshold
    MODERATE = "moderate"  # At least one muscle in the moderate band
    MAINTAIN = "maintain"


# =============================================================================
# Inputs
# =============================================================================

class SetInput(BaseModel):
    """A completed set, as reported by the caller. Never stored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    muscle_group: str = Field(..., min_length=1, description="Primary muscle group key, e.g. 'Chest'")
    difficulty: Difficulty = Field(..., description="Exercise difficulty")
    intensity: float = Field(0.0, description="Load relative to max, clamped to 0-1")
    volume: float = Field(0.0, description="Weight x reps, clamped to >= 0")
    duration_seconds: float = Field(0.0, description="Time under tension in seconds")
    rest_seconds_since_previous: float = Field(0.0, description="Rest taken before this set")

    @field_validator("intensity")
    @classmethod
    def _clamp_intensity(cls, value: float) -> float:
        return min(max(value, 0.0), 1.0)

    @field_validator("volume", "duration_seconds", "rest_seconds_since_previous")
    @classmethod
    def _clamp_non_negative(cls, value: float) -> float:
        return max(value, 0.0)


class ExerciseTarget(BaseModel):
    """An exercise described by the muscles it loads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    muscle_group: str = Field(..., description="Primary mover")
    target_muscles: Optional[List[str]] = Field(None, description="Synergists (may include the primary)")


# =============================================================================
# State
# =============================================================================

class MuscleFatigueState(BaseModel):
    """Fatigue tracking for one muscle group within a session."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    muscle_group: str = Field(..., frozen=True)
    fatigue_level: float = Field(0.0, ge=0, le=100, description="0 = fresh, 100 = fully fatigued")
    last_update_time: float = Field(..., description="Epoch milliseconds of the last recorded set")
    total_volume: float = Field(0.0, ge=0)
    exercise_count: int = Field(0, ge=0)
    recovery_rate_per_minute: float = Field(..., ge=0, frozen=True, description="Fatigue points recovered per minute")


# =============================================================================
# Outputs
# =============================================================================

class ExerciseFatigue(BaseModel):
    """Fatigue of the muscles an exercise would load."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    primary: float = Field(..., description="Current level of the primary mover")
    secondary: float = Field(..., description="Mean current level of the synergists")
    overall: float = Field(..., description="0.7 * primary + 0.3 * secondary")


class FatigueRecommendations(BaseModel):
    """Training guidance derived from current fatigue."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    rest_needed: List[str] = Field(default_factory=list)
    intensity_adjustment: IntensityAdjustment = IntensityAdjustment.MAINTAIN
    next_exercise_suggestion: str
