"""Per-muscle fatigue tracking and training recommendations for a workout session."""

from .clock import Clock, ManualClock, SystemClock
from .config import Settings, get_settings
from .engine import FatigueEngine
from .exceptions import (
    ClockError,
    ErrorCode,
    ReplayError,
    SetInputError,
    WorkoutFatigueError,
)
from .models import (
    Difficulty,
    ExerciseFatigue,
    ExerciseTarget,
    FatigueRecommendations,
    IntensityAdjustment,
    MuscleFatigueState,
    SetInput,
)
from .sets import (
    LoggedSet,
    build_set_input,
    estimate_intensity,
    parse_logged_set,
    parse_set_input,
)
from .status import FatigueStatus, classify_fatigue
from .tables import FatigueTables, MuscleGroup

__version__ = "0.1.0"

__all__ = [
    # Engine
    "FatigueEngine",
    "FatigueTables",
    "MuscleGroup",
    # Clocks
    "Clock",
    "ManualClock",
    "SystemClock",
    # Models
    "Difficulty",
    "ExerciseFatigue",
    "ExerciseTarget",
    "FatigueRecommendations",
    "IntensityAdjustment",
    "MuscleFatigueState",
    "SetInput",
    # Helpers
    "LoggedSet",
    "build_set_input",
    "estimate_intensity",
    "parse_logged_set",
    "parse_set_input",
    "FatigueStatus",
    "classify_fatigue",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ClockError",
    "ErrorCode",
    "ReplayError",
    "SetInputError",
    "WorkoutFatigueError",
]
