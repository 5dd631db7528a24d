"""
Static rate tables for muscle fatigue accrual and recovery.

The muscle vocabulary is open: any string key is accepted, and keys outside
the tables fall back to explicit default rates instead of failing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional

from .config import Settings, get_settings


class MuscleGroup(str, Enum):
    """Muscle groups with tuned fatigue and recovery rates."""
    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    LEGS = "Legs"
    CORE = "Core"
    CALVES = "Calves"
    HAMSTRINGS = "Hamstrings"
    QUADRICEPS = "Quadriceps"
    GLUTES = "Glutes"
    FOREARMS = "Forearms"
    TRAPS = "Traps"
    LATS = "Lats"
    DELTOIDS = "Deltoids"
    PECTORALS = "Pectorals"
    ABDOMINALS = "Abdominals"
    OBLIQUES = "Obliques"
    LOWER_BACK = "Lower Back"
    UPPER_BACK = "Upper Back"


# Base fatigue added per set, before multipliers
MUSCLE_FATIGUE_RATES: Dict[str, float] = {
    "Chest": 15,
    "Back": 12,
    "Shoulders": 18,
    "Biceps": 20,
    "Triceps": 18,
    "Legs": 10,
    "Core": 8,
    "Calves": 25,
    "Hamstrings": 12,
    "Quadriceps": 10,
    "Glutes": 8,
    "Forearms": 30,
    "Traps": 15,
    "Lats": 12,
    "Deltoids": 18,
    "Pectorals": 15,
    "Abdominals": 8,
    "Obliques": 10,
    "Lower Back": 12,
    "Upper Back": 12,
}

# Fatigue points recovered per minute
MUSCLE_RECOVERY_RATES: Dict[str, float] = {
    "Chest": 2.5,
    "Back": 3.0,
    "Shoulders": 2.0,
    "Biceps": 1.5,
    "Triceps": 2.0,
    "Legs": 4.0,
    "Core": 5.0,
    "Calves": 1.0,
    "Hamstrings": 3.0,
    "Quadriceps": 4.0,
    "Glutes": 4.5,
    "Forearms": 0.5,
    "Traps": 2.5,
    "Lats": 3.0,
    "Deltoids": 2.0,
    "Pectorals": 2.5,
    "Abdominals": 5.0,
    "Obliques": 4.0,
    "Lower Back": 3.0,
    "Upper Back": 3.0,
}

DIFFICULTY_MULTIPLIERS: Dict[str, float] = {
    "beginner": 0.8,
    "intermediate": 1.0,
    "advanced": 1.3,
}

DEFAULT_BASE_FATIGUE = 10.0
DEFAULT_RECOVERY_RATE = 2.0


@dataclass(frozen=True)
class FatigueTables:
    """Lookup tables the engine reads rates from.

    Lookups are case-sensitive. A miss takes the default path and is
    reported by ``is_known`` so callers can flag likely typos.
    """

    fatigue_rates: Mapping[str, float] = field(default_factory=lambda: dict(MUSCLE_FATIGUE_RATES))
    recovery_rates: Mapping[str, float] = field(default_factory=lambda: dict(MUSCLE_RECOVERY_RATES))
    difficulty_multipliers: Mapping[str, float] = field(
        default_factory=lambda: dict(DIFFICULTY_MULTIPLIERS)
    )
    default_base_fatigue: float = DEFAULT_BASE_FATIGUE
    default_recovery_rate: float = DEFAULT_RECOVERY_RATE

    def __post_init__(self) -> None:
        rates = {
            **{f"fatigue_rates[{k!r}]": v for k, v in self.fatigue_rates.items()},
            **{f"recovery_rates[{k!r}]": v for k, v in self.recovery_rates.items()},
            **{f"difficulty_multipliers[{k!r}]": v for k, v in self.difficulty_multipliers.items()},
            "default_base_fatigue": self.default_base_fatigue,
            "default_recovery_rate": self.default_recovery_rate,
        }
        negative = sorted(name for name, value in rates.items() if value < 0)
        if negative:
            raise ValueError(f"Rates must be non-negative: {', '.join(negative)}")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FatigueTables":
        """Build tables using the fallback rates from settings."""
        settings = settings or get_settings()
        return cls(
            default_base_fatigue=settings.default_base_fatigue,
            default_recovery_rate=settings.default_recovery_rate,
        )

    def is_known(self, muscle_group: str) -> bool:
        return muscle_group in self.fatigue_rates and muscle_group in self.recovery_rates

    def base_fatigue(self, muscle_group: str) -> float:
        return self.fatigue_rates.get(muscle_group, self.default_base_fatigue)

    def recovery_rate(self, muscle_group: str) -> float:
        return self.recovery_rates.get(muscle_group, self.default_recovery_rate)

    def difficulty_multiplier(self, difficulty: str) -> float:
        return self.difficulty_multipliers[difficulty]
