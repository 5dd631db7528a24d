"""
Per-muscle fatigue engine for a single workout session.

Fatigue accrues when a set is recorded and recovers linearly with elapsed
time at a per-muscle rate. Recovery is never ticked in the background: it is
computed from the time since each muscle's last recorded set whenever a set
is recorded or a level is read. Reads project the decay without touching
stored state.

Not thread-safe. Use one engine per session and serialize access to it.
"""

import logging
from typing import Dict, List, Mapping, Optional, Union

from .clock import MS_PER_MINUTE, Clock, SystemClock
from .config import Settings, get_settings
from .models import (
    ExerciseFatigue,
    ExerciseTarget,
    FatigueRecommendations,
    IntensityAdjustment,
    MuscleFatigueState,
    SetInput,
)
from .status import round_percent
from .tables import FatigueTables

logger = logging.getLogger(__name__)

PRIMARY_WEIGHT = 0.7
SECONDARY_WEIGHT = 0.3

# Caps on each multiplicative factor
MAX_VOLUME_FACTOR = 2.0
MAX_DURATION_FACTOR = 1.5
MIN_REST_FACTOR = 0.5
FULL_REST_SECONDS = 300

FALLBACK_SUGGESTION = "Consider a different muscle group or take a longer rest"


class FatigueEngine:
    """Tracks muscle fatigue across the sets of one session."""

    def __init__(
        self,
        clock: Optional[Clock] = None,
        tables: Optional[FatigueTables] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or get_settings()
        self._clock = clock or SystemClock()
        self._tables = tables or FatigueTables.from_settings(settings)
        self._per_set_cap = settings.per_set_cap
        self._max_fatigue = settings.max_fatigue
        self._rest_threshold = settings.rest_threshold
        self._moderate_threshold = settings.moderate_threshold
        self._suggestion_threshold = settings.suggestion_threshold

        self._states: Dict[str, MuscleFatigueState] = {}
        self._session_start_time = self._clock.now_ms()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def tables(self) -> FatigueTables:
        return self._tables

    @property
    def session_start_time(self) -> float:
        return self._session_start_time

    # =========================================================================
    # Mutation
    # =========================================================================

    def calculate_fatigue_increase(self, set_input: SetInput) -> float:
        """Fatigue added by one set, before recovery and the overall cap."""
        base_rate = self._tables.base_fatigue(set_input.muscle_group)
        difficulty_multiplier = self._tables.difficulty_multiplier(set_input.difficulty.value)

        volume_factor = min(set_input.volume / 1000, MAX_VOLUME_FACTOR)
        intensity_factor = set_input.intensity * 1.5
        duration_factor = min(set_input.duration_seconds / 60, MAX_DURATION_FACTOR)
        # Linear from no rest (1.0) to fully rested (0.5); a set always costs something
        rest_factor = max(1.0 - set_input.rest_seconds_since_previous / FULL_REST_SECONDS, MIN_REST_FACTOR)

        increase = (
            base_rate
            * difficulty_multiplier
            * volume_factor
            * intensity_factor
            * duration_factor
            * rest_factor
        )
        return min(increase, self._per_set_cap)

    def record_set(self, set_input: SetInput) -> None:
        """Apply recovery up to now, then add the fatigue of a completed set."""
        now = self._clock.now_ms()
        state = self._get_or_create(set_input.muscle_group, now)

        state.fatigue_level = self._decayed_level(state, now)
        increase = self.calculate_fatigue_increase(set_input)
        state.fatigue_level = min(self._max_fatigue, state.fatigue_level + increase)

        state.last_update_time = now
        state.exercise_count += 1
        state.total_volume += set_input.volume

        logger.debug(
            "Recorded set for %s: +%.2f -> %.2f (set %d)",
            state.muscle_group,
            increase,
            state.fatigue_level,
            state.exercise_count,
        )

    def reset(self) -> None:
        """Clear all fatigue for a new session."""
        tracked = len(self._states)
        self._states.clear()
        self._session_start_time = self._clock.now_ms()
        logger.info("Fatigue reset, cleared %d muscle groups", tracked)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_current_level(self, muscle_group: str) -> float:
        """Current fatigue of a muscle group, 0 if never trained this session."""
        state = self._states.get(muscle_group)
        if state is None:
            return 0.0
        return self._decayed_level(state, self._clock.now_ms())

    def get_state(self, muscle_group: str) -> Optional[MuscleFatigueState]:
        """Projected state of one muscle group, or None if never trained."""
        state = self._states.get(muscle_group)
        if state is None:
            return None
        return self._project(state, self._clock.now_ms())

    def get_all_levels(self) -> List[MuscleFatigueState]:
        """Projected state of every trained muscle, in order of first training."""
        now = self._clock.now_ms()
        return [self._project(state, now) for state in self._states.values()]

    def get_exercise_fatigue(
        self, exercise: Union[ExerciseTarget, Mapping]
    ) -> ExerciseFatigue:
        """Fatigue of the primary mover and synergists of an exercise."""
        if not isinstance(exercise, ExerciseTarget):
            exercise = ExerciseTarget.model_validate(exercise)

        primary = self.get_current_level(exercise.muscle_group)

        secondary_levels = [
            self.get_current_level(muscle)
            for muscle in exercise.target_muscles or []
            if muscle != exercise.muscle_group
        ]
        secondary = sum(secondary_levels) / len(secondary_levels) if secondary_levels else 0.0

        return ExerciseFatigue(
            primary=primary,
            secondary=secondary,
            overall=primary * PRIMARY_WEIGHT + secondary * SECONDARY_WEIGHT,
        )

    def get_recommendations(self) -> FatigueRecommendations:
        """Rest, intensity and next-exercise guidance from current fatigue."""
        all_fatigue = self.get_all_levels()

        high_fatigue = [f for f in all_fatigue if f.fatigue_level > self._rest_threshold]
        moderate_fatigue = [
            f for f in all_fatigue
            if self._moderate_threshold < f.fatigue_level <= self._rest_threshold
        ]

        rest_needed = [
            f"{f.muscle_group} ({round_percent(f.fatigue_level)}% fatigue)"
            for f in high_fatigue
        ]

        if high_fatigue:
            adjustment = IntensityAdjustment.REDUCE
        elif moderate_fatigue:
            adjustment = IntensityAdjustment.MODERATE
        else:
            adjustment = IntensityAdjustment.MAINTAIN

        return FatigueRecommendations(
            rest_needed=rest_needed,
            intensity_adjustment=adjustment,
            next_exercise_suggestion=self._next_exercise_suggestion(all_fatigue),
        )

    def get_session_duration_minutes(self) -> float:
        return (self._clock.now_ms() - self._session_start_time) / MS_PER_MINUTE

    # =========================================================================
    # Internals
    # =========================================================================

    def _get_or_create(self, muscle_group: str, now: float) -> MuscleFatigueState:
        state = self._states.get(muscle_group)
        if state is None:
            if not self._tables.is_known(muscle_group):
                logger.debug("Unknown muscle group %r, using default rates", muscle_group)
            state = MuscleFatigueState(
                muscle_group=muscle_group,
                fatigue_level=0.0,
                last_update_time=now,
                recovery_rate_per_minute=self._tables.recovery_rate(muscle_group),
            )
            self._states[muscle_group] = state
        return state

    def _decayed_level(self, state: MuscleFatigueState, now: float) -> float:
        # A clock behind the last update recovers nothing rather than adding fatigue
        elapsed_minutes = max(now - state.last_update_time, 0.0) / MS_PER_MINUTE
        recovered = elapsed_minutes * state.recovery_rate_per_minute
        return min(self._max_fatigue, max(0.0, state.fatigue_level - recovered))

    def _project(self, state: MuscleFatigueState, now: float) -> MuscleFatigueState:
        return state.model_copy(update={"fatigue_level": self._decayed_level(state, now)})

    def _next_exercise_suggestion(self, all_fatigue: List[MuscleFatigueState]) -> str:
        low_fatigue = [f for f in all_fatigue if f.fatigue_level < self._suggestion_threshold]
        if not low_fatigue:
            return FALLBACK_SUGGESTION

        # sorted() is stable, so ties keep first-trained order
        freshest = sorted(low_fatigue, key=lambda f: f.fatigue_level)[0]
        return (
            f"Consider targeting {freshest.muscle_group} "
            f"({round_percent(freshest.fatigue_level)}% fatigue)"
        )
