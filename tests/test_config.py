"""Tests for settings, rate tables and clocks."""

import pytest
from pydantic import ValidationError

from workout_fatigue.clock import ManualClock, SystemClock, Clock
from workout_fatigue.config import Settings
from workout_fatigue.engine import FatigueEngine
from workout_fatigue.exceptions import ClockError, ErrorCode
from workout_fatigue.tables import (
    MUSCLE_FATIGUE_RATES,
    MUSCLE_RECOVERY_RATES,
    FatigueTables,
    MuscleGroup,
)

from .factories import extreme_set, make_set


class TestFatigueTables:
    """Tests for rate lookups and the default path."""

    def test_vocabulary_matches_tables(self):
        names = {m.value for m in MuscleGroup}

        assert len(names) == 20
        assert names == set(MUSCLE_FATIGUE_RATES) == set(MUSCLE_RECOVERY_RATES)

    def test_known_lookups(self):
        tables = FatigueTables()

        assert tables.is_known("Chest")
        assert tables.base_fatigue("Chest") == 15
        assert tables.recovery_rate("Chest") == 2.5
        assert tables.recovery_rate(MuscleGroup.FOREARMS.value) == 0.5

    def test_unknown_lookups_use_defaults(self):
        tables = FatigueTables()

        assert not tables.is_known("Neck")
        assert not tables.is_known("chest")
        assert tables.base_fatigue("Neck") == 10
        assert tables.recovery_rate("Neck") == 2.0

    def test_from_settings(self):
        tables = FatigueTables.from_settings(
            Settings(_env_file=None, default_base_fatigue=12, default_recovery_rate=1.0)
        )

        assert tables.base_fatigue("Neck") == 12
        assert tables.recovery_rate("Neck") == 1.0
        assert tables.base_fatigue("Chest") == 15

    def test_custom_tables_in_engine(self, clock, settings):
        tables = FatigueTables(
            fatigue_rates={"Neck": 20},
            recovery_rates={"Neck": 1.0},
        )
        engine = FatigueEngine(clock=clock, tables=tables, settings=settings)

        engine.record_set(make_set("Neck"))
        clock.advance_minutes(5)

        assert engine.get_current_level("Neck") == pytest.approx(30.0 - 5.0)
        assert engine.get_state("Neck").recovery_rate_per_minute == 1.0

    def test_negative_recovery_rate_rejected(self):
        """A negative rate would make fatigue grow while resting."""
        with pytest.raises(ValueError, match="recovery_rates"):
            FatigueTables(recovery_rates={"Neck": -1.0})

    def test_negative_default_rate_rejected(self):
        with pytest.raises(ValueError, match="default_base_fatigue"):
            FatigueTables(default_base_fatigue=-10)


class TestSettings:
    """Tests for environment configuration."""

    def test_defaults(self, settings):
        assert settings.default_base_fatigue == 10.0
        assert settings.default_recovery_rate == 2.0
        assert settings.per_set_cap == 50.0
        assert settings.max_fatigue == 100.0
        assert settings.rest_threshold == 70.0

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("WORKOUT_FATIGUE_DEFAULT_RECOVERY_RATE", "3.5")
        monkeypatch.setenv("WORKOUT_FATIGUE_PER_SET_CAP", "40")

        settings = Settings(_env_file=None)

        assert settings.default_recovery_rate == 3.5
        assert settings.per_set_cap == 40

    def test_per_set_cap_from_settings(self, clock):
        engine = FatigueEngine(clock=clock, settings=Settings(_env_file=None, per_set_cap=40))

        engine.record_set(extreme_set("Chest"))

        assert engine.get_current_level("Chest") == 40

    @pytest.mark.parametrize("overrides", [
        {"max_fatigue": 150},
        {"max_fatigue": 0},
        {"per_set_cap": -1},
        {"default_recovery_rate": -5},
        {"default_base_fatigue": -10},
        {"rest_threshold": 120},
        {"suggestion_threshold": -1},
    ])
    def test_out_of_range_values_rejected(self, overrides):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)

    def test_out_of_range_env_rejected(self, monkeypatch):
        monkeypatch.setenv("WORKOUT_FATIGUE_MAX_FATIGUE", "150")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_lower_max_fatigue_still_clamps(self, clock):
        engine = FatigueEngine(clock=clock, settings=Settings(_env_file=None, max_fatigue=80))

        for _ in range(4):
            engine.record_set(extreme_set("Chest"))

        assert engine.get_current_level("Chest") == 80


class TestClocks:
    """Tests for clock implementations."""

    def test_protocol(self):
        assert isinstance(SystemClock(), Clock)
        assert isinstance(ManualClock(), Clock)

    def test_manual_clock_advances(self):
        clock = ManualClock(start_ms=1000)

        clock.advance(500)
        clock.advance_seconds(2)
        clock.advance_minutes(1)

        assert clock.now_ms() == 1000 + 500 + 2000 + 60_000

    def test_manual_clock_rejects_negative(self):
        clock = ManualClock(start_ms=1000)

        with pytest.raises(ClockError) as exc_info:
            clock.advance(-1)

        assert exc_info.value.code == ErrorCode.CLOCK_INVALID
        assert exc_info.value.details == {"delta_ms": -1}
        assert clock.now_ms() == 1000

    def test_system_clock_moves_forward(self):
        clock = SystemClock()
        first = clock.now_ms()

        assert clock.now_ms() >= first
