"""Helpers for turning logged sets into engine inputs."""

from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import SetInputError
from .models import Difficulty, SetInput, to_camel

DEFAULT_SET_DURATION_SECONDS = 60


class LoggedSet(BaseModel):
    """A set as logged in a workout: weight x reps rather than derived factors."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    muscle_group: str = Field(..., min_length=1)
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    difficulty: Difficulty = Difficulty.BEGINNER
    duration_seconds: float = Field(DEFAULT_SET_DURATION_SECONDS, ge=0)
    rest_seconds_since_previous: float = Field(0.0, ge=0)


def estimate_intensity(weight: float, reps: int) -> float:
    """
    Estimate relative intensity of a set from weight and reps.

    Uses the Epley one-rep-max estimate, 1RM = weight * (1 + reps / 30),
    and returns weight / 1RM capped at 1.0.
    """
    if weight <= 0:
        return 0.0
    estimated_max = weight * (1 + max(reps, 0) / 30)
    return min(weight / estimated_max, 1.0)


def build_set_input(
    muscle_group: str,
    weight: float,
    reps: int,
    difficulty: Union[Difficulty, str] = Difficulty.BEGINNER,
    duration_seconds: float = DEFAULT_SET_DURATION_SECONDS,
    rest_seconds: float = 0.0,
) -> SetInput:
    """Build a SetInput from a set logged as weight x reps."""
    return parse_set_input({
        "muscle_group": muscle_group,
        "difficulty": difficulty,
        "intensity": estimate_intensity(weight, reps),
        "volume": weight * reps,
        "duration_seconds": duration_seconds,
        "rest_seconds_since_previous": rest_seconds,
    })


def parse_logged_set(payload: Mapping[str, Any]) -> SetInput:
    """
    Validate a weight x reps payload (snake_case or camelCase keys) into a SetInput.

    Raises:
        SetInputError: If muscle group, weight or reps are missing or invalid
    """
    try:
        logged = LoggedSet.model_validate(payload)
    except ValidationError as exc:
        raise SetInputError("Invalid logged set", errors=_error_list(exc)) from exc

    return build_set_input(
        muscle_group=logged.muscle_group,
        weight=logged.weight,
        reps=logged.reps,
        difficulty=logged.difficulty,
        duration_seconds=logged.duration_seconds,
        rest_seconds=logged.rest_seconds_since_previous,
    )


def parse_set_input(payload: Mapping[str, Any]) -> SetInput:
    """
    Validate a raw set payload (snake_case or camelCase keys).

    Raises:
        SetInputError: If the payload is missing fields or has an unknown difficulty
    """
    try:
        return SetInput.model_validate(payload)
    except ValidationError as exc:
        raise SetInputError("Invalid set input", errors=_error_list(exc)) from exc


def _error_list(exc: ValidationError) -> list:
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
