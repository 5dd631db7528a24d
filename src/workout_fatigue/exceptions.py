"""
Custom exceptions for the workout fatigue package.

The engine itself favours silent defaulting and never raises on normal
numeric input. These exceptions cover the edges around it:
- Parsing raw set payloads into SetInput
- Driving a manual clock used for replays and tests
- Loading replay files in the CLI
"""

from typing import Any, Dict, List, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error payloads."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    SET_INPUT_INVALID = "SET_INPUT_INVALID"
    CLOCK_INVALID = "CLOCK_INVALID"
    REPLAY_INVALID = "REPLAY_INVALID"


class WorkoutFatigueError(Exception):
    """
    Base exception for all workout fatigue errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a plain dictionary."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class SetInputError(WorkoutFatigueError):
    """Raised when a raw set payload cannot be turned into a SetInput."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if errors:
            details["errors"] = errors
        super().__init__(
            message=message,
            code=ErrorCode.SET_INPUT_INVALID,
            details=details,
        )


class ClockError(WorkoutFatigueError):
    """Raised when a manual clock is moved backwards."""

    def __init__(self, message: str, delta_ms: Optional[float] = None) -> None:
        details = {"delta_ms": delta_ms} if delta_ms is not None else None
        super().__init__(message=message, code=ErrorCode.CLOCK_INVALID, details=details)


class ReplayError(WorkoutFatigueError):
    """Raised when a replay file is malformed."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if index is not None:
            error_details["index"] = index
        super().__init__(
            message=message,
            code=ErrorCode.REPLAY_INVALID,
            details=error_details,
        )
