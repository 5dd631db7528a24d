"""
Session replay: drive an engine from a recorded list of events.

Events are JSON objects with a "type" key:
    {"type": "set", "muscleGroup": "Chest", "difficulty": "intermediate",
     "intensity": 0.8, "volume": 1600, "durationSeconds": 60,
     "restSecondsSincePrevious": 120}
    {"type": "set", "muscleGroup": "Legs", "weight": 100, "reps": 10}
    {"type": "rest", "minutes": 5}          # or "seconds"
    {"type": "reset"}

Set keys may be camelCase or snake_case. A set with "weight" or "reps"
must carry both. Rest events advance the manual clock; time never passes
otherwise.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .clock import ManualClock
from .engine import FatigueEngine
from .exceptions import ClockError, ReplayError, SetInputError
from .sets import parse_logged_set, parse_set_input

logger = logging.getLogger(__name__)

EVENT_TYPES = ("set", "rest", "reset")


def load_events(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Load and shape-check a replay file."""
    path = Path(path)
    try:
        events = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ReplayError(f"Cannot read replay file: {path}", details={"reason": str(e)}) from e
    except json.JSONDecodeError as e:
        raise ReplayError(f"Replay file is not valid JSON: {path}", details={"reason": str(e)}) from e

    if not isinstance(events, list):
        raise ReplayError("Replay file must contain a list of events")

    for index, event in enumerate(events):
        if not isinstance(event, dict) or event.get("type") not in EVENT_TYPES:
            raise ReplayError(
                f"Event must be an object with type one of {', '.join(EVENT_TYPES)}",
                index=index,
            )
    return events


def apply_event(engine: FatigueEngine, clock: ManualClock, event: Dict[str, Any]) -> None:
    """Apply a single replay event."""
    event_type = event["type"]

    if event_type == "reset":
        engine.reset()
    elif event_type == "rest":
        minutes = float(event.get("minutes", 0)) + float(event.get("seconds", 0)) / 60
        clock.advance_minutes(minutes)
    else:
        payload = {k: v for k, v in event.items() if k != "type"}
        # Either key routes to the weight x reps path, which requires both
        if "weight" in payload or "reps" in payload:
            set_input = parse_logged_set(payload)
        else:
            set_input = parse_set_input(payload)
        engine.record_set(set_input)


def replay(engine: FatigueEngine, clock: ManualClock, events: List[Dict[str, Any]]) -> int:
    """
    Apply events in order.

    Returns:
        Number of events applied

    Raises:
        ReplayError: If an event cannot be applied
    """
    for index, event in enumerate(events):
        try:
            apply_event(engine, clock, event)
        except SetInputError as e:
            raise ReplayError("Invalid set event", index=index, details=e.details) from e
        except ClockError as e:
            raise ReplayError("Rest event cannot be negative", index=index, details=e.details) from e
        except (TypeError, ValueError) as e:
            raise ReplayError(f"Invalid {event['type']} event", index=index, details={"reason": str(e)}) from e
    logger.debug("Replayed %d events", len(events))
    return len(events)
