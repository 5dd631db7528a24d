"""Fatigue status bands used for display."""

import math
from enum import Enum


class FatigueStatus(str, Enum):
    """Display band for a fatigue level."""
    FRESH = "Fresh"          # < 30
    MODERATE = "Moderate"    # 30-60
    HIGH = "High"            # 60-80
    CRITICAL = "Critical"    # >= 80


STATUS_COLORS = {
    FatigueStatus.FRESH: "green",
    FatigueStatus.MODERATE: "yellow",
    FatigueStatus.HIGH: "dark_orange",
    FatigueStatus.CRITICAL: "red",
}


def classify_fatigue(level: float) -> FatigueStatus:
    """Map a 0-100 fatigue level to its display band."""
    if level < 30:
        return FatigueStatus.FRESH
    if level < 60:
        return FatigueStatus.MODERATE
    if level < 80:
        return FatigueStatus.HIGH
    return FatigueStatus.CRITICAL


def get_status_color(level: float) -> str:
    """Get rich color for a fatigue level."""
    return STATUS_COLORS[classify_fatigue(level)]


def round_percent(level: float) -> int:
    """Round half up, so 74.5 shows as 75 and 0.5 as 1."""
    return int(math.floor(level + 0.5))
