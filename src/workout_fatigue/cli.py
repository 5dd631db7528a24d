#!/usr/bin/env python3
"""
Workout fatigue CLI.

Replay workout sessions through the fatigue engine and inspect the results.

Usage:
    workout-fatigue demo                 # Bench press set, then 5 minutes rest
    workout-fatigue replay session.json  # Replay a recorded session
    workout-fatigue tables               # Show per-muscle rates
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .clock import ManualClock, SystemClock
from .config import get_settings
from .engine import FatigueEngine
from .exceptions import ReplayError
from .models import Difficulty, IntensityAdjustment, SetInput
from .replay import load_events, replay
from .status import classify_fatigue, get_status_color, round_percent
from .tables import FatigueTables

console = Console()


def non_negative_float(value: str) -> float:
    """argparse type for durations that cannot run backwards."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return number


def get_adjustment_color(adjustment: IntensityAdjustment) -> str:
    """Get rich color for an intensity adjustment."""
    colors = {
        IntensityAdjustment.REDUCE: "red",
        IntensityAdjustment.MODERATE: "yellow",
        IntensityAdjustment.MAINTAIN: "green",
    }
    return colors.get(adjustment, "white")


def print_levels(engine: FatigueEngine, title: str = "Muscle Fatigue") -> None:
    """Print current fatigue for every trained muscle."""
    levels = engine.get_all_levels()
    if not levels:
        console.print("No muscle groups trained yet.")
        console.print()
        return

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Muscle", style="cyan")
    table.add_column("Fatigue", justify="right")
    table.add_column("Status")
    table.add_column("Sets", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Recovery/min", justify="right")

    for state in levels:
        color = get_status_color(state.fatigue_level)
        table.add_row(
            state.muscle_group,
            f"[{color}]{round_percent(state.fatigue_level)}%[/{color}]",
            f"[{color}]{classify_fatigue(state.fatigue_level).value}[/{color}]",
            str(state.exercise_count),
            f"{state.total_volume:.0f}",
            f"{state.recovery_rate_per_minute:.1f}",
        )

    console.print(table)
    console.print()


def print_recommendations(engine: FatigueEngine) -> None:
    """Print rest, intensity and next-exercise guidance."""
    recs = engine.get_recommendations()
    color = get_adjustment_color(recs.intensity_adjustment)
    rest = ", ".join(recs.rest_needed) if recs.rest_needed else "none"

    text = f"""
[cyan]Rest needed:[/cyan]    {rest}
[cyan]Intensity:[/cyan]      [{color}]{recs.intensity_adjustment.value.upper()}[/{color}]
[cyan]Next:[/cyan]           {recs.next_exercise_suggestion}
[cyan]Session:[/cyan]        {engine.get_session_duration_minutes():.1f} min
"""
    console.print(Panel(text, title="Recommendations", box=box.ROUNDED))
    console.print()


def cmd_demo(args) -> None:
    """Record a bench press set, rest, and show fatigue before and after."""
    console.print()
    console.print(Panel("[bold]Workout Fatigue - Demo[/bold]"))
    console.print()

    clock = ManualClock(start_ms=SystemClock().now_ms())
    engine = FatigueEngine(clock=clock)

    # 200 lbs x 8 reps
    engine.record_set(SetInput(
        muscle_group="Chest",
        difficulty=Difficulty.INTERMEDIATE,
        intensity=0.8,
        volume=200 * 8,
        duration_seconds=60,
        rest_seconds_since_previous=120,
    ))
    print_levels(engine, title="After bench press set")

    clock.advance_minutes(args.rest_minutes)
    print_levels(engine, title=f"After {args.rest_minutes:g} min rest")
    print_recommendations(engine)


def cmd_replay(args) -> None:
    """Replay a recorded session file."""
    console.print()
    console.print(Panel(f"[bold]Workout Fatigue - Replay[/bold]\n{escape(str(args.file))}"))
    console.print()

    clock = ManualClock(start_ms=SystemClock().now_ms())
    engine = FatigueEngine(clock=clock)

    try:
        count = replay(engine, clock, load_events(args.file))
    except ReplayError as e:
        console.print(f"[red]Replay failed: {escape(e.message)}[/red]")
        if e.details:
            console.print(e.details, style="red")
        sys.exit(1)

    console.print(f"Replayed {count} events")
    console.print()
    print_levels(engine)
    print_recommendations(engine)


def cmd_tables(args) -> None:
    """Show per-muscle fatigue and recovery rates."""
    tables = FatigueTables.from_settings()

    table = Table(title="Muscle Rates", box=box.ROUNDED)
    table.add_column("Muscle", style="cyan")
    table.add_column("Base fatigue/set", justify="right")
    table.add_column("Recovery/min", justify="right")
    table.add_column("Minutes to recover 50%", justify="right")

    for muscle in tables.fatigue_rates:
        rate = tables.recovery_rate(muscle)
        table.add_row(
            muscle,
            f"{tables.base_fatigue(muscle):g}",
            f"{rate:g}",
            f"{50 / rate:.0f}",
        )

    console.print()
    console.print(table)
    console.print(
        f"Unknown muscle groups use {tables.default_base_fatigue:g}/set "
        f"and {tables.default_recovery_rate:g}/min."
    )
    console.print()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Workout fatigue CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    demo_p = subparsers.add_parser("demo", help="Run the bench press demo")
    demo_p.add_argument("--rest-minutes", "-r", type=non_negative_float, default=5.0, help="Rest after the set")

    replay_p = subparsers.add_parser("replay", help="Replay a session file")
    replay_p.add_argument("file", help="JSON file with a list of events")

    subparsers.add_parser("tables", help="Show per-muscle rates")

    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command == "demo":
        cmd_demo(args)
    elif args.command == "replay":
        cmd_replay(args)
    elif args.command == "tables":
        cmd_tables(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
