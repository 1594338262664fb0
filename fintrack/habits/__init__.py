"""Habit tracking package."""

from fintrack.habits.tracker import (
    STREAK_SLACK_DAYS,
    HabitTracker,
    UnknownHabitError,
    advance_streak,
    parse_habit_id,
)

__all__ = [
    "STREAK_SLACK_DAYS",
    "HabitTracker",
    "UnknownHabitError",
    "advance_streak",
    "parse_habit_id",
]
