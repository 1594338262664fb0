"""
Habit Models for fintrack

Three fixed money habits, each with a daily streak.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class HabitId(str, Enum):
    """
    Supported habits.

    DESIGN DECISION: The set is closed. Stored documents with other keys
    are ignored and requests for other ids are rejected.
    """
    LOG_DAILY = "log_daily"
    NO_FOOD_DELIVERY = "no_food_delivery"
    REVIEW_DASHBOARD = "review_dashboard"


HABIT_LABELS: dict[HabitId, str] = {
    HabitId.LOG_DAILY: "Log spending daily",
    HabitId.NO_FOOD_DELIVERY: "No food delivery",
    HabitId.REVIEW_DASHBOARD: "Review dashboard",
}


class HabitState(BaseModel):
    """Streak counter and the last day the habit was done."""

    streak: int = Field(default=0, ge=0)
    last_done: Optional[date] = None


def default_habits() -> dict[HabitId, HabitState]:
    return {habit_id: HabitState() for habit_id in HabitId}
