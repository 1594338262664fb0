"""
Habit Tracker

A per-habit streak state machine driven by "mark done today" events.

Transitions for one habit, given today's date:
- already done today            -> no change
- last done <= 1.5 days ago     -> streak + 1
- never done, or longer ago     -> streak = 1
Every transition that is not a no-op sets last_done to today.

The 1.5-day slack lets a streak survive late-night logging across a
timezone boundary. There is no terminal state.
"""

from datetime import date
from typing import Callable, Optional, Union

from pydantic import ValidationError

from fintrack.audit import ActivityLogger
from fintrack.config import get_settings
from fintrack.models.audit import ActivityEventBuilder
from fintrack.models.habit import HabitId, HabitState, default_habits
from fintrack.services.storage import DocumentStorageInterface, StorageError

STREAK_SLACK_DAYS = 1.5


class UnknownHabitError(ValueError):
    """Raised for a habit id outside the supported set."""

    def __init__(self, habit_id: str):
        super().__init__(
            f"Unknown habit: {habit_id}. Supported: {[h.value for h in HabitId]}"
        )
        self.habit_id = habit_id


def parse_habit_id(value: Union[HabitId, str]) -> HabitId:
    """Validate a habit id against the closed set."""
    try:
        return HabitId(value)
    except ValueError:
        raise UnknownHabitError(str(value))


def advance_streak(state: HabitState, today: date) -> HabitState:
    """
    Apply one "done today" event to a habit state.

    Returns the same object when the habit was already done today.
    """
    if state.last_done == today:
        return state

    if state.last_done is not None:
        gap_days = (today - state.last_done).days
        streak = state.streak + 1 if gap_days <= STREAK_SLACK_DAYS else 1
    else:
        streak = 1

    return HabitState(streak=streak, last_done=today)


class HabitTracker:
    """
    Holds the state of every supported habit and persists it as one document.
    """

    def __init__(
        self,
        storage: DocumentStorageInterface,
        key: Optional[str] = None,
        activity_logger: Optional[ActivityLogger] = None,
        today: Callable[[], date] = date.today,
    ):
        self._storage = storage
        self._key = key or get_settings().storage.habits_key
        self._activity = activity_logger or ActivityLogger()
        self._today = today
        self._habits = storage.load_or_default(
            self._key,
            self._parse_document,
            default_habits(),
            on_error=lambda error: self._activity.log_document_unreadable(error.key, error.reason),
        )

    def mark_done(
        self,
        habit_id: Union[HabitId, str],
        today: Optional[date] = None,
    ) -> HabitState:
        """
        Record that a habit was done today.

        Raises:
            UnknownHabitError: If habit_id is not a supported habit
        """
        habit = parse_habit_id(habit_id)
        day = today or self._today()

        current = self._habits[habit]
        updated = advance_streak(current, day)
        changed = updated is not current

        if changed:
            self._habits[habit] = updated
            self._persist()

        self._activity.log(ActivityEventBuilder.habit_marked(
            habit_id=habit.value,
            streak=updated.streak,
            changed=changed,
        ))
        return updated.model_copy()

    def state(self, habit_id: Union[HabitId, str]) -> HabitState:
        return self._habits[parse_habit_id(habit_id)].model_copy()

    def states(self) -> dict[HabitId, HabitState]:
        """Copy of every habit's state, in HabitId order."""
        return {habit: self._habits[habit].model_copy() for habit in HabitId}

    def is_done_today(self, habit_id: Union[HabitId, str], today: Optional[date] = None) -> bool:
        day = today or self._today()
        return self._habits[parse_habit_id(habit_id)].last_done == day

    def _persist(self) -> None:
        try:
            self._storage.save(
                self._key,
                {habit.value: state.model_dump(mode="json") for habit, state in self._habits.items()},
            )
        except StorageError as e:
            self._activity.log_storage_write_failed(self._key, str(e))
            raise

    def _parse_document(self, document) -> dict[HabitId, HabitState]:
        if not isinstance(document, dict):
            raise TypeError(f"expected a habit map, got {type(document).__name__}")

        habits = default_habits()
        for habit in HabitId:
            if habit.value not in document:
                continue
            try:
                habits[habit] = HabitState.model_validate(document[habit.value])
            except ValidationError as e:
                self._activity.log_document_unreadable(
                    self._key, f"reset habit {habit.value}: {e.error_count()} errors"
                )
        return habits
