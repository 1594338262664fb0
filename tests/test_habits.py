"""
Tests for the habit tracker

Streak transitions, persistence and recovery from bad stored data.
"""

import json

import pytest
from datetime import date

from fintrack.habits import HabitTracker, UnknownHabitError, advance_streak, parse_habit_id
from fintrack.models.habit import HabitId, HabitState

HABITS_KEY = "finance-mvc-habits"

DAY_1 = date(2024, 3, 1)
DAY_2 = date(2024, 3, 2)


class TestAdvanceStreak:
    """Tests for the streak state machine."""

    def test_first_time(self):
        """Test that a never-done habit starts at 1."""
        assert advance_streak(HabitState(), DAY_1) == HabitState(streak=1, last_done=DAY_1)

    def test_same_day_is_a_no_op(self):
        """Test that marking twice on one day returns the same state."""
        state = HabitState(streak=4, last_done=DAY_1)
        assert advance_streak(state, DAY_1) is state

    def test_consecutive_day_increments(self):
        """Test that the next day continues the streak."""
        state = HabitState(streak=4, last_done=DAY_1)
        assert advance_streak(state, DAY_2) == HabitState(streak=5, last_done=DAY_2)

    @pytest.mark.parametrize("gap", [2, 3, 30])
    def test_gap_resets(self, gap):
        """Test that missing a day resets the streak to 1."""
        state = HabitState(streak=9, last_done=DAY_1)
        later = date.fromordinal(DAY_1.toordinal() + gap)
        assert advance_streak(state, later) == HabitState(streak=1, last_done=later)


class TestParseHabitId:
    """Tests for habit id validation."""

    def test_known_ids(self):
        """Test that ids and their string values are accepted."""
        assert parse_habit_id("log_daily") == HabitId.LOG_DAILY
        assert parse_habit_id(HabitId.REVIEW_DASHBOARD) == HabitId.REVIEW_DASHBOARD

    def test_unknown_id(self):
        """Test that an unknown id is rejected."""
        with pytest.raises(UnknownHabitError) as exc_info:
            parse_habit_id("meditate")
        assert exc_info.value.habit_id == "meditate"


class TestHabitTracker:
    """Tests for the persistent habit tracker."""

    def test_starts_at_zero(self, storage):
        """Test the default state without a stored document."""
        tracker = HabitTracker(storage)
        assert all(state.streak == 0 for state in tracker.states().values())
        assert list(tracker.states()) == list(HabitId)

    def test_mark_done_twice_same_day(self, storage):
        """Test that the second mark on a day changes nothing."""
        tracker = HabitTracker(storage)
        assert tracker.mark_done("no_food_delivery", DAY_1).streak == 1
        assert tracker.mark_done("no_food_delivery", DAY_1).streak == 1
        assert tracker.is_done_today("no_food_delivery", DAY_1)
        assert not tracker.is_done_today("no_food_delivery", DAY_2)

    def test_streak_over_days(self, storage):
        """Test consecutive days and a reset after a gap."""
        tracker = HabitTracker(storage)
        tracker.mark_done(HabitId.LOG_DAILY, date(2024, 3, 1))
        tracker.mark_done(HabitId.LOG_DAILY, date(2024, 3, 2))
        assert tracker.mark_done(HabitId.LOG_DAILY, date(2024, 3, 3)).streak == 3
        assert tracker.mark_done(HabitId.LOG_DAILY, date(2024, 3, 6)).streak == 1

    def test_default_today(self, storage):
        """Test that the injected calendar is used when no date is given."""
        tracker = HabitTracker(storage, today=lambda: DAY_2)
        assert tracker.mark_done(HabitId.LOG_DAILY).last_done == DAY_2

    def test_unknown_habit_rejected(self, storage):
        """Test that unknown habits raise and change nothing."""
        tracker = HabitTracker(storage)
        with pytest.raises(UnknownHabitError):
            tracker.mark_done("meditate", DAY_1)
        assert storage.get_raw(HABITS_KEY) is None

    def test_state_survives_reload(self, storage):
        """Test that habit state is persisted and reloaded."""
        HabitTracker(storage).mark_done(HabitId.REVIEW_DASHBOARD, DAY_1)
        reloaded = HabitTracker(storage)
        assert reloaded.state(HabitId.REVIEW_DASHBOARD) == HabitState(streak=1, last_done=DAY_1)

    def test_stored_document_shape(self, storage):
        """Test the persisted habit map."""
        HabitTracker(storage).mark_done(HabitId.LOG_DAILY, DAY_1)
        document = json.loads(storage.get_raw(HABITS_KEY))
        assert document["log_daily"] == {"streak": 1, "last_done": "2024-03-01"}
        assert document["no_food_delivery"] == {"streak": 0, "last_done": None}

    def test_returned_state_is_a_copy(self, storage):
        """Test that callers cannot modify tracker state."""
        tracker = HabitTracker(storage)
        state = tracker.mark_done(HabitId.LOG_DAILY, DAY_1)
        state.streak = 99
        assert tracker.state(HabitId.LOG_DAILY).streak == 1

    def test_corrupt_document_uses_defaults(self, storage):
        """Test recovery from undecodable JSON."""
        storage.set_raw(HABITS_KEY, "{not json")
        tracker = HabitTracker(storage)
        assert tracker.state(HabitId.LOG_DAILY) == HabitState()

    def test_wrong_document_type_uses_defaults(self, storage):
        """Test recovery from a document that is not a map."""
        storage.set_raw(HABITS_KEY, "[1, 2, 3]")
        assert HabitTracker(storage).state(HabitId.LOG_DAILY) == HabitState()

    def test_partial_document(self, storage):
        """Test that unknown keys are ignored and bad entries reset."""
        storage.set_raw(HABITS_KEY, json.dumps({
            "log_daily": {"streak": 3, "last_done": "2024-02-29"},
            "no_food_delivery": {"streak": -4},
            "meditate": {"streak": 100},
        }))
        tracker = HabitTracker(storage)
        assert tracker.state(HabitId.LOG_DAILY) == HabitState(streak=3, last_done=date(2024, 2, 29))
        assert tracker.state(HabitId.NO_FOOD_DELIVERY) == HabitState()
        assert tracker.state(HabitId.REVIEW_DASHBOARD) == HabitState()
        assert set(tracker.states()) == set(HabitId)
