"""
Tests for streak calculation and points accumulation.
"""
from datetime import date, timedelta

from core.models import Activity, Mood, UserStats
from core.stats import PointsAccumulator, StreakCalculator
from conftest import make_entry, log_days


class TestStreakCalculator:

    def test_first_entry_starts_streak(self):
        assert StreakCalculator.next_streak(0, None, date(2024, 1, 7)) == 1

    def test_consecutive_days(self):
        calculator = StreakCalculator()
        stats = UserStats()
        start = date(2024, 1, 1)
        for offset in range(5):
            calculator.update(stats, start + timedelta(days=offset))

        assert stats.current_streak == 5
        assert stats.longest_streak == 5
        assert stats.last_entry_date == date(2024, 1, 5)

    def test_gap_resets_streak(self):
        calculator = StreakCalculator()
        stats = UserStats()
        calculator.update(stats, date(2024, 1, 1))
        calculator.update(stats, date(2024, 1, 2))
        calculator.update(stats, date(2024, 1, 4))

        assert stats.current_streak == 1
        assert stats.longest_streak == 2

    def test_same_day_keeps_streak(self):
        assert StreakCalculator.next_streak(3, date(2024, 1, 7), date(2024, 1, 7)) == 3

    def test_backfill_resets_streak(self):
        assert StreakCalculator.next_streak(4, date(2024, 1, 7), date(2024, 1, 3)) == 1

    def test_streak_from_days(self):
        days = [date(2024, 1, 3), date(2024, 1, 5), date(2024, 1, 4), date(2024, 1, 1)]
        assert StreakCalculator.streak_from_days(days) == 3
        assert StreakCalculator.streak_from_days([]) == 0


class TestPointsAccumulator:

    def test_mood_and_activity_points(self):
        entry = make_entry(date(2024, 1, 7), Mood.LOVE, activities=(Activity.EXERCISE, Activity.GAMING))
        assert PointsAccumulator.points_for_entry(entry) == 15 + 10 + 3

    def test_every_submit_counts(self):
        accumulator = PointsAccumulator()
        stats = UserStats()
        accumulator.accumulate(stats, make_entry(date(2024, 1, 7), Mood.HAPPY))
        accumulator.accumulate(stats, make_entry(date(2024, 1, 7), Mood.SAD))

        assert stats.total_points == 12
        assert stats.total_entries == 2


class TestJournalStreaks:

    def test_seven_days_in_a_row(self, journal, clock):
        log_days(journal, clock, 7)
        assert journal.stats.current_streak == 7
        assert journal.stats.longest_streak == 7

    def test_same_day_overwrite_double_counts(self, journal, clock):
        journal.submit_entry(make_entry(clock.today, Mood.NEUTRAL))
        result = journal.submit_entry(make_entry(clock.today, Mood.HAPPY))

        assert result.replaced is not None
        assert len(journal.entries) == 1
        assert journal.stats.total_entries == 2
        assert journal.stats.total_points == 15
        assert journal.stats.current_streak == 1

    def test_two_day_gap(self, journal, clock):
        log_days(journal, clock, 3)
        clock.advance(2)
        journal.submit_entry(make_entry(clock.today))

        assert journal.stats.current_streak == 1
        assert journal.stats.longest_streak == 3
