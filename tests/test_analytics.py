"""
Tests for read-only aggregate reports.
"""
from datetime import date

from core.analytics import AggregateReporter
from core.models import Activity, EnergyLevel, Mood, Achievement, DEFAULT_ACHIEVEMENTS
from conftest import make_entry

TODAY = date(2024, 1, 7)  # воскресенье


class TestWeeklyStats:

    def test_empty(self):
        weekly = AggregateReporter.weekly_stats([], TODAY)
        assert weekly.average_mood == 0
        assert weekly.total_entries == 0
        assert weekly.most_active_day is None

    def test_trailing_seven_days_only(self):
        entries = [
            make_entry(date(2023, 12, 31), Mood.ANGRY),  # вне окна
            make_entry(date(2024, 1, 1), Mood.HAPPY),
            make_entry(date(2024, 1, 7), Mood.NEUTRAL),
        ]
        weekly = AggregateReporter.weekly_stats(entries, TODAY)
        assert weekly.total_entries == 2
        assert weekly.average_mood == 7.5

    def test_tie_picks_earliest_weekday(self):
        entries = [make_entry(date(2024, 1, 7)), make_entry(date(2024, 1, 3))]
        assert AggregateReporter.weekly_stats(entries, TODAY).most_active_day == "Wednesday"

    def test_to_dict(self):
        weekly = AggregateReporter.weekly_stats([make_entry(TODAY, Mood.LOVE)], TODAY)
        assert weekly.to_dict() == {'average_mood': 15.0, 'total_entries': 1, 'most_active_day': 'Sunday'}


class TestDistributionAndPopularity:

    def test_distribution_includes_zeros(self):
        entries = [make_entry(date(2024, 1, 1), Mood.SAD), make_entry(date(2024, 1, 2), Mood.SAD)]
        distribution = AggregateReporter.mood_distribution(entries)
        assert distribution[Mood.SAD] == 2
        assert distribution[Mood.LOVE] == 0
        assert list(distribution) == list(Mood)

    def test_distribution_for_month(self):
        entries = [make_entry(date(2023, 12, 31), Mood.SAD), make_entry(date(2024, 1, 2), Mood.HAPPY)]
        distribution = AggregateReporter.mood_distribution(entries, date(2024, 1, 1))
        assert sum(distribution.values()) == 1

    def test_popularity_order_and_limit(self):
        entries = [
            make_entry(date(2024, 1, 1), activities=(Activity.MUSIC, Activity.READING)),
            make_entry(date(2024, 1, 2), activities=(Activity.MUSIC, Activity.EXERCISE)),
            make_entry(date(2024, 1, 3), activities=(Activity.GAMING,)),
        ]
        ranked = AggregateReporter.activity_popularity(entries, limit=3)
        assert ranked == [(Activity.MUSIC, 2), (Activity.EXERCISE, 1), (Activity.READING, 1)]

    def test_popularity_empty(self):
        assert AggregateReporter.activity_popularity([]) == []


class TestEnergyAndSleep:

    def test_summary(self):
        entries = [
            make_entry(date(2024, 1, 1), energy_level=2, sleep_hours=6),
            make_entry(date(2024, 1, 2), energy_level=4, sleep_hours=8),
            make_entry(date(2024, 1, 3)),
        ]
        summary = AggregateReporter.energy_and_sleep_summary(entries)
        assert summary.average_sleep == 7
        assert summary.most_common_energy is EnergyLevel.HIGH

    def test_empty_summary(self):
        summary = AggregateReporter.energy_and_sleep_summary([])
        assert summary.to_dict() == {'average_sleep': None, 'most_common_energy': None}


class TestMonthView:

    def test_calendar_grid_starts_on_sunday(self):
        grid = AggregateReporter.calendar_grid(date(2024, 2, 15))
        # 1 февраля 2024 - четверг
        assert grid[0][:4] == [None, None, None, None]
        assert grid[0][4] == date(2024, 2, 1)
        assert all(len(week) == 7 for week in grid)
        days = [d for week in grid for d in week if d]
        assert days[-1] == date(2024, 2, 29)

    def test_month_overview(self):
        reporter = AggregateReporter()
        entries = [
            make_entry(date(2024, 1, 3), Mood.HAPPY),
            make_entry(date(2024, 1, 2), Mood.SAD),
            make_entry(date(2024, 1, 1), Mood.NEUTRAL),
            make_entry(date(2024, 2, 1), Mood.ANGRY),
        ]
        overview = reporter.month_overview(entries, date(2024, 1, 20))
        assert [e.day.day for e in overview.entries] == [1, 2, 3]
        assert overview.average_score == (5 + 2 + 3) / 3
        assert overview.average_mood is Mood.NEUTRAL
        assert overview.streak == 3

    def test_empty_month(self):
        overview = AggregateReporter().month_overview([], date(2024, 1, 1))
        assert overview.average_mood is None
        assert overview.streak == 0

    def test_achievement_summary(self):
        achievements = [Achievement.create(*template) for template in DEFAULT_ACHIEVEMENTS]
        achievements[0].is_unlocked = True
        assert AggregateReporter.achievement_summary(achievements) == {
            'unlocked': 1, 'total': 8, 'percentage': 12,
        }
