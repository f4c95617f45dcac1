"""
Tests for core data models: entries, drafts, achievements and stats.
"""
from datetime import date, datetime

import pytest

from core.models import (
    Achievement, AchievementRule, AchievementType, Activity, EnergyLevel, EntryDraft,
    Mood, MoodEntry, UserStats, ValidationError, DEFAULT_ACHIEVEMENTS,
    parse_mood, parse_activities, parse_energy, validate_sleep_hours,
)


class TestMoodEntry:

    def test_datetime_day_is_truncated(self):
        entry = MoodEntry(day=datetime(2024, 1, 7, 23, 59), mood=Mood.SAD)
        assert entry.day == date(2024, 1, 7)

    def test_values_are_normalized(self):
        entry = MoodEntry(
            day=date(2024, 1, 7),
            mood="happy",
            activities=["reading", Activity.READING, "nature"],
            energy_level=4,
            sleep_hours="7.5",
        )
        assert entry.mood is Mood.HAPPY
        assert entry.activities == (Activity.READING, Activity.NATURE)
        assert entry.energy_level is EnergyLevel.HIGH
        assert entry.sleep_hours == 7.5

    def test_blank_comment_becomes_none(self):
        entry = MoodEntry(day=date(2024, 1, 7), mood=Mood.LOVE, comment="   ")
        assert entry.comment is None

    @pytest.mark.parametrize("kwargs", [
        {"mood": "bored"},
        {"mood": Mood.HAPPY, "activities": ["skydiving"]},
        {"mood": Mood.HAPPY, "energy_level": 9},
        {"mood": Mood.HAPPY, "sleep_hours": 25},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValidationError):
            MoodEntry(day=date(2024, 1, 7), **kwargs)

    def test_invalid_day_raises(self):
        with pytest.raises(ValidationError):
            MoodEntry(day="2024-01-07", mood=Mood.HAPPY)

    def test_dict_keeps_all_fields(self):
        entry = MoodEntry(
            day=date(2024, 1, 7), mood=Mood.NEUTRAL, comment="ok",
            activities=(Activity.WORK,), energy_level=EnergyLevel.LOW, sleep_hours=6,
        )
        restored = MoodEntry.from_dict(entry.to_dict())
        assert restored == entry

    def test_from_dict_missing_day_raises(self):
        with pytest.raises(ValidationError):
            MoodEntry.from_dict({"id": "x", "mood": "happy"})


class TestParsers:

    def test_parse_mood_accepts_emoji_and_name(self):
        assert parse_mood("😍") is Mood.LOVE
        assert parse_mood("ANGRY") is Mood.ANGRY

    def test_parse_activities_empty(self):
        assert parse_activities(None) == ()

    def test_parse_energy_none(self):
        assert parse_energy(None) is None

    def test_sleep_hours_bool_rejected(self):
        with pytest.raises(ValidationError):
            validate_sleep_hours(True)


class TestEntryDraft:

    def test_draft_without_mood_is_not_ready(self):
        draft = EntryDraft(comment="nothing yet")
        assert not draft.is_ready
        assert draft.to_entry(date(2024, 1, 7)) is None

    def test_draft_defaults_to_today(self):
        draft = EntryDraft(mood=Mood.HAPPY)
        assert draft.to_entry(date(2024, 1, 7)).day == date(2024, 1, 7)

    def test_toggle_activity(self):
        draft = EntryDraft()
        assert draft.toggle_activity(Activity.MUSIC) is True
        assert draft.toggle_activity(Activity.MUSIC) is False
        assert draft.activities == []

    def test_reset(self):
        draft = EntryDraft(day=date(2024, 1, 1), mood=Mood.SAD, comment="x",
                           activities=[Activity.WORK], energy_level=EnergyLevel.LOW, sleep_hours=5)
        draft.reset()
        assert draft == EntryDraft()


class TestAchievement:

    def test_unlock_is_one_way(self):
        achievement = Achievement.create(*DEFAULT_ACHIEVEMENTS[0])
        first = datetime(2024, 1, 7, 12, 0)

        assert achievement.unlock(first) is True
        assert achievement.unlock(datetime(2024, 2, 1)) is False
        assert achievement.unlocked_date == first.isoformat()

    def test_rule_recovered_from_title(self):
        data = Achievement.create(*DEFAULT_ACHIEVEMENTS[2]).to_dict()
        data.pop("rule")
        assert Achievement.from_dict(data).rule is AchievementRule.WEEK_WARRIOR

    def test_unknown_type_raises(self):
        data = Achievement.create(*DEFAULT_ACHIEVEMENTS[0]).to_dict()
        data["type"] = "legendary"
        with pytest.raises(ValidationError):
            Achievement.from_dict(data)


class TestUserStats:

    def test_default_catalog(self):
        stats = UserStats.create_default()
        assert len(stats.achievements) == 8
        assert stats.unlocked_achievements == []
        assert {a.achievement_type for a in stats.achievements} == set(AchievementType)

    def test_missing_catalog_entries_are_added(self):
        stats = UserStats.create_default()
        data = stats.to_dict()
        data["achievements"] = data["achievements"][:3]

        restored = UserStats.from_dict(data)
        assert len(restored.achievements) == 8
        assert restored.get_achievement(AchievementRule.PERFECT_WEEK) is not None

    def test_bad_date_raises(self):
        with pytest.raises(ValidationError):
            UserStats.from_dict({"last_entry_date": "yesterday"})
