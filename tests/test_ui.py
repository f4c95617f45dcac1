"""
Tests for message formatting and keyboards.
"""
from datetime import date

from core.analytics import AggregateReporter
from core.models import Activity, EnergyLevel, EntryDraft, Mood
from ui.keyboards import entry_details_keyboard, history_keyboard, mood_keyboard
from ui.messages import (
    draft_message, entry_saved_message, history_message, stats_message, today_message, welcome_message,
)
from ui.progress import achievement_bar, progress_bar, streak_emoji
from conftest import make_entry, log_days


class TestProgress:

    def test_progress_bar_is_clamped(self):
        assert progress_bar(150, length=4).endswith("100%")
        assert progress_bar(-5, length=4) == "⬜️" * 4 + " 0%"

    def test_achievement_bar(self):
        assert achievement_bar(3, 7).startswith("3/7 ")

    def test_streak_emoji(self):
        assert streak_emoji(1) == "🔹"
        assert streak_emoji(7) == "🔥"
        assert streak_emoji(30) == "🏆"


class TestMessages:

    def test_welcome_escapes_name(self):
        assert "&lt;b&gt;" in welcome_message("<b>")

    def test_draft_message(self):
        draft = EntryDraft(mood=Mood.HAPPY, activities=[Activity.NATURE], energy_level=EnergyLevel.HIGH)
        text = draft_message(draft, date(2024, 1, 7))
        assert "07.01.2024" in text
        assert "😊" in text
        assert "Nature" in text
        assert "High" in text

    def test_today_without_entry(self):
        assert "/mood" in today_message(None)

    def test_saved_message_reports_replacement(self, journal, clock):
        journal.submit_entry(make_entry(clock.today, Mood.SAD))
        result = journal.submit_entry(make_entry(clock.today, Mood.HAPPY))
        text = entry_saved_message(result, journal.stats)
        assert "обновлена" in text
        assert "+10" in text

    def test_stats_message(self, journal, clock):
        log_days(journal, clock, 2, activities=(Activity.MUSIC,), sleep_hours=8)
        text = stats_message(
            journal.stats, journal.weekly_stats(), journal.mood_distribution(),
            journal.activity_popularity(), journal.energy_and_sleep_summary(),
        )
        assert "Записей: 2" in text
        assert "Music: 2" in text
        assert "8.0 ч" in text

    def test_history_message(self):
        reporter = AggregateReporter()
        month = date(2024, 1, 1)
        overview = reporter.month_overview([make_entry(date(2024, 1, 5), Mood.LOVE)], month)
        text = history_message(overview, reporter.calendar_grid(month))
        assert "Январь 2024" in text
        assert "😍" in text


class TestKeyboards:

    def test_mood_keyboard_has_every_mood(self):
        buttons = mood_keyboard().inline_keyboard[0]
        assert [b.callback_data for b in buttons] == [f"mood_set:{m.value}" for m in Mood]

    def test_selected_activity_marked(self):
        keyboard = entry_details_keyboard([Activity.EXERCISE])
        first = keyboard.inline_keyboard[0][0]
        assert first.text.startswith("✅")
        assert first.callback_data == "activity_toggle:exercise"

    def test_history_keyboard_wraps_year(self):
        back, forward = history_keyboard(date(2024, 12, 1)).inline_keyboard[0]
        assert back.callback_data == "history:2024-11"
        assert forward.callback_data == "history:2025-01"
