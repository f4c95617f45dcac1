"""
Tests for the journal: submission flow, persistence and reset.
"""
import json
from datetime import date

import pytest

from core.journal import MoodJournal, ENTRIES_KEY, STATS_KEY
from core.models import Activity, EntryDraft, Mood, AchievementRule, DEFAULT_ACHIEVEMENTS
from database.manager import JsonFileStore, KeyValueStore, MemoryStore, StorageWriteError, StorageReadError
from database.repository import JournalRepository
from conftest import make_entry, log_days


class FailingStore(MemoryStore):
    """Хранилище, которое не может ни читать, ни писать"""

    def load(self, key):
        raise StorageReadError("disk unavailable")

    def save(self, key, blob):
        raise StorageWriteError("disk full")


class TestSubmission:

    def test_submit_returns_points_and_saves(self, journal, store, clock):
        result = journal.submit_entry(make_entry(clock.today, Mood.HAPPY, activities=(Activity.NATURE,)))

        assert result.points == 19
        assert result.replaced is None
        assert ENTRIES_KEY in store.data
        assert json.loads(store.data[STATS_KEY])["total_points"] == 19

    def test_submit_draft_without_mood_is_noop(self, journal):
        draft = EntryDraft(comment="later")
        assert journal.submit_draft(draft) is None
        assert len(journal.entries) == 0
        assert journal.stats.total_entries == 0
        assert draft.comment == "later"

    def test_submit_draft_resets_it(self, journal, clock):
        draft = EntryDraft(mood=Mood.LOVE, activities=[Activity.FAMILY], sleep_hours=8)
        result = journal.submit_draft(draft)

        assert result.entry.day == clock.today
        assert result.entry.sleep_hours == 8
        assert draft == EntryDraft()

    def test_drain_unlocked_empties_queue(self, journal, clock):
        journal.submit_entry(make_entry(clock.today))
        assert journal.latest_unlocked().title == "First Step"

        drained = journal.drain_unlocked()
        assert [a.title for a in drained] == ["First Step"]
        assert journal.drain_unlocked() == []
        assert journal.latest_unlocked() is None

    def test_views(self, journal, clock):
        log_days(journal, clock, 3, mood=Mood.SAD, energy_level=2)

        assert journal.entry_for_day(clock.today).mood is Mood.SAD
        assert journal.weekly_stats().total_entries == 3
        assert journal.mood_distribution()[Mood.SAD] == 3
        assert len(journal.entries_for_month(clock.today)) == 3
        assert journal.month_overview().streak == 3
        assert journal.energy_and_sleep_summary().most_common_energy == 2

    def test_happiness_seeker_on_fiftieth_happy_day(self, journal, clock):
        results = log_days(journal, clock, 50, mood=Mood.HAPPY)

        assert all("Happiness Seeker" not in [a.title for a in r.unlocked] for r in results[:-1])
        assert [a.title for a in results[-1].unlocked] == ["Happiness Seeker"]
        assert journal.stats.get_achievement(AchievementRule.HAPPINESS_SEEKER).is_unlocked


class TestPersistence:

    def test_reload_restores_state(self, store, clock):
        journal = MoodJournal(store, now_func=clock)
        log_days(journal, clock, 7)

        reloaded = MoodJournal(store, now_func=clock)
        assert len(reloaded.entries) == 7
        assert reloaded.stats.current_streak == 7
        assert reloaded.stats.get_achievement(AchievementRule.WEEK_WARRIOR).is_unlocked
        assert reloaded.drain_unlocked() == []

    def test_corrupted_entries_fall_back_to_empty(self, clock):
        store = MemoryStore({ENTRIES_KEY: "{not json", STATS_KEY: json.dumps({"total_points": 42})})
        journal = MoodJournal(store, now_func=clock)

        assert len(journal.entries) == 0
        assert journal.stats.total_points == 42

    def test_corrupted_stats_fall_back_to_defaults(self, clock):
        store = MemoryStore({STATS_KEY: json.dumps({"last_entry_date": "soon"})})
        journal = MoodJournal(store, now_func=clock)

        assert journal.stats.total_points == 0
        assert len(journal.stats.achievements) == 8

    def test_unreadable_store(self, clock):
        journal = MoodJournal(FailingStore(), now_func=clock)
        assert len(journal.entries) == 0

    def test_failed_save_keeps_memory_state(self, clock):
        journal = MoodJournal(FailingStore(), now_func=clock)
        result = journal.submit_entry(make_entry(clock.today))

        assert result.points == 10
        assert journal.stats.total_entries == 1
        assert journal.save() is False

    def test_invalid_utf8_file_falls_back_to_empty(self, tmp_path, clock):
        user_dir = tmp_path / "user_1"
        user_dir.mkdir()
        (user_dir / "mood_entries.json").write_bytes(b"\xff\xfe\x00garbage")

        journal = MoodJournal(JsonFileStore(user_dir), now_func=clock)
        assert len(journal.entries) == 0
        assert journal.stats.total_points == 0

    def test_infinity_in_stats_falls_back_to_defaults(self, clock):
        store = MemoryStore({STATS_KEY: '{"total_points": Infinity}'})
        journal = MoodJournal(store, now_func=clock)

        assert journal.stats.total_points == 0
        assert len(journal.stats.achievements) == 8

    def test_infinite_energy_in_entries_falls_back_to_empty(self, clock):
        raw = make_entry(clock.today).to_dict()
        raw["energy_level"] = float("inf")
        blob = json.dumps([raw])
        journal = MoodJournal(MemoryStore({ENTRIES_KEY: blob}), now_func=clock)

        assert "Infinity" in blob
        assert len(journal.entries) == 0

    def test_json_file_store(self, tmp_path, clock):
        journal = MoodJournal(JsonFileStore(tmp_path / "user_1"), now_func=clock)
        journal.submit_entry(make_entry(clock.today, comment="привет"))

        assert (tmp_path / "user_1" / "mood_entries.json").exists()
        reloaded = MoodJournal(JsonFileStore(tmp_path / "user_1"), now_func=clock)
        assert reloaded.entry_for_day(clock.today).comment == "привет"

    def test_store_contract_is_abstract(self):
        with pytest.raises(TypeError):
            KeyValueStore()


class TestClear:

    def test_clear_resets_everything(self, journal, store, clock):
        log_days(journal, clock, 7, activities=(Activity.MUSIC,))
        journal.clear_all()

        assert len(journal.entries) == 0
        assert journal.weekly_stats().total_entries == 0
        assert journal.activity_popularity() == []
        assert journal.stats.total_points == 0
        assert journal.stats.current_streak == 0
        assert journal.stats.last_entry_date is None
        assert len(journal.stats.achievements) == 8
        assert journal.mood_distribution() == {mood: 0 for mood in Mood}
        assert {a.title for a in journal.stats.achievements} == {t[1] for t in DEFAULT_ACHIEVEMENTS}
        assert journal.stats.unlocked_achievements == []
        assert journal.drain_unlocked() == []
        assert store.data == {}

    def test_first_entry_after_clear(self, journal, clock):
        log_days(journal, clock, 2)
        journal.clear_all()
        result = journal.submit_entry(make_entry(clock.today))

        assert journal.stats.current_streak == 1
        assert [a.title for a in result.unlocked] == ["First Step"]


class TestRepository:

    def test_journals_are_per_user(self, tmp_path, clock):
        repository = JournalRepository(tmp_path, now_func=clock)
        repository.get_journal(1).submit_entry(make_entry(clock.today))

        assert repository.get_journal(1) is repository.get_journal(1)
        assert len(repository.get_journal(2).entries) == 0
        assert repository.known_user_ids() == [1, 2]

    def test_known_users_from_disk(self, tmp_path, clock):
        JournalRepository(tmp_path, now_func=clock).get_journal(5).submit_entry(make_entry(clock.today))
        (tmp_path / "user_abc").mkdir()

        fresh = JournalRepository(tmp_path, now_func=clock)
        assert fresh.known_user_ids() == [5]
        assert fresh.get_journal(5).stats.total_entries == 1

    def test_custom_store_factory(self, tmp_path, clock):
        repository = JournalRepository(tmp_path, now_func=clock, store_factory=lambda path: MemoryStore())
        repository.get_journal(3).submit_entry(make_entry(date(2024, 1, 7)))
        assert not (tmp_path / "user_3").exists()

    def test_reload_sees_writes_from_another_repository(self, tmp_path, clock):
        bot_side = JournalRepository(tmp_path, now_func=clock)
        dashboard_side = JournalRepository(tmp_path, now_func=clock)

        bot_side.get_journal(1).submit_entry(make_entry(clock.today))
        assert dashboard_side.get_journal(1).stats.total_entries == 1

        clock.advance()
        bot_side.get_journal(1).submit_entry(make_entry(clock.today))
        assert dashboard_side.get_journal(1).stats.total_entries == 1
        assert dashboard_side.get_journal(1, reload=True).stats.total_entries == 2
        assert dashboard_side.get_journal(1).stats.current_streak == 2
