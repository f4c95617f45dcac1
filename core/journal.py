#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MoodJournal Bot - Journal
Контейнер состояния одного пользователя: записи, статистика, очередь
разблокированных достижений и сохранение после каждой мутации.

Версия: 1.0.0
"""

import json
from collections import deque
from datetime import datetime, date
from typing import Callable, Deque, Dict, List, Optional, Any, Tuple
from dataclasses import dataclass, field
import logging

from core.models import (
    MoodEntry, EntryDraft, UserStats, Achievement, Mood, Activity, ValidationError
)
from core.entry_store import EntryStore
from core.stats import StreakCalculator, PointsAccumulator
from core.achievements import AchievementEngine
from core.analytics import AggregateReporter, WeeklyStats, EnergySleepSummary, MonthOverview
from database.manager import KeyValueStore, StorageError, dump_json, load_json
from utils.datetime_utils import now_local

logger = logging.getLogger(__name__)

ENTRIES_KEY = "mood_entries"
STATS_KEY = "user_stats"


@dataclass
class SubmitResult:
    """Результат сохранения записи"""
    entry: MoodEntry
    points: int
    replaced: Optional[MoodEntry] = None
    unlocked: List[Achievement] = field(default_factory=list)


class MoodJournal:
    """Дневник настроения одного пользователя"""

    def __init__(self, storage: KeyValueStore,
                 now_func: Optional[Callable[[], datetime]] = None,
                 engine: Optional[AchievementEngine] = None,
                 entries_key: str = ENTRIES_KEY,
                 stats_key: str = STATS_KEY,
                 autoload: bool = True):
        self.storage = storage
        self.now_func = now_func or now_local
        self.entries_key = entries_key
        self.stats_key = stats_key

        self.streaks = StreakCalculator()
        self.points = PointsAccumulator()
        self.engine = engine or AchievementEngine()
        self.reporter = AggregateReporter()

        self.entries = EntryStore()
        self.stats = UserStats.create_default()
        self.pending_unlocks: Deque[Achievement] = deque()

        if autoload:
            self.load()

    def today(self) -> date:
        return self.now_func().date()

    # ===== MUTATIONS =====

    def submit_entry(self, entry: MoodEntry) -> SubmitResult:
        """Сохранить запись и пересчитать статистику и достижения"""
        replaced = self.entries.upsert(entry)
        points = self.points.accumulate(self.stats, entry)
        self.streaks.update(self.stats, entry.day)

        unlocked = self.engine.evaluate(self.stats, self.entries.all(), self.now_func())
        self.pending_unlocks.extend(unlocked)

        self.save()
        logger.info(
            f"Entry saved for {entry.day.isoformat()}: {entry.mood.value}, +{points} points, "
            f"streak {self.stats.current_streak}"
        )
        return SubmitResult(entry=entry, points=points, replaced=replaced, unlocked=unlocked)

    def submit_draft(self, draft: EntryDraft) -> Optional[SubmitResult]:
        """Черновик без настроения не сохраняется"""
        entry = draft.to_entry(self.today())
        if entry is None:
            logger.debug("Draft without mood ignored")
            return None
        result = self.submit_entry(entry)
        draft.reset()
        return result

    def clear_all(self) -> None:
        """Удалить все данные и вернуть состояние по умолчанию"""
        self.entries.clear()
        self.stats = UserStats.create_default()
        self.pending_unlocks.clear()

        for key in (self.entries_key, self.stats_key):
            try:
                self.storage.delete(key)
            except StorageError as e:
                logger.warning(f"Failed to delete '{key}': {e}")

        logger.info("Journal cleared")

    # ===== UNLOCK NOTIFICATIONS =====

    def drain_unlocked(self) -> List[Achievement]:
        """Забрать и очистить очередь новых достижений"""
        drained = list(self.pending_unlocks)
        self.pending_unlocks.clear()
        return drained

    def latest_unlocked(self) -> Optional[Achievement]:
        return self.pending_unlocks[-1] if self.pending_unlocks else None

    # ===== PERSISTENCE =====

    def load(self) -> None:
        """Загрузка; любая ошибка означает отсутствие данных"""
        self.entries = self._load_entries()
        self.stats = self._load_stats()
        self.pending_unlocks.clear()
        logger.debug(f"Loaded {len(self.entries)} entries")

    def save(self) -> bool:
        """Сохранение без повторов; ошибка только логируется"""
        saved_entries = self._save_record(self.entries_key, self.entries.to_list())
        saved_stats = self._save_record(self.stats_key, self.stats.to_dict())
        return saved_entries and saved_stats

    def _load_record(self, key: str) -> Optional[Any]:
        try:
            blob = self.storage.load(key)
            if blob is None:
                return None
            return load_json(blob)
        except (StorageError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load '{key}', using defaults: {e}")
            return None

    def _load_entries(self) -> EntryStore:
        data = self._load_record(self.entries_key)
        if data is None:
            return EntryStore()
        try:
            return EntryStore.from_list(data)
        except ValidationError as e:
            logger.warning(f"Stored entries are corrupted, starting empty: {e}")
            return EntryStore()

    def _load_stats(self) -> UserStats:
        data = self._load_record(self.stats_key)
        if data is None:
            return UserStats.create_default()
        try:
            return UserStats.from_dict(data)
        except ValidationError as e:
            logger.warning(f"Stored stats are corrupted, using defaults: {e}")
            return UserStats.create_default()

    def _save_record(self, key: str, data: Any) -> bool:
        try:
            return bool(self.storage.save(key, dump_json(data)))
        except (StorageError, TypeError, ValueError) as e:
            logger.warning(f"Failed to save '{key}': {e}")
            return False

    # ===== READ-ONLY VIEWS =====

    def all_entries(self) -> List[MoodEntry]:
        return self.entries.all()

    def entries_for_month(self, day) -> List[MoodEntry]:
        return self.entries.entries_for_month(day)

    def entry_for_day(self, day) -> Optional[MoodEntry]:
        return self.entries.entry_for_day(day)

    def weekly_stats(self) -> WeeklyStats:
        return self.reporter.weekly_stats(self.entries.all(), self.today())

    def mood_distribution(self, month: Optional[date] = None) -> Dict[Mood, int]:
        return self.reporter.mood_distribution(self.entries.all(), month)

    def activity_popularity(self, limit: Optional[int] = 5) -> List[Tuple[Activity, int]]:
        return self.reporter.activity_popularity(self.entries.all(), limit)

    def energy_and_sleep_summary(self, month: Optional[date] = None) -> EnergySleepSummary:
        entries = self.entries.entries_for_month(month) if month else self.entries.all()
        return self.reporter.energy_and_sleep_summary(entries)

    def month_overview(self, month: Optional[date] = None) -> MonthOverview:
        return self.reporter.month_overview(self.entries.all(), month or self.today())

    def achievement_progress(self) -> List[Dict[str, object]]:
        return self.engine.get_progress(self.stats, self.entries.all(), self.today())


__all__ = ['MoodJournal', 'SubmitResult', 'ENTRIES_KEY', 'STATS_KEY']
