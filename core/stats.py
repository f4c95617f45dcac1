# -*- coding: utf-8 -*-
"""
MoodJournal Bot - Streaks & Points
Подсчёт серий дней подряд и накопление очков
"""

from datetime import date, timedelta
from typing import Iterable
import logging

from core.models import MoodEntry, UserStats, MOOD_INFO, ACTIVITY_INFO
from utils.datetime_utils import day_gap, to_day

logger = logging.getLogger(__name__)

# ===== STREAKS =====

class StreakCalculator:
    """Обновление текущей и самой длинной серии при новой записи"""

    @staticmethod
    def next_streak(current_streak: int, last_entry_date, new_day) -> int:
        """Серия после записи за `new_day`"""
        if last_entry_date is None:
            return 1

        gap = day_gap(new_day, last_entry_date)
        if gap == 1:
            return current_streak + 1
        if gap == 0:
            # Перезапись того же дня
            return current_streak
        # Пропуск или запись задним числом
        return 1

    def update(self, stats: UserStats, new_day) -> int:
        new_day = to_day(new_day)
        stats.current_streak = self.next_streak(stats.current_streak, stats.last_entry_date, new_day)
        stats.longest_streak = max(stats.longest_streak, stats.current_streak)
        stats.last_entry_date = new_day
        return stats.current_streak

    @staticmethod
    def streak_from_days(days: Iterable[date]) -> int:
        """Серия подряд идущих дней, заканчивающаяся на самом позднем дне"""
        unique = sorted(set(to_day(d) for d in days), reverse=True)
        if not unique:
            return 0

        streak = 1
        previous = unique[0]
        for day in unique[1:]:
            if day == previous - timedelta(days=1):
                streak += 1
                previous = day
            else:
                break
        return streak

# ===== POINTS =====

class PointsAccumulator:
    """Очки за записи"""

    @staticmethod
    def points_for_entry(entry: MoodEntry) -> int:
        return MOOD_INFO[entry.mood].points + sum(ACTIVITY_INFO[a].points for a in entry.activities)

    def accumulate(self, stats: UserStats, entry: MoodEntry) -> int:
        """Начислить очки и посчитать запись.

        Начисление происходит при каждом сохранении, в том числе при
        перезаписи уже заполненного дня: очки и счётчик записей растут снова.
        """
        points = self.points_for_entry(entry)
        stats.total_points += points
        stats.total_entries += 1
        logger.debug(f"+{points} points for {entry.day.isoformat()} (total {stats.total_points})")
        return points
