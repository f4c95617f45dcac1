# -*- coding: utf-8 -*-
"""
MoodJournal Bot - Analytics
Сводки только для чтения: неделя, распределение настроений,
популярность активностей, энергия и сон, календарь месяца.
"""

import calendar
from collections import Counter
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple, Any
from dataclasses import dataclass, field

from core.models import (
    Mood, Activity, EnergyLevel, MoodEntry, Achievement, MOOD_INFO
)
from core.stats import StreakCalculator
from utils.datetime_utils import trailing_days, same_month, WEEKDAY_NAMES

WEEK_DAYS = 7


@dataclass
class WeeklyStats:
    """Статистика за последние 7 дней"""
    average_mood: float = 0.0
    total_entries: int = 0
    most_active_day: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'average_mood': round(self.average_mood, 2),
            'total_entries': self.total_entries,
            'most_active_day': self.most_active_day,
        }


@dataclass
class EnergySleepSummary:
    average_sleep: Optional[float] = None
    most_common_energy: Optional[EnergyLevel] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'average_sleep': round(self.average_sleep, 2) if self.average_sleep is not None else None,
            'most_common_energy': int(self.most_common_energy) if self.most_common_energy is not None else None,
        }


@dataclass
class MonthOverview:
    """Сводка месяца для экрана аналитики"""
    year: int
    month: int
    entries: List[MoodEntry] = field(default_factory=list)
    distribution: Dict[Mood, int] = field(default_factory=dict)
    average_score: float = 0.0
    average_mood: Optional[Mood] = None
    streak: int = 0


class AggregateReporter:
    """Чистые функции агрегации; пустой вход даёт нулевой результат"""

    @staticmethod
    def weekly_stats(entries: Sequence[MoodEntry], today: date) -> WeeklyStats:
        start, end = trailing_days(today, WEEK_DAYS)
        week = [e for e in entries if start <= e.day <= end]
        if not week:
            return WeeklyStats()

        average = sum(MOOD_INFO[e.mood].points for e in week) / len(week)

        per_weekday = Counter(e.day.weekday() for e in week)
        # При равенстве выигрывает более ранний день недели
        busiest = min(per_weekday, key=lambda wd: (-per_weekday[wd], wd))

        return WeeklyStats(
            average_mood=average,
            total_entries=len(week),
            most_active_day=WEEKDAY_NAMES[busiest],
        )

    @staticmethod
    def mood_distribution(entries: Sequence[MoodEntry], month: Optional[date] = None) -> Dict[Mood, int]:
        """Количество записей по каждому настроению (нули включены)"""
        if month is not None:
            entries = [e for e in entries if same_month(e.day, month)]
        counts = Counter(e.mood for e in entries)
        return {mood: counts.get(mood, 0) for mood in Mood}

    @staticmethod
    def activity_popularity(entries: Sequence[MoodEntry], limit: Optional[int] = 5) -> List[Tuple[Activity, int]]:
        """Активности по убыванию частоты, при равенстве в порядке перечисления"""
        counts = Counter(a for e in entries for a in e.activities)
        order = {activity: index for index, activity in enumerate(Activity)}
        ranked = sorted(counts.items(), key=lambda item: (-item[1], order[item[0]]))
        if limit is not None:
            ranked = ranked[:limit]
        return ranked

    @staticmethod
    def energy_and_sleep_summary(entries: Sequence[MoodEntry]) -> EnergySleepSummary:
        sleep = [e.sleep_hours for e in entries if e.sleep_hours is not None]
        energy = Counter(e.energy_level for e in entries if e.energy_level is not None)

        most_common = None
        if energy:
            # При равенстве выигрывает более высокий уровень
            most_common = max(energy, key=lambda level: (energy[level], int(level)))

        return EnergySleepSummary(
            average_sleep=sum(sleep) / len(sleep) if sleep else None,
            most_common_energy=most_common,
        )

    # ===== MONTH VIEW =====

    @staticmethod
    def average_mood_score(entries: Sequence[MoodEntry]) -> float:
        """Средняя оценка по шкале 1-5"""
        if not entries:
            return 0.0
        return sum(MOOD_INFO[e.mood].score for e in entries) / len(entries)

    @staticmethod
    def mood_from_score(value: float) -> Mood:
        if value >= 4.7:
            return Mood.HAPPY
        if value >= 3.7:
            return Mood.LOVE
        if value >= 2.7:
            return Mood.NEUTRAL
        if value >= 1.7:
            return Mood.SAD
        return Mood.ANGRY

    def month_overview(self, entries: Sequence[MoodEntry], month: date) -> MonthOverview:
        month_entries = sorted((e for e in entries if same_month(e.day, month)), key=lambda e: e.day)
        average = self.average_mood_score(month_entries)
        return MonthOverview(
            year=month.year,
            month=month.month,
            entries=month_entries,
            distribution=self.mood_distribution(month_entries),
            average_score=average,
            average_mood=self.mood_from_score(average) if average > 0 else None,
            streak=StreakCalculator.streak_from_days(e.day for e in month_entries),
        )

    @staticmethod
    def calendar_grid(month: date) -> List[List[Optional[date]]]:
        """Недели месяца, начиная с воскресенья, пустые клетки заполнены None"""
        first = month.replace(day=1)
        days_in_month = calendar.monthrange(first.year, first.month)[1]
        # weekday(): пн=0 .. вс=6 → смещение от воскресенья
        leading = (first.weekday() + 1) % 7

        cells: List[Optional[date]] = [None] * leading
        cells.extend(first + timedelta(days=offset) for offset in range(days_in_month))
        while len(cells) % 7:
            cells.append(None)

        return [cells[i:i + 7] for i in range(0, len(cells), 7)]

    @staticmethod
    def achievement_summary(achievements: Sequence[Achievement]) -> Dict[str, Any]:
        total = len(achievements)
        unlocked = sum(1 for a in achievements if a.is_unlocked)
        return {
            'unlocked': unlocked,
            'total': total,
            'percentage': int(unlocked / total * 100) if total else 0,
        }


__all__ = [
    'WeeklyStats',
    'EnergySleepSummary',
    'MonthOverview',
    'AggregateReporter',
]
