#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MoodJournal Bot - Achievement System
Правила достижений, реестр проверщиков и движок разблокировки

Версия: 1.0.0
"""

from datetime import datetime, date
from typing import Dict, List, Optional, Callable, Tuple, Sequence
from dataclasses import dataclass
from abc import ABC, abstractmethod
import logging

from core.models import (
    Achievement, AchievementRule, Mood, Activity, MoodEntry, UserStats
)
from utils.datetime_utils import trailing_days

logger = logging.getLogger(__name__)

HAPPY_TARGET = 50
PERFECT_WEEK_DAYS = 7

# ===== CONTEXT =====

@dataclass
class AchievementContext:
    """Состояние, по которому проверяются правила"""
    stats: UserStats
    entries: Sequence[MoodEntry]
    today: date

    @property
    def happy_count(self) -> int:
        return sum(1 for e in self.entries if e.mood == Mood.HAPPY)

    @property
    def distinct_moods(self) -> int:
        return len({e.mood for e in self.entries})

    @property
    def distinct_activities(self) -> int:
        return len({a for e in self.entries for a in e.activities})

    @property
    def days_in_trailing_week(self) -> int:
        start, end = trailing_days(self.today, PERFECT_WEEK_DAYS)
        return len({e.day for e in self.entries if start <= e.day <= end})

# ===== ACHIEVEMENT CHECKERS =====

class AchievementChecker(ABC):
    """Базовый класс для проверки достижений"""

    @abstractmethod
    def check(self, context: AchievementContext) -> bool:
        """Проверить условие достижения"""
        pass

    @abstractmethod
    def get_progress(self, context: AchievementContext) -> Tuple[int, int]:
        """Получить прогресс (текущий, максимальный)"""
        pass


class SimpleCountChecker(AchievementChecker):
    """Проверка простого подсчета"""

    def __init__(self, target_count: int, value_getter: Callable[[AchievementContext], int]):
        self.target_count = target_count
        self.value_getter = value_getter

    def check(self, context: AchievementContext) -> bool:
        return self.value_getter(context) >= self.target_count

    def get_progress(self, context: AchievementContext) -> Tuple[int, int]:
        current = min(self.target_count, self.value_getter(context))
        return current, self.target_count


class StreakChecker(AchievementChecker):
    """Проверка текущей серии"""

    def __init__(self, target_streak: int):
        self.target_streak = target_streak

    def check(self, context: AchievementContext) -> bool:
        return context.stats.current_streak >= self.target_streak

    def get_progress(self, context: AchievementContext) -> Tuple[int, int]:
        current = min(self.target_streak, context.stats.current_streak)
        return current, self.target_streak


class ConditionalChecker(AchievementChecker):
    """Проверка произвольного условия"""

    def __init__(self, condition_func: Callable[[AchievementContext], bool],
                 progress_func: Optional[Callable[[AchievementContext], Tuple[int, int]]] = None):
        self.condition_func = condition_func
        self.progress_func = progress_func

    def check(self, context: AchievementContext) -> bool:
        return self.condition_func(context)

    def get_progress(self, context: AchievementContext) -> Tuple[int, int]:
        if self.progress_func:
            return self.progress_func(context)
        return (1 if self.check(context) else 0, 1)

# ===== ACHIEVEMENT REGISTRY =====

class AchievementRegistry:
    """Реестр проверщиков по идентификатору правила"""

    def __init__(self):
        self.checkers: Dict[AchievementRule, AchievementChecker] = {}
        self._load_default_rules()

    def register(self, rule: AchievementRule, checker: AchievementChecker) -> None:
        self.checkers[rule] = checker
        logger.debug(f"Registered achievement rule: {rule.value}")

    def get_checker(self, rule: Optional[AchievementRule]) -> Optional[AchievementChecker]:
        if rule is None:
            return None
        return self.checkers.get(rule)

    def _load_default_rules(self):
        """Правила стандартного каталога"""
        self.register(AchievementRule.FIRST_STEP,
                      SimpleCountChecker(1, lambda ctx: ctx.stats.total_entries))
        self.register(AchievementRule.HAPPINESS_SEEKER,
                      SimpleCountChecker(HAPPY_TARGET, lambda ctx: ctx.happy_count))

        self.register(AchievementRule.WEEK_WARRIOR, StreakChecker(7))
        self.register(AchievementRule.CONSISTENCY_KING, StreakChecker(14))
        self.register(AchievementRule.MONTH_MASTER, StreakChecker(30))

        self.register(AchievementRule.MOOD_EXPLORER,
                      SimpleCountChecker(len(Mood), lambda ctx: ctx.distinct_moods))
        self.register(AchievementRule.ACTIVITY_MASTER,
                      SimpleCountChecker(len(Activity), lambda ctx: ctx.distinct_activities))

        def check_perfect_week(ctx: AchievementContext) -> bool:
            """Запись в каждый из последних 7 дней"""
            return ctx.days_in_trailing_week >= PERFECT_WEEK_DAYS

        self.register(AchievementRule.PERFECT_WEEK, ConditionalChecker(
            check_perfect_week,
            lambda ctx: (min(PERFECT_WEEK_DAYS, ctx.days_in_trailing_week), PERFECT_WEEK_DAYS)
        ))

# ===== ACHIEVEMENT ENGINE =====

class AchievementEngine:
    """Оценка заблокированных достижений после обновления статистики"""

    def __init__(self, registry: Optional[AchievementRegistry] = None):
        self.registry = registry or AchievementRegistry()

    def evaluate(self, stats: UserStats, entries: Sequence[MoodEntry], now: datetime) -> List[Achievement]:
        """Разблокировать все выполненные достижения, вернуть новые"""
        context = AchievementContext(stats=stats, entries=entries, today=now.date())
        unlocked: List[Achievement] = []

        for achievement in stats.locked_achievements:
            checker = self.registry.get_checker(achievement.rule)
            if checker is None:
                logger.warning(f"No rule for achievement '{achievement.title}', skipping")
                continue

            if checker.check(context) and achievement.unlock(now):
                unlocked.append(achievement)
                logger.info(f"🏆 Achievement unlocked: {achievement.title}")

        return unlocked

    def get_progress(self, stats: UserStats, entries: Sequence[MoodEntry],
                     today: date) -> List[Dict[str, object]]:
        """Прогресс по каждому достижению каталога"""
        context = AchievementContext(stats=stats, entries=entries, today=today)
        result = []
        for achievement in stats.achievements:
            checker = self.registry.get_checker(achievement.rule)
            if checker is None:
                current, target = (1, 1) if achievement.is_unlocked else (0, 1)
            elif achievement.is_unlocked:
                _, target = checker.get_progress(context)
                current = target
            else:
                current, target = checker.get_progress(context)

            result.append({
                'achievement': achievement,
                'current': current,
                'target': target,
                'percentage': (current / target * 100) if target else 100.0,
            })
        return result


__all__ = [
    'AchievementContext',
    'AchievementChecker',
    'SimpleCountChecker',
    'StreakChecker',
    'ConditionalChecker',
    'AchievementRegistry',
    'AchievementEngine',
    'HAPPY_TARGET',
    'PERFECT_WEEK_DAYS',
]
