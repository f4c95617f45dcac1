#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MoodJournal Bot - Core Data Models
Модели данных дневника настроения с валидацией и сериализацией

Версия: 1.0.0
"""

import uuid
from datetime import datetime, date
from typing import Dict, List, Optional, Any, Iterable, Tuple
from dataclasses import dataclass, field
from enum import Enum, IntEnum
import logging

logger = logging.getLogger(__name__)

# ===== ENUMS =====

class Mood(Enum):
    """Настроение дня"""
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    ANGRY = "angry"
    LOVE = "love"


class Activity(Enum):
    """Активности за день"""
    EXERCISE = "exercise"
    MEDITATION = "meditation"
    READING = "reading"
    WORK = "work"
    FRIENDS = "friends"
    FAMILY = "family"
    MUSIC = "music"
    COOKING = "cooking"
    NATURE = "nature"
    GAMING = "gaming"


class EnergyLevel(IntEnum):
    """Уровень энергии 1..5"""
    VERY_LOW = 1
    LOW = 2
    MODERATE = 3
    HIGH = 4
    VERY_HIGH = 5


class AchievementType(Enum):
    """Типы достижений"""
    STREAK = "streak"
    TOTAL_ENTRIES = "totalEntries"
    MOOD_VARIETY = "moodVariety"
    ACTIVITY_COMPLETION = "activityCompletion"
    PERFECT_WEEK = "perfectWeek"


class AchievementRule(Enum):
    """Стабильные идентификаторы правил (не зависят от заголовков)"""
    FIRST_STEP = "first_step"
    HAPPINESS_SEEKER = "happiness_seeker"
    WEEK_WARRIOR = "week_warrior"
    MONTH_MASTER = "month_master"
    CONSISTENCY_KING = "consistency_king"
    MOOD_EXPLORER = "mood_explorer"
    ACTIVITY_MASTER = "activity_master"
    PERFECT_WEEK = "perfect_week"

# ===== LOOKUP TABLES =====

@dataclass(frozen=True)
class MoodInfo:
    points: int
    emoji: str
    label: str
    color: str
    score: int  # шкала 1-5 для графиков


@dataclass(frozen=True)
class ActivityInfo:
    name: str
    icon: str
    points: int


MOOD_INFO: Dict[Mood, MoodInfo] = {
    Mood.HAPPY: MoodInfo(points=10, emoji="😊", label="Happy", color="moodHappy", score=5),
    Mood.NEUTRAL: MoodInfo(points=5, emoji="😐", label="Neutral", color="moodNeutral", score=3),
    Mood.SAD: MoodInfo(points=2, emoji="😞", label="Sad", color="moodSad", score=2),
    Mood.ANGRY: MoodInfo(points=1, emoji="😡", label="Angry", color="moodAngry", score=1),
    Mood.LOVE: MoodInfo(points=15, emoji="😍", label="Love", color="moodLove", score=4),
}

ACTIVITY_INFO: Dict[Activity, ActivityInfo] = {
    Activity.EXERCISE: ActivityInfo(name="Exercise", icon="🏃", points=10),
    Activity.MEDITATION: ActivityInfo(name="Meditation", icon="🧘", points=8),
    Activity.READING: ActivityInfo(name="Reading", icon="📚", points=6),
    Activity.WORK: ActivityInfo(name="Work", icon="💼", points=5),
    Activity.FRIENDS: ActivityInfo(name="Friends", icon="👥", points=7),
    Activity.FAMILY: ActivityInfo(name="Family", icon="👨‍👩‍👧", points=7),
    Activity.MUSIC: ActivityInfo(name="Music", icon="🎵", points=4),
    Activity.COOKING: ActivityInfo(name="Cooking", icon="🍳", points=5),
    Activity.NATURE: ActivityInfo(name="Nature", icon="🌳", points=9),
    Activity.GAMING: ActivityInfo(name="Gaming", icon="🎮", points=3),
}

ENERGY_LABELS: Dict[EnergyLevel, str] = {
    EnergyLevel.VERY_LOW: "Very Low",
    EnergyLevel.LOW: "Low",
    EnergyLevel.MODERATE: "Moderate",
    EnergyLevel.HIGH: "High",
    EnergyLevel.VERY_HIGH: "Very High",
}

# Каталог достижений: (rule, title, description, icon, type)
DEFAULT_ACHIEVEMENTS: List[Tuple[AchievementRule, str, str, str, AchievementType]] = [
    (AchievementRule.FIRST_STEP, "First Step", "Record your first mood", "🌱",
     AchievementType.TOTAL_ENTRIES),
    (AchievementRule.HAPPINESS_SEEKER, "Happiness Seeker", "Record 50 happy moods", "😊",
     AchievementType.TOTAL_ENTRIES),
    (AchievementRule.WEEK_WARRIOR, "Week Warrior", "Keep a 7-day streak", "🔥",
     AchievementType.STREAK),
    (AchievementRule.MONTH_MASTER, "Month Master", "Keep a 30-day streak", "🏆",
     AchievementType.STREAK),
    (AchievementRule.CONSISTENCY_KING, "Consistency King", "Keep a 14-day streak", "👑",
     AchievementType.STREAK),
    (AchievementRule.MOOD_EXPLORER, "Mood Explorer", "Record every kind of mood", "🎭",
     AchievementType.MOOD_VARIETY),
    (AchievementRule.ACTIVITY_MASTER, "Activity Master", "Try all 10 activities", "⭐",
     AchievementType.ACTIVITY_COMPLETION),
    (AchievementRule.PERFECT_WEEK, "Perfect Week", "Log your mood every day for a week", "✨",
     AchievementType.PERFECT_WEEK),
]

RULE_BY_TITLE: Dict[str, AchievementRule] = {title: rule for rule, title, _, _, _ in DEFAULT_ACHIEVEMENTS}

# ===== VALIDATION HELPERS =====

class ValidationError(Exception):
    """Ошибка валидации данных"""
    pass


def validate_text(text: str, min_length: int = 1, max_length: int = 1000, field_name: str = "text") -> str:
    """Валидация текстовых полей"""
    if not isinstance(text, str):
        raise ValidationError(f"{field_name} должен быть строкой")

    text = text.strip()
    if len(text) < min_length:
        raise ValidationError(f"{field_name} должен содержать минимум {min_length} символов")

    if len(text) > max_length:
        raise ValidationError(f"{field_name} должен содержать максимум {max_length} символов")

    return text


def validate_sleep_hours(value: Any) -> Optional[float]:
    """Часы сна: неотрицательное число не больше суток"""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("sleep_hours должен быть числом")
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError("sleep_hours должен быть числом")
    if not 0 <= hours <= 24:
        raise ValidationError("sleep_hours должен быть от 0 до 24")
    return hours


def parse_mood(value: Any) -> Mood:
    """Настроение по значению, имени или эмодзи"""
    if isinstance(value, Mood):
        return value
    if isinstance(value, str):
        key = value.strip()
        for mood, info in MOOD_INFO.items():
            if key.lower() in (mood.value, mood.name.lower()) or key == info.emoji:
                return mood
    raise ValidationError(f"Неизвестное настроение: {value!r}")


def parse_activities(values: Optional[Iterable[Any]]) -> Tuple[Activity, ...]:
    """Список активностей без дубликатов с сохранением порядка"""
    result: List[Activity] = []
    for value in values or ():
        try:
            activity = value if isinstance(value, Activity) else Activity(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Неизвестная активность: {value!r}")
        if activity not in result:
            result.append(activity)
    return tuple(result)


def parse_energy(value: Any) -> Optional[EnergyLevel]:
    if value is None:
        return None
    try:
        return EnergyLevel(int(value))
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("energy_level должен быть от 1 до 5")

# ===== CORE MODELS =====

@dataclass(frozen=True)
class MoodEntry:
    """Запись настроения за календарный день"""
    day: date
    mood: Mood
    comment: Optional[str] = None
    activities: Tuple[Activity, ...] = ()
    energy_level: Optional[EnergyLevel] = None
    sleep_hours: Optional[float] = None
    entry_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def __post_init__(self):
        """Валидация после создания объекта"""
        # frozen dataclass: нормализованные значения через object.__setattr__
        if isinstance(self.day, datetime):
            object.__setattr__(self, "day", self.day.date())
        elif not isinstance(self.day, date):
            raise ValidationError(f"Неверная дата: {self.day!r}")

        object.__setattr__(self, "mood", parse_mood(self.mood))
        object.__setattr__(self, "activities", parse_activities(self.activities))
        object.__setattr__(self, "energy_level", parse_energy(self.energy_level))
        object.__setattr__(self, "sleep_hours", validate_sleep_hours(self.sleep_hours))

        if self.comment is not None:
            comment = validate_text(self.comment, min_length=0, max_length=1000, field_name="comment")
            object.__setattr__(self, "comment", comment or None)

    @property
    def mood_emoji(self) -> str:
        return MOOD_INFO[self.mood].emoji

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.entry_id,
            "day": self.day.isoformat(),
            "mood": self.mood.value,
            "comment": self.comment,
            "activities": [a.value for a in self.activities],
            "energy_level": int(self.energy_level) if self.energy_level is not None else None,
            "sleep_hours": self.sleep_hours,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MoodEntry":
        """Десериализация из словаря"""
        try:
            return cls(
                entry_id=data["id"],
                day=date.fromisoformat(data["day"]),
                mood=data["mood"],
                comment=data.get("comment"),
                activities=tuple(data.get("activities") or ()),
                energy_level=data.get("energy_level"),
                sleep_hours=data.get("sleep_hours"),
                created_at=data.get("created_at", datetime.now().isoformat()),
            )
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise ValidationError(f"Не удалось загрузить запись: {e}")


@dataclass
class EntryDraft:
    """Незавершённая запись, которую собирает интерфейс"""
    day: Optional[date] = None
    mood: Optional[Mood] = None
    comment: str = ""
    activities: List[Activity] = field(default_factory=list)
    energy_level: Optional[EnergyLevel] = None
    sleep_hours: Optional[float] = None

    @property
    def is_ready(self) -> bool:
        return self.mood is not None

    def toggle_activity(self, activity: Activity) -> bool:
        """Переключить активность, вернуть новое состояние"""
        if activity in self.activities:
            self.activities.remove(activity)
            return False
        self.activities.append(activity)
        return True

    def to_entry(self, today: date) -> Optional[MoodEntry]:
        """Запись из черновика или None, если настроение не выбрано"""
        if self.mood is None:
            return None
        return MoodEntry(
            day=self.day or today,
            mood=self.mood,
            comment=self.comment or None,
            activities=tuple(self.activities),
            energy_level=self.energy_level,
            sleep_hours=self.sleep_hours,
        )

    def reset(self) -> None:
        self.day = None
        self.mood = None
        self.comment = ""
        self.activities = []
        self.energy_level = None
        self.sleep_hours = None


@dataclass
class Achievement:
    """Достижение с однократной разблокировкой"""
    achievement_id: str
    rule: Optional[AchievementRule]
    title: str
    description: str
    icon: str
    achievement_type: AchievementType
    is_unlocked: bool = False
    unlocked_date: Optional[str] = None

    def unlock(self, now: datetime) -> bool:
        """locked → unlocked; повторный вызов ничего не меняет"""
        if self.is_unlocked:
            return False
        self.is_unlocked = True
        self.unlocked_date = now.isoformat()
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.achievement_id,
            "rule": self.rule.value if self.rule else None,
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "type": self.achievement_type.value,
            "is_unlocked": self.is_unlocked,
            "unlocked_date": self.unlocked_date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Achievement":
        rule_value = data.get("rule")
        try:
            rule = AchievementRule(rule_value) if rule_value else RULE_BY_TITLE.get(data["title"])
            return cls(
                achievement_id=data.get("id") or str(uuid.uuid4()),
                rule=rule,
                title=data["title"],
                description=data.get("description", ""),
                icon=data.get("icon", "🏅"),
                achievement_type=AchievementType(data["type"]),
                is_unlocked=bool(data.get("is_unlocked", False)),
                unlocked_date=data.get("unlocked_date"),
            )
        except (KeyError, ValueError) as e:
            raise ValidationError(f"Не удалось загрузить достижение: {e}")

    @classmethod
    def create(cls, rule: AchievementRule, title: str, description: str, icon: str,
               achievement_type: AchievementType) -> "Achievement":
        return cls(
            achievement_id=str(uuid.uuid4()),
            rule=rule,
            title=title,
            description=description,
            icon=icon,
            achievement_type=achievement_type,
        )


def default_achievements() -> List[Achievement]:
    """Свежий каталог из 8 достижений, все заблокированы"""
    return [Achievement.create(*template) for template in DEFAULT_ACHIEVEMENTS]


@dataclass
class UserStats:
    """Производная статистика пользователя"""
    total_points: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    total_entries: int = 0
    achievements: List[Achievement] = field(default_factory=default_achievements)
    last_entry_date: Optional[date] = None

    @property
    def unlocked_achievements(self) -> List[Achievement]:
        return [a for a in self.achievements if a.is_unlocked]

    @property
    def locked_achievements(self) -> List[Achievement]:
        return [a for a in self.achievements if not a.is_unlocked]

    def get_achievement(self, rule: AchievementRule) -> Optional[Achievement]:
        for achievement in self.achievements:
            if achievement.rule == rule:
                return achievement
        return None

    def ensure_catalog(self) -> int:
        """Добавить отсутствующие достижения каталога, вернуть их число"""
        known = {a.rule for a in self.achievements}
        added = 0
        for template in DEFAULT_ACHIEVEMENTS:
            if template[0] not in known:
                self.achievements.append(Achievement.create(*template))
                added += 1
        return added

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_points": self.total_points,
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "total_entries": self.total_entries,
            "achievements": [a.to_dict() for a in self.achievements],
            "last_entry_date": self.last_entry_date.isoformat() if self.last_entry_date else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserStats":
        """Десериализация из словаря"""
        try:
            last = data.get("last_entry_date")
            achievements = data.get("achievements")
            stats = cls(
                total_points=int(data.get("total_points", 0)),
                current_streak=int(data.get("current_streak", 0)),
                longest_streak=int(data.get("longest_streak", 0)),
                total_entries=int(data.get("total_entries", 0)),
                achievements=[Achievement.from_dict(a) for a in achievements] if achievements else default_achievements(),
                last_entry_date=date.fromisoformat(last) if last else None,
            )
        except (TypeError, ValueError, OverflowError, AttributeError) as e:
            raise ValidationError(f"Не удалось загрузить статистику: {e}")

        added = stats.ensure_catalog()
        if added:
            logger.info(f"Catalog migrated: {added} achievements added")
        return stats

    @classmethod
    def create_default(cls) -> "UserStats":
        return cls()


__all__ = [
    'Mood', 'Activity', 'EnergyLevel', 'AchievementType', 'AchievementRule',
    'MoodInfo', 'ActivityInfo', 'MOOD_INFO', 'ACTIVITY_INFO', 'ENERGY_LABELS',
    'DEFAULT_ACHIEVEMENTS', 'RULE_BY_TITLE',
    'ValidationError', 'validate_text', 'validate_sleep_hours',
    'parse_mood', 'parse_activities', 'parse_energy',
    'MoodEntry', 'EntryDraft', 'Achievement', 'UserStats', 'default_achievements',
]
