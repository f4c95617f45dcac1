# -*- coding: utf-8 -*-
"""
MoodJournal Dashboard - Response models
Pydantic модели ответов API
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    users: int = 0


class UserStatsResponse(BaseModel):
    """Накопленная статистика пользователя"""
    user_id: int
    total_points: int
    current_streak: int
    longest_streak: int
    total_entries: int
    last_entry_date: Optional[date] = None
    achievements_unlocked: int
    achievements_total: int


class WeeklyStatsResponse(BaseModel):
    average_mood: float
    total_entries: int
    most_active_day: Optional[str] = None


class MoodDistributionResponse(BaseModel):
    month: Optional[str] = None
    distribution: Dict[str, int] = Field(default_factory=dict)
    total: int = 0


class ActivityCount(BaseModel):
    activity: str
    name: str
    icon: str
    count: int


class ActivityPopularityResponse(BaseModel):
    activities: List[ActivityCount] = Field(default_factory=list)


class EnergySleepResponse(BaseModel):
    average_sleep: Optional[float] = None
    most_common_energy: Optional[int] = None


class AchievementResponse(BaseModel):
    id: str
    rule: Optional[str] = None
    title: str
    description: str
    icon: str
    type: str
    is_unlocked: bool
    unlocked_date: Optional[str] = None
    current: int
    target: int
    percentage: float


class AchievementsResponse(BaseModel):
    unlocked: int
    total: int
    percentage: int
    achievements: List[AchievementResponse] = Field(default_factory=list)


class CalendarDay(BaseModel):
    day: date
    mood: Optional[str] = None
    emoji: Optional[str] = None


class CalendarResponse(BaseModel):
    """Месяц по неделям, начиная с воскресенья; None заполняет пустые клетки"""
    year: int
    month: int
    weeks: List[List[Optional[CalendarDay]]] = Field(default_factory=list)
    average_score: float = 0.0
    average_mood: Optional[str] = None
    streak: int = 0
