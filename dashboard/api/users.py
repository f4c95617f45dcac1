# -*- coding: utf-8 -*-
"""
MoodJournal Dashboard - User API
Эндпоинты только для чтения по дневнику пользователя
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.journal import MoodJournal
from core.models import ACTIVITY_INFO, MOOD_INFO, Mood
from dashboard.dependencies import get_journal, month_to_date
from dashboard.models import (
    UserStatsResponse, WeeklyStatsResponse, MoodDistributionResponse,
    ActivityCount, ActivityPopularityResponse, EnergySleepResponse,
    AchievementResponse, AchievementsResponse, CalendarDay, CalendarResponse
)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}/stats", response_model=UserStatsResponse)
async def get_user_stats(user_id: int, journal: MoodJournal = Depends(get_journal)):
    stats = journal.stats
    return UserStatsResponse(
        user_id=user_id,
        total_points=stats.total_points,
        current_streak=stats.current_streak,
        longest_streak=stats.longest_streak,
        total_entries=stats.total_entries,
        last_entry_date=stats.last_entry_date,
        achievements_unlocked=len(stats.unlocked_achievements),
        achievements_total=len(stats.achievements),
    )


@router.get("/{user_id}/weekly", response_model=WeeklyStatsResponse)
async def get_weekly_stats(journal: MoodJournal = Depends(get_journal)):
    """Статистика за последние 7 календарных дней"""
    return WeeklyStatsResponse(**journal.weekly_stats().to_dict())


@router.get("/{user_id}/moods", response_model=MoodDistributionResponse)
async def get_mood_distribution(journal: MoodJournal = Depends(get_journal),
                                month: Optional[str] = Query(None, description="ГГГГ-ММ")):
    distribution = journal.mood_distribution(month_to_date(month))
    return MoodDistributionResponse(
        month=month,
        distribution={mood.value: count for mood, count in distribution.items()},
        total=sum(distribution.values()),
    )


@router.get("/{user_id}/activities", response_model=ActivityPopularityResponse)
async def get_activity_popularity(journal: MoodJournal = Depends(get_journal),
                                  limit: int = Query(5, ge=1, le=len(ACTIVITY_INFO))):
    return ActivityPopularityResponse(activities=[
        ActivityCount(
            activity=activity.value,
            name=ACTIVITY_INFO[activity].name,
            icon=ACTIVITY_INFO[activity].icon,
            count=count,
        )
        for activity, count in journal.activity_popularity(limit)
    ])


@router.get("/{user_id}/energy-sleep", response_model=EnergySleepResponse)
async def get_energy_sleep(journal: MoodJournal = Depends(get_journal),
                           month: Optional[str] = Query(None, description="ГГГГ-ММ")):
    return EnergySleepResponse(**journal.energy_and_sleep_summary(month_to_date(month)).to_dict())


@router.get("/{user_id}/achievements", response_model=AchievementsResponse)
async def get_achievements(journal: MoodJournal = Depends(get_journal)):
    summary = journal.reporter.achievement_summary(journal.stats.achievements)
    items = [
        AchievementResponse(
            **item['achievement'].to_dict(),
            current=item['current'],
            target=item['target'],
            percentage=round(item['percentage'], 1),
        )
        for item in journal.achievement_progress()
    ]
    return AchievementsResponse(**summary, achievements=items)


@router.get("/{user_id}/calendar/{month}", response_model=CalendarResponse)
async def get_calendar(month: str, journal: MoodJournal = Depends(get_journal)):
    """Календарь месяца с настроением по дням"""
    first_day = month_to_date(month)
    overview = journal.month_overview(first_day)
    by_day = {e.day: e for e in overview.entries}

    weeks = []
    for week in journal.reporter.calendar_grid(first_day):
        cells = []
        for day in week:
            if day is None:
                cells.append(None)
                continue
            entry = by_day.get(day)
            mood: Optional[Mood] = entry.mood if entry else None
            cells.append(CalendarDay(
                day=day,
                mood=mood.value if mood else None,
                emoji=MOOD_INFO[mood].emoji if mood else None,
            ))
        weeks.append(cells)

    return CalendarResponse(
        year=overview.year,
        month=overview.month,
        weeks=weeks,
        average_score=round(overview.average_score, 2),
        average_mood=overview.average_mood.value if overview.average_mood else None,
        streak=overview.streak,
    )
