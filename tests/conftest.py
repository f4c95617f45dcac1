"""
Pytest fixtures for MoodJournal tests.
"""
from datetime import date, datetime, timedelta

import pytest
import pytz

from core.journal import MoodJournal
from core.models import MoodEntry, Mood
from database.manager import MemoryStore

TZ = pytz.timezone("Europe/Moscow")

# Воскресенье
START_DAY = date(2024, 1, 7)


class FakeClock:
    """Управляемые часы: тесты сдвигают день вручную"""

    def __init__(self, day: date = START_DAY):
        self.current = TZ.localize(datetime(day.year, day.month, day.day, 12, 0))

    def __call__(self) -> datetime:
        return self.current

    @property
    def today(self) -> date:
        return self.current.date()

    def advance(self, days: int = 1) -> None:
        self.current = self.current + timedelta(days=days)

    def set_day(self, day: date) -> None:
        self.current = TZ.localize(datetime(day.year, day.month, day.day, 12, 0))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def journal(store, clock):
    return MoodJournal(store, now_func=clock)


def make_entry(day: date, mood=Mood.HAPPY, **kwargs) -> MoodEntry:
    return MoodEntry(day=day, mood=mood, **kwargs)


def log_days(journal: MoodJournal, clock: FakeClock, count: int, mood=Mood.HAPPY, **kwargs):
    """Записи за `count` дней подряд, часы идут вместе с записями"""
    results = []
    for i in range(count):
        if i:
            clock.advance()
        results.append(journal.submit_entry(make_entry(clock.today, mood, **kwargs)))
    return results
