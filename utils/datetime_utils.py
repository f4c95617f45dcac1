from datetime import datetime, date, timedelta
from typing import Optional, Tuple

import pytz

DEFAULT_TZ = pytz.timezone("Europe/Moscow")

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def get_timezone(name: Optional[str] = None):
    if not name:
        return DEFAULT_TZ
    return pytz.timezone(name)


def now_local(tz_name: Optional[str] = None) -> datetime:
    return datetime.now(get_timezone(tz_name))


def to_day(value) -> date:
    """datetime → календарный день, date возвращается как есть"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_day(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to date")


def day_gap(later: date, earlier: date) -> int:
    """Разница в целых календарных днях (может быть отрицательной)"""
    return (to_day(later) - to_day(earlier)).days


def parse_day(date_str: str) -> date:
    return datetime.strptime(date_str.strip(), "%Y-%m-%d").date()


def parse_month(month_str: str) -> Tuple[int, int]:
    """'2024-01' → (2024, 1)"""
    parsed = datetime.strptime(month_str.strip(), "%Y-%m")
    return parsed.year, parsed.month


def same_month(first: date, second: date) -> bool:
    return first.year == second.year and first.month == second.month


def trailing_days(today: date, days: int = 7) -> Tuple[date, date]:
    """Окно из `days` календарных дней, заканчивающееся сегодня (включительно)"""
    return today - timedelta(days=days - 1), today


def format_date(dt: date, fmt: str = "%d.%m.%Y") -> str:
    return dt.strftime(fmt)
