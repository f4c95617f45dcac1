import html
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from core.analytics import WeeklyStats, EnergySleepSummary, MonthOverview
from core.journal import SubmitResult
from core.models import (
    Achievement, Activity, EntryDraft, Mood, MoodEntry, UserStats,
    MOOD_INFO, ACTIVITY_INFO, ENERGY_LABELS
)
from ui.progress import achievement_bar, streak_emoji
from utils.datetime_utils import format_date

MONTH_NAMES = ["Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
               "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь"]
WEEK_HEADER = "Вс Пн Вт Ср Чт Пт Сб"


def welcome_message(first_name: Optional[str]):
    return (
        f"Привет, {html.escape(first_name or 'друг')}! 👋\n"
        "Я твой дневник настроения: отмечай, как прошёл день, "
        "собирай серии дней подряд и открывай достижения.\n"
        "Используй /help для справки."
    )


def help_message():
    return (
        "📖 <b>Команды</b>\n"
        "/mood [комментарий] - отметить настроение\n"
        "/date ГГГГ-ММ-ДД - выбрать день для записи\n"
        "/sleep ЧАСЫ - указать сон\n"
        "/today - запись за сегодня\n"
        "/history [ГГГГ-ММ] - календарь месяца\n"
        "/stats - статистика\n"
        "/achievements - достижения\n"
        "/export - экспорт данных\n"
        "/clear - удалить все данные"
    )


def _activities_line(activities: Sequence[Activity]) -> str:
    return ", ".join(f"{ACTIVITY_INFO[a].icon} {ACTIVITY_INFO[a].name}" for a in activities)


def draft_message(draft: EntryDraft, today: date):
    day = draft.day or today
    lines = [f"📝 Запись на <b>{format_date(day)}</b>"]
    if draft.mood is not None:
        info = MOOD_INFO[draft.mood]
        lines.append(f"Настроение: {info.emoji} {info.label}")
    else:
        lines.append("Выберите настроение:")
    if draft.activities:
        lines.append(f"Активности: {_activities_line(draft.activities)}")
    if draft.energy_level is not None:
        lines.append(f"Энергия: {int(draft.energy_level)} ({ENERGY_LABELS[draft.energy_level]})")
    if draft.sleep_hours is not None:
        lines.append(f"Сон: {draft.sleep_hours:g} ч")
    if draft.comment:
        lines.append(f"Комментарий: {html.escape(draft.comment)}")
    return "\n".join(lines)


def entry_message(entry: MoodEntry):
    info = MOOD_INFO[entry.mood]
    lines = [f"{info.emoji} <b>{format_date(entry.day)}</b> - {info.label}"]
    if entry.activities:
        lines.append(f"Активности: {_activities_line(entry.activities)}")
    if entry.energy_level is not None:
        lines.append(f"Энергия: {int(entry.energy_level)} ({ENERGY_LABELS[entry.energy_level]})")
    if entry.sleep_hours is not None:
        lines.append(f"Сон: {entry.sleep_hours:g} ч")
    if entry.comment:
        lines.append(f"💬 {html.escape(entry.comment)}")
    return "\n".join(lines)


def today_message(entry: Optional[MoodEntry]):
    if entry is None:
        return "Сегодня записи пока нет. Отметьте настроение через /mood"
    return entry_message(entry)


def entry_saved_message(result: SubmitResult, stats: UserStats):
    action = "обновлена" if result.replaced else "сохранена"
    return (
        f"✅ Запись {action}!\n"
        f"{entry_message(result.entry)}\n\n"
        f"💫 +{result.points} очков (всего {stats.total_points})\n"
        f"{streak_emoji(stats.current_streak)} Серия: <b>{stats.current_streak}</b> дн. подряд"
    )


def achievement_unlocked_message(achievement: Achievement):
    return (
        "🏆 <b>Новое достижение!</b>\n\n"
        f"{achievement.icon} <b>{html.escape(achievement.title)}</b>\n"
        f"{html.escape(achievement.description)}"
    )


def stats_message(stats: UserStats, weekly: WeeklyStats, distribution: Dict[Mood, int],
                  popularity: List[Tuple[Activity, int]], energy_sleep: EnergySleepSummary):
    lines = [
        "📊 <b>Статистика</b>",
        f"Записей: {stats.total_entries}",
        f"Очки: {stats.total_points}",
        f"{streak_emoji(stats.current_streak)} Серия: {stats.current_streak} (рекорд {stats.longest_streak})",
        "",
        "<b>За неделю:</b>",
        f"Записей: {weekly.total_entries}",
        f"Среднее настроение: {weekly.average_mood:.1f}",
    ]
    if weekly.most_active_day:
        lines.append(f"Самый активный день: {weekly.most_active_day}")

    lines.append("")
    lines.append("<b>Настроения:</b>")
    lines.append("  ".join(f"{MOOD_INFO[m].emoji} {count}" for m, count in distribution.items()))

    if popularity:
        lines.append("")
        lines.append("<b>Популярные активности:</b>")
        for activity, count in popularity:
            lines.append(f"{ACTIVITY_INFO[activity].icon} {ACTIVITY_INFO[activity].name}: {count}")

    if energy_sleep.average_sleep is not None:
        lines.append(f"😴 Средний сон: {energy_sleep.average_sleep:.1f} ч")
    if energy_sleep.most_common_energy is not None:
        level = energy_sleep.most_common_energy
        lines.append(f"⚡ Частая энергия: {int(level)} ({ENERGY_LABELS[level]})")
    return "\n".join(lines)


def achievements_message(progress: List[Dict[str, object]]):
    unlocked = sum(1 for item in progress if item['achievement'].is_unlocked)
    lines = [f"🏆 <b>Достижения</b> {unlocked}/{len(progress)}", ""]
    for item in progress:
        achievement = item['achievement']
        if achievement.is_unlocked:
            when = achievement.unlocked_date[:10] if achievement.unlocked_date else ""
            lines.append(f"✅ {achievement.icon} <b>{html.escape(achievement.title)}</b> {when}")
        else:
            lines.append(f"🔒 {achievement.icon} {html.escape(achievement.title)}")
            lines.append(f"   {html.escape(achievement.description)}")
            lines.append(f"   {achievement_bar(item['current'], item['target'])}")
    return "\n".join(lines)


def history_message(overview: MonthOverview, grid: List[List[Optional[date]]]):
    by_day = {e.day: e for e in overview.entries}
    lines = [f"🗓 <b>{MONTH_NAMES[overview.month - 1]} {overview.year}</b>", f"<code>{WEEK_HEADER}</code>"]
    for week in grid:
        cells = []
        for day in week:
            if day is None:
                cells.append("  ")
            elif day in by_day:
                cells.append(MOOD_INFO[by_day[day].mood].emoji)
            else:
                cells.append(f"{day.day:02d}")
        lines.append(" ".join(cells))

    lines.append("")
    if overview.entries:
        mood = overview.average_mood
        lines.append(f"Среднее: {MOOD_INFO[mood].emoji if mood else '-'} ({overview.average_score:.1f})")
        lines.append(f"Серия: {overview.streak}")
        lines.append("  ".join(f"{MOOD_INFO[m].emoji} {c}" for m, c in overview.distribution.items()))
    else:
        lines.append("В этом месяце записей нет")
    return "\n".join(lines)


def cleared_message():
    return "🗑 Все данные удалены. Достижения сброшены."
