from datetime import date, timedelta
from typing import Iterable

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, ReplyKeyboardMarkup, KeyboardButton

from core.models import Mood, Activity, EnergyLevel, MOOD_INFO, ACTIVITY_INFO

# Кнопки главного меню
BUTTON_MOOD = "🙂 Настроение"
BUTTON_TODAY = "📅 Сегодня"
BUTTON_STATS = "📊 Статистика"
BUTTON_ACHIEVEMENTS = "🏆 Достижения"
BUTTON_HISTORY = "🗓 История"
BUTTON_HELP = "ℹ️ Помощь"


def main_menu_keyboard():
    keyboard = [
        [KeyboardButton(BUTTON_MOOD), KeyboardButton(BUTTON_TODAY)],
        [KeyboardButton(BUTTON_STATS), KeyboardButton(BUTTON_ACHIEVEMENTS)],
        [KeyboardButton(BUTTON_HISTORY), KeyboardButton(BUTTON_HELP)],
    ]
    return ReplyKeyboardMarkup(keyboard, resize_keyboard=True)


# Клавиатура настроения (эмоции)
def mood_keyboard():
    row = [InlineKeyboardButton(MOOD_INFO[mood].emoji, callback_data=f"mood_set:{mood.value}")
           for mood in Mood]
    return InlineKeyboardMarkup([row, [InlineKeyboardButton("❌ Отмена", callback_data="mood_cancel")]])


def entry_details_keyboard(selected_activities: Iterable[Activity], energy_level=None):
    """Активности (переключатели), энергия и сохранение"""
    selected = set(selected_activities)
    keyboard = []

    activities = list(Activity)
    for i in range(0, len(activities), 2):
        row = []
        for activity in activities[i:i + 2]:
            info = ACTIVITY_INFO[activity]
            mark = "✅" if activity in selected else info.icon
            row.append(InlineKeyboardButton(f"{mark} {info.name}", callback_data=f"activity_toggle:{activity.value}"))
        keyboard.append(row)

    keyboard.append([
        InlineKeyboardButton(f"{'⚡' if energy_level == level else ''}{int(level)}",
                             callback_data=f"energy_set:{int(level)}")
        for level in EnergyLevel
    ])
    keyboard.append([
        InlineKeyboardButton("💾 Сохранить", callback_data="mood_save"),
        InlineKeyboardButton("❌ Отмена", callback_data="mood_cancel"),
    ])
    return InlineKeyboardMarkup(keyboard)


def history_keyboard(month: date):
    """Переключение месяцев истории"""
    prev_day = month.replace(day=1) - timedelta(days=1)
    next_day = date(month.year + (month.month == 12), month.month % 12 + 1, 1)
    keyboard = [[
        InlineKeyboardButton("◀️", callback_data=f"history:{prev_day.strftime('%Y-%m')}"),
        InlineKeyboardButton("▶️", callback_data=f"history:{next_day.strftime('%Y-%m')}"),
    ]]
    return InlineKeyboardMarkup(keyboard)


def clear_confirm_keyboard():
    keyboard = [[
        InlineKeyboardButton("🗑 Удалить всё", callback_data="clear_confirm"),
        InlineKeyboardButton("🔙 Отмена", callback_data="clear_cancel"),
    ]]
    return InlineKeyboardMarkup(keyboard)
