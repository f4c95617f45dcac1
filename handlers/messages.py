# handlers/messages.py

import re

from telegram.ext import Application, MessageHandler, filters, ContextTypes
from telegram import Update

from core.models import ValidationError, validate_text
from handlers.commands.analytics import stats_command, achievements_command, history_command
from handlers.commands.basic import help_command
from handlers.commands.mood import mood_command, today_command
from handlers.utils import get_journal, get_draft
from ui.keyboards import (
    BUTTON_MOOD, BUTTON_TODAY, BUTTON_STATS, BUTTON_ACHIEVEMENTS, BUTTON_HISTORY, BUTTON_HELP,
    entry_details_keyboard
)
from ui.messages import draft_message

MENU_ROUTES = {
    BUTTON_MOOD: mood_command,
    BUTTON_TODAY: today_command,
    BUTTON_STATS: stats_command,
    BUTTON_ACHIEVEMENTS: achievements_command,
    BUTTON_HISTORY: history_command,
    BUTTON_HELP: help_command,
}


# --- Кнопки главного меню ---
async def menu_button(update: Update, context: ContextTypes.DEFAULT_TYPE):
    handler = MENU_ROUTES[update.message.text]
    await handler(update, context)


# --- Универсальный обработчик текста ---
async def text_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Текст во время заполнения записи становится комментарием"""
    draft = get_draft(context)

    if draft.mood is None:
        await update.message.reply_text("Используйте кнопки или команды для управления ботом.")
        return

    try:
        draft.comment = validate_text(update.message.text, field_name="Комментарий")
    except ValidationError as e:
        await update.message.reply_text(f"❌ {e}")
        return

    await update.message.reply_text(
        draft_message(draft, get_journal(update, context).today()),
        reply_markup=entry_details_keyboard(draft.activities, draft.energy_level),
        parse_mode="HTML"
    )


def register_message_handlers(application: Application):
    """Регистрирует обработчики"""
    menu_pattern = "^(" + "|".join(re.escape(text) for text in MENU_ROUTES) + ")$"
    application.add_handler(MessageHandler(filters.Regex(menu_pattern), menu_button))
    application.add_handler(MessageHandler(filters.TEXT & (~filters.COMMAND), text_message))
