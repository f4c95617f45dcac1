"""
System commands
Системные команды
"""

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from ui.keyboards import clear_confirm_keyboard

logger = logging.getLogger(__name__)


async def clear_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Команда /clear - удалить все данные после подтверждения"""
    await update.message.reply_text(
        "⚠️ <b>Удалить все записи?</b>\n\n"
        "Статистика, серии и достижения будут сброшены. Отменить это нельзя.",
        reply_markup=clear_confirm_keyboard(),
        parse_mode="HTML"
    )


def register_system_handlers(application: Application):
    application.add_handler(CommandHandler("clear", clear_command))
