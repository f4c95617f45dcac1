# handlers/commands/analytics.py

import logging
from datetime import date
from typing import Tuple

from telegram import InlineKeyboardMarkup, Update
from telegram.ext import Application, CommandHandler, ContextTypes

from config import config
from core.journal import MoodJournal
from handlers.utils import get_journal
from ui.keyboards import history_keyboard
from ui.messages import stats_message, achievements_message, history_message
from utils.datetime_utils import parse_month

logger = logging.getLogger(__name__)


def render_history(journal: MoodJournal, month: date) -> Tuple[str, InlineKeyboardMarkup]:
    """Текст календаря месяца и клавиатура переключения"""
    overview = journal.month_overview(month)
    grid = journal.reporter.calendar_grid(month)
    return history_message(overview, grid), history_keyboard(month)


async def stats_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /stats"""
    journal = get_journal(update, context)
    text = stats_message(
        journal.stats,
        journal.weekly_stats(),
        journal.mood_distribution(),
        journal.activity_popularity(config.journal.activity_top_limit),
        journal.energy_and_sleep_summary(),
    )
    await update.message.reply_text(text, parse_mode="HTML")


async def achievements_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /achievements"""
    journal = get_journal(update, context)
    await update.message.reply_text(achievements_message(journal.achievement_progress()), parse_mode="HTML")


async def history_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /history [ГГГГ-ММ]"""
    journal = get_journal(update, context)

    month = journal.today().replace(day=1)
    if context.args:
        try:
            year, month_num = parse_month(context.args[0])
        except ValueError:
            await update.message.reply_text("❌ Формат месяца: /history ГГГГ-ММ")
            return
        month = date(year, month_num, 1)

    text, keyboard = render_history(journal, month)
    await update.message.reply_text(text, reply_markup=keyboard, parse_mode="HTML")


def register_analytics_handlers(application: Application):
    application.add_handler(CommandHandler("stats", stats_command))
    application.add_handler(CommandHandler("achievements", achievements_command))
    application.add_handler(CommandHandler("history", history_command))
