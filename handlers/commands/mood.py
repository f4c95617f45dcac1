# handlers/commands/mood.py

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from core.models import ValidationError, validate_text, validate_sleep_hours
from handlers.utils import get_journal, get_draft
from ui.keyboards import mood_keyboard, entry_details_keyboard
from ui.messages import draft_message, today_message
from utils.datetime_utils import parse_day, format_date

logger = logging.getLogger(__name__)


async def mood_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /mood [комментарий]: начать новую запись"""
    journal = get_journal(update, context)
    draft = get_draft(context)

    if context.args:
        try:
            draft.comment = validate_text(" ".join(context.args), field_name="Комментарий")
        except ValidationError as e:
            await update.message.reply_text(f"❌ {e}")
            return

    await update.message.reply_text(
        draft_message(draft, journal.today()),
        reply_markup=mood_keyboard() if draft.mood is None else entry_details_keyboard(
            draft.activities, draft.energy_level),
        parse_mode="HTML"
    )


async def date_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /date ГГГГ-ММ-ДД: день записи"""
    journal = get_journal(update, context)
    draft = get_draft(context)

    if not context.args:
        draft.day = None
        await update.message.reply_text(f"📅 Запись будет на сегодня ({format_date(journal.today())})")
        return

    try:
        day = parse_day(context.args[0])
    except ValueError:
        await update.message.reply_text("❌ Формат даты: /date ГГГГ-ММ-ДД")
        return

    if day > journal.today():
        await update.message.reply_text("❌ Нельзя сделать запись на будущий день")
        return

    draft.day = day
    await update.message.reply_text(f"📅 Запись будет на {format_date(day)}. Теперь /mood")


async def sleep_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /sleep ЧАСЫ"""
    if not context.args:
        await update.message.reply_text("Использование: /sleep 7.5")
        return

    draft = get_draft(context)
    try:
        draft.sleep_hours = validate_sleep_hours(context.args[0].replace(",", "."))
    except ValidationError as e:
        await update.message.reply_text(f"❌ {e}")
        return

    await update.message.reply_text(f"😴 Сон: {draft.sleep_hours:g} ч. Сохраните запись через /mood")


async def today_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /today"""
    journal = get_journal(update, context)
    entry = journal.entry_for_day(journal.today())
    await update.message.reply_text(today_message(entry), parse_mode="HTML")


def register_mood_handlers(application: Application):
    application.add_handler(CommandHandler("mood", mood_command))
    application.add_handler(CommandHandler("date", date_command))
    application.add_handler(CommandHandler("sleep", sleep_command))
    application.add_handler(CommandHandler("today", today_command))
