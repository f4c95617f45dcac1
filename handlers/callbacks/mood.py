# handlers/callbacks/mood.py

import logging

from telegram.ext import Application, CallbackQueryHandler, ContextTypes
from telegram import Update

from core.models import Activity, ValidationError, parse_mood, parse_energy
from handlers.utils import get_journal, get_draft, announce_unlocks
from ui.keyboards import entry_details_keyboard
from ui.messages import draft_message, entry_saved_message

logger = logging.getLogger(__name__)


async def _show_draft(update: Update, context: ContextTypes.DEFAULT_TYPE):
    journal = get_journal(update, context)
    draft = get_draft(context)
    await update.callback_query.edit_message_text(
        draft_message(draft, journal.today()),
        reply_markup=entry_details_keyboard(draft.activities, draft.energy_level),
        parse_mode="HTML"
    )


async def mood_set_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    try:
        get_draft(context).mood = parse_mood(query.data.split(":", 1)[1])
    except ValidationError as e:
        await query.answer(f"❌ {e}", show_alert=True)
        return
    await query.answer()
    await _show_draft(update, context)


async def activity_toggle_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    try:
        activity = Activity(query.data.split(":", 1)[1])
    except ValueError:
        await query.answer("❌ Неизвестная активность", show_alert=True)
        return
    get_draft(context).toggle_activity(activity)
    await query.answer()
    await _show_draft(update, context)


async def energy_set_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    try:
        get_draft(context).energy_level = parse_energy(query.data.split(":", 1)[1])
    except ValidationError as e:
        await query.answer(f"❌ {e}", show_alert=True)
        return
    await query.answer()
    await _show_draft(update, context)


async def mood_save_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    journal = get_journal(update, context)
    draft = get_draft(context)

    try:
        result = journal.submit_draft(draft)
    except ValidationError as e:
        await query.answer(f"❌ {e}", show_alert=True)
        return

    if result is None:
        await query.answer("Сначала выберите настроение", show_alert=True)
        return

    await query.answer("Сохранено")
    await query.edit_message_text(entry_saved_message(result, journal.stats), parse_mode="HTML")
    await announce_unlocks(query.message, journal)


async def mood_cancel_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    get_draft(context).reset()
    await query.answer()
    await query.edit_message_text("Запись отменена")


def register_mood_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(mood_set_callback, pattern="^mood_set:"))
    application.add_handler(CallbackQueryHandler(activity_toggle_callback, pattern="^activity_toggle:"))
    application.add_handler(CallbackQueryHandler(energy_set_callback, pattern="^energy_set:"))
    application.add_handler(CallbackQueryHandler(mood_save_callback, pattern="^mood_save$"))
    application.add_handler(CallbackQueryHandler(mood_cancel_callback, pattern="^mood_cancel$"))
