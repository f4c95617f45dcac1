# handlers/callbacks/history.py

from datetime import date

from telegram.ext import Application, CallbackQueryHandler, ContextTypes
from telegram import Update

from handlers.commands.analytics import render_history
from handlers.utils import get_journal
from utils.datetime_utils import parse_month


async def history_month_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    try:
        year, month = parse_month(query.data.split(":", 1)[1])
    except ValueError:
        await query.answer("❌ Неверный месяц", show_alert=True)
        return

    await query.answer()
    text, keyboard = render_history(get_journal(update, context), date(year, month, 1))
    await query.edit_message_text(text, reply_markup=keyboard, parse_mode="HTML")


def register_history_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(history_month_callback, pattern=r"^history:\d{4}-\d{2}$"))
