# handlers/callbacks/settings.py

"""
Data reset callback handlers
Обработчики подтверждения сброса данных
"""

import logging

from telegram.ext import Application, CallbackQueryHandler, ContextTypes
from telegram import Update

from handlers.utils import get_journal, get_draft
from ui.messages import cleared_message

logger = logging.getLogger(__name__)


async def clear_confirm_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    get_journal(update, context).clear_all()
    get_draft(context).reset()
    logger.info(f"User {update.effective_user.id} cleared all data")
    await query.answer()
    await query.edit_message_text(cleared_message())


async def clear_cancel_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    await query.edit_message_text("Удаление отменено")


def register_settings_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(clear_confirm_callback, pattern="^clear_confirm$"))
    application.add_handler(CallbackQueryHandler(clear_cancel_callback, pattern="^clear_cancel$"))
