# handlers/commands/basic.py

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from handlers.utils import get_journal
from ui.keyboards import main_menu_keyboard
from ui.messages import welcome_message, help_message

logger = logging.getLogger(__name__)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /start"""
    journal = get_journal(update, context)
    logger.info(f"/start from user {update.effective_user.id} ({len(journal.entries)} entries)")
    await update.message.reply_text(
        welcome_message(update.effective_user.first_name),
        reply_markup=main_menu_keyboard(),
        parse_mode="HTML"
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Команда /help"""
    await update.message.reply_text(help_message(), parse_mode="HTML")


def register_basic_handlers(application: Application):
    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
