"""
Data export commands
Команды экспорта данных
"""

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from config import config
from handlers.utils import get_journal
from services.data_export import export_to_json, export_to_csv

logger = logging.getLogger(__name__)


async def export_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Команда /export - экспорт данных в JSON и CSV"""
    user_id = update.effective_user.id
    journal = get_journal(update, context)

    if not journal.entries:
        await update.message.reply_text("❌ Нет данных для экспорта.")
        return

    try:
        json_path = export_to_json(user_id, journal, config.export_dir)
        csv_path = export_to_csv(user_id, journal, config.export_dir)
    except OSError as e:
        logger.error(f"Export failed for user {user_id}: {e}")
        await update.message.reply_text("❌ Не удалось подготовить экспорт. Попробуйте позже.")
        return

    with open(json_path, "rb") as f:
        await update.message.reply_document(
            f,
            filename=json_path.name,
            caption=(
                "📊 <b>Экспорт ваших данных</b>\n\n"
                f"Записей: {len(journal.entries)}\n"
                "<i>Данные в формате JSON</i>"
            ),
            parse_mode="HTML"
        )

    if csv_path is not None:
        with open(csv_path, "rb") as f:
            await update.message.reply_document(f, filename=csv_path.name, caption="Таблица записей (CSV)")

    logger.info(f"Exported {len(journal.entries)} entries for user {user_id}")


def register_export_handlers(application: Application):
    application.add_handler(CommandHandler("export", export_command))
