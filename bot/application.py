import logging

from telegram import Update
from telegram.error import Conflict, NetworkError, TimedOut
from telegram.ext import Application, ApplicationBuilder, ContextTypes

from database.repository import JournalRepository
from handlers.router import register_handlers
from handlers.utils import REPOSITORY_KEY

logger = logging.getLogger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Обработчик ошибок"""
    error = context.error

    if isinstance(error, Conflict):
        logger.error(f"Error while getting Updates: {error}")
    elif isinstance(error, (TimedOut, NetworkError)):
        logger.warning(f"⚠️ Временная сетевая ошибка: {error}")
    else:
        logger.error("❌ Неожиданная ошибка", exc_info=error)

        # Если есть update, пытаемся ответить пользователю
        if isinstance(update, Update) and update.effective_user:
            if update.message:
                await update.message.reply_text(
                    "⚠️ Произошла временная ошибка. Попробуйте еще раз через несколько секунд."
                )
            elif update.callback_query:
                await update.callback_query.answer("⚠️ Временная ошибка. Попробуйте еще раз.")


def build_application(token: str, repository: JournalRepository) -> Application:
    # Обновления обрабатываются по одному: дневник не рассчитан на параллельные изменения
    application = (
        ApplicationBuilder()
        .token(token)
        .concurrent_updates(False)
        .build()
    )

    application.bot_data[REPOSITORY_KEY] = repository
    register_handlers(application)
    application.add_error_handler(error_handler)

    total_handlers = sum(len(handlers) for handlers in application.handlers.values())
    logger.info(f"✅ {total_handlers} обработчиков зарегистрировано")
    return application
