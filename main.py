#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MoodJournal Bot
Telegram бот-дневник настроения с сериями, очками и достижениями

Запуск:
    python main.py            - Telegram бот (polling)
    python main.py dashboard  - веб-дашборд
"""

import logging
import sys

from config import config
from database.repository import JournalRepository
from utils.datetime_utils import now_local
from utils.logger import configure_logging

logger = logging.getLogger(__name__)


def build_repository() -> JournalRepository:
    """Репозиторий дневников с часами в настроенном часовом поясе"""
    return JournalRepository(
        config.storage.data_dir,
        now_func=lambda: now_local(config.journal.timezone),
        entries_key=config.storage.entries_key,
        stats_key=config.storage.stats_key,
    )


# ===== TELEGRAM BOT =====

def run_bot():
    from bot.application import build_application

    token = config.get_required_bot_token()
    application = build_application(token, build_repository())

    logger.info("🎯 Запуск polling...")
    application.run_polling(
        drop_pending_updates=config.telegram.drop_pending_updates,
        allowed_updates=config.telegram.allowed_updates,
    )
    logger.info("🛑 Бот остановлен")


# ===== DASHBOARD =====

def run_dashboard():
    import uvicorn
    from dashboard.app import create_app

    app = create_app(build_repository(), debug=config.server.debug_mode or config.is_development())
    logger.info(f"🌐 Dashboard доступен на: http://{config.server.host}:{config.server.port}")
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


# ===== ТОЧКА ВХОДА =====

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    configure_logging(config.get_logging_config())
    config.ensure_directories()
    logger.info(f"Environment: {config.environment.value}, data: {config.data_dir}")
    logger.debug(f"Config: {config.to_dict()}")

    mode = argv[0] if argv else "bot"
    if mode == "dashboard":
        run_dashboard()
    elif mode == "bot":
        run_bot()
    else:
        logger.error(f"Неизвестный режим: {mode}")
        return 2
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except ValueError as e:
        logger.error(f"💥 Ошибка конфигурации: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("👋 Бот остановлен пользователем")
