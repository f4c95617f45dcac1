# handlers/router.py

from telegram.ext import Application

# Импорт всех нужных обработчиков (команды, callbacks, сообщения)
from handlers.commands.basic import register_basic_handlers
from handlers.commands.mood import register_mood_handlers
from handlers.commands.analytics import register_analytics_handlers
from handlers.commands.export_data import register_export_handlers
from handlers.commands.system import register_system_handlers

from handlers.callbacks.mood import register_mood_callbacks
from handlers.callbacks.history import register_history_callbacks
from handlers.callbacks.settings import register_settings_callbacks

from handlers.messages import register_message_handlers


def register_handlers(application: Application):
    """Подключает все обработчики в Application"""
    register_basic_handlers(application)
    register_mood_handlers(application)
    register_analytics_handlers(application)
    register_export_handlers(application)
    register_system_handlers(application)

    register_mood_callbacks(application)
    register_history_callbacks(application)
    register_settings_callbacks(application)

    # Текст последним: он перехватывает всё, что не команда
    register_message_handlers(application)
