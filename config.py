#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MoodJournal Bot - Configuration
Централизованная конфигурация с валидацией

Версия: 1.0.0
"""

import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass
from enum import Enum

import pytz

class Environment(Enum):
    """Среды выполнения"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Уровни логирования"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class StorageConfig:
    """Конфигурация хранилища"""
    data_dir: Path
    export_dir: Path
    entries_key: str = "mood_entries"
    stats_key: str = "user_stats"

@dataclass
class TelegramConfig:
    """Конфигурация Telegram бота"""
    bot_token: Optional[str]
    drop_pending_updates: bool = True
    allowed_updates: list = None

@dataclass
class ServerConfig:
    """Конфигурация дашборда"""
    host: str = "0.0.0.0"
    port: int = 8080
    debug_mode: bool = False

@dataclass
class JournalSettings:
    """Параметры дневника и аналитики"""
    timezone: str = "Europe/Moscow"
    activity_top_limit: int = 5

class JournalConfig:
    """Главный класс конфигурации"""

    def __init__(self):
        self.environment = Environment(os.getenv('ENVIRONMENT', 'development'))
        self._load_config()
        self._validate_config()

    def _load_config(self):
        """Загрузка конфигурации из переменных окружения"""

        self.telegram = TelegramConfig(
            bot_token=os.getenv('BOT_TOKEN'),
            drop_pending_updates=os.getenv('DROP_PENDING_UPDATES', 'true').lower() == 'true',
            allowed_updates=['message', 'callback_query']
        )

        # Директории
        self.data_dir = Path(os.getenv('DATA_DIR', 'data'))
        self.export_dir = Path(os.getenv('EXPORT_DIR', 'exports'))
        self.log_dir = Path(os.getenv('LOG_DIR', 'logs'))

        self.storage = StorageConfig(
            data_dir=self.data_dir,
            export_dir=self.export_dir,
        )

        self.server = ServerConfig(
            host=os.getenv('HOST', '0.0.0.0'),
            port=int(os.getenv('PORT', 8080)),
            debug_mode=os.getenv('DEBUG_MODE', 'false').lower() == 'true'
        )

        self.journal = JournalSettings(
            timezone=os.getenv('TIMEZONE', 'Europe/Moscow'),
            activity_top_limit=int(os.getenv('ACTIVITY_TOP_LIMIT', 5))
        )

        # Логирование
        self.log_level = LogLevel(os.getenv('LOG_LEVEL', 'INFO'))
        self.log_to_file = os.getenv('LOG_TO_FILE', 'false').lower() == 'true'
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        )

    def get_required_bot_token(self) -> str:
        """Токен нужен только при запуске бота"""
        if not self.telegram.bot_token:
            raise ValueError("Обязательная переменная окружения BOT_TOKEN не найдена!")
        return self.telegram.bot_token

    def _validate_config(self):
        """Валидация конфигурации"""
        errors = []

        if self.journal.timezone not in pytz.all_timezones_set:
            errors.append(f"Неизвестный часовой пояс: {self.journal.timezone}")

        if not 1024 <= self.server.port <= 65535:
            errors.append(f"Порт {self.server.port} вне допустимого диапазона (1024-65535)")

        if self.journal.activity_top_limit <= 0:
            errors.append("ACTIVITY_TOP_LIMIT должен быть положительным числом")

        if errors:
            raise ValueError("Ошибки конфигурации:\n" + "\n".join(f"• {error}" for error in errors))

    def ensure_directories(self):
        """Создание необходимых директорий"""
        for directory in (self.data_dir, self.export_dir, self.log_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def get_logging_config(self) -> Dict[str, Any]:
        """Получение конфигурации логирования"""
        handlers = ['console']
        if self.log_to_file:
            handlers.append('file')

        logging_config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.log_format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': self.log_level.value,
                    'formatter': 'default',
                    'stream': sys.stdout
                }
            },
            'loggers': {
                '': {
                    'level': self.log_level.value,
                    'handlers': handlers,
                    'propagate': False
                },
                'httpx': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                },
                'telegram': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                },
                'uvicorn': {
                    'level': 'INFO',
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }

        if self.log_to_file:
            logging_config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.log_level.value,
                'formatter': 'default',
                'filename': str(self.log_dir / f"journal_{self.environment.value}.log"),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8'
            }

        return logging_config

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация конфигурации в словарь"""
        token = self.telegram.bot_token
        return {
            'environment': self.environment.value,
            'telegram': {
                'bot_token': token[:10] + "..." if token else None,  # Скрываем токен
            },
            'server': {
                'host': self.server.host,
                'port': self.server.port,
                'debug_mode': self.server.debug_mode
            },
            'data_dir': str(self.data_dir),
            'timezone': self.journal.timezone,
            'log_level': self.log_level.value
        }

# Глобальный экземпляр конфигурации
config = JournalConfig()

__all__ = [
    'config',
    'JournalConfig',
    'Environment',
    'LogLevel',
    'StorageConfig',
    'TelegramConfig',
    'ServerConfig',
    'JournalSettings'
]
