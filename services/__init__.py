# services/__init__.py

"""
Сервисы MoodJournal Bot

Экспорт дневника в JSON и CSV.
"""

from .data_export import build_export, export_to_json, export_to_csv

__all__ = [
    'build_export',
    'export_to_json',
    'export_to_csv',
]
