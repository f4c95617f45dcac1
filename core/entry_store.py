# -*- coding: utf-8 -*-
"""
MoodJournal Bot - Entry Store
Упорядоченная коллекция записей, не более одной записи на календарный день
"""

from datetime import date
from typing import Dict, Iterator, List, Optional, Any, Iterable
import logging

from core.models import MoodEntry, ValidationError
from utils.datetime_utils import to_day, same_month

logger = logging.getLogger(__name__)


class EntryStore:
    """Хранилище записей в памяти, порядок вставки сохраняется"""

    def __init__(self, entries: Optional[Iterable[MoodEntry]] = None):
        self._entries: List[MoodEntry] = []
        for entry in entries or ():
            self.upsert(entry)

    def upsert(self, entry: MoodEntry) -> Optional[MoodEntry]:
        """Удалить запись за тот же день и добавить новую в конец"""
        replaced = self.entry_for_day(entry.day)
        if replaced is not None:
            self._entries = [e for e in self._entries if e.day != entry.day]
            logger.debug(f"Replacing entry for {entry.day.isoformat()}")
        self._entries.append(entry)
        return replaced

    def clear(self) -> None:
        self._entries = []

    def all(self) -> List[MoodEntry]:
        """Записи в порядке вставки (копия)"""
        return list(self._entries)

    def sorted_entries(self, reverse: bool = False) -> List[MoodEntry]:
        return sorted(self._entries, key=lambda e: e.day, reverse=reverse)

    def entry_for_day(self, day) -> Optional[MoodEntry]:
        target = to_day(day)
        for entry in self._entries:
            if entry.day == target:
                return entry
        return None

    def entries_for_month(self, day) -> List[MoodEntry]:
        """Записи того же месяца и года, что и `day`"""
        target = to_day(day)
        return [e for e in self._entries if same_month(e.day, target)]

    def days(self) -> List[date]:
        return [e.day for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MoodEntry]:
        return iter(list(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)

    # ===== SERIALIZATION =====

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self._entries]

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]]) -> "EntryStore":
        """Десериализация; одна битая запись делает невалидным весь список"""
        if not isinstance(data, list):
            raise ValidationError("Ожидался список записей")

        return cls(MoodEntry.from_dict(raw) for raw in data)
