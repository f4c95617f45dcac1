# database/repository.py

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional

from core.journal import MoodJournal, ENTRIES_KEY, STATS_KEY
from database.manager import JsonFileStore, KeyValueStore

logger = logging.getLogger(__name__)


class JournalRepository:
    """Дневники пользователей: отдельный каталог user_<id> на пользователя"""

    def __init__(self, data_dir: Path,
                 now_func: Optional[Callable[[], datetime]] = None,
                 store_factory: Optional[Callable[[Path], KeyValueStore]] = None,
                 entries_key: str = ENTRIES_KEY,
                 stats_key: str = STATS_KEY):
        self.data_dir = Path(data_dir)
        self.now_func = now_func
        self.store_factory = store_factory or JsonFileStore
        self.entries_key = entries_key
        self.stats_key = stats_key
        self._journals: Dict[int, MoodJournal] = {}

    def _user_dir(self, user_id: int) -> Path:
        return self.data_dir / f"user_{user_id}"

    def get_journal(self, user_id: int, reload: bool = False) -> MoodJournal:
        """
        Дневник пользователя из кэша.

        reload=True перечитывает хранилище: данные мог записать
        другой процесс (бот при работающем дашборде).
        """
        journal = self._journals.get(user_id)
        if journal is not None and reload:
            journal.load()
        elif journal is None:
            journal = MoodJournal(
                self.store_factory(self._user_dir(user_id)),
                now_func=self.now_func,
                entries_key=self.entries_key,
                stats_key=self.stats_key,
            )
            self._journals[user_id] = journal
            logger.info(f"Journal loaded for user {user_id}: {len(journal.entries)} entries")
        return journal

    def known_user_ids(self) -> List[int]:
        """Пользователи, у которых есть каталог или загруженный дневник"""
        ids = set(self._journals)
        if self.data_dir.exists():
            for path in self.data_dir.glob("user_*"):
                suffix = path.name[len("user_"):]
                if path.is_dir() and suffix.isdigit():
                    ids.add(int(suffix))
        return sorted(ids)
