# database/manager.py

import json
import os
import tempfile
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Dict

logger = logging.getLogger(__name__)

# ===== EXCEPTIONS =====

class StorageError(Exception):
    """Базовое исключение хранилища"""
    pass


class StorageReadError(StorageError):
    """Не удалось прочитать значение"""
    pass


class StorageWriteError(StorageError):
    """Не удалось записать значение"""
    pass

# ===== STORES =====

class KeyValueStore(ABC):
    """Контракт хранилища: строковые значения по ключу"""

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Значение по ключу или None, если его нет"""
        pass

    @abstractmethod
    def save(self, key: str, blob: str) -> bool:
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        pass


class MemoryStore(KeyValueStore):
    """Хранилище в памяти"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def save(self, key: str, blob: str) -> bool:
        self.data[key] = blob
        return True

    def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None


class JsonFileStore(KeyValueStore):
    """Один JSON файл на ключ в каталоге пользователя"""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _key_file(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def load(self, key: str) -> Optional[str]:
        path = self._key_file(key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Cannot read {path}: {e}") from e

    def save(self, key: str, blob: str) -> bool:
        path = self._key_file(key)
        try:
            self.directory.mkdir(exist_ok=True, parents=True)
            # Атомарная запись через временный файл
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(blob)
                os.replace(tmp_name, path)
            except OSError:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageWriteError(f"Cannot write {path}: {e}") from e
        return True

    def delete(self, key: str) -> bool:
        path = self._key_file(key)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as e:
            raise StorageWriteError(f"Cannot delete {path}: {e}") from e
        return True


def dump_json(data) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def load_json(blob: str):
    return json.loads(blob)
