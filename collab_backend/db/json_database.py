import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Union

from collab_backend.core.exceptions import DocumentStoreError

logger = logging.getLogger(__name__)


class JSONDatabase:
    """
    Хранилище записей в одном JSON-файле.

    Файл читается один раз при инициализации, далее источником истины служит
    копия в памяти, которая сбрасывается на диск после каждого изменения.
    Рассчитано на один процесс: изменения сериализуются через asyncio.Lock,
    защиты от других процессов, пишущих в тот же файл, нет.
    """

    def __init__(self, path: Path, records: List[Dict[str, Any]]):
        self.path = path
        self._records = records
        self.lock = asyncio.Lock()

    @classmethod
    async def init(cls, path: Union[str, Path]) -> "JSONDatabase":
        """Загрузка существующего файла или создание пустого хранилища"""
        path = Path(path)

        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8") or "{}")
            except (OSError, ValueError) as e:
                raise DocumentStoreError(f"Cannot load database file {path}: {e}") from e
            records = validate_records(raw, path)
            logger.info(f"Loaded {len(records)} records from {path}")
        else:
            records = []

        database = cls(path, records)
        if not path.exists():
            await database.write(records)
            logger.info(f"Created empty database at {path}")

        return database

    def read(self) -> List[Dict[str, Any]]:
        """Текущие записи (копии)"""
        return [dict(record) for record in self._records]

    async def write(self, records: List[Dict[str, Any]]) -> None:
        """Атомарная запись всех записей на диск"""
        payload = json.dumps({"docs": records}, ensure_ascii=False, indent=2)
        await asyncio.to_thread(self._write_file, payload)
        self._records = [dict(record) for record in records]

    def _write_file(self, payload: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    tmp.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise DocumentStoreError(f"Cannot write database file {self.path}: {e}") from e

    def drop(self) -> None:
        """Удаление файла хранилища"""
        try:
            self.path.unlink()
            logger.info(f"Removed database file {self.path}")
        except FileNotFoundError:
            pass


def validate_records(raw: Any, path: Path) -> List[Dict[str, Any]]:
    """Проверка структуры загруженного файла: {"docs": [{"id": str, ...}, ...]}"""
    if not isinstance(raw, dict) or not isinstance(raw.get("docs", []), list):
        raise DocumentStoreError(f"Database file {path} must hold an object with a 'docs' list")

    records = raw.get("docs", [])
    for index, record in enumerate(records):
        if not isinstance(record, dict) or not isinstance(record.get("id"), str) or not record["id"]:
            raise DocumentStoreError(f"Record #{index} in {path} has no string 'id'")

    return list(records)
