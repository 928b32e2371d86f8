import logging
from typing import List, Optional

from collab_backend.core.exceptions import DocumentStoreError
from collab_backend.db.json_database import JSONDatabase
from collab_backend.domains.documents.entities import DocMeta

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Репозиторий для работы с метаданными документов"""

    def __init__(self, database: JSONDatabase):
        self.database = database

    async def get_all(self) -> List[DocMeta]:
        """Получение всех метаданных документов"""
        return [self._to_domain(record) for record in self.database.read()]

    async def get(self, doc_id: str) -> Optional[DocMeta]:
        """Получение метаданных документа по id"""
        for record in self.database.read():
            if record.get("id") == doc_id:
                return self._to_domain(record)
        return None

    async def exists(self, doc_id: str) -> bool:
        return await self.get(doc_id) is not None

    async def add(self, doc: DocMeta) -> Optional[DocMeta]:
        """Добавление документа; None при дубликате id или ошибке записи"""
        async with self.database.lock:
            records = self.database.read()

            if any(record.get("id") == doc.id for record in records):
                logger.warning(f"Document {doc.id} already exists")
                return None

            records.append(doc.to_dict())
            if not await self._flush(records):
                return None

        return doc.copy()

    async def update(self, doc_id: str, title: Optional[str] = None) -> Optional[DocMeta]:
        """Частичное обновление документа; None если документа нет или запись не удалась"""
        async with self.database.lock:
            records = self.database.read()

            for index, record in enumerate(records):
                if record.get("id") == doc_id:
                    break
            else:
                return None

            doc = self._to_domain(records[index])
            if title is not None:
                doc.update_title(title)

            records[index] = doc.to_dict()
            if not await self._flush(records):
                return None

        return doc

    async def delete(self, doc_id: str) -> Optional[bool]:
        """Удаление документа; False если документа нет, None если запись не удалась"""
        async with self.database.lock:
            records = self.database.read()
            remaining = [record for record in records if record.get("id") != doc_id]

            if len(remaining) == len(records):
                return False

            if not await self._flush(remaining):
                return None

        return True

    async def _flush(self, records: list) -> bool:
        # При ошибке записи состояние в памяти остается прежним
        try:
            await self.database.write(records)
            return True
        except DocumentStoreError as e:
            logger.error(f"Failed to persist documents: {e}")
            return False

    def _to_domain(self, record: dict) -> DocMeta:
        return DocMeta.from_dict(record)
