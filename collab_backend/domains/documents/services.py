import logging
from typing import List, Optional, TYPE_CHECKING

from collab_backend.domains.documents.entities import DocMeta
from collab_backend.domains.documents.schemas import DocMetaCreate

if TYPE_CHECKING:
    from collab_backend.db.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с метаданными документов"""

    def __init__(self, repository: "DocumentRepository"):
        self.repository = repository

    async def list_documents(self) -> List[DocMeta]:
        return await self.repository.get_all()

    async def get_document(self, doc_id: str) -> Optional[DocMeta]:
        return await self.repository.get(doc_id)

    async def create_document(self, document_data: DocMetaCreate) -> Optional[DocMeta]:
        """Создание метаданных нового документа"""
        doc = DocMeta.create(
            title=document_data.title,
            id=document_data.id,
            tags=document_data.tags,
            extra=document_data.model_extra
        )

        created = await self.repository.add(doc)
        if created:
            logger.info(f"Created document {created.id}")
        return created

    async def update_title(self, doc_id: str, title: str) -> Optional[DocMeta]:
        """Обновление заголовка документа"""
        updated = await self.repository.update(doc_id, title=title)
        if updated:
            logger.info(f"Renamed document {doc_id}")
        return updated

    async def delete_document(self, doc_id: str) -> Optional[bool]:
        """Удаление документа"""
        deleted = await self.repository.delete(doc_id)
        if deleted:
            logger.info(f"Deleted document {doc_id}")
        return deleted
