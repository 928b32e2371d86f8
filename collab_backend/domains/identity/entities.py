from enum import Enum
from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from collab_backend.db.repositories.document_repository import DocumentRepository


class AccessLevel(str, Enum):
    """Уровень доступа пользователя к комнате"""
    READ_WRITE = "rw"
    READ_ONLY = "read-only"
    NO_ACCESS = "no-access"


@runtime_checkable
class RoomAuthorizer(Protocol):
    """Стратегия авторизации доступа к комнате"""

    async def authorize(self, user_id: str, room: str) -> AccessLevel:
        ...


class DocumentExistsAuthorizer:
    """Полный доступ к комнате, если для нее есть метаданные документа"""

    def __init__(self, repository: "DocumentRepository"):
        self.repository = repository

    async def authorize(self, user_id: str, room: str) -> AccessLevel:
        if await self.repository.exists(room):
            return AccessLevel.READ_WRITE
        return AccessLevel.NO_ACCESS
