from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from collab_backend.core.config import Settings
from collab_backend.db.json_database import JSONDatabase
from collab_backend.db.repositories.document_repository import DocumentRepository
from collab_backend.domains.collaboration.services import UpdateIngestService
from collab_backend.domains.documents.services import DocumentService
from collab_backend.domains.identity.entities import DocumentExistsAuthorizer, RoomAuthorizer
from collab_backend.domains.identity.services import PermissionService, TokenIssuer


@dataclass
class AppContext:
    """Состояние приложения, создаваемое один раз при запуске"""
    settings: Settings
    database: JSONDatabase
    documents: DocumentService
    token_issuer: TokenIssuer
    permissions: PermissionService
    update_ingest: UpdateIngestService

    @classmethod
    async def build(
        cls,
        settings: Settings,
        authorizer: Optional[RoomAuthorizer] = None
    ) -> "AppContext":
        database = await JSONDatabase.init(settings.db_file)
        repository = DocumentRepository(database)

        return cls(
            settings=settings,
            database=database,
            documents=DocumentService(repository),
            token_issuer=TokenIssuer(
                private_key=settings.auth_private_key,
                issuer=settings.app_name,
                algorithm=settings.auth_algorithm,
                ttl_seconds=settings.token_ttl_seconds
            ),
            permissions=PermissionService(authorizer or DocumentExistsAuthorizer(repository)),
            update_ingest=UpdateIngestService()
        )


def get_context(request: Request) -> AppContext:
    """Зависимость для получения контекста приложения"""
    return request.app.state.context
