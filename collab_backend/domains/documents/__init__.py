from collab_backend.domains.documents.entities import DocMeta
from collab_backend.domains.documents.schemas import DocMetaCreate, DocMetaResponse
from collab_backend.domains.documents.services import DocumentService

__all__ = [
    "DocMeta",
    "DocMetaCreate", "DocMetaResponse",
    "DocumentService"
]
