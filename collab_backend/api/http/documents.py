from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import PlainTextResponse

from collab_backend.core.context import AppContext, get_context
from collab_backend.domains.documents.entities import DocMeta
from collab_backend.domains.documents.schemas import DocMetaCreate, DocMetaResponse

router = APIRouter(prefix="/api/docs", tags=["documents"])


def to_response(doc: DocMeta) -> DocMetaResponse:
    return DocMetaResponse(**doc.to_dict())


@router.get("", response_model=List[DocMetaResponse])
async def list_documents(context: AppContext = Depends(get_context)):
    """Получение метаданных всех документов"""
    documents = await context.documents.list_documents()
    return [to_response(doc) for doc in documents]


@router.post("", response_model=DocMetaResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocMetaCreate,
    context: AppContext = Depends(get_context)
):
    """Создание нового документа"""
    document = await context.documents.create_document(document_data)

    if not document:
        return PlainTextResponse(
            "Failed to create document",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return to_response(document)


@router.get("/{doc_id}", response_model=DocMetaResponse)
async def get_document(doc_id: str, context: AppContext = Depends(get_context)):
    """Получение метаданных документа по id"""
    document = await context.documents.get_document(doc_id)

    if not document:
        return PlainTextResponse(
            f"Document {doc_id} not found",
            status_code=status.HTTP_404_NOT_FOUND
        )

    return to_response(document)


@router.patch("/{doc_id}/title", response_model=DocMetaResponse)
async def update_title(
    doc_id: str,
    payload: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context)
):
    """Обновление заголовка документа"""
    title = payload.get("title")

    if not isinstance(title, str):
        return PlainTextResponse("Missing title", status_code=status.HTTP_400_BAD_REQUEST)

    if not await context.documents.get_document(doc_id):
        return PlainTextResponse(
            f"Document {doc_id} not found",
            status_code=status.HTTP_404_NOT_FOUND
        )

    document = await context.documents.update_title(doc_id, title)

    if not document:
        return PlainTextResponse(
            "Failed to update document",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return to_response(document)


@router.delete("/{doc_id}", response_class=PlainTextResponse)
async def delete_document(doc_id: str, context: AppContext = Depends(get_context)):
    """Удаление документа"""
    deleted = await context.documents.delete_document(doc_id)

    if deleted is None:
        return PlainTextResponse(
            "Failed to delete document",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if not deleted:
        return PlainTextResponse(
            f"Document {doc_id} not found",
            status_code=status.HTTP_404_NOT_FOUND
        )

    return f"Document {doc_id} removed"
