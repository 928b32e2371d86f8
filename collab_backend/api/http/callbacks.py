import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from collab_backend.core.context import AppContext, get_context
from collab_backend.core.exceptions import MalformedUploadError, MissingAttachmentError
from collab_backend.domains.collaboration.schemas import BasicWsCallbackBody

logger = logging.getLogger(__name__)

router = APIRouter(tags=["callbacks"])

YDOC_FIELD = "ydoc"


@router.post("/basic-ws-callback", response_class=PlainTextResponse)
async def basic_ws_callback(
    body: BasicWsCallbackBody,
    context: AppContext = Depends(get_context)
):
    """Периодическое уведомление об изменении документа"""
    context.update_ingest.notify_changed(body.room, body.data)
    return "OK"


@router.api_route(
    "/ydoc/{room}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_class=PlainTextResponse
)
async def ydoc_callback(
    room: str,
    request: Request,
    context: AppContext = Depends(get_context)
):
    """Периодическое уведомление с бинарным состоянием документа в multipart-поле ydoc"""
    # Тело кэшируется, чтобы отличить оборванный multipart от формы без поля ydoc
    body = await request.body()
    is_multipart = request.headers.get("content-type", "").startswith("multipart/")

    try:
        form = await request.form()
    except (MultiPartException, HTTPException) as e:
        detail = getattr(e, "detail", None) or getattr(e, "message", None) or str(e)
        raise MalformedUploadError(f"Cannot parse multipart body: {detail}") from e

    try:
        if is_multipart and body.strip() and not form:
            raise MalformedUploadError("Cannot parse multipart body: no complete parts found")

        attachment = form.get(YDOC_FIELD)

        if not isinstance(attachment, UploadFile):
            raise MissingAttachmentError(YDOC_FIELD)

        update = await attachment.read()
    finally:
        await form.close()

    context.update_ingest.notify_changed_binary(room, update)
    return "OK"
