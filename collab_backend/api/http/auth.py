from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from collab_backend.core.context import AppContext, get_context
from collab_backend.domains.identity.schemas import PermissionResponse

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.get("/token", response_class=PlainTextResponse)
async def get_token(
    userid: Optional[str] = Query(None, min_length=1),
    context: AppContext = Depends(get_context)
):
    """Выдача токена доступа к серверу синхронизации"""
    # Доступ выдается всегда; проверку учетных данных нужно добавить здесь
    user_id = userid or context.settings.default_user_id
    return context.token_issuer.issue(user_id)


@router.get("/perm/{room}/{userid}", response_model=PermissionResponse)
async def get_permission(
    room: str,
    userid: str,
    context: AppContext = Depends(get_context)
):
    """Проверка прав пользователя на комнату (вызывается сервером синхронизации)"""
    return await context.permissions.check(room, userid)
