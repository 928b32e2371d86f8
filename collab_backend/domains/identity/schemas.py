from pydantic import BaseModel

from collab_backend.domains.identity.entities import AccessLevel


class AccessTokenClaims(BaseModel):
    """Содержимое токена доступа"""
    iss: str
    exp: int  # unix-время в миллисекундах
    yuserid: str


class PermissionResponse(BaseModel):
    """Ответ на запрос прав пользователя к комнате"""
    yroom: str
    yaccess: AccessLevel
    yuserid: str
