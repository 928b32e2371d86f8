from collab_backend.domains.identity.entities import AccessLevel, RoomAuthorizer, DocumentExistsAuthorizer
from collab_backend.domains.identity.schemas import AccessTokenClaims, PermissionResponse
from collab_backend.domains.identity.services import TokenIssuer, PermissionService

__all__ = [
    "AccessLevel", "RoomAuthorizer", "DocumentExistsAuthorizer",
    "AccessTokenClaims", "PermissionResponse",
    "TokenIssuer", "PermissionService"
]
