import logging
import time
from typing import Any, Callable, Dict

from jose import jwt

from collab_backend.domains.identity.entities import RoomAuthorizer
from collab_backend.domains.identity.schemas import AccessTokenClaims, PermissionResponse

logger = logging.getLogger(__name__)

PRIVATE_JWK_FIELDS = ("d", "p", "q", "dp", "dq", "qi", "oth", "key_ops")


def public_jwk(private_key: Dict[str, Any]) -> Dict[str, Any]:
    """Публичная часть JWK для проверки подписи"""
    if private_key.get("kty") == "oct":
        return dict(private_key)
    return {k: v for k, v in private_key.items() if k not in PRIVATE_JWK_FIELDS}


class TokenIssuer:
    """
    Выдача подписанных токенов доступа для сервера синхронизации.

    Токен выдается любому запросу: проверка учетных данных здесь не делается
    и в реальном развертывании должна выполняться до вызова issue().
    """

    def __init__(
        self,
        private_key: Dict[str, Any],
        issuer: str,
        algorithm: str = "ES256",
        ttl_seconds: int = 3600,
        clock: Callable[[], float] = time.time
    ):
        self.private_key = private_key
        self.public_key = public_jwk(private_key)
        self.issuer = issuer
        self.algorithm = algorithm
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    def build_claims(self, user_id: str) -> AccessTokenClaims:
        now_ms = int(self.clock() * 1000)
        return AccessTokenClaims(
            iss=self.issuer,
            exp=now_ms + self.ttl_seconds * 1000,
            yuserid=user_id
        )

    def issue(self, user_id: str) -> str:
        """Создание токена доступа для пользователя"""
        claims = self.build_claims(user_id)
        token = jwt.encode(claims.model_dump(), self.private_key, algorithm=self.algorithm)
        logger.info(f"Issued access token for user {user_id}")
        return token

    def decode(self, token: str) -> AccessTokenClaims:
        """Проверка подписи и извлечение данных токена"""
        # exp хранится в миллисекундах, поэтому jose его не проверяет
        payload = jwt.decode(
            token,
            self.public_key,
            algorithms=[self.algorithm],
            options={"verify_exp": False}
        )
        return AccessTokenClaims(**payload)


class PermissionService:
    """Ответы серверу синхронизации о правах доступа к комнатам"""

    def __init__(self, authorizer: RoomAuthorizer):
        self.authorizer = authorizer

    async def check(self, room: str, user_id: str) -> PermissionResponse:
        access = await self.authorizer.authorize(user_id, room)
        logger.debug(f"User {user_id} has {access.value} access to room {room}")
        return PermissionResponse(yroom=room, yaccess=access, yuserid=user_id)
