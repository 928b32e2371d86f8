from collab_backend.api.http.health import router as health_router
from collab_backend.api.http.auth import router as auth_router
from collab_backend.api.http.documents import router as documents_router
from collab_backend.api.http.callbacks import router as callbacks_router

__all__ = [
    "health_router",
    "auth_router",
    "documents_router",
    "callbacks_router"
]
