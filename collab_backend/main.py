import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from collab_backend import __version__
from collab_backend.api.http import auth_router, callbacks_router, documents_router, health_router
from collab_backend.core.config import Settings
from collab_backend.core.context import AppContext
from collab_backend.core.exceptions import register_exception_handlers
from collab_backend.core.logging import setup_logging
from collab_backend.domains.identity.entities import RoomAuthorizer

logger = logging.getLogger(__name__)


class NoCacheStaticFiles(StaticFiles):
    """Статические файлы клиента без кэширования"""

    async def get_response(self, path: str, scope):
        response = await super().get_response(path, scope)
        if response:
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response


def create_app(
    settings: Optional[Settings] = None,
    authorizer: Optional[RoomAuthorizer] = None
) -> FastAPI:
    """Сборка приложения; контекст создается при запуске"""
    settings = settings or Settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context = await AppContext.build(settings, authorizer)
        app.state.context = context
        logger.info(f"Server started, documents stored in {context.database.path}")

        yield

        # Файл базы удаляется при остановке; отключается через DELETE_DB_ON_EXIT=false
        if settings.delete_db_on_exit:
            context.database.drop()
        logger.info("Server stopped")

    app = FastAPI(
        title="Collab Backend",
        description="Auth and document metadata backend for a collaborative editor",
        version=__version__,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(callbacks_router)
    app.include_router(auth_router)
    app.include_router(documents_router)

    # Собранный клиент раздается с того же порта, если он есть
    if os.path.isdir(settings.static_dir):
        app.mount("/", NoCacheStaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


def main() -> None:
    """Запуск сервера через uvicorn"""
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
