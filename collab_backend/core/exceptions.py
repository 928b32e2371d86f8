import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CollabBackendError(Exception):
    """Базовое исключение сервиса"""
    pass


class DocumentStoreError(CollabBackendError):
    """Не удалось прочитать или записать файл хранилища"""
    pass


class MissingAttachmentError(CollabBackendError):
    """В multipart-запросе нет ожидаемого файла"""

    def __init__(self, field: str):
        super().__init__(f"Missing multipart attachment '{field}'")
        self.field = field


class MalformedUploadError(CollabBackendError):
    """Тело multipart-запроса не удалось разобрать"""
    pass


class InvalidDocumentUpdateError(CollabBackendError):
    """Бинарное обновление документа не удалось декодировать"""
    pass


def register_exception_handlers(app: FastAPI) -> None:
    """Подключение обработчиков исключений к приложению"""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_errors(exc), "code": "VALIDATION_ERROR"}
        )

    @app.exception_handler(MissingAttachmentError)
    async def missing_attachment_handler(request: Request, exc: MissingAttachmentError):
        logger.warning(f"{exc} path={request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "code": "MISSING_ATTACHMENT"}
        )

    @app.exception_handler(MalformedUploadError)
    async def malformed_upload_handler(request: Request, exc: MalformedUploadError):
        logger.error(f"Malformed upload: {exc} path={request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "code": "MALFORMED_UPLOAD"}
        )

    @app.exception_handler(InvalidDocumentUpdateError)
    async def invalid_update_handler(request: Request, exc: InvalidDocumentUpdateError):
        logger.error(f"Invalid document update: {exc} path={request.url.path}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "code": "INVALID_DOCUMENT_UPDATE"}
        )

    @app.exception_handler(CollabBackendError)
    async def backend_error_handler(request: Request, exc: CollabBackendError):
        logger.error(f"Internal error: {exc} path={request.url.path}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "code": "INTERNAL_ERROR"}
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx может содержать объекты исключений, которые не сериализуются
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
