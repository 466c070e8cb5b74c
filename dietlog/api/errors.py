import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dietlog.core.exceptions import DietlogError

logger = logging.getLogger(__name__)


async def dietlog_error_handler(request: Request, exc: DietlogError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.http_status}: {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Перевод доменных ошибок в HTTP-ответы с их http_status."""
    app.add_exception_handler(DietlogError, dietlog_error_handler)
