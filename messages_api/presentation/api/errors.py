"""Maps typed message access errors to HTTP responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ...domain.errors import MessageAccessError

logger = structlog.get_logger()

STATUS_BY_KIND = {
    "unauthorized": status.HTTP_403_FORBIDDEN,
    "not_found": status.HTTP_404_NOT_FOUND,
}


def status_for(error: MessageAccessError) -> int:
    return STATUS_BY_KIND.get(error.kind, status.HTTP_400_BAD_REQUEST)


async def message_access_error_handler(request: Request, exc: MessageAccessError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(
        "Request rejected",
        kind=exc.kind,
        error_type=type(exc).__name__,
        status_code=status_code,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": {"kind": exc.kind, "message": exc.detail}},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MessageAccessError, message_access_error_handler)
