from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

if TYPE_CHECKING:
    from fastapi import FastAPI, Request


log = logging.getLogger(__name__)

INVALID_JSON = "Invalid JSON format"
INTERNAL_ERROR = "Internal Server Error"


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los handlers de error comunes a ambos servicios.

    Errores del cliente terminan en 4xx con un mensaje corto; cualquier
    otra excepción se registra con traceback y responde 500 sin tumbar
    el proceso.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    exc_obj = cast("StarletteHTTPException", exc)
    log.warning(
        "%s %s -> %s: %s", request.method, request.url.path, exc_obj.status_code, exc_obj.detail
    )
    return JSONResponse(
        {"detail": exc_obj.detail},
        status_code=exc_obj.status_code,
        headers=getattr(exc_obj, "headers", None),
    )


def request_validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # JSON mal formado o tipos incorrectos: error del cliente, no 422.
    errors = cast("RequestValidationError", exc).errors()
    log.warning(
        "%s %s -> 400: %s (%d errores)",
        request.method,
        request.url.path,
        INVALID_JSON,
        len(errors),
    )
    return JSONResponse({"detail": INVALID_JSON}, status_code=status.HTTP_400_BAD_REQUEST)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("Error no controlado en %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        {"detail": INTERNAL_ERROR}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
