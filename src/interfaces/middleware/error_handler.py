from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import AppError, InfrastructureError, NotFound, ReferentialIntegrityError
from src.interfaces.http.views import render

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred while processing your request."


def _wants_json(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept


def _error_response(request: Request, status_code: int, code: str, message: str) -> Response:
    if _wants_json(request):
        return JSONResponse(status_code=status_code, content={"code": code, "message": message})
    return render(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> Response:  # noqa: WPS430
        logger.info(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        message = exc.message
        if isinstance(exc, (ReferentialIntegrityError, InfrastructureError)):
            # The reason is logged above; the page stays generic
            message = GENERIC_ERROR
        return _error_response(request, exc.status_code, exc.code, message)

    @app.exception_handler(RequestValidationError)
    async def handle_bad_route(request: Request, exc: RequestValidationError) -> Response:  # noqa: WPS430
        # Only path/query parameters are declared on routes, so a bad value means no such record
        error = NotFound("Not found")
        return _error_response(request, error.status_code, error.code, error.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:  # noqa: WPS430
        return _error_response(request, exc.status_code, "http_error", str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:  # noqa: WPS430
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        error = InfrastructureError("Unexpected server error")
        return _error_response(
            request, status.HTTP_500_INTERNAL_SERVER_ERROR, error.code, GENERIC_ERROR
        )
