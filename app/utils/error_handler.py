# app/utils/error_handler.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.utils.errors import ContactAPIError

log = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    if status_code >= 500:
        log.error("%s %s -> %s: %s", request.method, request.url.path, status_code, message)
    else:
        log.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, message)
    return JSONResponse(content={"message": message}, status_code=status_code)


async def contact_api_error_handler(request: Request, exc: ContactAPIError):
    return error_response(request, exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(request, status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(request, exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Internal Server Error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ContactAPIError, contact_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
