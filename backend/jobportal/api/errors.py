"""
Error envelope and failure boundary for the HTTP layer.

Every error response has the shape ``{"message": ..., "success": false,
"code": ...}``.
"""

import logging
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobportal.core.exceptions import AccountError, InternalFailure, MissingRequiredField

logger = logging.getLogger(__name__)


def error_response(exc: AccountError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "success": False, "code": exc.code},
    )


@contextmanager
def failure_boundary(message: str):
    """
    Translate unexpected exceptions into ``InternalFailure``.

    ``AccountError`` passes through unchanged; anything else is logged with
    its traceback and replaced by a generic error carrying ``message``.
    """
    try:
        yield
    except AccountError:
        raise
    except Exception as exc:
        logger.exception("Unhandled error: %s", message)
        raise InternalFailure(message) from exc


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request to %s", request.url.path)
    return error_response(MissingRequiredField())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountError, account_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
