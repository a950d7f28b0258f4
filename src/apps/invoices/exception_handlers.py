"""Обработчики исключений для счетов и платежей."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from .exceptions import (
    InvoiceAlreadyExistsError,
    InvoiceBaseException,
    InvoiceInvalidStateError,
    InvoiceNotFoundError,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: InvoiceBaseException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error_type": exc.__class__.__name__,
            "details": exc.details,
        },
    )


async def invoice_not_found_handler(
    request: Request,
    exc: InvoiceNotFoundError,
) -> JSONResponse:
    """Обработчик для InvoiceNotFoundError."""
    logger.warning("InvoiceNotFoundError: %s", exc.message)
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


async def invoice_invalid_state_handler(
    request: Request,
    exc: InvoiceInvalidStateError,
) -> JSONResponse:
    """Обработчик для InvoiceInvalidStateError."""
    logger.error("InvoiceInvalidStateError: %s, details=%s", exc.message, exc.details)
    return _error_response(status.HTTP_409_CONFLICT, exc)


async def invoice_already_exists_handler(
    request: Request,
    exc: InvoiceAlreadyExistsError,
) -> JSONResponse:
    """Обработчик для InvoiceAlreadyExistsError."""
    logger.warning("InvoiceAlreadyExistsError: %s", exc.message)
    return _error_response(status.HTTP_409_CONFLICT, exc)


async def invoice_base_exception_handler(
    request: Request,
    exc: InvoiceBaseException,
) -> JSONResponse:
    """Обработчик для InvoiceBaseException."""
    logger.error(
        "InvoiceBaseException: %s, details=%s",
        exc.message,
        exc.details,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


EXCEPTION_HANDLERS = {
    InvoiceNotFoundError: invoice_not_found_handler,
    InvoiceInvalidStateError: invoice_invalid_state_handler,
    InvoiceAlreadyExistsError: invoice_already_exists_handler,
    InvoiceBaseException: invoice_base_exception_handler,
}
