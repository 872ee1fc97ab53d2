"""
Error types shared by the services and the HTTP layer.

Services raise ``NotFound`` and ``Forbidden``; anything else that
escapes a request handler is wrapped as ``ServerError`` by
``server_errors``.  The FastAPI exception handler registered in
``main`` renders every ``ApiError`` as a JSON body with a ``message``
key (and an ``error`` key carrying the raw cause for 500s).
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base error with an HTTP status and a user-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class Forbidden(ApiError):
    """Role or ownership check failed."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ApiError):
    """Missing record or empty collection."""

    status_code = status.HTTP_404_NOT_FOUND


class ServerError(ApiError):
    """Store, notification or relay failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: str) -> None:
        super().__init__("Server error", error=error)


class DeliveryError(RuntimeError):
    """Raised when an email cannot be handed to the mail server."""


class RelayError(RuntimeError):
    """Raised when the audit service rejects or cannot receive a record."""


@contextmanager
def server_errors() -> Iterator[None]:
    """Map unexpected exceptions raised inside the block to ``ServerError``.

    ``ApiError`` subclasses pass through untouched so that 403/404
    responses keep their status.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Request failed: %s", exc)
        raise ServerError(str(exc)) from exc


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
