"""Mapping from domain outcomes to plain-text HTTP errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.domain.exceptions import (
    EncodingFailureError,
    EntityNotFoundError,
    InvalidRequestError,
    StorageFailureError,
)

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise domain exceptions as HTTPException with the matching status.

    Not-found outcomes are expected and are not logged; storage and encoding
    failures are logged with their cause and reported without detail.
    """
    try:
        yield
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageFailureError:
        logger.exception("fail to access DB")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="fail to access DB",
        )
    except EncodingFailureError:
        logger.exception("fail to encode response")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="fail to encode response",
        )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    return PlainTextResponse(
        "invalid request parameters",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error response as text/plain."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
