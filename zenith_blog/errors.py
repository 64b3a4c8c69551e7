# zenith_blog/errors.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_body(message: str) -> dict:
    return {"success": False, "error": message}


@asynccontextmanager
async def storage_errors(message: str):
    """
    Maps anything a storage call raises to a 500 carrying `message`.
    HTTPExceptions raised inside the block (404, 400) pass through untouched.
    """
    try:
        yield
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"{message}: {e}")
        raise HTTPException(500, message) from e


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Rejected body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content=error_body("Invalid request body"))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
