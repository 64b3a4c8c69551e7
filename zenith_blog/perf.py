# zenith_blog/perf.py
import functools
import logging
import time
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import Request

logger = logging.getLogger(__name__)

TIMING_HEADER = "X-Process-Time"


@asynccontextmanager
async def async_perf_log(operation: str, logger: logging.Logger = logger):
    """Logs how long the wrapped block took, whether or not it raised."""
    start: float = time.perf_counter()
    try:
        yield
    finally:
        logger.info(f"{operation} took {time.perf_counter() - start:.3f}s")


def time_async_function(func: Callable) -> Callable:
    """Decorator form of async_perf_log, labelled with the function's qualname."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        async with async_perf_log(func.__qualname__):
            return await func(*args, **kwargs)

    return wrapper


async def performance_middleware(request: Request, call_next):
    """
    One log line per API/page hit: method, path, status and duration.
    The duration also goes back to the caller in X-Process-Time.
    """
    route = f"{request.method} {request.url.path}"
    start_time: float = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{route} crashed after {time.perf_counter() - start_time:.3f}s: {e}")
        raise

    elapsed: float = time.perf_counter() - start_time
    logger.info(f"{route} -> {response.status_code} in {elapsed:.3f}s")
    response.headers[TIMING_HEADER] = f"{elapsed:.3f}"
    return response
