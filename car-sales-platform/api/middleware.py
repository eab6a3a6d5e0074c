"""
HTTP middleware.

Request timing: every response carries an X-Execution-Time-Ms header and each
request is logged with its method, path, status and elapsed time.
"""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

EXECUTION_TIME_HEADER = "X-Execution-Time-Ms"


def setup_middleware(app: FastAPI) -> None:
    """Register the request timing middleware on the application."""

    @app.middleware("http")
    async def log_request_timing(request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        response.headers[EXECUTION_TIME_HEADER] = f"{elapsed_ms:.2f}"
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {elapsed_ms:.2f}ms"
        )

        return response
