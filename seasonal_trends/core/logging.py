import logging
import json
import time
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from seasonal_trends.core.config import settings

# Configure logging
logger = logging.getLogger("seasonal_trends")
logger.setLevel(settings.LOG_LEVEL.upper())

if not logger.handlers:
    # Create console handler with formatting
    console_handler = logging.StreamHandler()
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time

        log_data = {
            "request": {
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
            "response": {
                "status_code": response.status_code,
                "duration": round(duration, 4)
            }
        }

        # Log at appropriate level based on status code
        if response.status_code >= 500:
            logger.error(json.dumps(log_data))
        elif response.status_code >= 400:
            logger.warning(json.dumps(log_data))
        else:
            logger.info(json.dumps(log_data))

        return response
