"""Logging middleware for the PsychoScore API.

Logs each incoming request and its response with timing. Request bodies carry
candidate answers, so they are only logged on request and with candidate
identity fields masked.
"""

import json
import time
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from psychoscore.utils.logger import get_api_logger, log_api_response

logger = get_api_logger()

MASKED = "***MASKED***"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests and responses."""

    def __init__(
        self,
        app: ASGIApp,
        log_request_body: bool = False,
        exclude_paths: Optional[List[str]] = None,
        mask_fields: Optional[List[str]] = None
    ):
        """Initialize logging middleware.

        Args:
            app: The ASGI application
            log_request_body: Whether to log JSON request bodies
            exclude_paths: Path prefixes that are not logged
            mask_fields: Field name fragments whose values are masked
        """
        super().__init__(app)
        self.log_request_body = log_request_body
        self.exclude_paths = exclude_paths or ["/health", "/docs", "/redoc", "/openapi.json"]
        self.mask_fields = mask_fields or ["authorization", "cookie", "email", "name", "token"]

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if any(path.startswith(excluded) for excluded in self.exclude_paths):
            return await call_next(request)

        start_time = time.perf_counter()
        await self._log_request(request)

        response = await call_next(request)

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        log_api_response(request.method, path, response.status_code, duration_ms, logger=logger)
        return response

    async def _log_request(self, request: Request) -> None:
        log_data: Dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_host": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
            "content_length": request.headers.get("content-length"),
        }

        if self.log_request_body and request.headers.get("content-type", "").startswith("application/json"):
            body = await request.body()
            if body:
                try:
                    log_data["body"] = self._mask_sensitive_data(json.loads(body))
                except ValueError as e:
                    log_data["body_error"] = str(e)

        logger.info(f"Request: {request.method} {request.url.path}", extra=log_data)

    def _mask_sensitive_data(self, data: Any) -> Any:
        """Recursively mask sensitive fields in data.

        Args:
            data: Data to mask

        Returns:
            Any: Data with sensitive fields masked
        """
        if isinstance(data, dict):
            return {
                key: MASKED if self._is_sensitive(key) else self._mask_sensitive_data(value)
                for key, value in data.items()
            }

        if isinstance(data, list):
            return [self._mask_sensitive_data(item) for item in data]

        return data

    def _is_sensitive(self, key: str) -> bool:
        key_lower = key.lower()
        return any(field in key_lower for field in self.mask_fields)
