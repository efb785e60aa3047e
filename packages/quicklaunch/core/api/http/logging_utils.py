from __future__ import annotations

import logging
import time
from collections.abc import Mapping

import httpx
from pydantic import BaseModel

logger = logging.getLogger("quicklaunch.core.api.http")

REDACTED = "***REDACTED***"


def redact_headers(headers: Mapping[str, str], redact: tuple[str, ...]) -> dict[str, str]:
    """Copy ``headers`` with the values of ``redact`` names (any case) masked."""
    hidden = {name.lower() for name in redact}
    return {k: (REDACTED if k.lower() in hidden else v) for k, v in headers.items()}


class RequestLogContext(BaseModel):
    """Fields attached to every log record of one request.

    Args:
        method: HTTP method
        url: URL as requested, before redirects
        purpose: What the request is for, e.g. "resolve" or "favicon"
    """

    method: str
    url: str
    purpose: str | None = None

    def fields(self) -> dict[str, str | None]:
        return {"method": self.method, "url": self.url, "purpose": self.purpose}


def log_request(
    ctx: RequestLogContext, headers: Mapping[str, str], redact: tuple[str, ...]
) -> float:
    """Log an outgoing request and return its start time."""
    logger.debug(
        "HTTP request",
        extra={**ctx.fields(), "headers": redact_headers(headers, redact)},
    )
    return time.perf_counter()


def log_response(ctx: RequestLogContext, response: httpx.Response, start: float) -> None:
    """Log where a request ended up and how many redirects it took."""
    logger.debug(
        "HTTP %s after %d redirect(s)",
        response.status_code,
        len(response.history),
        extra={
            **ctx.fields(),
            "final_url": str(response.url),
            "status_code": response.status_code,
            "redirects": len(response.history),
            "elapsed_ms": int((time.perf_counter() - start) * 1000),
        },
    )


def log_failure(ctx: RequestLogContext, error: Exception, start: float) -> None:
    """Log a request that produced no usable response."""
    logger.debug(
        "HTTP request failed: %s",
        type(error).__name__,
        extra={
            **ctx.fields(),
            "error": str(error),
            "elapsed_ms": int((time.perf_counter() - start) * 1000),
        },
    )
