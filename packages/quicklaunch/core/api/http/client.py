"""Async HTTP client wrapper built on HTTPX.

Provides:
- One exception family for every failure (status, network, timeout, redirect cap)
- Request/response logging with redaction and redirect counts
- Bodyless requests for callers that only need the final URL

Failures surface on first sight; nothing is retried.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from quicklaunch.core.api.http.config import HttpClientConfig
from quicklaunch.core.api.http.errors import (
    ApiError,
    ClientError,
    NetworkError,
    RedirectLimitError,
    ServerError,
    TimeoutError,
    UnexpectedStatusError,
)
from quicklaunch.core.api.http.logging_utils import (
    RequestLogContext,
    log_failure,
    log_request,
    log_response,
)


def _categorize_http_error(status_code: int) -> type[ApiError]:
    """Map HTTP status code to appropriate error class."""
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return UnexpectedStatusError


def _categorize_transport_error(
    exc: Exception, max_redirects: int
) -> tuple[type[ApiError], str]:
    """Map an HTTPX exception raised before any final response to an error class."""
    if isinstance(exc, httpx.TimeoutException):
        return TimeoutError, f"Request timed out ({type(exc).__name__})"
    if isinstance(exc, httpx.TooManyRedirects):
        return RedirectLimitError, f"Exceeded {max_redirects} redirects"
    return NetworkError, f"Network error while sending request: {exc}"


def safe_snippet(content: bytes, limit: int) -> str:
    """Decode at most ``limit`` bytes of a response body for error messages."""
    return content[:limit].decode("utf-8", errors="replace") if content else ""


def _status_error(
    response: httpx.Response, *, method: str, url: str, body_snippet_limit: int
) -> ApiError:
    """Build the error for a non-2xx response.

    The body is only quoted when it was read; bodyless requests never
    download it just to build a message.
    """
    snippet = None
    if response.is_stream_consumed:
        snippet = safe_snippet(response.content, body_snippet_limit)
    return _categorize_http_error(response.status_code)(
        message="HTTP error response",
        method=method,
        url=url,
        status_code=response.status_code,
        response_headers=dict(response.headers),
        response_body_snippet=snippet,
    )


class AsyncApiClient:
    """Asynchronous HTTP client for absolute URLs.

    Unlike a base-URL API client this one talks to arbitrary hosts: the
    page being resolved and the favicon service.

    Args:
        config: Client configuration
        transport: Optional custom transport (useful for testing)

    Example:
        >>> async with AsyncApiClient(HttpClientConfig()) as client:
        ...     resp = await client.get("https://example.com", check_status=False)
        ...     final = str(resp.url)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or HttpClientConfig()
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent, **self.config.headers},
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
            max_redirects=self.config.max_redirects,
            verify=self.config.verify,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncApiClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: httpx.Timeout | None = None,
        check_status: bool = True,
        read_body: bool = True,
        purpose: str | None = None,
    ) -> httpx.Response:
        """Send a request and normalize every failure into an ApiError.

        Args:
            method: HTTP method
            url: Absolute request URL
            params: Query parameters (values are stringified)
            headers: Extra request headers
            timeout: Per-request timeout override
            check_status: Raise on non-2xx responses
            read_body: Download the body; when False only status, headers and
                final URL are usable
            purpose: Short label attached to log records

        Returns:
            HTTP response; ``response.url`` is the URL after redirects

        Raises:
            ApiError: On transport failure, timeout, redirect overflow or
                (with check_status) a non-2xx status
        """
        method_u = method.upper()
        ctx = RequestLogContext(method=method_u, url=url, purpose=purpose)
        start = log_request(
            ctx, {**self._client.headers, **(headers or {})}, self.config.redact_headers
        )

        try:
            req = self._client.build_request(
                method_u,
                url,
                params={k: str(v) for k, v in (params or {}).items()},
                headers=headers,
                timeout=timeout or self.config.timeout,
            )
            resp = await self._client.send(req, stream=not read_body)
            if not read_body:
                await resp.aclose()
        # idna rejects some hosts urlsplit accepts (e.g. "xn--a.com") with a
        # UnicodeError, which is a ValueError but not an httpx exception
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            exc_type, message = _categorize_transport_error(e, self.config.max_redirects)
            error = exc_type(message=message, method=method_u, url=url, cause=e)
            log_failure(ctx, error, start)
            raise error from e

        log_response(ctx, resp, start)

        if check_status and not resp.is_success:
            raise _status_error(
                resp,
                method=method_u,
                url=url,
                body_snippet_limit=self.config.max_response_body_for_error,
            )
        return resp

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Perform async GET request (see ``request`` for arguments)."""
        return await self.request("GET", url, **kwargs)
