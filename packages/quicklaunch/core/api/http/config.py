from __future__ import annotations

import httpx
from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/126.0 Safari/537.36 quicklaunch/1.0"
)


class HttpClientConfig(BaseModel):
    """Configuration for AsyncApiClient.

    Args:
        timeout: HTTPX timeout configuration
        follow_redirects: Whether to follow HTTP redirects
        max_redirects: Redirect hops allowed before RedirectLimitError
        headers: Default headers applied to all requests
        verify: TLS certificate verification (True, False, or path to CA bundle)
        user_agent: User-Agent header value
        redact_headers: Headers to redact in logs (case-insensitive)
        max_response_body_for_error: Max response bytes to include in error messages
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    timeout: httpx.Timeout = Field(default_factory=lambda: httpx.Timeout(10.0, connect=5.0))
    follow_redirects: bool = True
    max_redirects: int = Field(default=20, ge=0)
    headers: dict[str, str] = Field(default_factory=dict)
    verify: bool | str = True
    user_agent: str = DEFAULT_USER_AGENT
    redact_headers: tuple[str, ...] = (
        "authorization",
        "proxy-authorization",
        "cookie",
        "set-cookie",
    )
    max_response_body_for_error: int = 1024
