"""HTTPX wrapper used for page resolution and favicon downloads.

Exposes a small surface:
- AsyncApiClient: async client for absolute URLs
- HttpClientConfig: configuration
- Exceptions: ApiError and subclasses
"""

from quicklaunch.core.api.http.client import AsyncApiClient
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

__all__ = [
    "AsyncApiClient",
    "HttpClientConfig",
    "ApiError",
    "NetworkError",
    "TimeoutError",
    "RedirectLimitError",
    "ClientError",
    "ServerError",
    "UnexpectedStatusError",
]
