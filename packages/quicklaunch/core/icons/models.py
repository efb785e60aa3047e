"""Per-fetch result type for favicon downloads.

A fetch never raises; success or failure is carried in the result so the
aggregation policy decides what is fatal.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from quicklaunch.core.errors import FetchErrorKind


class FetchResult(BaseModel):
    """Outcome of fetching one icon size.

    Attributes:
        size: Requested size in pixels
        ok: Whether the fetch produced an image payload
        data: Payload bytes (if ok)
        error_kind: Failure category (if not ok)
        error: Error message (if not ok)
        status_code: HTTP status, when a response was received
    """

    size: int = Field(gt=0)
    ok: bool
    data: bytes | None = None
    error_kind: FetchErrorKind | None = None
    error: str | None = None
    status_code: int | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


# Helper functions to create results (avoids Pydantic classmethod issues)


def ok_result(size: int, data: bytes, status_code: int | None = None) -> FetchResult:
    """Create a successful fetch result."""
    return FetchResult(size=size, ok=True, data=data, status_code=status_code)


def err_result(
    size: int,
    kind: FetchErrorKind,
    error: str,
    status_code: int | None = None,
) -> FetchResult:
    """Create a failed fetch result."""
    return FetchResult(
        size=size,
        ok=False,
        error_kind=kind,
        error=error,
        status_code=status_code,
    )
