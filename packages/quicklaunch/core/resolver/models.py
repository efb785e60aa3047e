"""Identity derived from resolving a target URL."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResolvedIdentity(BaseModel):
    """Canonical host and display title for a target URL.

    ``hostname`` and ``display_title`` are always identical today; they are
    kept apart because one drives favicon lookups and the other naming.

    Attributes:
        hostname: Host used for the favicon request
        display_title: Title used for the extension name and directory
        resolved_url: Final URL after redirects (raw URL on fallback)
        fallback: True when resolution failed and the raw URL was used
    """

    hostname: str = Field(min_length=1)
    display_title: str
    resolved_url: str
    fallback: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")
