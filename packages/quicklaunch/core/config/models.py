"""Configuration models for QuickLaunch."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from quicklaunch.core.api.http.config import DEFAULT_USER_AGENT, HttpClientConfig

DEFAULT_FAVICON_ENDPOINT = "https://t0.gstatic.com/faviconV2"
DEFAULT_IDENTITY_PROVIDER_HOST = "accounts.google.com"


class IconVariant(str, Enum):
    """Which icon sizes a generated extension ships."""

    SINGLE = "single"
    MULTI = "multi"

    @property
    def sizes(self) -> tuple[int, ...]:
        """Pixel sizes fetched for this variant, in manifest order."""
        return ICON_SIZES[self]


ICON_SIZES: dict[IconVariant, tuple[int, ...]] = {
    IconVariant.SINGLE: (64,),
    IconVariant.MULTI: (16, 32, 48, 128),
}


class CollisionPolicy(str, Enum):
    """What to do when the output directory already exists."""

    REUSE = "reuse"
    FAIL = "fail"
    VERSION = "version"


class HttpConfig(BaseModel):
    """HTTP transport settings shared by resolution and favicon fetches."""

    timeout_s: float = Field(default=10.0, gt=0, description="Read/write/pool timeout")
    connect_timeout_s: float = Field(default=5.0, gt=0, description="Connect timeout")
    max_redirects: int = Field(
        default=20, ge=0, description="Redirect hops followed before giving up"
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    verify: bool = Field(default=True, description="Verify TLS certificates")

    model_config = ConfigDict(extra="forbid")

    def to_client_config(self) -> HttpClientConfig:
        """Build the HTTP client configuration for these settings."""
        return HttpClientConfig(
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            max_redirects=self.max_redirects,
            user_agent=self.user_agent,
            verify=self.verify,
        )


class FaviconConfig(BaseModel):
    """Favicon service endpoint.

    The request is ``GET <endpoint>?<params>&url=<scheme>://<hostname>&size=<size>``.
    """

    endpoint: str = Field(default=DEFAULT_FAVICON_ENDPOINT)
    params: dict[str, str] = Field(
        default_factory=lambda: {
            "client": "SOCIAL",
            "type": "FAVICON",
            "fallback_opts": "TYPE,SIZE,URL",
        }
    )
    scheme: str = Field(default="https", pattern="^https?$")

    model_config = ConfigDict(extra="forbid")

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Ensure endpoint is an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must start with http:// or https://")
        return v


class ResolverConfig(BaseModel):
    """Identity-provider redirect handling."""

    identity_provider_host: str = Field(default=DEFAULT_IDENTITY_PROVIDER_HOST)
    continue_param: str = Field(default="continue")

    model_config = ConfigDict(extra="forbid")


class GeneratorConfig(BaseModel):
    """Artifact generation settings."""

    variant: IconVariant = Field(default=IconVariant.SINGLE)
    on_collision: CollisionPolicy = Field(default=CollisionPolicy.REUSE)
    concurrent_icon_fetches: bool = Field(
        default=False, description="Fetch all icon sizes at once instead of one by one"
    )
    templates_root: Path | None = Field(
        default=None, description="Template directory (defaults to the bundled templates)"
    )
    output_root: Path | None = Field(
        default=None, description="Parent of the output directory (defaults to cwd)"
    )

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level",
    )
    format: str = Field(default="%(levelname)s: %(message)s")
    structured: bool = Field(default=False, description="Emit JSON lines")
    filename: str | None = Field(default=None, description="Log file (stderr when unset)")

    model_config = ConfigDict(extra="forbid")

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Top-level QuickLaunch configuration.

    Example:
        >>> config = AppConfig.model_validate({"generator": {"variant": "multi"}})
        >>> config.generator.variant.sizes
        (16, 32, 48, 128)
    """

    http: HttpConfig = Field(default_factory=HttpConfig)
    favicon: FaviconConfig = Field(default_factory=FaviconConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")
