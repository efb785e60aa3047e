"""Exception hierarchy for QuickLaunch.

Resolution problems never surface here: the resolver degrades to a fallback
identity. Everything below is either a usage error or fatal to a run.
"""

from __future__ import annotations

from enum import Enum


class QuickLaunchError(Exception):
    """Base exception for all QuickLaunch errors."""


class InvalidUrlError(QuickLaunchError, ValueError):
    """Input URL is missing or not a well-formed absolute URL."""


class ConfigError(QuickLaunchError):
    """Configuration could not be loaded or validated."""


class GenerationError(QuickLaunchError):
    """Fatal failure while generating the extension artifacts."""


class FetchErrorKind(str, Enum):
    """Why an icon fetch failed."""

    STATUS = "status"
    NETWORK = "network"
    TIMEOUT = "timeout"


class IconFetchError(GenerationError):
    """An icon could not be fetched from the favicon service.

    Attributes:
        size: Requested icon size in pixels
        kind: Failure category
        status_code: HTTP status (only for ``FetchErrorKind.STATUS``)
    """

    def __init__(
        self,
        message: str,
        *,
        size: int,
        kind: FetchErrorKind,
        status_code: int | None = None,
    ) -> None:
        self.size = size
        self.kind = kind
        self.status_code = status_code
        super().__init__(message)


class ArtifactWriteError(GenerationError):
    """An artifact could not be written to the output directory."""


class OutputCollisionError(GenerationError):
    """Output directory already exists and the collision policy forbids reuse."""


class TemplateError(GenerationError):
    """A template file is missing or malformed."""
