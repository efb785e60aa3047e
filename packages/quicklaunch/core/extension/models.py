"""Data model for a generated browser extension."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quicklaunch.core.resolver.models import ResolvedIdentity
from quicklaunch.core.urls import parse_absolute_url

REQUIRED_PERMISSIONS: tuple[str, ...] = ("tabs", "storage")


class RawRequest(BaseModel):
    """What the user asked for: a target URL and an optional naming suffix.

    Attributes:
        url: Absolute target URL (trimmed), embedded verbatim as the click default
        suffix: Free text appended to names only (None when absent)

    Build through ``RawRequest.parse`` to get InvalidUrlError instead of a
    pydantic ValidationError for a bad URL.
    """

    url: str
    suffix: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def parse(cls, url: str, suffix: str | None = None) -> RawRequest:
        """Validate ``url`` and build a request.

        Surrounding whitespace is trimmed before validation, so the stored
        URL is exactly the one that was checked.

        Raises:
            InvalidUrlError: If ``url`` is missing or not absolute
        """
        url = (url or "").strip()
        parse_absolute_url(url)
        return cls(url=url, suffix=suffix)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute URL and store it without surrounding whitespace."""
        v = v.strip()
        parse_absolute_url(v)
        return v

    @field_validator("suffix")
    @classmethod
    def empty_suffix_is_none(cls, v: str | None) -> str | None:
        """Treat an empty suffix as absent; any other text, even blanks, is kept."""
        return v or None


class IconRecord(BaseModel):
    """One fetched icon image."""

    size: int = Field(gt=0)
    data: bytes

    model_config = ConfigDict(frozen=True)


class ActionSpec(BaseModel):
    """Toolbar button declaration."""

    default_title: str
    default_icon: dict[str, str]

    model_config = ConfigDict(frozen=True, extra="forbid")


class BackgroundSpec(BaseModel):
    """Event-handler entry point."""

    service_worker: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class OptionsUISpec(BaseModel):
    """Options page entry point."""

    page: str
    open_in_tab: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")


class ExtensionManifest(BaseModel):
    """Typed ``manifest.json`` contents.

    Icon maps are keyed by pixel size; the serialized form uses string keys
    as browsers expect.
    """

    manifest_version: int = 3
    name: str = Field(min_length=1)
    version: str = Field(default="1.0", pattern=r"^\d+(\.\d+){0,3}$")
    description: str
    icons: dict[int, str]
    action: ActionSpec
    background: BackgroundSpec
    options_ui: OptionsUISpec
    permissions: tuple[str, ...] = REQUIRED_PERMISSIONS

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("permissions")
    @classmethod
    def unique_permissions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Permissions behave as a set; keep first-seen order."""
        return tuple(dict.fromkeys(v))

    def referenced_files(self) -> set[str]:
        """Every file path the manifest points at."""
        return {
            *self.icons.values(),
            *self.action.default_icon.values(),
            self.background.service_worker,
            self.options_ui.page,
        }

    def to_json(self) -> str:
        """Serialize as pretty-printed manifest JSON."""
        data = self.model_dump(mode="json")
        data["icons"] = {str(size): path for size, path in self.icons.items()}
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


class ArtifactSet(BaseModel):
    """Full logical content of one generated extension.

    ``icons`` is empty until the icon fetches have succeeded.
    """

    manifest: ExtensionManifest
    background_js: str
    options_html: str
    options_js: str
    icons: list[IconRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class GenerationResult(BaseModel):
    """Outcome of a successful generation."""

    output_dir: Path
    identity: ResolvedIdentity
    artifacts: ArtifactSet | None = None
    written_files: list[Path] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
