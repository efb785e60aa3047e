"""Static templates for the click handler and options page."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from quicklaunch.core.errors import TemplateError
from quicklaunch.core.extension.manifest import (
    BACKGROUND_FILE,
    OPTIONS_HTML_FILE,
    OPTIONS_JS_FILE,
)

DEFAULT_TEMPLATES_ROOT: Path = Path(__file__).resolve().parent / "templates"
DEFAULT_URL_PLACEHOLDER = "__DEFAULT_URL__"


class TemplateSet(BaseModel):
    """Template bodies read from a templates root.

    Only the click handler has a substitution point; the options page and
    its script are copied verbatim.
    """

    background_js: str
    options_html: str
    options_js: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def load(cls, root: Path) -> TemplateSet:
        """Read all templates from ``root``.

        Raises:
            TemplateError: If a file is missing or the click handler has no
                placeholder
        """
        bodies: dict[str, str] = {}
        for field, filename in (
            ("background_js", BACKGROUND_FILE),
            ("options_html", OPTIONS_HTML_FILE),
            ("options_js", OPTIONS_JS_FILE),
        ):
            path = root / filename
            try:
                bodies[field] = path.read_text(encoding="utf-8")
            except OSError as e:
                raise TemplateError(f"Cannot read template {path}: {e}") from e

        if DEFAULT_URL_PLACEHOLDER not in bodies["background_js"]:
            raise TemplateError(
                f"Template {root / BACKGROUND_FILE} has no {DEFAULT_URL_PLACEHOLDER} placeholder"
            )
        return cls(**bodies)

    def render_background(self, default_url: str) -> str:
        """Click handler with ``default_url`` substituted verbatim."""
        return self.background_js.replace(DEFAULT_URL_PLACEHOLDER, default_url)
