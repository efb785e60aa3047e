"""Manifest and naming rules for generated extensions."""

from __future__ import annotations

from collections.abc import Sequence

from quicklaunch.core.extension.models import (
    ActionSpec,
    BackgroundSpec,
    ExtensionManifest,
    OptionsUISpec,
    RawRequest,
)
from quicklaunch.core.resolver.models import ResolvedIdentity
from quicklaunch.core.utils.formatting import sanitize_for_filename

OUTPUT_DIR_PREFIX = "quick-launch-"
NAME_PREFIX = "QuickLaunch: "

MANIFEST_FILE = "manifest.json"
BACKGROUND_FILE = "background.js"
OPTIONS_HTML_FILE = "options.html"
OPTIONS_JS_FILE = "options.js"


def icon_filename(size: int) -> str:
    """File name of the icon for ``size`` pixels."""
    return f"icon-{size}.png"


def output_dir_name(display_title: str, suffix: str | None = None) -> str:
    """Directory name for an extension.

    Example:
        >>> output_dir_name("mail.google.com", "beta")
        'quick-launch-mail.google.com-beta'
    """
    name = OUTPUT_DIR_PREFIX + sanitize_for_filename(display_title)
    if suffix:
        name += "-" + sanitize_for_filename(suffix)
    return name


def extension_name(display_title: str, suffix: str | None = None) -> str:
    """Human-readable extension name, e.g. ``QuickLaunch: mail.google.com - beta``."""
    name = NAME_PREFIX + display_title
    if suffix:
        name += f" - {suffix}"
    return name


def build_manifest(
    raw: RawRequest,
    identity: ResolvedIdentity,
    icon_sizes: Sequence[int],
) -> ExtensionManifest:
    """Build the manifest for ``raw`` named after ``identity``.

    Args:
        raw: Original request; its URL is embedded verbatim
        identity: Resolved identity used for naming
        icon_sizes: Sizes that will be written, one icon file each

    Returns:
        Manifest whose icon paths match ``icon_filename`` for every size
    """
    icons = {size: icon_filename(size) for size in icon_sizes}
    return ExtensionManifest(
        name=extension_name(identity.display_title, raw.suffix),
        description=f"Opens a configurable URL when clicked. Default: {raw.url}",
        icons=icons,
        action=ActionSpec(
            default_title=f"Go to {identity.display_title}",
            default_icon={str(size): path for size, path in icons.items()},
        ),
        background=BackgroundSpec(service_worker=BACKGROUND_FILE),
        options_ui=OptionsUISpec(page=OPTIONS_HTML_FILE),
    )
