"""Browser extension data model, manifest and templates."""

from quicklaunch.core.extension.manifest import (
    build_manifest,
    extension_name,
    icon_filename,
    output_dir_name,
)
from quicklaunch.core.extension.models import (
    ArtifactSet,
    ExtensionManifest,
    GenerationResult,
    IconRecord,
    RawRequest,
)
from quicklaunch.core.extension.output import prepare_output_dir
from quicklaunch.core.extension.templates import DEFAULT_TEMPLATES_ROOT, TemplateSet

__all__ = [
    "ArtifactSet",
    "ExtensionManifest",
    "GenerationResult",
    "IconRecord",
    "RawRequest",
    "TemplateSet",
    "DEFAULT_TEMPLATES_ROOT",
    "build_manifest",
    "extension_name",
    "icon_filename",
    "output_dir_name",
    "prepare_output_dir",
]
