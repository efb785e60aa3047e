"""Generator: turns a request and its resolved identity into an extension directory."""

from __future__ import annotations

from pathlib import Path

from quicklaunch.core.config.models import GeneratorConfig
from quicklaunch.core.errors import ArtifactWriteError, GenerationError
from quicklaunch.core.extension.manifest import (
    BACKGROUND_FILE,
    MANIFEST_FILE,
    OPTIONS_HTML_FILE,
    OPTIONS_JS_FILE,
    build_manifest,
    icon_filename,
    output_dir_name,
)
from quicklaunch.core.extension.models import ArtifactSet, GenerationResult, RawRequest
from quicklaunch.core.extension.output import prepare_output_dir
from quicklaunch.core.extension.templates import DEFAULT_TEMPLATES_ROOT, TemplateSet
from quicklaunch.core.icons import AbortOnFirstFailure, FaviconService, FetchPolicy, acquire_icons
from quicklaunch.core.io import AbsolutePath, FileSystem, absolute_path
from quicklaunch.core.resolver.models import ResolvedIdentity
from quicklaunch.core.utils.logging import get_logger

logger = get_logger(__name__)


class ExtensionGenerator:
    """Writes a complete extension for one request.

    Steps run in a fixed order and the first failure aborts the rest:
    output directory, manifest, click handler, options page and script,
    then icons. Files written before a failure are left in place.

    Args:
        favicons: Favicon service client
        fs: Filesystem to write into
        config: Variant, collision policy and fetch mode
        templates_root: Directory holding background.js, options.html and
            options.js (defaults to the bundled templates)
        output_root: Parent of the output directory (defaults to cwd)
        policy: Icon failure policy (AbortOnFirstFailure by default)
    """

    def __init__(
        self,
        favicons: FaviconService,
        fs: FileSystem,
        *,
        config: GeneratorConfig | None = None,
        templates_root: Path | None = None,
        output_root: Path | None = None,
        policy: FetchPolicy | None = None,
    ) -> None:
        self._favicons = favicons
        self._fs = fs
        self._config = config or GeneratorConfig()
        self.templates_root = Path(
            templates_root or self._config.templates_root or DEFAULT_TEMPLATES_ROOT
        )
        self.output_root: AbsolutePath = absolute_path(
            output_root or self._config.output_root or Path.cwd()
        )
        self._policy = policy or AbortOnFirstFailure()

    @property
    def icon_sizes(self) -> tuple[int, ...]:
        """Sizes fetched for the configured variant."""
        return self._config.variant.sizes

    def build_text_artifacts(
        self, raw: RawRequest, identity: ResolvedIdentity
    ) -> ArtifactSet:
        """Build manifest and script bodies (no icons, no I/O besides templates).

        Raises:
            TemplateError: If the templates cannot be loaded
        """
        templates = TemplateSet.load(self.templates_root)
        return ArtifactSet(
            manifest=build_manifest(raw, identity, self.icon_sizes),
            # The unresolved URL is the functional default; resolution only names things
            background_js=templates.render_background(raw.url),
            options_html=templates.options_html,
            options_js=templates.options_js,
        )

    async def generate(self, raw: RawRequest, identity: ResolvedIdentity) -> GenerationResult:
        """Generate the extension directory.

        Args:
            raw: Original request
            identity: Resolved identity

        Returns:
            Output directory, the full artifact set and the files written

        Raises:
            GenerationError: On template, directory, write or icon failure,
                or if the manifest names a file that was not written
        """
        log = get_logger(__name__, hostname=identity.hostname)
        name = output_dir_name(identity.display_title, raw.suffix)
        output_dir = await prepare_output_dir(
            self._fs, self.output_root, name, self._config.on_collision
        )
        log.info("Generating extension in %s", output_dir)

        artifacts = self.build_text_artifacts(raw, identity)
        written: list[Path] = []

        for filename, body in (
            (MANIFEST_FILE, artifacts.manifest.to_json()),
            (BACKGROUND_FILE, artifacts.background_js),
            (OPTIONS_HTML_FILE, artifacts.options_html),
            (OPTIONS_JS_FILE, artifacts.options_js),
        ):
            written.append(await self._write(output_dir, filename, body))

        icons = await acquire_icons(
            self._favicons,
            identity.hostname,
            self.icon_sizes,
            policy=self._policy,
            concurrent=self._config.concurrent_icon_fetches,
        )
        artifacts = artifacts.model_copy(update={"icons": icons})
        for icon in artifacts.icons:
            written.append(await self._write(output_dir, icon_filename(icon.size), icon.data))
        log.info("Wrote %d icon(s)", len(artifacts.icons))

        missing = artifacts.manifest.referenced_files() - {path.name for path in written}
        if missing:
            raise GenerationError(
                f"Manifest references files that were not written: {', '.join(sorted(missing))}"
            )

        return GenerationResult(
            output_dir=Path(output_dir),
            identity=identity,
            artifacts=artifacts,
            written_files=written,
        )

    async def _write(self, directory: AbsolutePath, filename: str, body: str | bytes) -> Path:
        path = self._fs.join(directory, filename)
        try:
            if isinstance(body, bytes):
                await self._fs.write_bytes(path, body)
            else:
                await self._fs.write_text(path, body)
        except OSError as e:
            raise ArtifactWriteError(f"Cannot write {path}: {e}") from e
        logger.debug("Wrote %s", path)
        return Path(path)
