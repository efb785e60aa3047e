"""End-to-end run: resolve the target URL, then generate the extension."""

from __future__ import annotations

import logging

import httpx

from quicklaunch.core.api.http import AsyncApiClient
from quicklaunch.core.config.models import AppConfig
from quicklaunch.core.extension.models import GenerationResult, RawRequest
from quicklaunch.core.generator import ExtensionGenerator
from quicklaunch.core.icons import FaviconService
from quicklaunch.core.io import FileSystem, RealFileSystem
from quicklaunch.core.resolver import SiteResolver

logger = logging.getLogger(__name__)


async def create_extension(
    request: RawRequest,
    config: AppConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    fs: FileSystem | None = None,
) -> GenerationResult:
    """Resolve ``request.url`` and generate its extension.

    Resolution only decides naming and which favicon to fetch; it never
    fails the run. Generation failures propagate.

    Args:
        request: Validated user request
        config: Application config (defaults when None)
        transport: Optional HTTPX transport (tests use httpx.MockTransport)
        fs: Filesystem to write into (RealFileSystem when None)

    Returns:
        GenerationResult for the written directory

    Raises:
        GenerationError: On any fatal generation failure
    """
    config = config or AppConfig()

    async with AsyncApiClient(config.http.to_client_config(), transport=transport) as client:
        identity = await SiteResolver(client, config.resolver).resolve(request.url)
        if identity.fallback:
            logger.info("Naming %s from the raw URL", identity.hostname)

        generator = ExtensionGenerator(
            FaviconService(client, config.favicon),
            fs or RealFileSystem(),
            config=config.generator,
        )
        return await generator.generate(request, identity)
