"""Fetch every configured icon size for a hostname."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from quicklaunch.core.extension.models import IconRecord
from quicklaunch.core.icons.favicon import FaviconService
from quicklaunch.core.icons.models import FetchResult
from quicklaunch.core.icons.policy import AbortOnFirstFailure, FetchPolicy

logger = logging.getLogger(__name__)


async def acquire_icons(
    service: FaviconService,
    hostname: str,
    sizes: Sequence[int],
    *,
    policy: FetchPolicy | None = None,
    concurrent: bool = False,
) -> list[IconRecord]:
    """Fetch one icon per size and apply ``policy`` to the results.

    Sequential mode stops requesting further sizes as soon as the policy
    says so. Concurrent mode issues every request at once and applies the
    policy to the full result list, so a failure in any size still aborts
    before anything is reported as success.

    Args:
        service: Favicon service client
        hostname: Resolved hostname
        sizes: Icon sizes, in manifest order
        policy: Failure policy (AbortOnFirstFailure by default)
        concurrent: Fetch all sizes concurrently

    Returns:
        Icon records in the order of ``sizes``

    Raises:
        IconFetchError: If the policy rejects the results
    """
    policy = policy or AbortOnFirstFailure()

    results: list[FetchResult]
    if concurrent:
        results = list(await asyncio.gather(*(service.fetch(hostname, s) for s in sizes)))
    else:
        results = []
        for size in sizes:
            result = await service.fetch(hostname, size)
            results.append(result)
            if policy.should_stop(result):
                logger.debug("Stopping icon fetches after %dpx failed", size)
                break

    return policy.collect(results)
