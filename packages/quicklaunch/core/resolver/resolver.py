"""Resolve a target URL to the site it ultimately represents.

Resolution only follows HTTP-level redirects and inspects URL parameters.
It never raises outward: any failure degrades to an identity computed from
the raw input URL.
"""

from __future__ import annotations

import logging

from quicklaunch.core.api.http import ApiError, AsyncApiClient
from quicklaunch.core.config.models import ResolverConfig
from quicklaunch.core.errors import InvalidUrlError
from quicklaunch.core.resolver.models import ResolvedIdentity
from quicklaunch.core.urls import host_of, is_absolute_url, query_param

logger = logging.getLogger(__name__)


def identity_from_url(url: str, *, fallback: bool = False) -> ResolvedIdentity:
    """Build an identity straight from ``url`` with no network access.

    Raises:
        InvalidUrlError: If ``url`` is not an absolute URL
    """
    hostname = host_of(url)
    return ResolvedIdentity(
        hostname=hostname,
        display_title=hostname,
        resolved_url=url,
        fallback=fallback,
    )


def apply_identity_provider_rule(
    identity: ResolvedIdentity,
    *,
    identity_provider_host: str,
    continue_param: str = "continue",
) -> ResolvedIdentity:
    """Swap a login gateway host for the service it will continue to.

    Only applies when the host is exactly ``identity_provider_host``; a
    ``continue`` parameter on any other host is ignored. An empty or
    non-absolute ``continue`` value keeps the identity unchanged.

    Example:
        >>> ident = identity_from_url(
        ...     "https://accounts.google.com/signin?continue=https://mail.google.com/mail/"
        ... )
        >>> apply_identity_provider_rule(
        ...     ident, identity_provider_host="accounts.google.com"
        ... ).hostname
        'mail.google.com'
    """
    if identity.hostname != identity_provider_host:
        return identity

    target = query_param(identity.resolved_url, continue_param)
    if not target or not is_absolute_url(target):
        if target:
            logger.debug("Ignoring unparseable %s=%r", continue_param, target)
        return identity

    hostname = host_of(target)
    logger.debug("Identity provider redirect: %s -> %s", identity.hostname, hostname)
    return identity.model_copy(update={"hostname": hostname, "display_title": hostname})


class SiteResolver:
    """Follows redirects from a target URL and derives its identity.

    Args:
        client: HTTP client; its config bounds redirects and timeouts
        config: Identity-provider settings
    """

    def __init__(self, client: AsyncApiClient, config: ResolverConfig | None = None) -> None:
        self._client = client
        self._config = config or ResolverConfig()

    async def resolve(self, url: str) -> ResolvedIdentity:
        """Resolve ``url`` to a ResolvedIdentity.

        Args:
            url: Absolute input URL

        Returns:
            Identity from the final post-redirect URL, or from ``url`` itself
            when fetching or parsing fails

        Raises:
            InvalidUrlError: Only if ``url`` itself is not absolute, since no
                fallback can be computed then
        """
        try:
            response = await self._client.get(
                url, check_status=False, read_body=False, purpose="resolve"
            )
            identity = identity_from_url(str(response.url))
        except (ApiError, InvalidUrlError) as e:
            logger.warning(
                "Could not fetch or parse page data for %s (%s). Using fallback values.",
                url,
                e,
            )
            return identity_from_url(url, fallback=True)

        identity = apply_identity_provider_rule(
            identity,
            identity_provider_host=self._config.identity_provider_host,
            continue_param=self._config.continue_param,
        )
        logger.info("Resolved %s to %s", url, identity.hostname)
        return identity
