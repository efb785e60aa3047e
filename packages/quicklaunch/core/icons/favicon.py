"""Client for the remote favicon service."""

from __future__ import annotations

import logging

from quicklaunch.core.api.http import ApiError, AsyncApiClient, TimeoutError
from quicklaunch.core.config.models import FaviconConfig
from quicklaunch.core.errors import FetchErrorKind
from quicklaunch.core.icons.models import FetchResult, err_result, ok_result

logger = logging.getLogger(__name__)


class FaviconService:
    """Fetches favicon images for a hostname at a given pixel size.

    The payload is returned as-is; its image format is never checked.

    Args:
        client: HTTP client
        config: Endpoint and fixed query parameters
    """

    def __init__(self, client: AsyncApiClient, config: FaviconConfig | None = None) -> None:
        self._client = client
        self._config = config or FaviconConfig()

    def request_params(self, hostname: str, size: int) -> dict[str, str]:
        """Query parameters for one icon request.

        Example:
            >>> FaviconService(client).request_params("mail.google.com", 64)["url"]
            'https://mail.google.com'
        """
        return {
            **self._config.params,
            "url": f"{self._config.scheme}://{hostname}",
            "size": str(size),
        }

    async def fetch(self, hostname: str, size: int) -> FetchResult:
        """Fetch one icon.

        Args:
            hostname: Site whose favicon is wanted
            size: Pixel size

        Returns:
            ``ok_result`` with the payload on 2xx, otherwise ``err_result``
        """
        try:
            response = await self._client.get(
                self._config.endpoint,
                params=self.request_params(hostname, size),
                purpose="favicon",
            )
        except TimeoutError as e:
            return err_result(size, FetchErrorKind.TIMEOUT, str(e))
        except ApiError as e:
            if e.status_code is not None:
                return err_result(
                    size,
                    FetchErrorKind.STATUS,
                    f"Failed to fetch favicon. Status: {e.status_code}",
                    status_code=e.status_code,
                )
            return err_result(size, FetchErrorKind.NETWORK, str(e))

        logger.debug("Fetched %dpx favicon for %s (%d bytes)", size, hostname, len(response.content))
        return ok_result(size, response.content, status_code=response.status_code)
