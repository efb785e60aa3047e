"""Failure policies applied to an aggregated set of icon fetches."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from quicklaunch.core.errors import FetchErrorKind, IconFetchError
from quicklaunch.core.extension.models import IconRecord
from quicklaunch.core.icons.models import FetchResult


class FetchPolicy(Protocol):
    """Decides whether a sequence of fetch results is acceptable."""

    def should_stop(self, result: FetchResult) -> bool:
        """Return True if no further fetches should be attempted."""
        ...

    def collect(self, results: Sequence[FetchResult]) -> list[IconRecord]:
        """Turn results into icon records, or raise IconFetchError."""
        ...


class AbortOnFirstFailure:
    """All-or-nothing: any failed size fails the whole icon set.

    No retry and no placeholder image. Results are inspected in the given
    order, so the reported failure is the first failed size.
    """

    def should_stop(self, result: FetchResult) -> bool:
        return not result.ok

    def collect(self, results: Sequence[FetchResult]) -> list[IconRecord]:
        records: list[IconRecord] = []
        for result in results:
            if not result.ok:
                raise IconFetchError(
                    f"Error downloading {result.size}px favicon: {result.error}",
                    size=result.size,
                    kind=result.error_kind or FetchErrorKind.NETWORK,
                    status_code=result.status_code,
                )
            assert result.data is not None
            records.append(IconRecord(size=result.size, data=result.data))
        return records
