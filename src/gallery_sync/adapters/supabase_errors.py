"""Translation of Supabase client errors into gallery errors."""

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import TypeVar

import httpx
from supabase import PostgrestAPIError, StorageException

from gallery_sync.domain.errors import (
    CapabilityUnavailable,
    RemoteError,
    is_missing_relation,
)

T = TypeVar("T")


@contextmanager
def translate_errors(operation: str, capability: str | None = None) -> Iterator[None]:
    """Re-raise client failures as `RemoteError` or `CapabilityUnavailable`.

    Only operations that name a `capability` may degrade; a missing photos
    table is an ordinary remote failure.
    """
    try:
        yield
    except PostgrestAPIError as error:
        if capability and is_missing_relation(error.code, error.message):
            raise CapabilityUnavailable(capability, error.message) from error
        raise RemoteError(operation, error.message) from error
    except (StorageException, httpx.HTTPError) as error:
        raise RemoteError(operation, str(error)) from error


def parse_rows(
    operation: str,
    rows: Iterable[dict[str, object]],
    parser: Callable[[dict[str, object]], T],
) -> list[T]:
    """Parse response rows, reporting malformed data as a `RemoteError`."""
    try:
        return [parser(row) for row in rows]
    except (KeyError, TypeError, ValueError) as error:
        raise RemoteError(operation, f"malformed row: {error!r}") from error
