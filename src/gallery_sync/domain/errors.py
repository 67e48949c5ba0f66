"""Error taxonomy for gallery operations."""

_MISSING_RELATION_CODES = frozenset({"PGRST116", "PGRST205", "42P01"})
_MISSING_RELATION_MARKER = "does not exist"


class GalleryError(Exception):
    """Base class for gallery failures."""


class ValidationError(GalleryError):
    """A required field is missing; no network call was attempted."""


class CapabilityUnavailable(GalleryError):
    """The remote store has no table backing the requested feature."""

    def __init__(self, capability: str, detail: str | None = None) -> None:
        message = f"{capability} capability unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.capability = capability


class RemoteError(GalleryError):
    """Transport or server failure talking to the remote store."""

    def __init__(self, operation: str, detail: str | None = None) -> None:
        message = f"{operation} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.operation = operation


class PartialFailure(RemoteError):
    """One half of a two-step remote operation succeeded and was left in place."""

    def __init__(
        self, operation: str, detail: str | None = None, orphan_url: str | None = None
    ) -> None:
        super().__init__(operation, detail)
        self.orphan_url = orphan_url


def is_missing_relation(code: str | None, message: str | None) -> bool:
    """Return whether a remote error means the backing table is not provisioned."""
    if code and code in _MISSING_RELATION_CODES:
        return True
    return bool(message) and _MISSING_RELATION_MARKER in message
