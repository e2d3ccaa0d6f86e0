"""Custom exception hierarchy for the wordroots application."""


class WordRootsError(Exception):
    """Base exception for all wordroots errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(WordRootsError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class MorphemeContentNotFoundError(NotFoundError):
    """No lesson content stored for a morpheme."""

    def __init__(self, morpheme_id: str) -> None:
        """Initialize with the morpheme ID."""
        self.morpheme_id = morpheme_id
        super().__init__("Content not found")


class MorphemeRegistryNotFoundError(NotFoundError):
    """The morpheme registry file is missing or unreadable."""

    def __init__(self, reason: str = "missing") -> None:
        """Initialize with the reason the registry could not be loaded."""
        self.reason = reason
        super().__init__(f"Morpheme registry not found ({reason})")


class ValidationError(WordRootsError):
    """Validation error."""


class CorruptRecordError(ValidationError):
    """A stored record does not match the expected schema."""

    def __init__(self, record: str, reason: str) -> None:
        """Initialize with the record name and the reason it was rejected."""
        self.record = record
        self.reason = reason
        super().__init__(f"Stored record '{record}' is malformed: {reason}", status_code=500)


class UpstreamError(WordRootsError):
    """The vocabulary webhook answered with a non-success status."""

    def __init__(
        self, message: str, upstream_status: int | None = None, status_code: int = 502
    ) -> None:
        """Initialize with message, the upstream status and a 502 status code."""
        self.upstream_status = upstream_status
        super().__init__(message, status_code=status_code)


class UpstreamTransportError(UpstreamError):
    """The vocabulary webhook could not be reached or returned an unusable payload."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 500 status code."""
        super().__init__(message, status_code=500)


class StorageError(WordRootsError):
    """Filesystem read or write failure."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize with the path involved and the underlying reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Storage failure on {path}: {reason}", status_code=500)
