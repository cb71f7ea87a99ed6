"""Custom exception hierarchy for the flashdeck application."""


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class StorageConnectionError(FlashdeckError):
    """The store could not be reached or its schema could not be synchronized.

    Raised only while bootstrapping storage, never while serving a request.
    """


class UnknownOperationError(FlashdeckError):
    """A storage operation failed in a way the request handler cannot describe.

    Carries the original error as ``cause``. The transport layer decides how
    to surface it; it is never turned into a regular response envelope.
    """

    def __init__(self, message: str, cause: BaseException | object | None = None) -> None:
        """Initialize with message and the error that triggered it."""
        self.cause = cause
        super().__init__(message)
