"""Domain error types."""


class DetectionUnavailableError(Exception):
    """Raised by a signals source when it cannot supply the requested data."""


class CopyFailedError(Exception):
    """Raised when text cannot be placed on the system clipboard."""
