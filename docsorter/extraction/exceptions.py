class ExtractionError(Exception):
    """Raised when text cannot be extracted from a file."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when no adapter is registered for a file extension."""
