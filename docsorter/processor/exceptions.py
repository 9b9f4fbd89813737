class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UploadRejectedError(ProcessorError):
    """Raised when an upload request fails intake validation."""
