from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any

METADATA_SUFFIX = "_metadata.json"


def sidecar_name(stored_filename: str) -> str:
    """Metadata filename paired with a stored document: ``<stem>_metadata.json``."""
    return f"{Path(stored_filename).stem}{METADATA_SUFFIX}"


@dataclass(frozen=True)
class DocumentMetadata:
    """Contents of one JSON sidecar, in on-disk key order."""

    original_filename: str
    stored_filename: str
    category: str
    subcategory: str
    confidence: float
    description: str
    upload_timestamp: str
    file_size: int
    file_extension: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocumentMetadata":
        """Build from a parsed sidecar, ignoring unknown keys.

        Raises:
            TypeError: if ``data`` is not an object or a required key is missing.
        """
        if not isinstance(data, dict):
            raise TypeError("metadata must be a JSON object")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class StoreResult:
    folder: str
    metadata: DocumentMetadata
    storage_path: Path


class DeleteFailure(str, Enum):
    NOT_FOUND = "not_found"
    METADATA_NOT_FOUND = "metadata_not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    INVALID_NAME = "invalid_name"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a delete operation. Failures carry a typed reason."""

    success: bool
    message: str
    reason: DeleteFailure | None = None

    @classmethod
    def ok(cls, message: str) -> "DeleteResult":
        return cls(success=True, message=message)

    @classmethod
    def failure(cls, reason: DeleteFailure, message: str) -> "DeleteResult":
        return cls(success=False, message=message, reason=reason)


@dataclass(frozen=True)
class PreviewFile:
    path: Path
    content_type: str
    size: int
