from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docsorter.storage.models import StoreResult


@dataclass(frozen=True)
class UploadedFile:
    """A transient upload waiting to be processed.

    ``path`` carries the generated, collision-resistant name that becomes the
    stored filename; ``original_filename`` is what the user uploaded.
    ``inbox_source`` points at the inbox original for files claimed by the
    worker; it stays in place until the file's outcome is known.
    """

    path: Path
    original_filename: str
    size: int
    inbox_source: Path | None = None


@dataclass(frozen=True)
class ProcessingOutcome:
    """Per-file result of a batch run."""

    success: bool
    original_filename: str
    result: StoreResult | None = None
    error: str | None = None

    @classmethod
    def succeeded(cls, original_filename: str, result: StoreResult) -> "ProcessingOutcome":
        return cls(success=True, original_filename=original_filename, result=result)

    @classmethod
    def failed(cls, original_filename: str, error: str) -> "ProcessingOutcome":
        return cls(success=False, original_filename=original_filename, error=error)

    def to_dict(self) -> dict[str, Any]:
        if self.result is None:
            return {"success": False, "file": self.original_filename, "error": self.error}
        return {
            "success": True,
            "file": self.original_filename,
            "result": {
                "folder": self.result.folder,
                "metadata": self.result.metadata.to_dict(),
                "storage_path": str(self.result.storage_path),
            },
        }


@dataclass(frozen=True)
class BatchSummary:
    """Aggregate of one batch; ``outcomes`` follows submission order."""

    total: int
    successful: int
    failed: int
    outcomes: list[ProcessingOutcome] = field(default_factory=list)

    @classmethod
    def from_outcomes(cls, outcomes: list[ProcessingOutcome]) -> "BatchSummary":
        successful = sum(1 for o in outcomes if o.success)
        return cls(
            total=len(outcomes),
            successful=successful,
            failed=len(outcomes) - successful,
            outcomes=outcomes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "successful": self.successful,
            "failed": self.failed,
            "results": [o.to_dict() for o in self.outcomes],
        }
