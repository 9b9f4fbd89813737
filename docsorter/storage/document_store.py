import json
import shutil
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import ClassVar

from docsorter.categories.normalizer import FALLBACK_CATEGORY, normalize_folder_name
from docsorter.classification.models import ClassificationResult
from docsorter.logging.logger import Log
from docsorter.storage.exceptions import StorageIOError
from docsorter.storage.models import (
    METADATA_SUFFIX,
    DeleteFailure,
    DeleteResult,
    DocumentMetadata,
    PreviewFile,
    StoreResult,
    sidecar_name,
)

DEFAULT_FOLDER = "Uncategorized"


def _is_plain_name(name: str) -> bool:
    """True if ``name`` is a single path component that stays inside its parent."""
    if not name or name in (".", ".."):
        return False
    return "/" not in name and "\\" not in name and Path(name).name == name


class DocumentStore:
    """Category-folder tree of documents with one JSON sidecar per document.

    Layout::

        <root>/<folder>/<stored_filename>
        <root>/<folder>/<stored stem>_metadata.json

    Delete and list operations never raise; write failures in ``store`` are
    raised as StorageIOError.
    """

    CONTENT_TYPES: ClassVar[dict[str, str]] = {
        ".pdf": "application/pdf",
        ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        ".txt": "text/plain",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
    }

    def __init__(self, root: Path, clock: Callable[[], datetime] | None = None) -> None:
        self._root = root
        self._clock = clock or (lambda: datetime.now(UTC))
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def store(
        self,
        file_path: Path,
        classification: ClassificationResult,
        original_filename: str,
    ) -> StoreResult:
        """Copy ``file_path`` into its category folder and write its sidecar.

        The stored filename is the (already unique) name of ``file_path``.

        Raises:
            StorageIOError: if any write fails.
        """
        folder = normalize_folder_name(classification.suggested_folder_name or DEFAULT_FOLDER)
        if not _is_plain_name(folder):
            Log.warning(f"Unusable folder name {folder!r}, filing under {FALLBACK_CATEGORY}")
            folder = FALLBACK_CATEGORY
        folder_path = self._root / folder

        try:
            folder_path.mkdir(parents=True, exist_ok=True)
            metadata = DocumentMetadata(
                original_filename=original_filename,
                stored_filename=file_path.name,
                category=classification.category or DEFAULT_FOLDER,
                subcategory=classification.subcategory or "",
                confidence=classification.confidence or 0.0,
                description=classification.description or "",
                upload_timestamp=self._clock().isoformat(),
                file_size=file_path.stat().st_size,
                file_extension=file_path.suffix,
            )
            metadata_path = folder_path / sidecar_name(file_path.name)
            metadata_path.write_text(
                json.dumps(metadata.to_dict(), indent=2), encoding="utf-8"
            )
            storage_path = folder_path / file_path.name
            shutil.copy2(file_path, storage_path)
        except OSError as exc:
            raise StorageIOError(
                f"Failed to store {original_filename} in {folder!r}: {exc}"
            ) from exc

        Log.info(f"Stored {original_filename} as {folder}/{file_path.name}")
        return StoreResult(folder=folder, metadata=metadata, storage_path=storage_path)

    def list_documents(self) -> dict[str, list[DocumentMetadata]]:
        """Map every folder under the root to its documents.

        Empty folders are listed with an empty list. Sidecars whose data file
        is missing, or that cannot be parsed, are skipped.
        """
        documents: dict[str, list[DocumentMetadata]] = {}
        try:
            entries = sorted(self._root.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            Log.error(f"Cannot read storage root {self._root}: {exc}")
            return documents

        for folder_path in entries:
            if not folder_path.is_dir():
                continue
            documents[folder_path.name] = [
                metadata
                for sidecar in sorted(folder_path.glob(f"*{METADATA_SUFFIX}"))
                if (metadata := self._read_sidecar(sidecar)) is not None
            ]
        return documents

    def delete_document(self, folder: str, stored_filename: str) -> DeleteResult:
        """Remove a stored document and its sidecar; both must exist."""
        if not (_is_plain_name(folder) and _is_plain_name(stored_filename)):
            return DeleteResult.failure(
                DeleteFailure.INVALID_NAME, f"Invalid document name: {folder}/{stored_filename}"
            )

        folder_path = self._root / folder
        file_path = folder_path / stored_filename
        metadata_path = folder_path / sidecar_name(stored_filename)

        if not file_path.is_file():
            Log.warning(f"File not found: {file_path}")
            return DeleteResult.failure(DeleteFailure.NOT_FOUND, "File not found")
        if not metadata_path.is_file():
            Log.warning(f"Metadata file not found: {metadata_path}")
            return DeleteResult.failure(
                DeleteFailure.METADATA_NOT_FOUND, "Metadata file not found"
            )

        try:
            file_path.unlink()
            metadata_path.unlink()
        except OSError as exc:
            Log.error(f"Error deleting {folder}/{stored_filename}: {exc}")
            return DeleteResult.failure(DeleteFailure.IO_ERROR, str(exc))

        Log.info(f"Deleted document {folder}/{stored_filename}")
        return DeleteResult.ok(f"Document '{stored_filename}' deleted from '{folder}'")

    def delete_folder(self, folder: str) -> DeleteResult:
        """Recursively remove a folder and everything in it."""
        if not _is_plain_name(folder):
            return DeleteResult.failure(DeleteFailure.INVALID_NAME, f"Invalid folder name: {folder}")

        folder_path = self._root / folder
        if not folder_path.exists():
            Log.warning(f"Folder not found: {folder_path}")
            return DeleteResult.failure(DeleteFailure.NOT_FOUND, "Folder not found")
        if not folder_path.is_dir():
            Log.warning(f"Path is not a directory: {folder_path}")
            return DeleteResult.failure(DeleteFailure.NOT_A_DIRECTORY, "Path is not a directory")

        try:
            shutil.rmtree(folder_path)
        except OSError as exc:
            Log.error(f"Error deleting folder {folder}: {exc}")
            return DeleteResult.failure(DeleteFailure.IO_ERROR, str(exc))

        Log.info(f"Deleted folder {folder}")
        return DeleteResult.ok(f"Folder '{folder}' and all its contents have been deleted")

    def preview(self, folder: str, filename: str) -> PreviewFile | None:
        """Resolve a stored file for display, or None if it is not there."""
        if not (_is_plain_name(folder) and _is_plain_name(filename)):
            return None
        path = self._root / folder / filename
        if not path.is_file():
            return None
        content_type = self.CONTENT_TYPES.get(path.suffix.lower(), "application/octet-stream")
        return PreviewFile(path=path, content_type=content_type, size=path.stat().st_size)

    def _read_sidecar(self, sidecar: Path) -> DocumentMetadata | None:
        try:
            metadata = DocumentMetadata.from_dict(json.loads(sidecar.read_text(encoding="utf-8")))
        except (OSError, ValueError, TypeError) as exc:
            Log.warning(f"Skipping unreadable metadata {sidecar}: {exc}")
            return None
        if not (sidecar.parent / metadata.stored_filename).is_file():
            Log.warning(f"Skipping metadata without its document: {sidecar}")
            return None
        return metadata
