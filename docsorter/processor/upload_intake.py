import shutil
import uuid
from collections.abc import Iterable, Sequence
from pathlib import Path

from docsorter.logging.logger import Log
from docsorter.processor.exceptions import ProcessorError, UploadRejectedError
from docsorter.processor.models import UploadedFile

FAILED_INBOX_DIR = "failed"


def generate_stored_name(original_filename: str) -> str:
    """Collision-resistant transient/stored name keeping the original extension."""
    return f"files-{uuid.uuid4().hex}{Path(original_filename).suffix.lower()}"


class UploadIntake:
    """Validates incoming files and stages them in the transient upload directory.

    Staged files get a generated name; that name later becomes the stored
    filename, which keeps stored names unique within every folder. Sources
    are always copied, so the processor may delete the staged file whatever
    the outcome.
    """

    def __init__(
        self,
        upload_dir: Path,
        allowed_extensions: Iterable[str],
        max_files: int,
    ) -> None:
        self._upload_dir = upload_dir
        self._allowed_extensions = frozenset(ext.lower() for ext in allowed_extensions)
        self._max_files = max_files
        self._upload_dir.mkdir(parents=True, exist_ok=True)

    def is_allowed(self, path: Path) -> bool:
        return path.suffix.lower() in self._allowed_extensions

    def accept(self, sources: Sequence[Path]) -> list[UploadedFile]:
        """Validate a whole request, then copy each file into the upload dir.

        Nothing is staged unless every file passes validation.

        Raises:
            UploadRejectedError: on an empty request, too many files, a
                disallowed extension, or a missing source file.
        """
        self._validate(sources)
        return self._stage_all(sources, from_inbox=False)

    def claim_inbox(self, inbox_dir: Path) -> list[UploadedFile]:
        """Stage copies of up to ``max_files`` allowed inbox files, oldest first.

        The originals stay in ``inbox_dir`` until ``settle_inbox_file`` is
        called with their outcome. Files that vanish while being listed are
        skipped.
        """
        if not inbox_dir.is_dir():
            return []
        candidates: list[tuple[float, str, Path]] = []
        for path in inbox_dir.iterdir():
            if not self.is_allowed(path):
                continue
            try:
                if not path.is_file():
                    continue
                candidates.append((path.stat().st_mtime, path.name, path))
            except FileNotFoundError:
                Log.debug(f"Inbox file disappeared before it was claimed: {path}")
        if not candidates:
            return []
        candidates.sort()
        oldest = [path for _mtime, _name, path in candidates[: self._max_files]]
        return self._stage_all(oldest, from_inbox=True)

    def settle_inbox_file(self, upload: UploadedFile, succeeded: bool) -> None:
        """Remove the inbox original of a stored file, or park it under ``failed/``.

        Raises:
            OSError: if the original cannot be removed or moved.
        """
        source = upload.inbox_source
        if source is None:
            return
        if succeeded:
            source.unlink(missing_ok=True)
            return
        failed_dir = source.parent / FAILED_INBOX_DIR
        failed_dir.mkdir(exist_ok=True)
        destination = failed_dir / source.name
        if destination.exists():
            destination = failed_dir / f"{source.stem}-{uuid.uuid4().hex[:8]}{source.suffix}"
        shutil.move(source, destination)
        Log.warning(f"Kept unsorted inbox file at {destination}")

    def _validate(self, sources: Sequence[Path]) -> None:
        if not sources:
            raise UploadRejectedError("No files uploaded")
        if len(sources) > self._max_files:
            raise UploadRejectedError(
                f"Too many files: {len(sources)} (max {self._max_files})"
            )
        for source in sources:
            if not self.is_allowed(source):
                raise UploadRejectedError(f"Unsupported file type: {source.name}")
            if not source.is_file():
                raise UploadRejectedError(f"File not found: {source}")

    def _stage_all(self, sources: Sequence[Path], *, from_inbox: bool) -> list[UploadedFile]:
        staged: list[UploadedFile] = []
        try:
            for source in sources:
                staged.append(self._stage(source, from_inbox=from_inbox))
        except OSError as exc:
            self._roll_back(staged)
            raise ProcessorError(f"Failed to stage upload: {exc}") from exc
        Log.info(f"Staged {len(staged)} upload(s) in {self._upload_dir}")
        return staged

    @staticmethod
    def _roll_back(staged: list[UploadedFile]) -> None:
        for upload in staged:
            try:
                upload.path.unlink(missing_ok=True)
            except OSError as exc:
                Log.error(f"Could not roll back staged upload {upload.path}: {exc}")

    def _stage(self, source: Path, *, from_inbox: bool) -> UploadedFile:
        destination = self._upload_dir / generate_stored_name(source.name)
        shutil.copy2(source, destination)
        return UploadedFile(
            path=destination,
            original_filename=source.name,
            size=destination.stat().st_size,
            inbox_source=source if from_inbox else None,
        )
