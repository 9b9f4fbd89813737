from pathlib import Path

from docsorter.extraction.base import BaseTextExtractor
from docsorter.extraction.exceptions import ExtractionError, UnsupportedFileTypeError
from docsorter.logging.logger import Log


class TextExtractor:
    """Routes a file to the adapter registered for its extension.

    Adapter failures are reported in-band as an error string so that a
    damaged document can still be classified and stored. Only an
    unsupported extension is raised to the caller.
    """

    def __init__(self, adapters: dict[str, tuple[str, BaseTextExtractor]]) -> None:
        self._adapters = {ext.lower(): entry for ext, entry in adapters.items()}

    @property
    def supported_extensions(self) -> list[str]:
        return sorted(self._adapters)

    def extract(self, path: Path, extension: str) -> str:
        """Extract text from ``path`` using the adapter for ``extension``.

        Raises:
            UnsupportedFileTypeError: if no adapter handles the extension.
        """
        ext = extension.lower()
        entry = self._adapters.get(ext)
        if entry is None:
            raise UnsupportedFileTypeError(f"Unsupported file type: {ext}")
        kind, adapter = entry
        try:
            return adapter.extract(path)
        except ExtractionError as exc:
            Log.warning(f"{kind} extraction failed for {path.name}: {exc}")
            return f"Error extracting {kind} text: {exc}"
