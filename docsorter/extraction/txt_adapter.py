from pathlib import Path

from docsorter.extraction.base import BaseTextExtractor
from docsorter.extraction.exceptions import ExtractionError


class TxtAdapter(BaseTextExtractor):
    """Reads plain text files as UTF-8."""

    def extract(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise ExtractionError(f"text read failed: {exc}") from exc
