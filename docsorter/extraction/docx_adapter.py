from pathlib import Path

import docx

from docsorter.extraction.base import BaseTextExtractor
from docsorter.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts paragraph and table text from Word documents using python-docx."""

    def extract(self, path: Path) -> str:
        try:
            document = docx.Document(str(path))
            parts = [p.text for p in document.paragraphs if p.text.strip()]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        parts.append(" | ".join(cells))
            return "\n".join(parts).strip()
        except Exception as exc:
            raise ExtractionError(f"python-docx extraction failed: {exc}") from exc
