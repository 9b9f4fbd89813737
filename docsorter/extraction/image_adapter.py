from pathlib import Path

from docsorter.extraction.base import BaseTextExtractor


class ImagePlaceholderAdapter(BaseTextExtractor):
    """Stand-in for OCR: describes the image by name only."""

    def extract(self, path: Path) -> str:
        return f"Image file: {path.name} (OCR not implemented yet)"
