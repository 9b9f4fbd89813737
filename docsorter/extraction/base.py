from abc import ABC, abstractmethod
from pathlib import Path


class BaseTextExtractor(ABC):
    """Contract for all per-format text extraction adapters."""

    @abstractmethod
    def extract(self, path: Path) -> str:
        """Extract plain text from a file on disk.

        Args:
            path: Location of the file to read.

        Returns:
            Extracted text as a single stripped string.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
