from abc import ABC, abstractmethod

from docsorter.classification.models import ClassificationResult


class BaseClassifier(ABC):
    """Contract for all document classifiers."""

    @abstractmethod
    def classify(self, filename: str, text: str) -> ClassificationResult:
        """Classify a document by its original filename and extracted text.

        Args:
            filename: Original filename as uploaded.
            text: Extracted text (may be an extraction error string).

        Returns:
            ClassificationResult. Implementations never raise; failures are
            reported through a fallback record with confidence 0.0.
        """
