from dataclasses import dataclass


@dataclass(frozen=True)
class ClassificationResult:
    """Output of the classification step, before folder normalization."""

    category: str
    subcategory: str = ""
    confidence: float = 0.0
    suggested_folder_name: str = ""
    description: str = ""
