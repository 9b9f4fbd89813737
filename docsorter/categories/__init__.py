from docsorter.categories.normalizer import (
    CANONICAL_CATEGORIES,
    FALLBACK_CATEGORY,
    FOLDER_KEYWORDS,
    normalize_folder_name,
)

__all__ = [
    "CANONICAL_CATEGORIES",
    "FALLBACK_CATEGORY",
    "FOLDER_KEYWORDS",
    "normalize_folder_name",
]
