"""Validates the model's parsed JSON answer and builds a ClassificationResult."""

import math
from typing import Any

from docsorter.classification.exceptions import ClassificationValidationError
from docsorter.classification.models import ClassificationResult

_DEFAULT_CATEGORY = "Uncategorized"
_OPTIONAL_STRING_FIELDS = ("subcategory", "suggested_folder_name", "description")


def validate_and_build(data: dict[str, Any]) -> ClassificationResult:
    """Validate raw parsed JSON and build a ClassificationResult.

    Missing fields get neutral defaults; present fields must have the right
    type. Confidence is clamped into [0, 1].

    Raises:
        ClassificationValidationError: on a field of the wrong type.
    """
    category = _string_field(data, "category") or _DEFAULT_CATEGORY
    strings = {name: _string_field(data, name) for name in _OPTIONAL_STRING_FIELDS}
    return ClassificationResult(
        category=category,
        subcategory=strings["subcategory"],
        confidence=_build_confidence(data.get("confidence")),
        suggested_folder_name=strings["suggested_folder_name"],
        description=strings["description"],
    )


def _string_field(data: dict[str, Any], name: str) -> str:
    raw = data.get(name)
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ClassificationValidationError(f"'{name}' must be a string, got {type(raw).__name__}")
    return raw.strip()


def _build_confidence(raw: Any) -> float:
    if raw is None:
        return 0.0
    # bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ClassificationValidationError("'confidence' must be a number")
    try:
        value = float(raw)
    except ValueError as exc:
        raise ClassificationValidationError(
            f"'confidence' must be a number, got {raw!r}"
        ) from exc
    if math.isnan(value):
        raise ClassificationValidationError("'confidence' must be a number, got NaN")
    return max(0.0, min(1.0, value))
