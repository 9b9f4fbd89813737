from pathlib import Path

from docsorter.classification.exceptions import ClassificationError

_BUNDLED_DIR = Path(__file__).parent / "prompts"


def _read(path: Path | None, bundled_name: str, what: str) -> str:
    target = path if path is not None else _BUNDLED_DIR / bundled_name
    try:
        return target.read_text(encoding="utf-8")
    except OSError as exc:
        raise ClassificationError(f"Failed to load {what}: {exc}") from exc


def load_prompt_template(path: Path | None = None) -> str:
    """Return the user prompt template.

    The template is rendered with ``str.format`` and must accept the
    ``{filename}``, ``{content_preview}`` and ``{json_schema}`` fields.
    Without ``path`` the bundled ``prompts/classification_prompt.txt`` is used.

    Raises:
        ClassificationError: if the file cannot be read.
    """
    return _read(path, "classification_prompt.txt", "prompt template")


def load_json_schema(path: Path | None = None) -> str:
    """Return the raw JSON schema text for the classification answer."""
    return _read(path, "classification_schema.json", "JSON schema")
