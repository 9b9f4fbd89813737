"""AI-powered document classifier."""

import json
import re
from pathlib import Path

from docsorter.classification.base import BaseClassifier
from docsorter.classification.client_base import BaseClassificationClient
from docsorter.classification.exceptions import ClassificationError
from docsorter.classification.models import ClassificationResult
from docsorter.classification.prompt_loader import load_json_schema, load_prompt_template
from docsorter.classification.validator import validate_and_build
from docsorter.logging.logger import Log

DEFAULT_SYSTEM_PROMPT = (
    "You are a document classification expert. Provide accurate JSON responses only."
)

# Opening fence with optional language tag, or closing fence.
_CODE_FENCE_RE = re.compile(r"^```[\w-]*\s*|\s*```$")


def unconfigured_result(filename: str) -> ClassificationResult:
    """Fallback used when no AI provider credentials are configured."""
    return ClassificationResult(
        category="Other Documents",
        subcategory="Unknown",
        confidence=0.0,
        suggested_folder_name="Other Documents",
        description=f"Basic classification for {filename}",
    )


def failed_result(reason: str) -> ClassificationResult:
    """Fallback used when the AI call or its answer is unusable."""
    return ClassificationResult(
        category="Uncategorized",
        subcategory="Unknown",
        confidence=0.0,
        suggested_folder_name="Uncategorized",
        description=f"Error in classification: {reason}",
    )


class Classifier(BaseClassifier):
    """Classifies documents into folder categories using an AI provider.

    A ``client`` of ``None`` means the provider is not configured; every call
    then returns ``unconfigured_result`` without touching the network.
    """

    def __init__(
        self,
        *,
        client: BaseClassificationClient | None,
        model: str,
        temperature: float = 0.3,
        excerpt_max_chars: int = 1000,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._excerpt_max_chars = excerpt_max_chars
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def classify(self, filename: str, text: str) -> ClassificationResult:
        """Classify a document; never raises."""
        if self._client is None:
            Log.warning(f"AI provider not configured, using basic classification for {filename}")
            return unconfigured_result(filename)

        Log.info(f"Classifying {filename} ({len(text)} chars)")
        try:
            result = self._classify(self._client, filename, text)
        except Exception as exc:
            Log.error(f"Classification failed for {filename}: {exc}")
            return failed_result(str(exc))

        Log.info(
            f"Classified {filename} as {result.category!r} "
            f"(folder {result.suggested_folder_name!r}, confidence {result.confidence:.2f})"
        )
        return result

    def _classify(
        self, client: BaseClassificationClient, filename: str, text: str
    ) -> ClassificationResult:
        prompt = self._build_prompt(filename, text)
        Log.debug(f"Classification prompt:\n{prompt}")

        raw_response = client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        return validate_and_build(self._parse_json(raw_response))

    def _build_prompt(self, filename: str, text: str) -> str:
        return self._prompt_template.format(
            filename=filename,
            content_preview=text[: self._excerpt_max_chars],
            json_schema=self._json_schema,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = _CODE_FENCE_RE.sub("", raw.strip())

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ClassificationError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ClassificationError("JSON response must be an object")
        return parsed
