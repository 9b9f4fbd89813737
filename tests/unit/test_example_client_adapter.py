"""Tests for the offline ExampleClientAdapter."""

import json

from docsorter.classification.classifier import Classifier
from docsorter.classification.example_client_adapter import ExampleClientAdapter
from docsorter.classification.prompt_loader import load_json_schema


def _complete(json_schema: dict[str, object], user_prompt: str = "") -> dict[str, object]:
    raw = ExampleClientAdapter().create_chat_completion(
        model="x",
        temperature=0.1,
        system_prompt="",
        user_prompt=user_prompt,
        json_schema=json_schema,
    )
    return json.loads(raw)


class TestExampleClientAdapter:
    def test_returns_canned_answer_without_schema(self) -> None:
        assert _complete({}) == ExampleClientAdapter.CANNED_ANSWER

    def test_answer_matches_bundled_schema(self) -> None:
        schema = json.loads(load_json_schema())
        data = _complete(schema)
        assert list(data) == schema["required"]
        assert data["suggested_folder_name"] == "Other Documents"

    def test_fills_unknown_required_fields_by_type(self) -> None:
        schema = {
            "type": "object",
            "properties": {"category": {"type": "string"}, "tags": {"type": "array"}},
            "required": ["category", "tags", "mystery"],
        }
        assert _complete(schema) == {"category": "Other Documents", "tags": [], "mystery": None}

    def test_ignores_prompt_content(self) -> None:
        assert _complete({}, user_prompt="bank statement") == _complete({}, user_prompt="resume")

    def test_round_trips_through_classifier(self) -> None:
        classifier = Classifier(client=ExampleClientAdapter(), model="example")
        result = classifier.classify("anything.txt", "any text")
        assert result.category == "Other Documents"
        assert result.subcategory == "Example"
        assert result.confidence == 0.5
