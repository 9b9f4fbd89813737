"""Tests for the Classifier (AI-powered document classification)."""

import json
from unittest.mock import MagicMock, patch

from docsorter.classification.classifier import Classifier
from docsorter.classification.exceptions import (
    ClassificationError,
    ClassificationNetworkError,
)
from docsorter.classification.models import ClassificationResult


def _make_classifier(client: MagicMock | None = None, **kwargs: object) -> Classifier:
    if client is None:
        client = MagicMock()
    return Classifier(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]


def _mock_ai_response(client: MagicMock, content: str) -> None:
    client.create_chat_completion.return_value = content


def _valid_json_response(**overrides: object) -> str:
    payload: dict[str, object] = {
        "category": "Banking",
        "subcategory": "Checking statement",
        "confidence": 0.95,
        "suggested_folder_name": "Bank Statements",
        "description": "Monthly statement from a checking account",
    }
    payload.update(overrides)
    return json.dumps(payload)


class TestClassifySuccess:
    def test_returns_classification_result(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        result = _make_classifier(client).classify("march.pdf", "statement text")
        assert result == ClassificationResult(
            category="Banking",
            subcategory="Checking statement",
            confidence=0.95,
            suggested_folder_name="Bank Statements",
            description="Monthly statement from a checking account",
        )

    def test_prompt_contains_filename_and_text(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_classifier(client).classify("w2_2023.pdf", "Wage and Tax Statement")
        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "w2_2023.pdf" in user_prompt
        assert "Wage and Tax Statement" in user_prompt

    def test_prompt_lists_canonical_taxonomy(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_classifier(client).classify("a.txt", "text")
        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        for folder in ("Bank Statements", "Tax Documents", "School Work", "Other Documents"):
            assert folder in user_prompt

    def test_excerpt_capped_to_first_thousand_chars(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        text = "a" * 1000 + "TAIL_MARKER"
        _make_classifier(client).classify("long.txt", text)
        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "a" * 1000 in user_prompt
        assert "TAIL_MARKER" not in user_prompt

    def test_custom_excerpt_length(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_classifier(client, excerpt_max_chars=5).classify("x.txt", "12345678")
        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "12345..." in user_prompt
        assert "123456" not in user_prompt

    def test_calls_ai_with_model_and_temperature(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_classifier(client, temperature=0.3).classify("a.txt", "text")
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.3

    def test_clamps_temperature(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_classifier(client, temperature=3.0).classify("a.txt", "text")
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 1.0

    def test_passes_json_schema(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_classifier(client).classify("a.txt", "text")
        schema = client.create_chat_completion.call_args.kwargs["json_schema"]
        assert "suggested_folder_name" in schema["properties"]

    def test_is_configured(self) -> None:
        assert _make_classifier().is_configured
        assert not Classifier(client=None, model="m").is_configured


class TestJsonParsing:
    def test_strips_markdown_code_fences(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, "```json\n" + _valid_json_response() + "\n```")
        result = _make_classifier(client).classify("a.txt", "text")
        assert result.suggested_folder_name == "Bank Statements"

    def test_strips_plain_code_fences(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, "```\n" + _valid_json_response() + "\n```")
        result = _make_classifier(client).classify("a.txt", "text")
        assert result.confidence == 0.95

    def test_strips_inline_fences(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, "```json" + _valid_json_response() + "```")
        result = _make_classifier(client).classify("a.txt", "text")
        assert result.category == "Banking"

    def test_invalid_json_returns_fallback(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, "not valid json")
        result = _make_classifier(client).classify("a.txt", "text")
        assert result.category == "Uncategorized"
        assert result.confidence == 0.0
        assert result.description.startswith("Error in classification: Invalid JSON")

    def test_json_array_returns_fallback(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, "[]")
        result = _make_classifier(client).classify("a.txt", "text")
        assert "must be an object" in result.description

    def test_wrong_field_type_returns_fallback(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response(confidence="high"))
        result = _make_classifier(client).classify("a.txt", "text")
        assert result.suggested_folder_name == "Uncategorized"
        assert "confidence" in result.description


class TestFallbacks:
    def test_unconfigured_classifier_never_calls_ai(self) -> None:
        classifier = Classifier(client=None, model="m")
        result = classifier.classify("scan.png", "text")
        assert result == ClassificationResult(
            category="Other Documents",
            subcategory="Unknown",
            confidence=0.0,
            suggested_folder_name="Other Documents",
            description="Basic classification for scan.png",
        )

    def test_network_error_returns_uncategorized(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = ClassificationNetworkError(
            "AI provider network error: timeout"
        )
        result = _make_classifier(client).classify("a.txt", "text")
        assert result == ClassificationResult(
            category="Uncategorized",
            subcategory="Unknown",
            confidence=0.0,
            suggested_folder_name="Uncategorized",
            description="Error in classification: AI provider network error: timeout",
        )

    def test_empty_response_returns_fallback(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = ClassificationError("AI returned empty response")
        result = _make_classifier(client).classify("a.txt", "text")
        assert result.description == "Error in classification: AI returned empty response"

    def test_unexpected_error_returns_fallback(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = RuntimeError("boom")
        result = _make_classifier(client).classify("a.txt", "text")
        assert result.category == "Uncategorized"
        assert result.confidence == 0.0


class TestLogging:
    def test_logs_prompt_in_debug(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        with patch("docsorter.classification.classifier.Log") as mock_log:
            _make_classifier(client).classify("a.txt", "text")
        assert "prompt" in mock_log.debug.call_args_list[0].args[0].lower()

    def test_logs_failure_as_error(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = ClassificationError("bad")
        with patch("docsorter.classification.classifier.Log") as mock_log:
            _make_classifier(client).classify("a.txt", "text")
        assert any("a.txt" in c.args[0] for c in mock_log.error.call_args_list)

    def test_logs_unconfigured_as_warning(self) -> None:
        with patch("docsorter.classification.classifier.Log") as mock_log:
            Classifier(client=None, model="m").classify("a.txt", "text")
        mock_log.warning.assert_called_once()
