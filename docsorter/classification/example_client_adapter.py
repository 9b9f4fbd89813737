"""Offline classification client, selected with ``classification_provider=example``.

Answers every prompt with the same canned classification, shaped to the
schema it is given. Handy for demos and for exercising the full pipeline
without an API key.
"""

import json
from typing import ClassVar

from docsorter.classification.client_base import BaseClassificationClient


class ExampleClientAdapter(BaseClassificationClient):
    CANNED_ANSWER: ClassVar[dict[str, object]] = {
        "category": "Other Documents",
        "subcategory": "Example",
        "confidence": 0.5,
        "suggested_folder_name": "Other Documents",
        "description": "Classified by the offline example client",
    }

    _EMPTY_BY_TYPE: ClassVar[dict[str, object]] = {
        "string": "",
        "number": 0.0,
        "integer": 0,
        "boolean": False,
        "array": [],
        "object": {},
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        return json.dumps(self._shape_answer(json_schema))

    @classmethod
    def _shape_answer(cls, json_schema: dict[str, object]) -> dict[str, object]:
        required = json_schema.get("required")
        if not isinstance(required, list):
            return dict(cls.CANNED_ANSWER)
        properties = json_schema.get("properties")
        if not isinstance(properties, dict):
            properties = {}
        answer: dict[str, object] = {}
        for key in required:
            if key in cls.CANNED_ANSWER:
                answer[key] = cls.CANNED_ANSWER[key]
            else:
                prop = properties.get(key)
                field_type = prop.get("type") if isinstance(prop, dict) else None
                answer[key] = cls._EMPTY_BY_TYPE.get(field_type) if isinstance(field_type, str) else None
        return answer
