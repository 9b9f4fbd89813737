import httpx
import openai

from docsorter.classification.client_base import BaseClassificationClient
from docsorter.classification.exceptions import (
    ClassificationError,
    ClassificationNetworkError,
)

RESPONSE_FORMATS = ("json_object", "json_schema")


class OpenAIClientAdapter(BaseClassificationClient):
    """Chat-completions client for OpenAI and OpenAI-compatible hosts.

    ``response_format="json_schema"`` asks for strict structured output.
    Older models and most self-hosted servers only understand
    ``"json_object"``; there the schema travels inside the prompt instead.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        response_format: str = "json_object",
    ) -> None:
        if response_format not in RESPONSE_FORMATS:
            raise ValueError(
                f"Unknown response format '{response_format}'. Choose from: {list(RESPONSE_FORMATS)}"
            )
        self._response_format = response_format
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format=self._build_response_format(json_schema),
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ClassificationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise ClassificationNetworkError(
                f"AI provider API error (HTTP {exc.status_code}): {exc.message}"
            ) from exc
        except openai.APIError as exc:
            raise ClassificationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ClassificationError("AI returned no choices")
        choice = response.choices[0]
        refusal = getattr(choice.message, "refusal", None)
        if refusal:
            raise ClassificationError(f"AI refused to classify: {refusal}")
        # A cut-off reply is never valid JSON.
        if choice.finish_reason == "length":
            raise ClassificationError("AI response was truncated")
        if not choice.message.content:
            raise ClassificationError("AI returned empty response")
        return choice.message.content

    def _build_response_format(self, json_schema: dict[str, object]) -> dict[str, object]:
        if self._response_format == "json_object":
            return {"type": "json_object"}
        return {
            "type": "json_schema",
            "json_schema": {
                "name": "classification_result",
                "strict": True,
                "schema": json_schema,
            },
        }
