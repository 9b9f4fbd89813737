from typing import ClassVar

from docsorter.classification.base import BaseClassifier
from docsorter.classification.classifier import Classifier
from docsorter.classification.client_base import BaseClassificationClient
from docsorter.classification.example_client_adapter import ExampleClientAdapter
from docsorter.classification.openai_client_adapter import OpenAIClientAdapter
from docsorter.config.settings import Settings
from docsorter.logging.logger import Log


class ClassifierFactory:
    """Creates the configured classifier.

    A missing API key yields a Classifier without a client, which answers
    every request with the basic "not configured" classification.
    """

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    # Local servers accept any key.
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseClassifier:
        """Create a configured classifier from application settings."""
        provider = settings.classification_provider.lower()
        if provider == "example":
            return Classifier(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                excerpt_max_chars=settings.excerpt_max_chars,
            )

        base_url = cls._resolve_base_url(provider, settings)
        return Classifier(
            client=cls._build_client(provider, base_url, settings),
            model=cls._resolve_model_name(provider, settings),
            temperature=cls._resolve_temperature(provider, settings),
            excerpt_max_chars=settings.excerpt_max_chars,
        )

    @classmethod
    def _build_client(
        cls, provider: str, base_url: str | None, settings: Settings
    ) -> BaseClassificationClient | None:
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            if provider not in cls.KEYLESS_PROVIDERS:
                Log.warning(f"No API key configured for classification provider '{provider}'")
                return None
            api_key = provider
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=base_url,
            response_format=settings.classification_response_format,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.classification_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "classification_compatible_base_url is required for "
                    "classification_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.classification_compatible_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown classification provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        if provider == "openai":
            return settings.classification_openai_api_key
        return settings.classification_compatible_api_key

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        if provider == "openai":
            return settings.classification_openai_model_name
        return settings.classification_compatible_model_name

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        if provider == "openai":
            return settings.classification_openai_timeout_seconds
        return settings.classification_compatible_timeout_seconds

    @classmethod
    def _resolve_temperature(cls, provider: str, settings: Settings) -> float:
        if provider == "openai":
            return settings.classification_openai_temperature
        return 0.0
