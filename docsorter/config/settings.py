from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    storage_root: str = "storage"
    upload_dir: str = "uploads"
    inbox_dir: str = "inbox"

    batch_chunk_size: int = 3
    max_files_per_request: int = 10
    allowed_extensions: list[str] = [".pdf", ".docx", ".txt", ".jpg", ".jpeg", ".png"]
    inbox_poll_interval_seconds: int = 5

    pdf_engine: str = "pdfplumber"
    excerpt_max_chars: int = 1000

    classification_provider: str = "openai"
    classification_response_format: str = "json_object"

    classification_openai_api_key: str = ""
    classification_openai_model_name: str = "gpt-3.5-turbo"
    classification_openai_temperature: float = 0.3
    classification_openai_timeout_seconds: int = 30

    classification_compatible_api_key: str = ""
    classification_compatible_model_name: str = ""
    classification_compatible_base_url: str = ""
    classification_compatible_timeout_seconds: int = 30
