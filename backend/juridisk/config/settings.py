from pydantic_settings import BaseSettings
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    database_url: str = "sqlite:///./juridisk.db"
    # Completion provider settings
    llm_provider: str = "gemini"  # "gemini" or "openai"
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.0-flash"
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    # Auth
    jwt_secret_key: Optional[str] = None
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = 24
    # Logging
    log_level: str = "INFO"
    debug: bool = False
    # CORS
    cors_origins: list = ["http://localhost:3000"]
    # Telemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"

    class Config:
        env_file = ".env"
        case_sensitive = False


def validate_settings(settings: Settings) -> None:
    """Validate required settings

    The completion provider key is not checked here; a missing key
    is reported by the completions endpoint when it is called.
    """
    errors = []

    if not settings.jwt_secret_key:
        errors.append("JWT_SECRET_KEY is required")

    if settings.llm_provider not in ("gemini", "openai"):
        errors.append(f"LLM_PROVIDER must be 'gemini' or 'openai', got '{settings.llm_provider}'")

    if errors:
        error_message = "Configuration errors:\n" + "\n".join(f"  - {error}" for error in errors)
        raise ValueError(error_message)


settings = Settings()
validate_settings(settings)
logger.info("Settings loaded and validated successfully")
