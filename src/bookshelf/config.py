"""
Configuration management for the Bookshelf API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False

    # Dataset (built-in seed data when unset)
    data_path: str | None = None

    # Request handling
    max_body_size: int = 1024 * 1024  # 1MB
    request_timeout: float | None = 30.0  # seconds, applies to async execution
    mask_errors: bool = True
    max_tokens: int | None = 10_000  # parser token bound per query document

    # Environment
    debug: bool = True
    log_level: str = "INFO"

    # Tracing
    otel_enabled: bool = False
    otel_endpoint: str = "http://localhost:4317"
    otel_service_name: str = "bookshelf-api"

    class Config:
        env_file = ".env"
        env_prefix = "BOOKSHELF_"
        case_sensitive = False


# Global settings instance
settings = Settings()
