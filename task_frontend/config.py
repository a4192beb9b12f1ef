from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Task API
    api_base_url: str = "http://localhost:8080/api"
    api_timeout: float = 5.0  # Seconds, same as the httpx default

    # Presentation
    app_title: str = "Task Management System"
    development_mode: bool = False  # Reload templates on change

    # Server
    host: str = "0.0.0.0"
    port: int = 3100
    log_level: str = "INFO"

    @property
    def tasks_url(self) -> str:
        """Collection URL of the task API, without a trailing slash."""
        return f"{self.api_base_url.rstrip('/')}/tasks"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
