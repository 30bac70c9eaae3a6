"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "AYUSH Healthcare API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # API
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    @property
    def base_url(self) -> str:
        """Local base URL used in startup logging."""
        return f"http://localhost:{self.port}{self.api_prefix}"


settings = Settings()
