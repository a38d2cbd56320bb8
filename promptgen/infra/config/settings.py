"""
Application configuration settings.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from promptgen import __version__


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field("promptgen", alias="APP_NAME")
    version: str = Field(__version__, alias="APP_VERSION")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # Input limits (unset means unlimited)
    max_prompt_length: Optional[int] = Field(None, gt=0, alias="MAX_PROMPT_LENGTH")
    max_instructions_length: Optional[int] = Field(
        None, gt=0, alias="MAX_INSTRUCTIONS_LENGTH"
    )

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: Optional[str] = Field(None, alias="LOG_FORMAT")  # json or console

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    def get_log_format(self) -> str:
        """Resolve the log renderer; console in development, json elsewhere."""
        if self.log_format:
            return self.log_format.lower()
        return "console" if self.is_development() else "json"


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
