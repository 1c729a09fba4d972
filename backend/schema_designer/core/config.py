"""Application settings loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    The language-model credential and the database URL are required for the
    chat and project endpoints respectively. Missing values are reported at
    startup and the dependent endpoints fail individually.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Language model
    gemini_api_key: str | None = None
    llm_provider: str = "gemini"
    llm_model: str = "gemini-2.0-flash"
    llm_timeout_seconds: float = 60.0

    # Document store
    database_url: str | None = None
    database_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: str = "*"
    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def missing_required(self) -> list[str]:
        """Names of required environment variables that are not set."""
        required = {
            "GEMINI_API_KEY": self.gemini_api_key,
            "DATABASE_URL": self.database_url,
        }
        return [name for name, value in required.items() if not value]


settings = Settings()
