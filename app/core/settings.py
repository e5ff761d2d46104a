"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ISP Advisor API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    testing: bool = Field(default=False, description="Testing mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=5000, description="Port to bind to")
    log_level: str = Field(default="INFO", description="Root logging level")

    # CORS
    allowed_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )

    # PostgreSQL Database
    postgres_user: str = Field(default="admin", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="isp_advisor", description="PostgreSQL database name")
    test_postgres_db: str = Field(
        default="isp_advisor_test", description="PostgreSQL test database name"
    )

    # Database URL (computed property)
    @property
    def database_url(self) -> str:
        """Construct database URL from individual components."""
        db_name = self.test_postgres_db if self.testing else self.postgres_db
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{db_name}"
        )

    # Sentiment provider (Hugging Face inference API)
    huggingface_api_key: str | None = Field(
        default=None, description="Hugging Face API key for sentiment analysis"
    )
    sentiment_model_url: str = Field(
        default=(
            "https://api-inference.huggingface.co/models/"
            "cardiffnlp/twitter-roberta-base-sentiment"
        ),
        description="Inference endpoint of the sentiment classification model",
    )

    # Recommendation provider (Google AI)
    google_api_key: str | None = Field(
        default=None, description="Google AI API key for Gemini model"
    )
    completion_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model used for recommendations and relays",
    )
    completion_temperature: float = Field(
        default=0.2, description="Sampling temperature for the chat model"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
