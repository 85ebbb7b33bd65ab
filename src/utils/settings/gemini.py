"""Gemini API settings configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    GEMINI_API_KEY: str | None = None
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODEL: str = "gemini-1.5-flash"
    # Seconds; unset means the upstream call may wait indefinitely
    GEMINI_TIMEOUT: float | None = None

    FORECAST_LOCATION: str = "Gandhinagar, Gujarat, India"

    @property
    def generate_content_url(self) -> str:
        return f"{self.GEMINI_API_URL}/models/{self.GEMINI_MODEL}:generateContent"
