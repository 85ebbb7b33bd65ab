from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: str = "DEV"
    API_VERSION: str = "0.1.0"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Base64 JPEGs inflate by a third, keep headroom for phone camera shots
    MAX_REQUEST_SIZE: int = 10 * 1024 * 1024  # 10MB

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"
