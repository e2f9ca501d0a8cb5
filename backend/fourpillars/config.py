from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "development"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    cors_origins_raw: str = ""

    # Accepted birth-date range at the HTTP boundary
    min_birth_year: int = 1800
    max_birth_year: int = 2100

    # slowapi limit strings
    rate_limit_chart: str = "30/minute"
    rate_limit_health: str = "60/minute"

    # Request bodies larger than this are not buffered for the audit log
    request_log_body_limit: int = 102400

    def cors_origins(self) -> list[str]:
        raw = self.cors_origins_raw.strip()
        if not raw:
            return []
        return [item.strip() for item in raw.split(",") if item.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
