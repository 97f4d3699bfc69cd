from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./habitlog.db"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # IANA zone name used to decide what "today" is. Empty = server local time.
    TIMEZONE: str = ""

    # Comma-separated allowed origins, or "*" to allow all.
    # Example: "https://myapp.com,https://api.myapp.com"
    CORS_ORIGINS: str = "*"

    # Daily targets
    WATER_ML_PER_KG: int = 35
    SUNLIGHT_MINUTES: int = 10
    MEDITATION_MINUTES: int = 5

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def json_logs(self) -> bool:
        return self.APP_ENV != "development"


settings = Settings()
