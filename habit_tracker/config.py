from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = Field(
        "sqlite+aiosqlite:///./habits.db",
        description="SQLAlchemy async URL, e.g., sqlite+aiosqlite:///./habits.db",
    )
    DB_ECHO: bool = False

    # IANA zone used to decide what "today" is; None means the server's local time
    APP_TIMEZONE: str | None = None

    HOST: str = "0.0.0.0"
    PORT: int = 3333

    CORS_ORIGINS: str = "*"  # Comma-separated

    @property
    def cors_origin_list(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return []
        return [x.strip() for x in self.CORS_ORIGINS.split(",") if x.strip()]

settings = Settings()
