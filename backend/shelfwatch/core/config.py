"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_NAME: str = "ShelfWatch"
    DEBUG: bool = False  # Echo SQL statements
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Database
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "shelfwatch"
    POSTGRES_PASSWORD: str = "shelfwatch_dev"
    POSTGRES_DB: str = "shelfwatch"
    DATABASE_URL: str = ""  # Overrides the POSTGRES_* settings when set

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # Notifications
    NOTIFICATIONS_MOCK_MODE: bool = True
    NOTIFICATION_TIMEOUT: float = 10.0

    # Telegram
    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_CHAT_ID: str = ""
    TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
