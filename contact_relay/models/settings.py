from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    telegram_bot_token: str | None = None
    telegram_chat_id: str | None = None

    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    log_level: str = "INFO"

    business_name: str = "Kezi Fire Chilli"
    cors_origins: list[str] = ["*"]
    relay_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    @property
    def has_telegram_credentials(self) -> bool:
        return bool(self.telegram_bot_token and self.telegram_chat_id)
