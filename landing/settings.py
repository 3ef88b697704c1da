from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_nested_delimiter="__", extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    root_path: str = ""

    debug: bool = False
    reload: bool = False

    cors_origins: list[str] = ["*"]
    static_dir: str | None = None

    resend_api_key: str | None = None
    resend_api_url: str = "https://api.resend.com/emails"

    contact_from: str = "Website Contact Form <noreply@dcinfrastructures.io>"
    contact_recipients: list[str] = ["dcruz@dcinfrastructures.io"]


settings = Settings()
