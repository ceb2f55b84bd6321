from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Both must be set to read from Supabase; otherwise the sample fixture is served
    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None
    ORDERS_TABLE: str = "Orders"
    PAGE_SIZE: int = 1000
    REQUEST_TIMEOUT: float = 10.0

    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "1234"
    USER_PASSWORD: str = "1234"

    DASHBOARD_TIMEZONE: str | None = None  # IANA name, e.g. "Africa/Cairo"
    LOG_LEVEL: str = "INFO"
    REPORT_DIR: str = "."


config = Config()
