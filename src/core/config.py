from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///./db.sqlite3"
    database_echo: bool = False

    # Хранилище счетов: "sqlalchemy" или "memory"
    storage_backend: str = "sqlalchemy"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_dir: str = "logs"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="IPS_",
        extra="ignore",
        env_file_encoding="utf-8",
    )


settings = Settings()
