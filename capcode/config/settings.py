from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    hash_salt: str | None = None
    hash_salt_mode: str = "shared"
    hash_time_cost: int = 3
    hash_memory_cost: int = 4096
    hash_parallelism: int = 1
    hash_variant: str = "id"

    storage_backend: str = "postgres"
    capcode_table: str = "capcodes"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "capcode"
    db_username: str = "capcode"
    db_password: str = "secret"
