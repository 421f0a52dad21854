from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "1.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    ENV: str = "development"
    PORT: int = 8000

    # Connection pool bounds
    DB_MAX_OPEN_CONNS: int = 25
    DB_MAX_IDLE_CONNS: int = 25
    DB_MAX_IDLE_TIME: int = 900  # seconds

    # Deadline applied to every repository round trip, in seconds
    DB_QUERY_TIMEOUT: float = 3.0
