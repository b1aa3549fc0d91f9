from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DEBUG: bool = False
    SECRET_KEY: str = "dev-secret-key-change-in-production"
    # Comma-separated host names
    ALLOWED_HOSTS: str = "localhost,127.0.0.1,testserver"
    TIME_ZONE: str = "UTC"
    LOG_LEVEL: str = "INFO"

    # Defaults give a local SQLite file; set DB_ENGINE to django.db.backends.postgresql for Postgres.
    DB_ENGINE: str = "django.db.backends.sqlite3"
    DB_NAME: str = "db.sqlite3"
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_HOST: str = ""
    DB_PORT: str = ""

    @property
    def allowed_hosts(self) -> list[str]:
        return [h.strip() for h in self.ALLOWED_HOSTS.split(",") if h.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
