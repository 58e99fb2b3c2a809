"""Application configuration contract."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gtp.errors import ConfigError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_APP_ENVS = {"dev", "test", "prod"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")
    log_json: bool | None = Field(alias="LOG_JSON", default=None)


def validate_settings(settings: Settings) -> None:
    problems: list[str] = []
    if settings.log_level.upper() not in _LOG_LEVELS:
        problems.append(f"LOG_LEVEL={settings.log_level!r}")
    if settings.app_env not in _APP_ENVS:
        problems.append(f"APP_ENV={settings.app_env!r}")
    if problems:
        raise ConfigError(f"invalid configuration: {', '.join(problems)}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
