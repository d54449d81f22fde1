import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


class ConfigError(ValueError):
    pass


def _get_port() -> int:
    port = os.getenv("TASK_API_PORT")
    if not port:
        return DEFAULT_PORT
    try:
        return int(port)
    except ValueError as e:
        raise ConfigError(f"TASK_API_PORT must be an integer, got {port!r}") from e


def get_settings() -> Settings:
    return Settings(
        host=os.getenv("TASK_API_HOST") or DEFAULT_HOST,
        port=_get_port(),
        log_level=(os.getenv("TASK_API_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
