# utils/config.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), "../.env"))


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


@dataclass(frozen=True)
class Settings:
    min_text_length: int = 50
    max_text_length: int = 50000
    include_metrics: bool = True
    batch_workers: int = 3
    host: str = "0.0.0.0"
    port: int = 8000


def get_settings() -> Settings:
    return Settings(
        min_text_length=_int_env("MIN_TEXT_LENGTH", 50),
        max_text_length=_int_env("MAX_TEXT_LENGTH", 50000),
        include_metrics=_bool_env("INCLUDE_METRICS", True),
        batch_workers=max(1, _int_env("BATCH_WORKERS", 3)),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", 8000),
    )
