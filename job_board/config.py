"""Runtime settings.

Values come from environment variables (a `.env` file in the working
directory is loaded first). Everything has a default, so an empty environment
gives a working configuration.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_FEED_URL = "https://empllo.com/api/v1"


class Settings(BaseModel):
    feed_url: str = DEFAULT_FEED_URL
    timeout_s: float = Field(default=20.0, gt=0)
    auto_close_delay_s: float = Field(default=2.0, ge=0)
    log_level: str = "INFO"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_settings() -> Settings:
    """Build `Settings` from the environment; unset variables keep their defaults."""
    load_dotenv()

    values = {}
    for field_name, env_key in (
        ("feed_url", "JOB_BOARD_FEED_URL"),
        ("timeout_s", "JOB_BOARD_TIMEOUT_S"),
        ("auto_close_delay_s", "JOB_BOARD_AUTO_CLOSE_DELAY_S"),
        ("log_level", "LOG_LEVEL"),
    ):
        raw = get_env(env_key)
        if raw:
            values[field_name] = raw
    return Settings(**values)
