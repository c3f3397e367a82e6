"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is driven by environment variables."""

    # Engine
    rrdtool_path: str = "rrdtool"

    # Database files reachable over HTTP (blank = unrestricted)
    rrd_data_dir: str = ""

    # API key
    rrd_api_key: str = ""

    # Logging
    rrd_log_level: str = Field(default="INFO")
    rrd_log_json: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "frozen": True}


# Singleton – import this from anywhere
settings = Settings()
