"""
Configuration loader for the contracts API server
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
import logging

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
CONFIG_PATH_ENV = "SERVER_CONFIG"

# Python logging levels plus uvicorn's TRACE
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")


class ServerConfig(BaseModel):
    """HTTP server configuration"""

    title: str = "Insurance Contracts Mock API"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if os.getenv("PORT"):
        overrides["port"] = os.environ["PORT"].strip()
    if os.getenv("HOST"):
        overrides["host"] = os.environ["HOST"].strip()
    if os.getenv("LOG_LEVEL"):
        overrides["log_level"] = os.environ["LOG_LEVEL"]
    if os.getenv("CORS_ORIGINS"):
        overrides["cors_origins"] = [o.strip() for o in os.environ["CORS_ORIGINS"].split(",") if o.strip()]
    return overrides


def load_server_config(config_path: Optional[Path] = None) -> ServerConfig:
    """
    Load server configuration from YAML (when present) and the environment

    Args:
        config_path: Path to config file. Defaults to $SERVER_CONFIG, then
            config/server_config.yml

    Returns:
        Validated ServerConfig object. Environment variables (PORT, HOST,
        LOG_LEVEL, CORS_ORIGINS) take precedence over the file.

    Raises:
        ValidationError: If the merged config doesn't match the schema
    """
    if config_path is None and os.getenv(CONFIG_PATH_ENV):
        config_path = Path(os.environ[CONFIG_PATH_ENV])
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "server_config.yml"

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = (yaml.safe_load(f) or {}).get("server", {}) or {}
    else:
        logger.debug(f"No server config at {config_path}, using defaults")

    config_data.update(_env_overrides())

    try:
        config = ServerConfig(**config_data)
        logger.info(f"Loaded server config: host={config.host} port={config.port}")
        return config
    except ValidationError as e:
        logger.error(f"Server config validation failed: {e}")
        raise
