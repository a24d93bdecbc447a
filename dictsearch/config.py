"""Runtime settings for the dictionary search server.

Resolution order (later wins):
  1. Dataclass defaults
  2. Environment variables
  3. Explicit keyword arguments to ``load_settings``

Supported env vars:
  - DICTSEARCH_RESOURCE_PATH  path of the bundled JSON dictionary
  - DICTSEARCH_LOG_LEVEL      logging level name ("DEBUG", "INFO", ...)
  - DICTSEARCH_CORS_ORIGINS   comma-separated origins, "*" for any
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List

from .dictionary import DEFAULT_RESOURCE_PATH


@dataclass
class Settings:
    resource_path: Path = DEFAULT_RESOURCE_PATH
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_log_level(value: str) -> str:
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level: {value!r}")
    return name


def _parse_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def load_settings(**overrides) -> Settings:
    cfg = Settings()

    resource_path = os.getenv("DICTSEARCH_RESOURCE_PATH")
    if resource_path:
        cfg.resource_path = Path(resource_path)

    log_level = os.getenv("DICTSEARCH_LOG_LEVEL")
    if log_level:
        cfg.log_level = _parse_log_level(log_level)

    origins = os.getenv("DICTSEARCH_CORS_ORIGINS")
    if origins:
        cfg.cors_origins = _parse_origins(origins)

    known = {f.name for f in fields(Settings)}
    for key, value in overrides.items():
        if key not in known:
            raise TypeError(f"Unknown setting: {key}")
        if key == "resource_path":
            value = Path(value)
        elif key == "log_level":
            value = _parse_log_level(value)
        setattr(cfg, key, value)

    return cfg
