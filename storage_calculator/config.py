from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .model.entities import Container, InvalidDimensionsError, StorageCalculatorError

load_dotenv()

# Boombox unit interior, inches
DEFAULT_CONTAINER_WIDTH = 95.0
DEFAULT_CONTAINER_DEPTH = 56.0
DEFAULT_CONTAINER_HEIGHT = 83.5


class ConfigError(StorageCalculatorError):
    pass


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    container_width: float = DEFAULT_CONTAINER_WIDTH
    container_depth: float = DEFAULT_CONTAINER_DEPTH
    container_height: float = DEFAULT_CONTAINER_HEIGHT
    fill_factor: float = 0.85
    item_gap: float = 0.0
    catalog_file: Optional[str] = None
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    @property
    def container(self) -> Container:
        return Container(self.container_width, self.container_depth, self.container_height)


def get_settings() -> Settings:
    settings = Settings(
        container_width=_float_env("CONTAINER_WIDTH_IN", DEFAULT_CONTAINER_WIDTH),
        container_depth=_float_env("CONTAINER_DEPTH_IN", DEFAULT_CONTAINER_DEPTH),
        container_height=_float_env("CONTAINER_HEIGHT_IN", DEFAULT_CONTAINER_HEIGHT),
        fill_factor=_float_env("FILL_FACTOR", 0.85),
        item_gap=_float_env("ITEM_GAP_IN", 0.0),
        catalog_file=os.getenv("CATALOG_FILE") or None,
        log_dir=os.getenv("LOG_DIR") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
    if not 0 < settings.fill_factor < 1:
        raise ConfigError(f"FILL_FACTOR must be between 0 and 1, got {settings.fill_factor}")
    if settings.item_gap < 0:
        raise ConfigError(f"ITEM_GAP_IN must be >= 0, got {settings.item_gap}")
    try:
        settings.container
    except InvalidDimensionsError as e:
        raise ConfigError(f"invalid CONTAINER_*_IN setting: {e}")
    return settings
