from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent.parent
SETTINGS_PATH = ROOT / "config" / "settings.yaml"


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _env_flag(name: str) -> Optional[bool]:
    val = os.getenv(name, "").strip().lower()
    if val in ("1", "true", "yes"):
        return True
    if val in ("0", "false", "no"):
        return False
    return None


@dataclass(frozen=True)
class Settings:
    ignore_offset_default: bool = False
    log_level: str = "INFO"
    api_title: str = "ChronoDate API"
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings(path: Path = SETTINGS_PATH) -> Settings:
    """Build settings from YAML, letting CHRONODATE_* environment variables win."""
    raw = _load_yaml(path)
    resolver_cfg = raw.get("resolver", {}) or {}
    server_cfg = raw.get("server", {}) or {}

    ignore_offset = _env_flag("CHRONODATE_IGNORE_OFFSET")
    if ignore_offset is None:
        ignore_offset = bool(resolver_cfg.get("ignore_offset", False))
    log_level = os.getenv("CHRONODATE_LOG_LEVEL") or raw.get("log_level", "INFO")

    return Settings(
        ignore_offset_default=ignore_offset,
        log_level=str(log_level).upper(),
        api_title=raw.get("api_title", Settings.api_title),
        host=server_cfg.get("host", Settings.host),
        port=int(server_cfg.get("port", Settings.port)),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(ROOT / ".env")
    return load_settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
