"""Settings loaded from TRACK_* environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TRACK"
DEFAULT_DIR = Path("~/.local/share/track")


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default.expanduser()
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str


def get_settings() -> Settings:
    return Settings(
        data_dir=_env_path(_k("DIR"), DEFAULT_DIR),
        log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
    )
