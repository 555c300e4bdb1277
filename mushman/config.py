from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def project_root() -> Path:
    # mushman/config.py -> mushman/ -> project root
    return Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class Settings:
    levels_path: Path
    log_level: str


def settings_from_env() -> Settings:
    return Settings(
        levels_path=Path(os.environ.get("MUSHMAN_LEVELS_PATH", str(project_root() / "levels.dat"))),
        log_level=os.environ.get("MUSHMAN_LOG_LEVEL", "INFO").upper(),
    )
