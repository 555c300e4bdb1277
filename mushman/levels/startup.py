from __future__ import annotations

from mushman.config import settings_from_env
from mushman.levels.registry import LevelPack
from mushman.levels.singleton import init_pack


def init_pack_for_app() -> LevelPack:
    # Path comes from MUSHMAN_LEVELS_PATH, defaulting to <project root>/levels.dat.
    settings = settings_from_env()
    return init_pack(path=settings.levels_path)
