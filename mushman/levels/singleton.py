from __future__ import annotations

from pathlib import Path

from mushman.levels.loader import load_level_pack
from mushman.levels.registry import LevelPack


_PACK: LevelPack | None = None


def init_pack(*, path: Path) -> LevelPack:
    """Load the level pack once and cache it.

    Safe to call multiple times; subsequent calls return the already loaded instance.
    """

    global _PACK
    if _PACK is None:
        _PACK = load_level_pack(path)
    return _PACK


def reset_pack_for_tests() -> None:
    """Reset the cached pack so tests can initialize it from fixture files."""

    global _PACK
    _PACK = None


def get_pack() -> LevelPack:
    if _PACK is None:
        raise RuntimeError("Level pack not initialized. Call init_pack() at startup.")
    return _PACK
