from __future__ import annotations

from pathlib import Path
from typing import Any

from mushman.levels.errors import LevelLoadError, LoadErrorKind
from mushman.levels.parse import parse_levels
from mushman.levels.registry import LevelPack


def load_level_pack_bytes(data: bytes, **parse_options: Any) -> LevelPack:
    """Decode a whole pack; raises `LevelLoadError` and never returns a partial pack."""

    return parse_levels(data, **parse_options)


def load_level_pack(path: Path, **parse_options: Any) -> LevelPack:
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise LevelLoadError(LoadErrorKind.not_found, f"Level pack not found: {path}") from e
    except OSError as e:
        raise LevelLoadError(LoadErrorKind.unreadable, f"Cannot read level pack {path}: {e}") from e

    return load_level_pack_bytes(raw, **parse_options)
