from __future__ import annotations

from pathlib import Path

import pytest

from mushman.core.cells import Tile
from mushman.core.grid import Coord
from mushman.levels.errors import LevelLoadError, LoadErrorKind
from mushman.levels.loader import load_level_pack
from mushman.levels.singleton import get_pack, init_pack

ASSETS = Path(__file__).resolve().parent / "assets"


def _byte_sum(checksum: int, body: bytes) -> bool:
    return sum(body) % 2**32 == checksum


def test_sample_pack_loads_from_disk() -> None:
    pack = load_level_pack(ASSETS / "levels.dat")

    assert len(pack) == 100
    first = pack.level(1)
    assert first.name == "Sample 001"
    assert first.author == "mushman"
    assert first.start_pos == Coord(1, 1)

    # Layout 4 has a short final row that gets padded.
    fourth = pack.level(4)
    assert fourth.cells[3] == (Tile.wall,) * 4 + (Tile.empty,) * 2


def test_sample_pack_checksum_matches_byte_sum_verifier() -> None:
    pack = load_level_pack(ASSETS / "levels.dat", verify_checksum=_byte_sum)
    assert pack.checksum > 0


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(LevelLoadError) as e:
        load_level_pack(tmp_path / "nope.dat")
    assert e.value.kind == LoadErrorKind.not_found
    assert isinstance(e.value.__cause__, FileNotFoundError)


def test_directory_path_raises_unreadable(tmp_path: Path) -> None:
    with pytest.raises(LevelLoadError) as e:
        load_level_pack(tmp_path)
    assert e.value.kind == LoadErrorKind.unreadable
    assert isinstance(e.value.__cause__, OSError)


def test_pack_cache_is_initialized_once() -> None:
    pack = get_pack()
    assert len(pack) == 100

    # A second init with another path returns the cached instance.
    assert init_pack(path=Path("/does/not/exist.dat")) is pack
