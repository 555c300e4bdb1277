from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

PackBuilder = Callable[..., bytes]

FILLER_ROWS: tuple[str, ...] = ("s e",)


def build_pack_bytes(
    levels: Sequence[Sequence[str]] = (),
    *,
    total: int = 100,
    checksum: str = "0",
    header: str = "Mushroom Man 3.0",
    newline: str = "\n",
) -> bytes:
    """Assemble a pack: the given level layouts first, then filler levels up to `total`."""

    layouts = list(levels) + [FILLER_ROWS] * max(total - len(levels), 0)
    lines = [header, checksum, ""]
    for n, rows in enumerate(layouts, start=1):
        lines.extend([f"Level {n}", "tester", *rows, ""])
    return (newline.join(lines) + newline).encode("latin-1")


@pytest.fixture(scope="session", autouse=True)
def _load_dotenv_for_tests() -> None:
    """Load repo .env for local runs; CI stays hermetic unless opted in."""

    if os.environ.get("CI") and os.environ.get("MUSHMAN_LOAD_DOTENV_FOR_TESTS") != "1":
        return

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)


@pytest.fixture(scope="session", autouse=True)
def _init_pack_from_test_fixtures() -> None:
    """Initialize the level pack cache from `tests/assets/levels.dat`."""

    from mushman.levels.singleton import init_pack, reset_pack_for_tests

    reset_pack_for_tests()
    init_pack(path=Path(__file__).resolve().parent / "assets" / "levels.dat")


@pytest.fixture()
def make_pack() -> PackBuilder:
    return build_pack_bytes
