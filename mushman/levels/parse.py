"""Decoder for "Mushroom Man 3.0" level packs.

Layout (line endings are LF or CRLF):

    Mushroom Man 3.0
    <checksum, decimal uint32>
    <blank>
    <name>
    <author>
    <row>+
    <blank>
    ... more level blocks ...

Rows are cell codes (see `CELL_CODES`) plus three-byte teleporter tokens
`t<id><dir>`. Short rows are padded with empty cells to the width of the
block's first row.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterator

from mushman.core.cells import Cell, Direction, Teleport, Tile
from mushman.core.grid import Coord, Grid
from mushman.levels.errors import LevelLoadError, LoadErrorKind
from mushman.levels.registry import Level, LevelPack

logger = logging.getLogger(__name__)

HEADER = b"Mushroom Man 3.0"
MIN_LEVELS = 100
MAX_CHECKSUM = 2**32 - 1

CELL_CODES: dict[str, Tile] = {
    " ": Tile.empty,
    "w": Tile.wall,
    "s": Tile.start,
    "e": Tile.exit,
    "b": Tile.bomb,
    "c": Tile.cement,
    "d": Tile.barrel,
    "f": Tile.money,
    "g": Tile.guard,
    "h": Tile.hole,
    "i": Tile.metal_wall,
    "j": Tile.jelly_bean,
    "k": Tile.key,
    "l": Tile.lock,
    "n": Tile.gun,
    "o": Tile.oxygen,
    "~": Tile.water,
}

TELEPORT_CODE = "t"
TELEPORT_DIRECTIONS: dict[str, Direction] = {
    "1": Direction.up,
    "2": Direction.down,
    "3": Direction.left,
    "4": Direction.right,
}


ChecksumVerifier = Callable[[int, bytes], bool]


def accept_any_checksum(checksum: int, body: bytes) -> bool:
    """Default verifier. Packs in the wild have never been checked against their checksum."""

    return True


def _split_lines(data: bytes) -> list[bytes]:
    lines = data.split(b"\n")
    if lines and lines[-1] == b"":
        lines.pop()

    out: list[bytes] = []
    for idx, line in enumerate(lines, start=1):
        if line.endswith(b"\r"):
            line = line[:-1]
        if b"\r" in line:
            raise LevelLoadError(LoadErrorKind.bad_format, "Stray carriage return", line=idx)
        out.append(line)
    return out


def _parse_checksum(line: bytes, *, lineno: int) -> int:
    if not line.isdigit():
        raise LevelLoadError(LoadErrorKind.bad_format, f"Checksum is not a number: {line!r}", line=lineno)
    value = int(line)
    if value > MAX_CHECKSUM:
        raise LevelLoadError(LoadErrorKind.bad_format, "Checksum does not fit in 32 bits", line=lineno)
    return value


def parse_row(text: str, *, lineno: int | None = None) -> list[Cell]:
    """Decode one row of cell codes."""

    cells: list[Cell] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == TELEPORT_CODE:
            token = text[i : i + 3]
            if len(token) < 3 or token[1] not in "12345":
                raise LevelLoadError(LoadErrorKind.invalid_character, f"Bad teleport token: {token!r}", line=lineno)
            direction = TELEPORT_DIRECTIONS.get(token[2])
            if direction is None:
                raise LevelLoadError(LoadErrorKind.invalid_character, f"Bad teleport direction: {token!r}", line=lineno)
            cells.append(Teleport(id=int(token[1]), direction=direction))
            i += 3
            continue

        tile = CELL_CODES.get(ch)
        if tile is None:
            raise LevelLoadError(LoadErrorKind.invalid_character, f"Unknown cell code: {ch!r}", line=lineno)
        cells.append(tile)
        i += 1
    return cells


def _build_level(
    *,
    name: str,
    author: str,
    rows: list[list[Cell]],
    first_lineno: int,
    numbering: Iterator[int],
) -> Level:
    width = len(rows[0])
    for offset, row in enumerate(rows):
        if len(row) > width:
            raise LevelLoadError(
                LoadErrorKind.bad_format,
                f"Row is {len(row)} cells wide but the level is {width}",
                line=first_lineno + offset,
            )
        row.extend([Tile.empty] * (width - len(row)))

    grid = Grid.from_rows(rows)
    start = grid.find(Tile.start)
    if start is None:
        raise LevelLoadError(LoadErrorKind.missing_start, f"Level '{name}' has no start cell", line=first_lineno)

    return Level(
        name=name,
        author=author,
        number=next(numbering),
        cells=grid.rows(),
        start_pos=start,
        player_pos=Coord(start.row, start.col),
    )


def parse_levels(
    data: bytes,
    *,
    numbering: Iterator[int] | None = None,
    verify_checksum: ChecksumVerifier = accept_any_checksum,
) -> LevelPack:
    """Decode a level pack.

    `numbering` supplies level numbers in parse order (a fresh count from 1 by
    default); pass a shared iterator to keep numbering going across calls.
    """

    numbering = numbering if numbering is not None else itertools.count(1)
    lines = _split_lines(data)

    if not lines or lines[0] != HEADER:
        raise LevelLoadError(LoadErrorKind.bad_header, "Not a Mushroom Man 3.0 level pack", line=1)
    if len(lines) < 3:
        raise LevelLoadError(LoadErrorKind.bad_format, "Truncated header")

    checksum = _parse_checksum(lines[1], lineno=2)
    if lines[2] != b"":
        raise LevelLoadError(LoadErrorKind.bad_format, "Expected a blank line after the checksum", line=3)

    body = data.split(b"\n", 3)[3] if data.count(b"\n") >= 3 else b""
    if not verify_checksum(checksum, body):
        raise LevelLoadError(LoadErrorKind.bad_checksum, f"Checksum {checksum} does not match pack contents")

    levels: list[Level] = []
    i = 3
    while i < len(lines):
        if not any(lines[i:]):
            # Trailing blank lines after the last block.
            break

        block_start = i + 1
        name = lines[i].decode("utf-8", errors="replace")
        i += 1
        if i >= len(lines):
            raise LevelLoadError(LoadErrorKind.bad_format, f"Level '{name}' has no author line", line=block_start)
        author = lines[i].decode("utf-8", errors="replace")
        i += 1

        rows: list[list[Cell]] = []
        first_row_lineno = i + 1
        while i < len(lines) and lines[i] != b"":
            rows.append(parse_row(lines[i].decode("latin-1"), lineno=i + 1))
            i += 1
        if not rows:
            raise LevelLoadError(LoadErrorKind.bad_format, f"Level '{name}' has no rows", line=first_row_lineno)
        # Skip the blank separator (absent only at end of input).
        i += 1

        levels.append(
            _build_level(name=name, author=author, rows=rows, first_lineno=first_row_lineno, numbering=numbering)
        )

    if len(levels) < MIN_LEVELS:
        raise LevelLoadError(
            LoadErrorKind.too_few_levels,
            f"Level pack has {len(levels)} levels; at least {MIN_LEVELS} are required",
        )

    logger.info("Found %d levels", len(levels))
    return LevelPack(checksum=checksum, levels=tuple(levels))
