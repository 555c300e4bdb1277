from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from mushman.core.cells import Cell
from mushman.core.grid import Coord, Grid


@dataclass(frozen=True, slots=True)
class Level:
    """Immutable level template as decoded from a pack.

    `number` is assigned at parse time, in parse order. Play happens on the
    mutable copy returned by `grid()`, never on `cells`.
    """

    name: str
    author: str
    number: int
    cells: tuple[tuple[Cell, ...], ...]
    start_pos: Coord
    player_pos: Coord

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def title(self) -> str:
        return f"Level: {self.name}, by {self.author}"

    def grid(self) -> Grid:
        return Grid.from_rows(self.cells)


class LevelNotFoundError(KeyError):
    pass


@dataclass(frozen=True, slots=True)
class LevelPack:
    """Ordered level templates plus the checksum read from the file header.

    The checksum is carried as-is; see `parse.accept_any_checksum`.
    """

    checksum: int
    levels: tuple[Level, ...]

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[Level]:
        return iter(self.levels)

    @property
    def first_number(self) -> int:
        return self.levels[0].number

    @property
    def last_number(self) -> int:
        return self.levels[-1].number

    def has_level(self, number: int) -> bool:
        return any(lv.number == number for lv in self.levels)

    def level(self, number: int) -> Level:
        lv = next((lv for lv in self.levels if lv.number == number), None)
        if lv is None:
            raise LevelNotFoundError(f"No level numbered {number}")
        return lv
