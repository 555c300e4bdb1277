from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from mushman.core.cells import Cell, Direction, Tile


@dataclass(frozen=True, slots=True)
class Delta:
    drow: int
    dcol: int

    @property
    def is_orthogonal_step(self) -> bool:
        return abs(self.drow) + abs(self.dcol) == 1


@dataclass(frozen=True, slots=True)
class Coord:
    row: int
    col: int

    def offset(self, delta: Delta) -> Coord:
        return Coord(self.row + delta.drow, self.col + delta.dcol)


DIRECTION_DELTAS: dict[Direction, Delta] = {
    Direction.up: Delta(-1, 0),
    Direction.down: Delta(1, 0),
    Direction.left: Delta(0, -1),
    Direction.right: Delta(0, 1),
}

# Area effects pass over these.
BLAST_IMMUNE: frozenset[Cell] = frozenset({Tile.metal_wall, Tile.water})


@dataclass(slots=True)
class Grid:
    """Mutable rectangular map of cells, indexed by `Coord`."""

    cells: list[list[Cell]]

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("Grid needs at least one row and one column")
        width = len(self.cells[0])
        if any(len(row) != width for row in self.cells):
            raise ValueError("Grid rows must all have the same width")

    @staticmethod
    def from_rows(rows: Sequence[Sequence[Cell]]) -> Grid:
        return Grid(cells=[list(row) for row in rows])

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.row < self.height and 0 <= coord.col < self.width

    def __getitem__(self, coord: Coord) -> Cell:
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} outside {self.height}x{self.width} grid")
        return self.cells[coord.row][coord.col]

    def __setitem__(self, coord: Coord, cell: Cell) -> None:
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} outside {self.height}x{self.width} grid")
        self.cells[coord.row][coord.col] = cell

    def coords(self) -> Iterator[Coord]:
        """Row-major walk over every coordinate."""

        for r in range(self.height):
            for c in range(self.width):
                yield Coord(r, c)

    def find(self, cell: Cell) -> Coord | None:
        return next((p for p in self.coords() if self[p] == cell), None)

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.cells)

    def copy(self) -> Grid:
        return Grid(cells=[list(row) for row in self.cells])


def neighbors_in_bounds(grid: Grid, coord: Coord, delta: Delta) -> Coord | None:
    """One step from `coord` along `delta`, or None when that leaves the grid."""

    target = coord.offset(delta)
    return target if grid.in_bounds(target) else None


def blast_radius(grid: Grid, coord: Coord) -> frozenset[Coord]:
    """The clipped 3x3 block around `coord` (centre included), minus immune cells."""

    out: set[Coord] = set()
    for drow in (-1, 0, 1):
        for dcol in (-1, 0, 1):
            p = neighbors_in_bounds(grid, coord, Delta(drow, dcol))
            if p is not None and grid[p] not in BLAST_IMMUNE:
                out.add(p)
    return frozenset(out)
