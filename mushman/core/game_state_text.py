from __future__ import annotations

from mushman.core.cells import Cell, Teleport
from mushman.core.grid import Coord, Grid
from mushman.levels.parse import CELL_CODES, TELEPORT_CODE, TELEPORT_DIRECTIONS
from mushman.play_state import PlayState

PLAYER_CODE = "@"

_TILE_TO_CODE = {tile: code for code, tile in CELL_CODES.items()}
_DIRECTION_TO_DIGIT = {direction: digit for digit, direction in TELEPORT_DIRECTIONS.items()}


def cell_code(cell: Cell) -> str:
    """Level-file spelling of `cell` (teleporters take three characters)."""

    if isinstance(cell, Teleport):
        return f"{TELEPORT_CODE}{cell.id}{_DIRECTION_TO_DIGIT[cell.direction]}"
    return _TILE_TO_CODE[cell]


def grid_rows_to_text(grid: Grid, *, player: Coord | None = None) -> list[str]:
    rows: list[str] = []
    for r, row in enumerate(grid.cells):
        parts = [
            PLAYER_CODE if player is not None and player == Coord(r, c) else cell_code(cell)
            for c, cell in enumerate(row)
        ]
        rows.append("".join(parts))
    return rows


def grid_to_text(grid: Grid, *, player: Coord | None = None) -> str:
    return "\n".join(grid_rows_to_text(grid, player=player))


def play_state_to_text(state: PlayState) -> str:
    """Deterministic multi-line summary for logs and debugging.

    The player is drawn as `@`; every other cell uses its level-file code.
    """

    header = f"{state.level.title} (#{state.level.number}) [{state.status.value}]"
    carrying = ", ".join(f"{item.value}={n}" for item, n in state.inventory.as_dict().items() if n)
    lines = [header, f"Inventory: {carrying or '(empty)'}"]
    if state.death_message:
        lines.append(f"Died: {state.death_message}")
    lines.append(grid_to_text(state.grid, player=state.player))
    return "\n".join(lines)
