from __future__ import annotations

from mushman.core.cells import Direction
from mushman.core.grid import DIRECTION_DELTAS, Coord, Delta
from mushman.play_state import PlayState


def delta_for(direction: Direction | str) -> Delta:
    return DIRECTION_DELTAS[Direction(direction)]


def destination_for(*, state: PlayState, direction: Direction | str, clamp: bool = True) -> Coord:
    """Return the cell one step from the player toward `direction`.

    With `clamp` the result is pinned to the grid, so pressing toward an edge
    yields the player's own cell (callers treat that as "no move").
    """

    dest = state.player.offset(delta_for(direction))
    if not clamp:
        return dest

    grid = state.grid
    return Coord(
        row=min(max(dest.row, 0), grid.height - 1),
        col=min(max(dest.col, 0), grid.width - 1),
    )


def is_noop_intent(*, state: PlayState, direction: Direction | str) -> bool:
    return destination_for(state=state, direction=direction) == state.player
