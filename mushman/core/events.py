from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from mushman.core.cells import Cell
from mushman.core.grid import Coord

SignalType = Literal[
    "POSITION_CHANGED",
    "CELL_CHANGED",
    "PLAYER_DIED",
    "LEVEL_ADVANCE_REQUESTED",
    "SOUND",
]


class Sound(StrEnum):
    player_die = "player_die"
    hit_wall = "hit_wall"
    explosion = "explosion"


@dataclass(frozen=True, slots=True)
class PositionChanged:
    pos: Coord
    type: SignalType = "POSITION_CHANGED"


@dataclass(frozen=True, slots=True)
class CellChanged:
    """A tile's kind was replaced; renderers resync whatever they bound to `coord`."""

    coord: Coord
    cell: Cell
    type: SignalType = "CELL_CHANGED"


@dataclass(frozen=True, slots=True)
class PlayerDied:
    message: str
    type: SignalType = "PLAYER_DIED"


@dataclass(frozen=True, slots=True)
class LevelAdvanceRequested:
    next_level: int
    type: SignalType = "LEVEL_ADVANCE_REQUESTED"


@dataclass(frozen=True, slots=True)
class SoundCue:
    sound: Sound
    type: SignalType = "SOUND"


Signal = PositionChanged | CellChanged | PlayerDied | LevelAdvanceRequested | SoundCue
