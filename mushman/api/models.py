"""Read-only snapshot models handed to presentation collaborators."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from mushman.core.game_state_text import grid_rows_to_text
from mushman.play_state import PlayState, PlayStatus


class SessionPhase(StrEnum):
    playing = "playing"
    game_over = "game_over"
    completed = "completed"


class LevelSummary(BaseModel):
    number: int
    name: str
    author: str
    title: str
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)


class PlayStateSnapshot(BaseModel):
    level: LevelSummary

    # Level-file codes per row, with the player drawn as '@'.
    rows: list[str]

    player: tuple[int, int]
    inventory: dict[str, int] = Field(default_factory=dict)
    status: PlayStatus = PlayStatus.playing
    death_message: str | None = None


class SessionSnapshot(BaseModel):
    phase: SessionPhase
    play: PlayStateSnapshot
    signals_seen: int = 0


def snapshot_play_state(state: PlayState) -> PlayStateSnapshot:
    level = state.level
    return PlayStateSnapshot(
        level=LevelSummary(
            number=level.number,
            name=level.name,
            author=level.author,
            title=level.title,
            width=state.grid.width,
            height=state.grid.height,
        ),
        rows=grid_rows_to_text(state.grid, player=state.player),
        player=(state.player.row, state.player.col),
        inventory={item.value: n for item, n in state.inventory.as_dict().items()},
        status=state.status,
        death_message=state.death_message,
    )
