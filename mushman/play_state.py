from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from mushman.core.cells import Item
from mushman.core.grid import Coord, Grid
from mushman.levels.registry import Level


class PlayStatus(StrEnum):
    playing = "playing"
    dead = "dead"
    exited = "exited"


@dataclass(slots=True)
class Inventory:
    counts: dict[Item, int] = field(default_factory=dict)

    def count(self, item: Item) -> int:
        return self.counts.get(item, 0)

    def add(self, item: Item, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError("amount must be >= 0")
        self.counts[item] = self.count(item) + amount

    def consume(self, item: Item) -> bool:
        """Spend one `item`. Returns False (and changes nothing) when there is none."""

        have = self.count(item)
        if have == 0:
            return False
        self.counts[item] = have - 1
        return True

    def as_dict(self) -> dict[Item, int]:
        return {item: self.count(item) for item in Item}

    def copy(self) -> Inventory:
        return Inventory(counts=dict(self.counts))


@dataclass(slots=True)
class PlayState:
    """Working copy of the active level plus everything the player carries.

    Only the movement engine writes to this; presentation code reads copies.
    """

    level: Level
    grid: Grid
    inventory: Inventory
    player: Coord
    status: PlayStatus = PlayStatus.playing
    death_message: str | None = None

    def copy(self) -> PlayState:
        return PlayState(
            level=self.level,
            grid=self.grid.copy(),
            inventory=self.inventory.copy(),
            player=self.player,
            status=self.status,
            death_message=self.death_message,
        )
