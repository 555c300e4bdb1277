from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Tile(StrEnum):
    empty = "empty"
    wall = "wall"
    start = "start"
    exit = "exit"
    bomb = "bomb"
    cement = "cement"
    barrel = "barrel"
    money = "money"
    guard = "guard"
    hole = "hole"
    metal_wall = "metal_wall"
    jelly_bean = "jelly_bean"
    key = "key"
    lock = "lock"
    gun = "gun"
    oxygen = "oxygen"
    water = "water"


class Direction(StrEnum):
    up = "up"
    down = "down"
    left = "left"
    right = "right"


class Item(StrEnum):
    key = "key"
    oxygen = "oxygen"
    cement = "cement"
    money = "money"


TELEPORT_IDS = range(1, 6)


@dataclass(frozen=True, slots=True)
class Teleport:
    """A teleporter pad. `id` pairs pads (1..5); `direction` is the facing."""

    id: int
    direction: Direction

    def __post_init__(self) -> None:
        if self.id not in TELEPORT_IDS:
            raise ValueError(f"Invalid teleport number: {self.id}")


Cell = Tile | Teleport


# Effects. Consume branches only accept the leaf effects below.


@dataclass(frozen=True, slots=True)
class Nothing:
    pass


@dataclass(frozen=True, slots=True)
class Block:
    pass


@dataclass(frozen=True, slots=True)
class Die:
    message: str


BranchEffect = Nothing | Block | Die


@dataclass(frozen=True, slots=True)
class Add:
    item: Item
    amount: int = 1

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise ValueError("amount must be > 0")


@dataclass(frozen=True, slots=True)
class Consume:
    """Spend one `item`; run `on_failure` when there is none, else `on_success`."""

    item: Item
    on_failure: BranchEffect
    on_success: BranchEffect

    def __post_init__(self) -> None:
        for name in ("on_failure", "on_success"):
            branch = getattr(self, name)
            if not isinstance(branch, (Nothing, Block, Die)):
                raise TypeError(f"Unsupported {name} effect for Consume: {type(branch).__name__}")


@dataclass(frozen=True, slots=True)
class AreaExplode:
    pass


@dataclass(frozen=True, slots=True)
class DirectionalShoot:
    pass


@dataclass(frozen=True, slots=True)
class Push:
    pass


@dataclass(frozen=True, slots=True)
class TeleportTo:
    id: int
    direction: Direction


@dataclass(frozen=True, slots=True)
class AdvanceLevel:
    pass


CellEffect = Nothing | Block | Add | Consume | AreaExplode | DirectionalShoot | Push | TeleportTo | Die | AdvanceLevel


_TILE_EFFECTS: dict[Tile, CellEffect] = {
    Tile.empty: Nothing(),
    Tile.start: Nothing(),
    Tile.wall: Block(),
    Tile.metal_wall: Block(),
    Tile.barrel: Block(),
    Tile.exit: AdvanceLevel(),
    Tile.bomb: AreaExplode(),
    Tile.gun: DirectionalShoot(),
    Tile.jelly_bean: Push(),
    Tile.key: Add(Item.key, 1),
    Tile.oxygen: Add(Item.oxygen, 1),
    Tile.cement: Add(Item.cement, 1),
    Tile.money: Add(Item.money, 1),
    # Guards take a bribe; without money they just stand in the way.
    Tile.guard: Consume(Item.money, on_failure=Block(), on_success=Nothing()),
    Tile.lock: Consume(Item.key, on_failure=Block(), on_success=Nothing()),
    Tile.hole: Consume(Item.cement, on_failure=Die("fell into a hole"), on_success=Nothing()),
    Tile.water: Consume(Item.oxygen, on_failure=Die("drowned"), on_success=Nothing()),
}


def effect_of(cell: Cell) -> CellEffect:
    """Return the effect triggered when the player tries to enter `cell`."""

    if isinstance(cell, Teleport):
        return TeleportTo(id=cell.id, direction=cell.direction)
    return _TILE_EFFECTS[cell]


# Presentation hints: indices into the 6x7 sprite atlas.

PLAYER_SPRITE_INDEX = 0

_TILE_SPRITES: dict[Tile, tuple[int, ...]] = {
    Tile.empty: (26,),
    Tile.wall: (6,),
    Tile.start: (26,),
    Tile.exit: (5,),
    Tile.bomb: (1,),
    Tile.cement: (20,),
    Tile.barrel: (10,),
    Tile.money: (13,),
    Tile.guard: (14,),
    Tile.hole: (4,),
    Tile.metal_wall: (7,),
    Tile.jelly_bean: (11,),
    Tile.key: (2,),
    Tile.lock: (3,),
    Tile.gun: (9,),
    Tile.oxygen: (19,),
    Tile.water: (8,),
}

_TELEPORT_SPRITES: dict[int, tuple[int, ...]] = {
    1: (15, 16, 17),
    2: (21, 22, 23),
    3: (27, 28, 29),
    4: (33, 34, 35),
    5: (39, 40, 41),
}


def sprite_indices(cell: Cell) -> tuple[int, ...]:
    """Atlas frames for `cell`; teleporters animate over three frames."""

    if isinstance(cell, Teleport):
        frames = _TELEPORT_SPRITES.get(cell.id)
        if frames is None:
            raise ValueError(f"Invalid teleport number: {cell.id}")
        return frames
    return _TILE_SPRITES[cell]
