from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from mushman.core.cells import (
    Add,
    AdvanceLevel,
    AreaExplode,
    Block,
    BranchEffect,
    Cell,
    CellEffect,
    Consume,
    Die,
    DirectionalShoot,
    Nothing,
    Push,
    TeleportTo,
    Tile,
    effect_of,
)
from mushman.core.events import (
    CellChanged,
    LevelAdvanceRequested,
    PlayerDied,
    PositionChanged,
    Signal,
    Sound,
    SoundCue,
)
from mushman.core.grid import Coord, Delta, blast_radius, neighbors_in_bounds
from mushman.play_state import PlayState, PlayStatus
from mushman.turn_processing.validators import DEFAULT_MOVE_PIPELINE, MoveContext, ValidatorPipeline

logger = logging.getLogger(__name__)

# A pushed jelly bean may only slide onto these.
PUSHABLE_ONTO: frozenset[Cell] = frozenset({Tile.empty, Tile.start})

EXPLOSION_DEATH = "died in an explosion"
EXIT_DESTROYED_DEATH = "blew up the exit"


class MoveOutcome(StrEnum):
    moved = "moved"
    blocked = "blocked"
    died = "died"
    level_advance = "level_advance"
    unsupported = "unsupported"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Post-move state plus the signals presentation code should react to.

    Unpacks as `(state, signals)`.
    """

    state: PlayState
    signals: tuple[Signal, ...]
    outcome: MoveOutcome
    effect: CellEffect | None = None

    def __iter__(self) -> Iterator[object]:
        return iter((self.state, self.signals))


@dataclass(slots=True)
class _Resolution:
    state: PlayState
    dest: Coord
    delta: Delta
    signals: list[Signal] = field(default_factory=list)

    def set_cell(self, coord: Coord, cell: Cell) -> None:
        if self.state.grid[coord] == cell:
            return
        self.state.grid[coord] = cell
        self.signals.append(CellChanged(coord=coord, cell=cell))

    def move(self) -> MoveOutcome:
        self.state.player = self.dest
        self.signals.append(PositionChanged(pos=self.dest))
        return MoveOutcome.moved

    def reject(self) -> MoveOutcome:
        self.signals.append(SoundCue(sound=Sound.hit_wall))
        return MoveOutcome.blocked

    def die(self, message: str) -> MoveOutcome:
        self.state.status = PlayStatus.dead
        self.state.death_message = message
        self.signals.append(SoundCue(sound=Sound.player_die))
        self.signals.append(PlayerDied(message=message))
        return MoveOutcome.died

    def hazard_death(self, coord: Coord) -> str | None:
        """Death message if blasting `coord` is fatal, else None."""

        cell = self.state.grid[coord]
        if cell == Tile.barrel:
            return EXPLOSION_DEATH
        if cell == Tile.exit:
            return EXIT_DESTROYED_DEATH
        return None

    def branch(self, effect: BranchEffect) -> MoveOutcome:
        match effect:
            case Nothing():
                return self.move()
            case Block():
                return self.reject()
            case Die(message=message):
                return self.die(message)
        raise TypeError(f"Unsupported branch effect: {effect!r}")

    def apply(self, effect: CellEffect) -> MoveOutcome:
        grid = self.state.grid
        inventory = self.state.inventory

        match effect:
            case Nothing():
                return self.move()

            case Block():
                return self.reject()

            case Add(item=item, amount=amount):
                self.set_cell(self.dest, Tile.empty)
                inventory.add(item, amount)
                return self.move()

            case Consume(item=item, on_failure=on_failure, on_success=on_success):
                if not inventory.consume(item):
                    return self.branch(on_failure)
                self.set_cell(self.dest, Tile.empty)
                return self.branch(on_success)

            case AreaExplode():
                self.signals.append(SoundCue(sound=Sound.explosion))
                for p in sorted(blast_radius(grid, self.dest), key=lambda c: (c.row, c.col)):
                    message = self.hazard_death(p)
                    if message is not None:
                        return self.die(message)
                    self.set_cell(p, Tile.empty)
                return self.move()

            case DirectionalShoot():
                self.signals.append(SoundCue(sound=Sound.explosion))
                message = self.hazard_death(self.dest)
                if message is not None:
                    return self.die(message)
                self.set_cell(self.dest, Tile.empty)
                # The shot cell beyond is cleared without the hazard check.
                beyond = neighbors_in_bounds(grid, self.dest, self.delta)
                if beyond is not None:
                    self.set_cell(beyond, Tile.empty)
                return self.move()

            case Push():
                beyond = neighbors_in_bounds(grid, self.dest, self.delta)
                if beyond is None or grid[beyond] not in PUSHABLE_ONTO:
                    return self.reject()
                self.set_cell(self.dest, Tile.empty)
                self.set_cell(beyond, Tile.jelly_bean)
                return self.move()

            case TeleportTo():
                logger.warning("Teleport effect not supported yet: %r at %r", effect, self.dest)
                return MoveOutcome.unsupported

            case Die(message=message):
                return self.die(message)

            case AdvanceLevel():
                self.state.status = PlayStatus.exited
                self.signals.append(LevelAdvanceRequested(next_level=self.state.level.number + 1))
                return MoveOutcome.level_advance

        raise TypeError(f"Unknown cell effect: {effect!r}")


def resolve_move(
    state: PlayState,
    delta: Delta,
    *,
    level_number: int | None = None,
    pipeline: ValidatorPipeline = DEFAULT_MOVE_PIPELINE,
) -> MoveResult:
    """Resolve one player step.

    Validates the request (raising `InvalidMoveError`), then applies the effect
    of the destination cell to a copy of `state`. The input state is never
    modified; the returned state is the post-move world.

    `level_number` is the level the intent was computed for; a mismatch with
    the active level is rejected. It defaults to the active level.
    """

    intended = state.level.number if level_number is None else level_number
    pipeline.validate(ctx=MoveContext(level_number=intended, delta=delta), state=state)

    work = state.copy()
    dest = neighbors_in_bounds(work.grid, work.player, delta)
    if dest is None:
        # Walking off the map edge.
        return MoveResult(state=work, signals=(), outcome=MoveOutcome.blocked)

    effect = effect_of(work.grid[dest])
    resolution = _Resolution(state=work, dest=dest, delta=delta)
    outcome = resolution.apply(effect)

    logger.debug(
        "Move %s -> %s: %s (%s)",
        (state.player.row, state.player.col),
        (dest.row, dest.col),
        outcome.value,
        type(effect).__name__,
    )
    return MoveResult(state=work, signals=tuple(resolution.signals), outcome=outcome, effect=effect)
