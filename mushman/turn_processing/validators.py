from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from mushman.core.grid import Delta
from mushman.play_state import PlayState, PlayStatus


class InvalidMoveError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class MoveContext:
    """Inputs available to validators.

    Keep this tight and loggable.
    """

    level_number: int
    delta: Delta


class MoveValidator(ABC):
    """A small, composable validation unit for a requested move."""

    @abstractmethod
    def validate(self, *, ctx: MoveContext, state: PlayState) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class StatusValidator(MoveValidator):
    """Moves are only resolved while the level is still being played."""

    allowed_statuses: frozenset[PlayStatus]

    def validate(self, *, ctx: MoveContext, state: PlayState) -> None:
        if state.status not in self.allowed_statuses:
            allowed = ",".join(sorted(s.value for s in self.allowed_statuses))
            raise InvalidMoveError(f"Move not allowed while '{state.status.value}' (allowed: {allowed})")


@dataclass(frozen=True, slots=True)
class SingleStepValidator(MoveValidator):
    """The player moves exactly one cell up, down, left or right."""

    def validate(self, *, ctx: MoveContext, state: PlayState) -> None:
        if not ctx.delta.is_orthogonal_step:
            raise InvalidMoveError(f"Move must be one orthogonal step, got ({ctx.delta.drow}, {ctx.delta.dcol})")


@dataclass(frozen=True, slots=True)
class LevelMatchValidator(MoveValidator):
    """Guard against a stale intent computed for a different level."""

    def validate(self, *, ctx: MoveContext, state: PlayState) -> None:
        if ctx.level_number != state.level.number:
            raise InvalidMoveError(f"Move targets level {ctx.level_number} but level {state.level.number} is active")


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[MoveValidator, ...]

    def validate(self, *, ctx: MoveContext, state: PlayState) -> None:
        for v in self.validators:
            v.validate(ctx=ctx, state=state)


DEFAULT_MOVE_PIPELINE = ValidatorPipeline(
    validators=(
        StatusValidator(allowed_statuses=frozenset({PlayStatus.playing})),
        LevelMatchValidator(),
        SingleStepValidator(),
    )
)
