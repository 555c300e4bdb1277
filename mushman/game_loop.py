from __future__ import annotations

import logging
from dataclasses import dataclass, field

from mushman.actions import MoveOutcome, MoveResult, resolve_move
from mushman.api.models import SessionPhase, SessionSnapshot, snapshot_play_state
from mushman.core.cells import Direction
from mushman.core.events import LevelAdvanceRequested, PlayerDied, Signal
from mushman.fsm import SessionFSM
from mushman.game_setup import enter_level
from mushman.levels.registry import LevelPack
from mushman.play_state import PlayState
from mushman.turn_processing.turns import delta_for

logger = logging.getLogger(__name__)


class SessionError(ValueError):
    pass


@dataclass(slots=True)
class GameSession:
    """Level-transition wiring around the movement engine.

    Reacts to the engine's signals the way the game shell does: death ends the
    game, reaching an exit loads the next level, and running out of levels
    completes the pack.
    """

    pack: LevelPack
    state: PlayState = field(init=False)
    phase: SessionPhase = SessionPhase.playing
    history: list[Signal] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.state = enter_level(self.pack, self.pack.first_number)

    @property
    def level_number(self) -> int:
        return self.state.level.number

    def move(self, direction: Direction | str, *, level_number: int | None = None) -> MoveResult:
        """Resolve one step. `level_number` names the level the input was read on."""

        fsm = SessionFSM(self)
        if fsm.current_state != fsm.playing:
            raise SessionError(f"Cannot move while session is '{self.phase.value}'")

        result = resolve_move(self.state, delta_for(direction), level_number=level_number)
        self.state = result.state
        self.history.extend(result.signals)

        for signal in result.signals:
            match signal:
                case PlayerDied(message=message):
                    logger.info("%s", message)
                    fsm.died()
                case LevelAdvanceRequested(next_level=next_level):
                    if self.pack.has_level(next_level):
                        fsm.advanced()
                        self.state = enter_level(self.pack, next_level)
                    else:
                        logger.info("Level pack completed at level %d", self.level_number)
                        fsm.finished()

        if result.outcome is MoveOutcome.unsupported:
            logger.warning("Move on level %d hit an unsupported effect", self.level_number)

        fsm.sync_phase_to_model()
        return result

    def restart(self) -> PlayState:
        fsm = SessionFSM(self)
        if fsm.current_state == fsm.completed:
            raise SessionError("Session is completed")
        fsm.restarted()
        self.state = enter_level(self.pack, self.level_number)
        fsm.sync_phase_to_model()
        return self.state

    def skip_level(self, step: int = 1) -> PlayState:
        """Jump `step` levels forward (or back) in pack order, clamped to the pack."""

        fsm = SessionFSM(self)
        if fsm.current_state != fsm.playing:
            raise SessionError(f"Cannot change level while session is '{self.phase.value}'")

        numbers = [lv.number for lv in self.pack.levels]
        index = min(max(numbers.index(self.level_number) + step, 0), len(numbers) - 1)
        target = numbers[index]
        if target != self.level_number:
            fsm.advanced()
            self.state = enter_level(self.pack, target)
            fsm.sync_phase_to_model()
        return self.state

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self.phase,
            play=snapshot_play_state(self.state.copy()),
            signals_seen=len(self.history),
        )
