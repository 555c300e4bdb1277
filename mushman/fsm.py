from __future__ import annotations

from typing import TYPE_CHECKING

from statemachine import State, StateMachine

from mushman.api.models import SessionPhase

if TYPE_CHECKING:
    from mushman.game_loop import GameSession


class SessionFSM(StateMachine):
    """FSM wrapper around GameSession.

    - phases: playing -> game_over (restart returns to playing) | completed
    - moves and level changes are applied by the session; the FSM only guards transitions.
    """

    playing = State(SessionPhase.playing.value, value=SessionPhase.playing.value, initial=True)
    game_over = State(SessionPhase.game_over.value, value=SessionPhase.game_over.value)
    completed = State(SessionPhase.completed.value, value=SessionPhase.completed.value, final=True)

    died = playing.to(game_over)
    advanced = playing.to.itself()
    finished = playing.to(completed)
    restarted = game_over.to(playing) | playing.to.itself()

    def __init__(self, session: GameSession):
        self.session = session
        super().__init__(start_value=session.phase.value)

    def sync_phase_to_model(self) -> None:
        self.session.phase = SessionPhase(str(self.current_state.value))
