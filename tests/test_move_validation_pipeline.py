from __future__ import annotations

import pytest

from mushman.core.grid import Delta
from mushman.game_setup import enter_level
from mushman.levels.singleton import get_pack
from mushman.play_state import PlayStatus
from mushman.turn_processing.validators import (
    DEFAULT_MOVE_PIPELINE,
    InvalidMoveError,
    MoveContext,
    StatusValidator,
    ValidatorPipeline,
)


def test_status_validator_denies_dead_player() -> None:
    state = enter_level(get_pack(), 1)
    state.status = PlayStatus.dead
    ctx = MoveContext(level_number=1, delta=Delta(0, 1))

    with pytest.raises(ValueError) as e:
        DEFAULT_MOVE_PIPELINE.validate(ctx=ctx, state=state)

    assert "not allowed" in str(e.value)
    assert "dead" in str(e.value)
    assert "(allowed: playing)" in str(e.value)


def test_exited_level_takes_no_more_moves() -> None:
    state = enter_level(get_pack(), 1)
    state.status = PlayStatus.exited

    with pytest.raises(InvalidMoveError) as e:
        DEFAULT_MOVE_PIPELINE.validate(ctx=MoveContext(level_number=1, delta=Delta(1, 0)), state=state)
    assert "exited" in str(e.value)


def test_stale_level_number_is_rejected() -> None:
    state = enter_level(get_pack(), 3)
    ctx = MoveContext(level_number=2, delta=Delta(0, 1))

    with pytest.raises(InvalidMoveError) as e:
        DEFAULT_MOVE_PIPELINE.validate(ctx=ctx, state=state)
    assert "level 2" in str(e.value)
    assert "level 3" in str(e.value)


@pytest.mark.parametrize("delta", [Delta(0, 0), Delta(1, 1), Delta(-2, 0)])
def test_single_step_validator(delta: Delta) -> None:
    state = enter_level(get_pack(), 1)
    with pytest.raises(InvalidMoveError) as e:
        DEFAULT_MOVE_PIPELINE.validate(ctx=MoveContext(level_number=1, delta=delta), state=state)
    assert "orthogonal" in str(e.value)


def test_custom_pipeline_can_allow_other_statuses() -> None:
    state = enter_level(get_pack(), 1)
    state.status = PlayStatus.dead
    lenient = ValidatorPipeline(validators=(StatusValidator(allowed_statuses=frozenset(PlayStatus)),))

    lenient.validate(ctx=MoveContext(level_number=1, delta=Delta(0, 1)), state=state)
