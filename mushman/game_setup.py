from __future__ import annotations

import logging

from mushman.levels.registry import LevelPack
from mushman.play_state import Inventory, PlayState

logger = logging.getLogger(__name__)


def enter_level(pack: LevelPack, number: int) -> PlayState:
    """Start (or restart) level `number` from its pristine template.

    The inventory starts empty and the player stands on the level's start cell.
    Raises `LevelNotFoundError` for numbers the pack does not contain.
    """

    level = pack.level(number)

    logger.info("Changing level: %d", number)
    logger.info("Width x Height: %d x %d", level.width, level.height)

    return PlayState(
        level=level,
        grid=level.grid(),
        inventory=Inventory(),
        player=level.start_pos,
    )
