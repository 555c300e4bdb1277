from __future__ import annotations

import logging

from dotenv import load_dotenv

from mushman.config import settings_from_env
from mushman.game_loop import GameSession
from mushman.levels.startup import init_pack_for_app

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))


def bootstrap() -> GameSession:
    """Load `.env`, configure logging, load the level pack, and open a session on its first level.

    A bad pack raises `LevelLoadError`; there is no retry.
    """

    load_dotenv(override=False)
    settings = settings_from_env()
    configure_logging(settings.log_level)

    pack = init_pack_for_app()
    logger.info("Loaded level pack from %s (checksum %d)", settings.levels_path, pack.checksum)
    return GameSession(pack=pack)
