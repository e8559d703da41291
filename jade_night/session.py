"""
Jade Night - Session Setup

Starts a game from application settings: player count default, RNG seed and
logging level all come from the environment.
"""

import logging

from jade_night.config.settings import Settings, configure_logging, get_settings, make_rng
from jade_night.engine.state import GameState, PlayerState, create_initial_state

logger = logging.getLogger(__name__)


def start_game(num_players: int | None = None, settings: Settings | None = None) -> GameState:
    """
    Create a game using configured defaults.

    Args:
        num_players: Player count (settings.default_num_players when omitted)
        settings: Settings to use (cached environment settings when omitted)

    Returns:
        Fresh GameState

    Raises:
        ValueError: If the player count is out of range
    """
    settings = settings or get_settings()
    configure_logging(settings)
    count = num_players if num_players is not None else settings.default_num_players
    if settings.rng_seed is not None:
        logger.debug("Seeding game RNG with %d", settings.rng_seed)
    return create_initial_state(count, rng=make_rng(settings))


def has_waiting_space(player: PlayerState, settings: Settings | None = None) -> bool:
    """Whether the player's waiting area is below the configured cap."""
    settings = settings or get_settings()
    return len(player.waiting_area) < settings.waiting_area_limit
