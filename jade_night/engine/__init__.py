"""
Jade Night Game Engine.

Pure Python game logic with zero UI/network dependencies.
Handles deck setup, public grid refill, scoring, and turn/endgame tracking.
"""

from jade_night.engine.base import (
    Card,
    CardAttributes,
    CardKind,
    Color,
    EndCondition,
    FinalScore,
    Pending,
    Shape,
    Slot,
    Temperature,
    TriggeredAt,
)
from jade_night.engine.cards import AuthoredDecks, build_authored_decks, shuffle
from jade_night.engine.grid import PublicGridEngine, refresh_grid_snacks, refresh_grid_tableware
from jade_night.engine.scoring import ScoringEngine, final_score, pairing_score
from jade_night.engine.state import GameState, PlayerState, create_initial_state
from jade_night.engine.turns import GameResult, TurnEngine, advance_turn, is_game_over

__all__ = [
    # Data Classes
    "Card",
    "CardAttributes",
    "Slot",
    "FinalScore",
    "GameResult",
    "GameState",
    "PlayerState",
    "AuthoredDecks",
    # Enums
    "CardKind",
    "Color",
    "Shape",
    "Temperature",
    # End condition
    "EndCondition",
    "Pending",
    "TriggeredAt",
    # Engines
    "PublicGridEngine",
    "ScoringEngine",
    "TurnEngine",
    # Primitives
    "advance_turn",
    "build_authored_decks",
    "create_initial_state",
    "final_score",
    "is_game_over",
    "pairing_score",
    "refresh_grid_snacks",
    "refresh_grid_tableware",
    "shuffle",
]
