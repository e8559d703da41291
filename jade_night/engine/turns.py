"""
Jade Night - Turn & Endgame Engine

Turn order cycles through player ids in lexicographic order. Each time play
returns to player "0" a new round begins.

The game end is a one-way latch: the first turn advance that finds no
level-2 plate left in the reward deck records the current round. From then
on every player gets one more full round, and the game ends at the first
start-of-round boundary at least player-count rounds past the latch.
"""

import logging
from dataclasses import dataclass

from jade_night.engine.base import ACTION_POINTS_PER_TURN, Pending, TriggeredAt
from jade_night.engine.cards import count_level
from jade_night.engine.scoring import PlayerStanding, ScoringEngine
from jade_night.engine.state import GameState, PlayerState

logger = logging.getLogger(__name__)

FIRST_PLAYER = "0"


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of a finished game.

    Attributes:
        standings: Players best first
        winner_id: Id of the winning player
        reason: Why the game ended
    """
    standings: tuple[PlayerStanding, ...]
    winner_id: str
    reason: str = "level_2_rewards_exhausted"

    @property
    def scores(self) -> dict[str, int]:
        return {s.player_id: s.score.total_score for s in self.standings}


class TurnEngine:
    """Stateless engine for turn advancement and game end detection."""

    END_TRIGGER_LEVEL: int = 2

    @classmethod
    def reset_turn_resources(cls, player: PlayerState) -> None:
        """Restore a player's per-turn action points and flags."""
        player.action_points = ACTION_POINTS_PER_TURN
        player.taste_done_this_turn = False
        player.tea_token_used_this_turn = False

    @classmethod
    def next_player_id(cls, state: GameState) -> str:
        """
        Id of the player after the current one, wrapping around.

        Raises:
            KeyError: If current_player is not a player id
        """
        if state.current_player not in state.players:
            raise KeyError(state.current_player)
        pids = state.player_ids
        index = pids.index(state.current_player)
        return pids[(index + 1) % len(pids)]

    @classmethod
    def advance_turn(cls, state: GameState) -> None:
        """
        Hand play to the next player.

        Precondition: the current player's turn is over.
        Postcondition: current_player is the cyclic successor with fresh
        per-turn resources; turn is incremented when that successor is "0";
        the end condition is latched at turn if still pending and the reward
        deck holds no level-2 plate.

        Args:
            state: Game state, mutated in place
        """
        state.current_player = cls.next_player_id(state)
        cls.reset_turn_resources(state.players[state.current_player])

        if state.current_player == FIRST_PLAYER:
            state.turn += 1

        if isinstance(state.end_condition, Pending):
            if count_level(state.reward_deck, cls.END_TRIGGER_LEVEL) == 0:
                state.end_condition = TriggeredAt(round=state.turn)
                logger.info("End condition latched at round %d", state.turn)

        logger.debug("Turn passed to player %s (round %d)", state.current_player, state.turn)

    @classmethod
    def is_game_over(cls, state: GameState) -> bool:
        """
        Check whether the game has ended.

        Returns:
            True once the end condition is latched, play is back at player
            "0", and at least player-count rounds have passed since the latch
        """
        triggered_round = state.end_condition.triggered_round
        if triggered_round is None:
            return False

        is_start_of_round = state.current_player == FIRST_PLAYER
        rounds_since_trigger = state.turn - triggered_round
        return is_start_of_round and rounds_since_trigger >= state.num_players

    @classmethod
    def game_result(cls, state: GameState) -> GameResult:
        """
        Final standings of a finished game.

        Raises:
            ValueError: If the game is not over yet
        """
        if not cls.is_game_over(state):
            raise ValueError("Game is not over yet.")

        standings = tuple(ScoringEngine.rank_players(state))
        return GameResult(standings=standings, winner_id=standings[0].player_id)


def advance_turn(state: GameState) -> None:
    TurnEngine.advance_turn(state)


def is_game_over(state: GameState) -> bool:
    return TurnEngine.is_game_over(state)
