"""
Jade Night - Player & Game State

The mutable aggregate of decks, public grid, players and progress markers.
A GameState is created once by create_initial_state and afterwards mutated
in place, one writer at a time, by the engine primitives (grid refill, turn
advance) and by the external move layer.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass, field

from jade_night.engine.base import (
    ACTION_POINTS_PER_TURN,
    GRID_SIZE,
    Card,
    EndCondition,
    Pending,
    Slot,
)
from jade_night.engine.cards import AuthoredDecks, build_authored_decks, shuffle, split_tableware
from jade_night.engine.validators import validate_player_count

logger = logging.getLogger(__name__)


@dataclass
class PlayerState:
    """
    Everything one player owns.

    Attributes:
        waiting_area: In-progress pairings, capped by the move layer
        personal_area: Committed pairings, scored by pairing quality
        offering_area: Donated pairings, scored per item
        action_points: Actions left this turn
        tea_tokens: Tea token balance
        tea_token_used_this_turn: Once-per-turn token spend flag
        taste_done_this_turn: Once-per-turn taste flag
        has_jade_chalice: Whether this player holds the Jade Chalice
    """
    waiting_area: list[Slot] = field(default_factory=list)
    personal_area: list[Slot] = field(default_factory=list)
    offering_area: list[Slot] = field(default_factory=list)
    action_points: int = ACTION_POINTS_PER_TURN
    tea_tokens: int = 0
    tea_token_used_this_turn: bool = False
    taste_done_this_turn: bool = False
    has_jade_chalice: bool = False

    def cards(self) -> list[Card]:
        """Every card across the player's three areas."""
        return [
            card
            for area in (self.waiting_area, self.personal_area, self.offering_area)
            for slot in area
            for card in slot.cards()
        ]


@dataclass
class GameState:
    """
    Complete state of one game session.

    Attributes:
        snack_deck: Unseen snacks, top of deck first
        tableware_deck: Unseen level-1 tableware, top of deck first
        reward_deck: Unseen level-2/3 tableware
        public_area: The 9 public grid slots, row-major
        players: Player id ("0".."n-1") to PlayerState
        jade_given: Whether the Jade Chalice has ever been granted
        current_player: Id of the player whose turn it is
        turn: Round counter, incremented when play returns to player "0"
        end_condition: Pending, or the round the end condition latched at
    """
    snack_deck: list[Card] = field(default_factory=list)
    tableware_deck: list[Card] = field(default_factory=list)
    reward_deck: list[Card] = field(default_factory=list)
    public_area: list[Slot] = field(
        default_factory=lambda: [Slot(id=f"public-slot-{i}") for i in range(GRID_SIZE)]
    )
    players: dict[str, PlayerState] = field(default_factory=dict)
    jade_given: bool = False
    current_player: str = "0"
    turn: int = 0
    end_condition: EndCondition = field(default_factory=Pending)

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def player_ids(self) -> list[str]:
        """Player ids in turn order (lexicographic)."""
        return sorted(self.players)

    @property
    def end_condition_triggered_at_round(self) -> int | None:
        """Latched round, or None while the end condition is pending."""
        return self.end_condition.triggered_round

    @property
    def active_player(self) -> PlayerState:
        return self.players[self.current_player]

    def card_ids(self) -> Counter[str]:
        """
        Multiset of every card id held anywhere in the game.

        Used to audit card conservation: decks, grid and all player areas
        together must always equal the authored deck.
        """
        cards: list[Card] = [*self.snack_deck, *self.tableware_deck, *self.reward_deck]
        for slot in self.public_area:
            cards.extend(slot.cards())
        for player in self.players.values():
            cards.extend(player.cards())
        return Counter(card.id for card in cards)


def create_initial_state(
    num_players: int,
    rng: random.Random | None = None,
    decks: AuthoredDecks | None = None,
) -> GameState:
    """
    Set up a new game.

    Steps:
    1. Shuffle snacks, level-1 tableware and level-2/3 reward tableware
    2. Deal one level-1 tableware into each player's waiting area
    3. Stock each grid slot in index order: tableware first, then a snack

    Running out of cards while stocking leaves slots empty; it is not an error.

    Args:
        num_players: Number of players (2-5)
        rng: Random generator for every shuffle (unseeded when omitted)
        decks: Authored card set (the standard one when omitted)

    Returns:
        Fresh GameState with player "0" to act in round 0

    Raises:
        ValueError: If num_players is out of range or two cards share an id
    """
    validate_player_count(num_players)
    rng = rng if rng is not None else random.Random()
    decks = decks if decks is not None else build_authored_decks()
    duplicates = sorted(
        card_id
        for card_id, count in Counter(card.id for card in decks.all_cards).items()
        if count > 1
    )
    if duplicates:
        raise ValueError(f"Card ids must be unique, duplicated: {', '.join(duplicates)}.")

    draw_pile, reward_pile = split_tableware(decks.tableware_deck)
    state = GameState(
        snack_deck=shuffle(decks.snack_deck, rng),
        tableware_deck=shuffle(draw_pile, rng),
        reward_deck=shuffle(reward_pile, rng),
        players={str(i): PlayerState() for i in range(num_players)},
    )

    for pid in state.player_ids:
        if state.tableware_deck:
            start = Slot(id=f"start-{pid}")
            start.put_tableware(state.tableware_deck.pop(0))
            state.players[pid].waiting_area.append(start)

    for slot in state.public_area:
        if state.tableware_deck:
            slot.put_tableware(state.tableware_deck.pop(0))
        if state.snack_deck:
            slot.put_snack(state.snack_deck.pop(0))

    logger.info(
        "Created game for %d players (%d snacks, %d L1, %d reward left)",
        num_players,
        len(state.snack_deck),
        len(state.tableware_deck),
        len(state.reward_deck),
    )
    return state
