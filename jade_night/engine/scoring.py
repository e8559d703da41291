"""
Jade Night - Scoring Engine

Pure calculators for pairing quality and player totals.

Scoring Rules:
    - Pairing score: one point per attribute value the tableware shares with
      its snack (colors, shapes and temperatures counted separately)
    - Final score: personal pairing sum
                   + offering count (doubled for the Jade Chalice holder)
                   - 2 per waiting-area slot still holding a snack
    - Standings tie-break: more offerings, then fewer personal pairings
"""

from dataclasses import dataclass

from jade_night.engine.base import Card, FinalScore, Slot
from jade_night.engine.state import GameState, PlayerState


@dataclass(frozen=True)
class PlayerStanding:
    """
    One row of the final standings.

    Attributes:
        player_id: Player id
        score: Score breakdown
        offering_count: Raw offering-area size (first tie-break)
        personal_count: Personal-area size (second tie-break, fewer wins)
    """
    player_id: str
    score: FinalScore
    offering_count: int
    personal_count: int


class ScoringEngine:
    """
    Stateless scoring calculators.

    All methods are class methods; nothing is mutated.
    """

    WAITING_PENALTY: int = 2
    JADE_CHALICE_MULTIPLIER: int = 2

    @classmethod
    def pairing_score(cls, tableware: Card, snack: Card) -> int:
        """
        Count attribute overlaps between a tableware card and a snack.

        Each shared value scores 1: a two-color plate holding a snack with
        both colors scores 2 from color alone.

        Example:
            plate {red} {circle} {warm} + snack {red, green} {circle} {cold}
            = 1 (red) + 1 (circle) + 0 = 2
        """
        plate = tableware.attributes
        food = snack.attributes
        return (
            len(plate.colors & food.colors)
            + len(plate.shapes & food.shapes)
            + len(plate.temps & food.temps)
        )

    @classmethod
    def slot_pairing_score(cls, slot: Slot) -> int:
        """Pairing score of a slot, 0 unless it holds both tableware and a snack."""
        if slot.tableware is None or slot.snack is None:
            return 0
        return cls.pairing_score(slot.tableware, slot.snack)

    @classmethod
    def final_score(cls, player: PlayerState) -> FinalScore:
        """
        Calculate a player's score with its components.

        Args:
            player: Player to score (not modified)

        Returns:
            FinalScore breakdown
        """
        personal_sum = sum(cls.slot_pairing_score(slot) for slot in player.personal_area)

        offering_component = len(player.offering_area)
        if player.has_jade_chalice:
            offering_component *= cls.JADE_CHALICE_MULTIPLIER

        waiting_penalty_count = sum(1 for slot in player.waiting_area if slot.has_snack)

        return FinalScore(
            total_score=personal_sum + offering_component - cls.WAITING_PENALTY * waiting_penalty_count,
            personal_sum=personal_sum,
            offering_component=offering_component,
            waiting_penalty_count=waiting_penalty_count,
            has_jade_chalice=player.has_jade_chalice,
        )

    @classmethod
    def rank_players(cls, state: GameState) -> list[PlayerStanding]:
        """
        Order players best first.

        Higher total wins; ties go to more offerings, then to fewer personal
        pairings, then to the lower player id.
        """
        standings = [
            PlayerStanding(
                player_id=pid,
                score=cls.final_score(player),
                offering_count=len(player.offering_area),
                personal_count=len(player.personal_area),
            )
            for pid, player in state.players.items()
        ]
        return sorted(
            standings,
            key=lambda s: (-s.score.total_score, -s.offering_count, s.personal_count, s.player_id),
        )


def pairing_score(tableware: Card, snack: Card) -> int:
    return ScoringEngine.pairing_score(tableware, snack)


def final_score(player: PlayerState) -> FinalScore:
    return ScoringEngine.final_score(player)
