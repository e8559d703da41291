"""
Jade Night - Public Grid Engine

The public area is a fixed 3x3 grid of slots, row-major:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8

Refill rule: when a tableware card is taken from a slot, every slot sharing
its row or column is topped up. A slot missing a snack draws the next snack;
a slot missing tableware draws the next level-1 plate, or, once that pile is
exhausted, the first level-2 plate of the reward deck. Slots stay empty when
nothing is left to draw.
"""

import logging
from typing import ClassVar

from jade_night.engine.base import GRID_COLUMNS, GRID_ROWS, Card
from jade_night.engine.cards import take_reward_tableware
from jade_night.engine.state import GameState
from jade_night.engine.validators import validate_slot_index

logger = logging.getLogger(__name__)


class PublicGridEngine:
    """
    Stateless engine for the public grid.

    Index helpers are pure; refill methods mutate the GameState passed in.
    """

    ROWS: ClassVar[int] = GRID_ROWS
    COLUMNS: ClassVar[int] = GRID_COLUMNS
    FALLBACK_REWARD_LEVEL: ClassVar[int] = 2

    @classmethod
    def position(cls, index: int) -> tuple[int, int]:
        """Return (row, column) of a slot index."""
        validate_slot_index(index)
        return divmod(index, cls.COLUMNS)

    @classmethod
    def row_indices(cls, index: int) -> tuple[int, int, int]:
        """Indices of the three slots in the same row as index."""
        row, _ = cls.position(index)
        start = row * cls.COLUMNS
        return tuple(range(start, start + cls.COLUMNS))

    @classmethod
    def column_indices(cls, index: int) -> tuple[int, int, int]:
        """Indices of the three slots in the same column as index."""
        _, column = cls.position(index)
        return tuple(column + row * cls.COLUMNS for row in range(cls.ROWS))

    @classmethod
    def affected_indices(cls, index: int) -> list[int]:
        """
        Slots touched by a refill around index.

        Returns:
            Sorted union of the row and column (5 indices, index included)
        """
        return sorted(set(cls.row_indices(index)) | set(cls.column_indices(index)))

    @classmethod
    def draw_tableware(cls, state: GameState) -> Card | None:
        """
        Draw the next replacement plate.

        Level-1 pile first; once empty, the first level-2 plate of the reward
        deck. Returns None when neither source has a card.
        """
        if state.tableware_deck:
            return state.tableware_deck.pop(0)
        return take_reward_tableware(state.reward_deck, cls.FALLBACK_REWARD_LEVEL)

    @classmethod
    def refresh_snacks(cls, state: GameState, index: int) -> list[int]:
        """
        Refill snacks in the row and column of a slot.

        Precondition: a tableware card was just removed from slot index.
        Postcondition: every affected slot without a snack received the next
        snack from the deck, in ascending index order, while snacks last.

        Args:
            state: Game state, mutated in place
            index: Slot the tableware was taken from (0-8)

        Returns:
            Indices of the slots that received a snack
        """
        filled = []
        for i in cls.affected_indices(index):
            if not state.snack_deck:
                break
            slot = state.public_area[i]
            if not slot.has_snack:
                slot.put_snack(state.snack_deck.pop(0))
                filled.append(i)

        logger.debug("Snack refill around slot %d filled %s", index, filled)
        return filled

    @classmethod
    def refresh_tableware(cls, state: GameState, index: int) -> list[int]:
        """
        Refill tableware in the row and column of a slot.

        Precondition: a tableware card was just removed from slot index.
        Postcondition: every affected slot without tableware received one
        plate (level-1 pile, else first level-2 reward plate) in ascending
        index order; slots stay empty once both sources are exhausted.

        Args:
            state: Game state, mutated in place
            index: Slot the tableware was taken from (0-8)

        Returns:
            Indices of the slots that received tableware
        """
        filled = []
        for i in cls.affected_indices(index):
            slot = state.public_area[i]
            if slot.has_tableware:
                continue
            card = cls.draw_tableware(state)
            if card is None:
                break
            slot.put_tableware(card)
            filled.append(i)

        logger.debug("Tableware refill around slot %d filled %s", index, filled)
        return filled


def refresh_grid_snacks(state: GameState, slot_index: int) -> list[int]:
    return PublicGridEngine.refresh_snacks(state, slot_index)


def refresh_grid_tableware(state: GameState, slot_index: int) -> list[int]:
    return PublicGridEngine.refresh_tableware(state, slot_index)
