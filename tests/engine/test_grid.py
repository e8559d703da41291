"""
Tests for the public grid engine.
"""

import pytest

from jade_night.engine.base import Slot
from jade_night.engine.grid import PublicGridEngine, refresh_grid_snacks, refresh_grid_tableware


@pytest.fixture
def stocked_bare_state(bare_state, make_card, make_plate):
    """Every grid slot holds a plate and a snack; decks hold spares."""
    for i, slot in enumerate(bare_state.public_area):
        slot.put_tableware(make_plate(f"grid-plate-{i}"))
        slot.put_snack(make_card(f"grid-snack-{i}"))
    bare_state.snack_deck = [make_card(f"deck-snack-{i}") for i in range(20)]
    bare_state.tableware_deck = [make_plate(f"deck-plate-{i}") for i in range(20)]
    return bare_state


class TestIndexHelpers:
    """Tests for row/column index functions."""

    @pytest.mark.parametrize("index,expected", [
        (0, (0, 0)), (2, (0, 2)), (4, (1, 1)), (5, (1, 2)), (8, (2, 2)),
    ])
    def test_position(self, index, expected):
        assert PublicGridEngine.position(index) == expected

    @pytest.mark.parametrize("index,expected", [
        (0, (0, 1, 2)), (4, (3, 4, 5)), (7, (6, 7, 8)),
    ])
    def test_row_indices(self, index, expected):
        assert PublicGridEngine.row_indices(index) == expected

    @pytest.mark.parametrize("index,expected", [
        (0, (0, 3, 6)), (4, (1, 4, 7)), (8, (2, 5, 8)),
    ])
    def test_column_indices(self, index, expected):
        assert PublicGridEngine.column_indices(index) == expected

    def test_affected_indices_center(self):
        assert PublicGridEngine.affected_indices(4) == [1, 3, 4, 5, 7]

    def test_affected_indices_corner(self):
        assert PublicGridEngine.affected_indices(0) == [0, 1, 2, 3, 6]

    @pytest.mark.parametrize("index", range(9))
    def test_affected_always_five_including_self(self, index):
        affected = PublicGridEngine.affected_indices(index)
        assert len(affected) == 5
        assert index in affected

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="Slot index must be 0-8"):
            PublicGridEngine.row_indices(9)


class TestRefreshSnacks:
    """Tests for snack refill."""

    def test_refills_only_row_and_column(self, stocked_bare_state):
        state = stocked_bare_state
        for slot in state.public_area:
            slot.take_snacks()

        filled = PublicGridEngine.refresh_snacks(state, 4)

        assert filled == [1, 3, 4, 5, 7]
        for i in (0, 2, 6, 8):
            assert not state.public_area[i].has_snack
        assert state.public_area[1].snack.id == "deck-snack-0"
        assert state.public_area[7].snack.id == "deck-snack-4"
        assert len(state.snack_deck) == 15

    def test_occupied_slots_untouched(self, stocked_bare_state):
        state = stocked_bare_state
        state.public_area[3].take_snacks()

        filled = refresh_grid_snacks(state, 4)

        assert filled == [3]
        assert state.public_area[4].snack.id == "grid-snack-4"

    def test_deck_exhaustion_is_not_an_error(self, stocked_bare_state, make_card):
        state = stocked_bare_state
        for i in (1, 3, 5):
            state.public_area[i].take_snacks()
        state.snack_deck = [make_card("last")]

        filled = PublicGridEngine.refresh_snacks(state, 4)

        assert filled == [1]
        assert not state.public_area[3].has_snack
        assert state.snack_deck == []


class TestRefreshTableware:
    """Tests for tableware refill."""

    def test_refill_locality_center(self, stocked_bare_state):
        state = stocked_bare_state
        for slot in state.public_area:
            slot.take_tableware()

        filled = PublicGridEngine.refresh_tableware(state, 4)

        assert filled == [1, 3, 4, 5, 7]
        for i in (0, 2, 6, 8):
            assert not state.public_area[i].has_tableware

    def test_draws_level_one_first(self, stocked_bare_state):
        state = stocked_bare_state
        state.public_area[4].take_tableware()

        refresh_grid_tableware(state, 4)

        assert state.public_area[4].tableware.id == "deck-plate-0"
        assert len(state.tableware_deck) == 19

    def test_falls_back_to_first_level_two_reward(self, stocked_bare_state, make_plate):
        state = stocked_bare_state
        state.tableware_deck = []
        state.reward_deck = [
            make_plate("l3-a", level=3),
            make_plate("l2-a", level=2),
            make_plate("l2-b", level=2),
        ]
        state.public_area[4].take_tableware()

        filled = PublicGridEngine.refresh_tableware(state, 4)

        assert filled == [4]
        assert state.public_area[4].tableware.id == "l2-a"
        assert [c.id for c in state.reward_deck] == ["l3-a", "l2-b"]

    def test_never_takes_level_three(self, stocked_bare_state, make_plate):
        state = stocked_bare_state
        state.tableware_deck = []
        state.reward_deck = [make_plate("l3-a", level=3)]
        state.public_area[4].take_tableware()

        filled = PublicGridEngine.refresh_tableware(state, 4)

        assert filled == []
        assert not state.public_area[4].has_tableware
        assert len(state.reward_deck) == 1

    def test_mixed_sources_one_card_per_slot(self, stocked_bare_state, make_plate):
        state = stocked_bare_state
        state.tableware_deck = [make_plate("l1-last")]
        state.reward_deck = [make_plate("l2-a", level=2)]
        state.public_area[0].take_tableware()
        state.public_area[2].take_tableware()
        state.public_area[6].take_tableware()

        filled = PublicGridEngine.refresh_tableware(state, 0)

        assert filled == [0, 2]
        assert state.public_area[0].tableware.id == "l1-last"
        assert state.public_area[2].tableware.id == "l2-a"
        assert not state.public_area[6].has_tableware

    def test_snacks_not_touched(self, stocked_bare_state):
        state = stocked_bare_state
        state.public_area[4].take_tableware()
        snacks_before = [slot.snack for slot in state.public_area]

        PublicGridEngine.refresh_tableware(state, 4)

        assert [slot.snack for slot in state.public_area] == snacks_before

    def test_refill_conserves_cards(self, four_player_state):
        state = four_player_state
        before = state.card_ids()
        taken = state.public_area[4].take_tableware()
        state.players["0"].waiting_area.append(
            Slot(id="taken", tableware=taken)
        )

        PublicGridEngine.refresh_tableware(state, 4)
        PublicGridEngine.refresh_snacks(state, 4)

        assert state.card_ids() == before
