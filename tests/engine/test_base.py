"""
Jade Night - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import pytest

from jade_night.engine.base import (
    Card,
    CardAttributes,
    CardKind,
    Color,
    FinalScore,
    Pending,
    Shape,
    Slot,
    Temperature,
    TriggeredAt,
)
from jade_night.engine.validators import (
    validate_level,
    validate_player_count,
    validate_slot_index,
)


class TestEnums:
    """Tests for attribute and kind enums."""

    def test_card_kind_wire_values(self):
        assert CardKind.SNACK.value == "Snack"
        assert CardKind.TABLEWARE.value == "Tableware"

    def test_attribute_domains(self):
        assert len(Color) == 3
        assert len(Shape) == 3
        assert len(Temperature) == 2


class TestCardAttributes:
    """Tests for CardAttributes dataclass."""

    def test_of_builds_frozensets(self):
        attrs = CardAttributes.of(colors=[Color.RED, Color.RED], shapes=[Shape.FLOWER])
        assert attrs.colors == frozenset({Color.RED})
        assert attrs.shapes == frozenset({Shape.FLOWER})
        assert attrs.temps == frozenset()

    def test_wrong_domain_raises(self):
        with pytest.raises(ValueError, match="Invalid colors value"):
            CardAttributes.of(colors=[Shape.CIRCLE])


class TestCard:
    """Tests for Card dataclass."""

    def test_kind_helpers(self):
        card = Card(id="c1", kind=CardKind.TABLEWARE, name="Plate", attributes=CardAttributes())
        assert card.is_tableware
        assert not card.is_snack

    def test_invalid_level_raises(self):
        with pytest.raises(ValueError, match="level 4"):
            Card(id="c1", kind=CardKind.TABLEWARE, name="Plate", attributes=CardAttributes(), level=4)

    def test_card_is_immutable(self):
        card = Card(id="c1", kind=CardKind.SNACK, name="Snack", attributes=CardAttributes())
        with pytest.raises(AttributeError):
            card.id = "c2"


class TestSlot:
    """Tests for Slot container."""

    def test_empty_slot(self):
        slot = Slot(id="s")
        assert slot.is_empty
        assert slot.snack is None
        assert slot.cards() == []

    def test_put_and_take(self, make_card, make_plate):
        slot = Slot(id="s")
        plate, snack = make_plate("p"), make_card("n")
        slot.put_tableware(plate)
        slot.put_snack(snack)

        assert slot.snack is snack
        assert slot.cards() == [plate, snack]
        assert slot.take_tableware() is plate
        assert slot.take_snacks() == [snack]
        assert slot.is_empty

    def test_put_tableware_twice_raises(self, make_plate):
        slot = Slot(id="s", tableware=make_plate("p1"))
        with pytest.raises(ValueError, match="already holds tableware"):
            slot.put_tableware(make_plate("p2"))

    def test_put_snack_twice_raises(self, make_card):
        slot = Slot(id="s", snacks=[make_card("n1")])
        with pytest.raises(ValueError, match="already holds a snack"):
            slot.put_snack(make_card("n2"))

    def test_put_snack_as_tableware_raises(self, make_card):
        with pytest.raises(ValueError, match="not tableware"):
            Slot(id="s").put_tableware(make_card("n1"))

    def test_put_tableware_as_snack_raises(self, make_plate):
        slot = Slot(id="s")
        with pytest.raises(ValueError, match="not a snack"):
            slot.put_snack(make_plate("p1"))
        assert slot.is_empty

    def test_stacked_snacks_expose_first(self, make_card):
        first, second = make_card("n1"), make_card("n2")
        slot = Slot(id="s", snacks=[first, second])
        assert slot.snack is first
        assert slot.has_snack


class TestEndCondition:
    """Tests for the Pending / TriggeredAt latch states."""

    def test_pending_has_no_round(self):
        assert Pending().triggered_round is None

    def test_triggered_round(self):
        assert TriggeredAt(round=4).triggered_round == 4

    def test_triggered_is_immutable(self):
        latch = TriggeredAt(round=4)
        with pytest.raises(AttributeError):
            latch.round = 5


class TestFinalScore:
    def test_str_lists_components(self):
        score = FinalScore(
            total_score=5,
            personal_sum=5,
            offering_component=2,
            waiting_penalty_count=1,
            has_jade_chalice=False,
        )
        text = str(score)
        assert "Total: 5 points" in text
        assert "Waiting penalty: -2" in text


class TestValidators:
    """Tests for validation helpers."""

    @pytest.mark.parametrize("count", [2, 3, 4, 5])
    def test_valid_player_counts(self, count):
        assert validate_player_count(count) == count

    @pytest.mark.parametrize("count", [0, 1, 6])
    def test_invalid_player_counts(self, count):
        with pytest.raises(ValueError, match="Player count must be 2-5"):
            validate_player_count(count)

    def test_player_count_type(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_player_count("4")

    def test_slot_index_range(self):
        assert validate_slot_index(0) == 0
        assert validate_slot_index(8) == 8
        with pytest.raises(ValueError, match="Slot index must be 0-8"):
            validate_slot_index(9)
        with pytest.raises(ValueError, match="Slot index must be 0-8"):
            validate_slot_index(-1)

    def test_level_range(self):
        assert validate_level(2) == 2
        with pytest.raises(ValueError, match="Level must be 1-3"):
            validate_level(0)
