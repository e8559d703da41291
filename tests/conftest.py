"""
Jade Night - Test Configuration and Fixtures

Common fixtures and card builders for all test modules.
"""

import random

import pytest

from jade_night.engine.base import Card, CardAttributes, CardKind, Color, Shape, Slot, Temperature
from jade_night.engine.state import GameState, PlayerState, create_initial_state


# =============================================================================
# CARD BUILDERS
# =============================================================================

def _make_card(
    card_id: str,
    kind: CardKind = CardKind.SNACK,
    colors=(Color.RED,),
    shapes=(Shape.CIRCLE,),
    temps=(Temperature.WARM,),
    level: int = 1,
) -> Card:
    """Build a card with the given attributes."""
    return Card(
        id=card_id,
        kind=kind,
        name=card_id,
        attributes=CardAttributes.of(colors=colors, shapes=shapes, temps=temps),
        level=level,
    )


def _make_plate(card_id: str, level: int = 1, **attrs) -> Card:
    return _make_card(card_id, kind=CardKind.TABLEWARE, level=level, **attrs)


def _make_pairing(slot_id: str, plate: Card | None = None, snack: Card | None = None) -> Slot:
    """Slot holding an optional plate and an optional snack."""
    return Slot(id=slot_id, tableware=plate, snacks=[snack] if snack is not None else [])


@pytest.fixture
def make_card():
    """Factory for snack cards (or any kind via `kind=`)."""
    return _make_card


@pytest.fixture
def make_plate():
    """Factory for tableware cards."""
    return _make_plate


@pytest.fixture
def make_pairing():
    """Factory for slots holding a plate and/or a snack."""
    return _make_pairing


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for deterministic shuffles."""
    return random.Random(1234)


@pytest.fixture
def four_player_state(rng) -> GameState:
    """Freshly initialised 4-player game."""
    return create_initial_state(4, rng=rng)


@pytest.fixture
def bare_state() -> GameState:
    """Empty decks and grid with three players, for hand-built scenarios."""
    return GameState(players={str(i): PlayerState() for i in range(3)})


@pytest.fixture
def example_plate() -> Card:
    """Plate {red} {circle} {warm}."""
    return _make_plate("plate-example")


@pytest.fixture
def example_snack() -> Card:
    """Snack {red, green} {circle} {cold}."""
    return _make_card(
        "snack-example",
        colors=(Color.RED, Color.GREEN),
        shapes=(Shape.CIRCLE,),
        temps=(Temperature.COLD,),
    )
