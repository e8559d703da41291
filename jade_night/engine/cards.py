"""
Jade Night - Card & Deck Model

Deck construction from the authored card content, shuffling with an
injectable random generator, and level-based deck queries.

Authored content:
    - Snacks (84): two copies of every color/shape/temperature combination,
      dual-color and dual-shape snacks for every pair, and triple-color /
      triple-shape showpieces
    - Tableware L1 (18): one of every color/shape/temperature combination
    - Tableware L2 (12): dual color, dual shape and dual temperature plates
    - Tableware L3 (6): all-color and all-shape plates
"""

import random
from dataclasses import dataclass
from itertools import product
from typing import Sequence, TypeVar

from jade_night.engine.base import (
    Card,
    CardAttributes,
    CardKind,
    Color,
    Shape,
    Temperature,
)
from jade_night.engine.validators import validate_level

T = TypeVar("T")

COLORS = tuple(Color)
SHAPES = tuple(Shape)
TEMPS = tuple(Temperature)

COLOR_PAIRS = (
    (Color.RED, Color.GREEN),
    (Color.GREEN, Color.YELLOW),
    (Color.YELLOW, Color.RED),
)
SHAPE_PAIRS = (
    (Shape.CIRCLE, Shape.SQUARE),
    (Shape.SQUARE, Shape.FLOWER),
    (Shape.FLOWER, Shape.CIRCLE),
)

SNACK_NAMES = {
    (Color.RED, Shape.CIRCLE, Temperature.WARM): "Rose Red Bean Cake",
    (Color.GREEN, Shape.SQUARE, Temperature.COLD): "Jade Mint Jelly",
    (Color.YELLOW, Shape.FLOWER, Temperature.WARM): "Osmanthus Crisp",
}

PLATE_NAMES = {
    1: "Coarse Porcelain Plate",
    2: "Fine Glazed Plate",
}


@dataclass(frozen=True)
class AuthoredDecks:
    """
    The full authored card set before any shuffling.

    Attributes:
        snack_deck: Every snack card
        tableware_deck: Every tableware card, all levels
    """
    snack_deck: tuple[Card, ...]
    tableware_deck: tuple[Card, ...]

    @property
    def all_cards(self) -> tuple[Card, ...]:
        return self.snack_deck + self.tableware_deck


def shuffle(sequence: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a uniformly shuffled copy of a sequence (Fisher-Yates).

    Args:
        sequence: Items to shuffle; left unmodified
        rng: Random generator to draw from (fresh unseeded one when omitted)

    Returns:
        New list holding the same items in random order
    """
    rng = rng if rng is not None else random.Random()
    result = list(sequence)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def split_tableware(cards: Sequence[Card]) -> tuple[list[Card], list[Card]]:
    """
    Partition tableware by level.

    Returns:
        (level-1 draw pile, level-2/3 reward pile), authored order preserved
    """
    draw_pile = [card for card in cards if card.level == 1]
    reward_pile = [card for card in cards if card.level > 1]
    return draw_pile, reward_pile


def count_level(deck: Sequence[Card], level: int) -> int:
    """Number of cards of a given level in a deck."""
    return sum(1 for card in deck if card.level == level)


def take_reward_tableware(deck: list[Card], level: int) -> Card | None:
    """
    Remove and return the first card of a level from a deck.

    The first match in deck order is taken, not a random one.

    Args:
        deck: Deck to draw from, mutated in place
        level: Tableware level wanted (1-3)

    Returns:
        The removed card, or None when no card of that level remains
    """
    validate_level(level)
    for index, card in enumerate(deck):
        if card.level == level:
            return deck.pop(index)
    return None


def build_authored_decks() -> AuthoredDecks:
    """Build the static authored card set in a deterministic order."""
    counter = 0

    def next_id(prefix: str) -> str:
        nonlocal counter
        card_id = f"{prefix}-{counter}"
        counter += 1
        return card_id

    def snack(prefix: str, name: str, description: str, **attrs) -> Card:
        return Card(
            id=next_id(prefix),
            kind=CardKind.SNACK,
            name=name,
            attributes=CardAttributes.of(**attrs),
            level=1,
            description=description,
        )

    def plate(prefix: str, name: str, level: int, description: str, **attrs) -> Card:
        return Card(
            id=next_id(prefix),
            kind=CardKind.TABLEWARE,
            name=name,
            attributes=CardAttributes.of(**attrs),
            level=level,
            description=description,
        )

    snacks: list[Card] = []

    # Basic snacks: 2 copies x 18 combinations
    for _ in range(2):
        for color, shape, temp in product(COLORS, SHAPES, TEMPS):
            name = SNACK_NAMES.get(
                (color, shape, temp), f"{color.value} {shape.value} {temp.value} snack"
            )
            snacks.append(snack(
                "snack-basic", name, "Delicate snack",
                colors=[color], shapes=[shape], temps=[temp],
            ))

    # Dual color: 3 pairs x 3 shapes x 2 temps
    for pair, shape, temp in product(COLOR_PAIRS, SHAPES, TEMPS):
        snacks.append(snack(
            "snack-dual-color", "Two-Tone Snack", "Two flavours in one bite",
            colors=pair, shapes=[shape], temps=[temp],
        ))

    # Dual shape: 3 pairs x 3 colors x 2 temps
    for pair, color, temp in product(SHAPE_PAIRS, COLORS, TEMPS):
        snacks.append(snack(
            "snack-dual-shape", "Twin-Form Snack", "Exquisitely shaped",
            colors=[color], shapes=pair, temps=[temp],
        ))

    # Showpieces: all colors or all shapes
    for shape, temp in product(SHAPES, TEMPS):
        snacks.append(snack(
            "snack-all-color", "Tri-Color Brocade", "The essence of three colors",
            colors=COLORS, shapes=[shape], temps=[temp],
        ))
    for color, temp in product(COLORS, TEMPS):
        snacks.append(snack(
            "snack-all-shape", "Thousand-Layer Marvel", "Pastry craft at its peak",
            colors=[color], shapes=SHAPES, temps=[temp],
        ))

    plates: list[Card] = []

    # L1: one of each combination
    for color, shape, temp in product(COLORS, SHAPES, TEMPS):
        plates.append(plate(
            "plate-L1", PLATE_NAMES[1], 1, "Basic tableware",
            colors=[color], shapes=[shape], temps=[temp],
        ))

    # L2: 4 dual color, 4 dual shape, 4 dual temperature
    for i in range(4):
        plates.append(plate(
            "plate-L2-C", PLATE_NAMES[2], 2, "Holds two colors",
            colors=COLOR_PAIRS[i % 3], shapes=[SHAPES[i % 3]], temps=[TEMPS[i % 2]],
        ))
    for i in range(4):
        plates.append(plate(
            "plate-L2-S", PLATE_NAMES[2], 2, "Holds two shapes",
            colors=[COLORS[i % 3]], shapes=SHAPE_PAIRS[i % 3], temps=[TEMPS[i % 2]],
        ))
    for i in range(4):
        plates.append(plate(
            "plate-L2-T", PLATE_NAMES[2], 2, "Holds any temperature",
            colors=[COLORS[i % 3]], shapes=[SHAPES[i % 3]], temps=TEMPS,
        ))

    # L3: 3 all-color, 3 all-shape
    for i in range(3):
        plates.append(plate(
            "plate-L3-C", "Flowing Light Plate", 3, "Holds every color",
            colors=COLORS, shapes=[SHAPES[i % 3]], temps=[TEMPS[i % 2]],
        ))
    for i in range(3):
        plates.append(plate(
            "plate-L3-S", "Hundred Blossom Plate", 3, "Holds every shape",
            colors=[COLORS[i % 3]], shapes=SHAPES, temps=[TEMPS[i % 2]],
        ))

    return AuthoredDecks(snack_deck=tuple(snacks), tableware_deck=tuple(plates))
