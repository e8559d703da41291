"""
Jade Night - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Cards and attribute sets are immutable (frozen dataclasses);
slots are the mutable containers cards move between.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


# Rule constants
ACTION_POINTS_PER_TURN = 3
WAITING_AREA_LIMIT = 5
MIN_PLAYERS = 2
MAX_PLAYERS = 5
GRID_ROWS = 3
GRID_COLUMNS = 3
GRID_SIZE = GRID_ROWS * GRID_COLUMNS


class CardKind(Enum):
    """Kind of card. Values match the wire format."""
    SNACK = "Snack"
    TABLEWARE = "Tableware"


class Color(Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


class Shape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    FLOWER = "flower"


class Temperature(Enum):
    WARM = "warm"
    COLD = "cold"


@dataclass(frozen=True)
class CardAttributes:
    """
    The three independent attribute sets carried by a card.

    Attributes:
        colors: Colors printed on the card
        shapes: Shapes printed on the card
        temps: Serving temperatures printed on the card
    """
    colors: frozenset[Color] = field(default_factory=frozenset)
    shapes: frozenset[Shape] = field(default_factory=frozenset)
    temps: frozenset[Temperature] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate every value belongs to its own domain."""
        for name, domain in (("colors", Color), ("shapes", Shape), ("temps", Temperature)):
            for value in getattr(self, name):
                if not isinstance(value, domain):
                    raise ValueError(
                        f"Invalid {name} value {value!r}, expected a {domain.__name__}."
                    )

    @classmethod
    def of(
        cls,
        colors: Iterable[Color] = (),
        shapes: Iterable[Shape] = (),
        temps: Iterable[Temperature] = (),
    ) -> "CardAttributes":
        """Create attributes from any iterables of enum members."""
        return cls(colors=frozenset(colors), shapes=frozenset(shapes), temps=frozenset(temps))


@dataclass(frozen=True)
class Card:
    """
    Immutable card identity.

    Attributes:
        id: Unique identifier across the whole authored deck
        kind: Snack or tableware
        name: Display name
        attributes: Colors, shapes and temperatures
        level: 1 for snacks, 1-3 for tableware
        description: Optional flavour text
    """
    id: str
    kind: CardKind
    name: str
    attributes: CardAttributes
    level: int = 1
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate level range."""
        if not (1 <= self.level <= 3):
            raise ValueError(f"Card {self.id} has level {self.level}, must be between 1 and 3.")

    @property
    def is_snack(self) -> bool:
        return self.kind is CardKind.SNACK

    @property
    def is_tableware(self) -> bool:
        return self.kind is CardKind.TABLEWARE


@dataclass
class Slot:
    """
    A grid or waiting-area position holding up to one tableware and its snacks.

    The snack holding is a single list: empty when absent, one card in the
    normal case, several cards only for the stacked waiting-area variant.

    Attributes:
        id: Slot identifier
        tableware: Tableware card, or None when absent
        snacks: Snack cards resting on this slot
    """
    id: str
    tableware: Card | None = None
    snacks: list[Card] = field(default_factory=list)

    @property
    def snack(self) -> Card | None:
        """The slot's snack (the first one when stacked)."""
        return self.snacks[0] if self.snacks else None

    @property
    def has_tableware(self) -> bool:
        return self.tableware is not None

    @property
    def has_snack(self) -> bool:
        return len(self.snacks) > 0

    @property
    def is_empty(self) -> bool:
        """True when the slot holds neither tableware nor snack."""
        return not self.has_tableware and not self.has_snack

    def cards(self) -> list[Card]:
        """All cards currently held by this slot."""
        held = [self.tableware] if self.tableware is not None else []
        return held + list(self.snacks)

    def put_tableware(self, card: Card) -> None:
        """Place a tableware card on a slot that has none."""
        if not card.is_tableware:
            raise ValueError(f"Card {card.id} is not tableware.")
        if self.tableware is not None:
            raise ValueError(f"Slot {self.id} already holds tableware {self.tableware.id}.")
        self.tableware = card

    def put_snack(self, card: Card) -> None:
        """Place a single snack on a slot that has none."""
        if not card.is_snack:
            raise ValueError(f"Card {card.id} is not a snack.")
        if self.snacks:
            raise ValueError(f"Slot {self.id} already holds a snack.")
        self.snacks.append(card)

    def take_tableware(self) -> Card | None:
        """Remove and return the tableware, if any."""
        card, self.tableware = self.tableware, None
        return card

    def take_snacks(self) -> list[Card]:
        """Remove and return every snack on the slot."""
        taken, self.snacks = self.snacks, []
        return taken


@dataclass(frozen=True)
class Pending:
    """End condition not yet reached."""

    @property
    def triggered_round(self) -> None:
        return None


@dataclass(frozen=True)
class TriggeredAt:
    """
    End condition latched at a given round.

    Attributes:
        round: Round counter value when the latch fired
    """
    round: int

    @property
    def triggered_round(self) -> int:
        return self.round


EndCondition = Pending | TriggeredAt


@dataclass(frozen=True)
class FinalScore:
    """
    Score breakdown for one player.

    Attributes:
        total_score: Personal sum + offering component - 2 x waiting penalty
        personal_sum: Sum of pairing scores in the personal area
        offering_component: Offering count, doubled for the Jade Chalice holder
        waiting_penalty_count: Waiting slots still holding a snack
        has_jade_chalice: Whether the player holds the Jade Chalice
    """
    total_score: int
    personal_sum: int
    offering_component: int
    waiting_penalty_count: int
    has_jade_chalice: bool

    def __str__(self) -> str:
        lines = [f"Total: {self.total_score} points"]
        lines.append(f"  - Personal pairings: {self.personal_sum}")
        chalice = " (Jade Chalice x2)" if self.has_jade_chalice else ""
        lines.append(f"  - Offerings: {self.offering_component}{chalice}")
        lines.append(f"  - Waiting penalty: -{self.waiting_penalty_count * 2}")
        return "\n".join(lines)
