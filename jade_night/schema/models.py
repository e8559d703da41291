"""
Jade Night - Wire Models

Pydantic models that mirror the JSON shape of GameState exchanged with the
transport and UI layers. Keys use the transport's camelCase names.
"""

from pydantic import BaseModel, Field, model_serializer, model_validator

from jade_night.engine.base import CardKind, Color, Shape, Temperature


def _drop_none(data: dict) -> dict:
    """Optional card and slot keys are left out when empty."""
    return {key: value for key, value in data.items() if value is not None}


class CardAttributesModel(BaseModel):
    """Mirrors `card.attributes`."""

    colors: list[Color] = Field(default_factory=list)
    shapes: list[Shape] = Field(default_factory=list)
    temps: list[Temperature] = Field(default_factory=list)


class CardModel(BaseModel):
    """Mirrors a card."""

    id: str
    type: CardKind
    name: str
    attributes: CardAttributesModel
    level: int = Field(default=1, ge=1, le=3)
    description: str | None = None

    @model_serializer(mode="wrap")
    def _omit_missing(self, handler):
        return _drop_none(handler(self))


class SlotModel(BaseModel):
    """Mirrors a grid or waiting-area slot.

    A single snack travels as `snack`; a stack of several travels as `snacks`.
    """

    id: str
    tableware: CardModel | None = None
    snack: CardModel | None = None
    snacks: list[CardModel] | None = None

    @model_validator(mode="after")
    def _single_snack_holding(self) -> "SlotModel":
        if self.snack is not None and self.snacks:
            raise ValueError(f"Slot {self.id} cannot carry both 'snack' and 'snacks'.")
        return self

    @model_serializer(mode="wrap")
    def _omit_missing(self, handler):
        return _drop_none(handler(self))


class PlayerStateModel(BaseModel):
    """Mirrors one entry of `players`."""

    waiting_area: list[SlotModel] = Field(default_factory=list, alias="waitingArea")
    personal_area: list[SlotModel] = Field(default_factory=list, alias="personalArea")
    offering_area: list[SlotModel] = Field(default_factory=list, alias="offeringArea")
    action_points: int = Field(default=3, alias="actionPoints")
    tea_tokens: int = Field(default=0, ge=0, alias="teaTokens")
    tea_token_used_this_turn: bool = Field(default=False, alias="teaTokenUsedThisTurn")
    taste_done_this_turn: bool = Field(default=False, alias="tasteDoneThisTurn")
    has_jade_chalice: bool = Field(default=False, alias="hasJadeChalice")

    model_config = {"populate_by_name": True}


class GameStateModel(BaseModel):
    """Mirrors the whole GameState."""

    snack_deck: list[CardModel] = Field(default_factory=list, alias="snackDeck")
    tableware_deck: list[CardModel] = Field(default_factory=list, alias="tablewareDeck")
    reward_deck: list[CardModel] = Field(default_factory=list, alias="rewardDeck")
    public_area: list[SlotModel] = Field(default_factory=list, alias="publicArea")
    players: dict[str, PlayerStateModel] = Field(default_factory=dict)
    jade_given: bool = Field(default=False, alias="jadeGiven")
    current_player: str = Field(default="0", alias="currentPlayer")
    turn: int = Field(default=0, ge=0)
    end_condition_triggered_at_round: int | None = Field(
        default=None, alias="endConditionTriggeredAtRound"
    )

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _current_player_known(self) -> "GameStateModel":
        if self.players and self.current_player not in self.players:
            raise ValueError(f"currentPlayer {self.current_player!r} is not a player id.")
        return self
