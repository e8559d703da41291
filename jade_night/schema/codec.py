"""
Jade Night - State Codec

Converts between the engine's GameState and its wire models / JSON text.
The sum-typed end condition travels as a round number, or null while pending.
"""

from jade_night.engine.base import Card, CardAttributes, Color, Pending, Shape, Slot, Temperature, TriggeredAt
from jade_night.engine.state import GameState, PlayerState
from jade_night.schema.models import (
    CardAttributesModel,
    CardModel,
    GameStateModel,
    PlayerStateModel,
    SlotModel,
)


def _ordered(values, domain) -> list:
    """Attribute values in enum declaration order, for stable output."""
    return [member for member in domain if member in values]


def card_to_model(card: Card) -> CardModel:
    return CardModel(
        id=card.id,
        type=card.kind,
        name=card.name,
        attributes=CardAttributesModel(
            colors=_ordered(card.attributes.colors, Color),
            shapes=_ordered(card.attributes.shapes, Shape),
            temps=_ordered(card.attributes.temps, Temperature),
        ),
        level=card.level,
        description=card.description,
    )


def card_from_model(model: CardModel) -> Card:
    return Card(
        id=model.id,
        kind=model.type,
        name=model.name,
        attributes=CardAttributes.of(
            colors=model.attributes.colors,
            shapes=model.attributes.shapes,
            temps=model.attributes.temps,
        ),
        level=model.level,
        description=model.description,
    )


def slot_to_model(slot: Slot) -> SlotModel:
    model = SlotModel(id=slot.id)
    if slot.tableware is not None:
        model.tableware = card_to_model(slot.tableware)
    if len(slot.snacks) == 1:
        model.snack = card_to_model(slot.snacks[0])
    elif len(slot.snacks) > 1:
        model.snacks = [card_to_model(card) for card in slot.snacks]
    return model


def slot_from_model(model: SlotModel) -> Slot:
    if model.snack is not None:
        snacks = [card_from_model(model.snack)]
    else:
        snacks = [card_from_model(card) for card in model.snacks or []]
    tableware = card_from_model(model.tableware) if model.tableware is not None else None
    return Slot(id=model.id, tableware=tableware, snacks=snacks)


def player_to_model(player: PlayerState) -> PlayerStateModel:
    return PlayerStateModel(
        waiting_area=[slot_to_model(slot) for slot in player.waiting_area],
        personal_area=[slot_to_model(slot) for slot in player.personal_area],
        offering_area=[slot_to_model(slot) for slot in player.offering_area],
        action_points=player.action_points,
        tea_tokens=player.tea_tokens,
        tea_token_used_this_turn=player.tea_token_used_this_turn,
        taste_done_this_turn=player.taste_done_this_turn,
        has_jade_chalice=player.has_jade_chalice,
    )


def player_from_model(model: PlayerStateModel) -> PlayerState:
    return PlayerState(
        waiting_area=[slot_from_model(slot) for slot in model.waiting_area],
        personal_area=[slot_from_model(slot) for slot in model.personal_area],
        offering_area=[slot_from_model(slot) for slot in model.offering_area],
        action_points=model.action_points,
        tea_tokens=model.tea_tokens,
        tea_token_used_this_turn=model.tea_token_used_this_turn,
        taste_done_this_turn=model.taste_done_this_turn,
        has_jade_chalice=model.has_jade_chalice,
    )


def state_to_snapshot(state: GameState) -> GameStateModel:
    """Build the wire model of a GameState."""
    return GameStateModel(
        snack_deck=[card_to_model(card) for card in state.snack_deck],
        tableware_deck=[card_to_model(card) for card in state.tableware_deck],
        reward_deck=[card_to_model(card) for card in state.reward_deck],
        public_area=[slot_to_model(slot) for slot in state.public_area],
        players={pid: player_to_model(player) for pid, player in state.players.items()},
        jade_given=state.jade_given,
        current_player=state.current_player,
        turn=state.turn,
        end_condition_triggered_at_round=state.end_condition_triggered_at_round,
    )


def snapshot_to_state(snapshot: GameStateModel) -> GameState:
    """Rebuild a GameState from its wire model."""
    triggered = snapshot.end_condition_triggered_at_round
    return GameState(
        snack_deck=[card_from_model(card) for card in snapshot.snack_deck],
        tableware_deck=[card_from_model(card) for card in snapshot.tableware_deck],
        reward_deck=[card_from_model(card) for card in snapshot.reward_deck],
        public_area=[slot_from_model(slot) for slot in snapshot.public_area],
        players={pid: player_from_model(player) for pid, player in snapshot.players.items()},
        jade_given=snapshot.jade_given,
        current_player=snapshot.current_player,
        turn=snapshot.turn,
        end_condition=Pending() if triggered is None else TriggeredAt(round=triggered),
    )


def state_to_dict(state: GameState) -> dict:
    """JSON-compatible dict in the wire shape."""
    return state_to_snapshot(state).model_dump(mode="json", by_alias=True)


def dumps_state(state: GameState) -> str:
    """Serialize a GameState to JSON text."""
    return state_to_snapshot(state).model_dump_json(by_alias=True)


def loads_state(data: str | bytes) -> GameState:
    """Parse JSON text into a GameState.

    Raises:
        pydantic.ValidationError: If the payload does not match the wire shape
    """
    return snapshot_to_state(GameStateModel.model_validate_json(data))
