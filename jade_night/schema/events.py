"""
Jade Night - State Change Events

Event types and payloads describing what changed between two snapshots of
the game, for the UI and transport layers to react to.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from jade_night.engine.turns import TurnEngine
from jade_night.schema.codec import snapshot_to_state
from jade_night.schema.models import GameStateModel, SlotModel


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_OVER = auto()
    END_CONDITION_TRIGGERED = auto()
    ROUND_STARTED = auto()
    TURN_ADVANCED = auto()
    JADE_CHALICE_GRANTED = auto()
    GRID_REFILLED = auto()
    STATE_UPDATED = auto()


@dataclass
class EventPayload:
    """Wrapper for a classified change."""

    event: GameEvent
    player_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


def _slot_card_ids(slot: SlotModel) -> set[str]:
    ids = {card.id for card in slot.snacks or []}
    if slot.snack is not None:
        ids.add(slot.snack.id)
    if slot.tableware is not None:
        ids.add(slot.tableware.id)
    return ids


def _is_over(snapshot: GameStateModel) -> bool:
    return TurnEngine.is_game_over(snapshot_to_state(snapshot))


def refilled_slots(old: GameStateModel, new: GameStateModel) -> list[int]:
    """Grid indices holding a card in `new` that was not there in `old`."""
    filled = []
    for index, (before, after) in enumerate(zip(old.public_area, new.public_area)):
        if _slot_card_ids(after) - _slot_card_ids(before):
            filled.append(index)
    return filled


def classify_state_change(old: GameStateModel, new: GameStateModel) -> EventPayload:
    """Determine the most significant game event between two snapshots.

    GAME_OVER fires once, on the change that ends the game.
    """
    if _is_over(new) and not _is_over(old):
        return EventPayload(GameEvent.GAME_OVER, data={"round": new.turn})

    if (
        old.end_condition_triggered_at_round is None
        and new.end_condition_triggered_at_round is not None
    ):
        return EventPayload(
            GameEvent.END_CONDITION_TRIGGERED,
            player_id=new.current_player,
            data={"round": new.end_condition_triggered_at_round},
        )

    if new.turn != old.turn:
        return EventPayload(GameEvent.ROUND_STARTED, player_id=new.current_player, data={"round": new.turn})

    if new.current_player != old.current_player:
        return EventPayload(GameEvent.TURN_ADVANCED, player_id=new.current_player)

    if new.jade_given and not old.jade_given:
        holder = next(
            (pid for pid, player in new.players.items() if player.has_jade_chalice), None
        )
        return EventPayload(GameEvent.JADE_CHALICE_GRANTED, player_id=holder)

    filled = refilled_slots(old, new)
    if filled:
        return EventPayload(GameEvent.GRID_REFILLED, data={"slots": filled})

    return EventPayload(GameEvent.STATE_UPDATED)
