"""
Jade Night Wire Schema.

Pydantic models for the JSON shape of the game state, the codec to and from
the engine's dataclasses, and change classification for state broadcasts.
"""

from jade_night.schema.codec import (
    dumps_state,
    loads_state,
    snapshot_to_state,
    state_to_dict,
    state_to_snapshot,
)
from jade_night.schema.events import EventPayload, GameEvent, classify_state_change
from jade_night.schema.models import CardModel, GameStateModel, PlayerStateModel, SlotModel

__all__ = [
    "CardModel",
    "EventPayload",
    "GameEvent",
    "GameStateModel",
    "PlayerStateModel",
    "SlotModel",
    "classify_state_change",
    "dumps_state",
    "loads_state",
    "snapshot_to_state",
    "state_to_dict",
    "state_to_snapshot",
]
