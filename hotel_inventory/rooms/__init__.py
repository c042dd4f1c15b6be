"""
Модуль контекста номеров (Rooms Context).

Отвечает за форму номера, доп. услуги, ценообразование
и жизненный цикл отдельного номера.
"""

from . import domain, lifecycle
from .domain import (
    PricingPolicy,
    RoomFeature,
    RoomInstance,
    InvalidRoomLabel,
    create_room,
    describe,
    feature_surcharge,
)
from .lifecycle import OutcomeKind, RoomAction, RoomState, TransitionOutcome, transition

__all__ = [
    "domain",
    "lifecycle",
    "PricingPolicy",
    "RoomFeature",
    "RoomInstance",
    "InvalidRoomLabel",
    "create_room",
    "describe",
    "feature_surcharge",
    "OutcomeKind",
    "RoomAction",
    "RoomState",
    "TransitionOutcome",
    "transition",
]
