"""
Жизненный цикл номера: Available -> Reserved -> Occupied -> Available.

Переходы заданы таблицей; функция transition чистая и не меняет номер,
поэтому каждую клетку таблицы можно проверить отдельно.
"""

from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict


class RoomState(str, Enum):
    """Состояния номера."""

    AVAILABLE = "available"  # Свободен
    RESERVED = "reserved"  # Забронирован
    OCCUPIED = "occupied"  # Гость заселен


class RoomAction(str, Enum):
    """Действия над номером."""

    BOOK = "book"
    CANCEL = "cancel"
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"


class OutcomeKind(str, Enum):
    """Результат попытки перехода."""

    SUCCESS = "success"  # Состояние изменилось
    NO_OP = "no_op"  # Номер уже в нужном состоянии
    REJECTED = "rejected"  # Переход запрещен


class TransitionOutcome(BaseModel):
    """Наблюдаемый результат попытки перехода."""

    model_config = ConfigDict(frozen=True)

    action: RoomAction
    previous_state: RoomState
    state: RoomState
    kind: OutcomeKind
    message: str

    @property
    def changed(self) -> bool:
        return self.state != self.previous_state


_S = RoomState
_A = RoomAction
_K = OutcomeKind

TRANSITIONS: Dict[Tuple[RoomState, RoomAction], Tuple[RoomState, OutcomeKind, str]] = {
    (_S.AVAILABLE, _A.BOOK): (_S.RESERVED, _K.SUCCESS, "Room booked successfully!"),
    (_S.AVAILABLE, _A.CANCEL): (_S.AVAILABLE, _K.NO_OP, "Room is already available."),
    (_S.AVAILABLE, _A.CHECK_IN): (
        _S.AVAILABLE,
        _K.REJECTED,
        "Cannot check in. Room is not reserved.",
    ),
    (_S.AVAILABLE, _A.CHECK_OUT): (_S.AVAILABLE, _K.NO_OP, "Room is already available."),
    (_S.RESERVED, _A.BOOK): (_S.RESERVED, _K.REJECTED, "Room is already reserved."),
    (_S.RESERVED, _A.CANCEL): (_S.AVAILABLE, _K.SUCCESS, "Reservation cancelled."),
    (_S.RESERVED, _A.CHECK_IN): (_S.OCCUPIED, _K.SUCCESS, "Checked in successfully."),
    (_S.RESERVED, _A.CHECK_OUT): (
        _S.RESERVED,
        _K.REJECTED,
        "Cannot check out. Room is not occupied.",
    ),
    (_S.OCCUPIED, _A.BOOK): (_S.OCCUPIED, _K.REJECTED, "Room is occupied. Cannot book."),
    (_S.OCCUPIED, _A.CANCEL): (_S.OCCUPIED, _K.REJECTED, "Cannot cancel. Room is occupied."),
    (_S.OCCUPIED, _A.CHECK_IN): (_S.OCCUPIED, _K.REJECTED, "Room is already occupied."),
    (_S.OCCUPIED, _A.CHECK_OUT): (_S.AVAILABLE, _K.SUCCESS, "Checked out successfully."),
}


def transition(
    state: RoomState, action: RoomAction
) -> Tuple[RoomState, TransitionOutcome]:
    """Возвращает новое состояние и результат перехода."""
    new_state, kind, message = TRANSITIONS[(RoomState(state), RoomAction(action))]
    outcome = TransitionOutcome(
        action=action,
        previous_state=state,
        state=new_state,
        kind=kind,
        message=message,
    )
    return new_state, outcome
