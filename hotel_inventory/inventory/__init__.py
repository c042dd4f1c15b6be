"""
Модуль контекста инвентаря (Inventory Context).

Отвечает за учет мест по четырем категориям номеров:
- Проверку числа свободных мест
- Бронирование первого свободного места
- Освобождение места после отмены или выселения
"""

from . import application, domain
from .application import (
    BookingConfirmation,
    BookRoomRequest,
    CustomerDetails,
    HotelService,
)
from .domain import (
    EmptySlot,
    Inventory,
    NoCapacity,
    OccupiedSlot,
    RoomAvailabilityChanged,
    Slot,
    SlotNotFound,
    SlotNotOccupied,
)

__all__ = [
    "domain",
    "application",
    "BookingConfirmation",
    "BookRoomRequest",
    "CustomerDetails",
    "HotelService",
    "EmptySlot",
    "Inventory",
    "NoCapacity",
    "OccupiedSlot",
    "RoomAvailabilityChanged",
    "Slot",
    "SlotNotFound",
    "SlotNotOccupied",
]
