"""
Доменная модель контекста инвентаря.

Инвентарь хранит для каждой категории список мест фиксированной длины.
Место либо пустое, либо занято одним номером. Бронирование занимает
первое свободное место, начиная с индекса 0.
"""

from typing import Dict, Iterable, List, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..rooms import (
    PricingPolicy,
    RoomFeature,
    RoomInstance,
    RoomState,
    TransitionOutcome,
    create_room,
)
from ..shared_kernel import (
    BusinessRuleValidationException,
    DomainEvent,
    DomainException,
    RoomCategory,
)

CategoryRef = Union[RoomCategory, int, str]


class EmptySlot(BaseModel):
    """Свободное место."""

    model_config = ConfigDict(frozen=True)

    index: int

    @property
    def is_empty(self) -> bool:
        return True


class OccupiedSlot(BaseModel):
    """Место, занятое номером."""

    model_config = ConfigDict(frozen=True)

    index: int
    room: RoomInstance

    @property
    def is_empty(self) -> bool:
        return False


Slot = Union[EmptySlot, OccupiedSlot]


class NoCapacity(BusinessRuleValidationException):
    """В категории не осталось свободных мест."""

    user_message = "No rooms available."

    def __init__(self, category: RoomCategory):
        self.category = category
        super().__init__(f"No rooms available for {category.label}")


class SlotNotFound(DomainException, IndexError):
    """Индекс места вне диапазона категории."""

    def __init__(self, category: RoomCategory, index: int):
        self.category = category
        self.index = index
        super().__init__(f"Slot {index} does not exist for {category.label}")


class SlotNotOccupied(BusinessRuleValidationException):
    """Действие над пустым местом."""

    def __init__(self, category: RoomCategory, index: int):
        self.category = category
        self.index = index
        super().__init__(f"Slot {index} of {category.label} is empty")


class RoomAvailabilityChanged(DomainEvent):
    """Событие изменения числа свободных мест в категории."""

    event_type: str = "room_availability_changed"
    category: RoomCategory
    available: int

    @property
    def message(self) -> str:
        return f"Room type {self.category.label} availability has changed."


class Inventory:
    """Агрегат 'Инвентарь номеров'."""

    def __init__(self, capacities: Mapping[RoomCategory, int]):
        self._slots: Dict[RoomCategory, List[Slot]] = {}
        for category in RoomCategory:
            capacity = capacities.get(category, 0)
            if capacity < 0:
                raise ValueError(f"Capacity for {category.label} must be >= 0")
            self._slots[category] = [EmptySlot(index=i) for i in range(capacity)]
        self._domain_events: List[DomainEvent] = []

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Возвращает список доменных событий."""
        return list(self._domain_events)

    def pull_domain_events(self) -> List[DomainEvent]:
        """Извлекает события и очищает список."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def capacity(self, category: CategoryRef) -> int:
        return len(self._slots[RoomCategory.coerce(category)])

    def slots(self, category: CategoryRef) -> Tuple[Slot, ...]:
        """Снимок мест категории; изменения копий не влияют на инвентарь."""
        category = RoomCategory.coerce(category)
        return tuple(slot.model_copy(deep=True) for slot in self._slots[category])

    def check_availability(self, category: CategoryRef) -> int:
        """Количество свободных мест в категории."""
        category = RoomCategory.coerce(category)
        return sum(1 for slot in self._slots[category] if slot.is_empty)

    def book(
        self,
        category: CategoryRef,
        policy: PricingPolicy = PricingPolicy.STANDARD,
        features: Iterable[RoomFeature] = (),
    ) -> OccupiedSlot:
        """Занимает первое свободное место новым номером."""
        category = RoomCategory.coerce(category)
        slots = self._slots[category]

        for i, slot in enumerate(slots):
            if slot.is_empty:
                room = create_room(category.label, policy, features)
                room.book_room()
                occupied = OccupiedSlot(index=i, room=room)
                slots[i] = occupied
                self._record_change(category)
                return occupied.model_copy(deep=True)

        raise NoCapacity(category)

    def room_at(self, category: CategoryRef, index: int) -> RoomInstance:
        """Возвращает копию номера, занимающего место."""
        category = RoomCategory.coerce(category)
        return self._occupant(category, index).model_copy(deep=True)

    def check_in(self, category: CategoryRef, index: int) -> TransitionOutcome:
        return self._drive(category, index, lambda room: room.check_in())

    def check_out(self, category: CategoryRef, index: int) -> TransitionOutcome:
        return self._drive(category, index, lambda room: room.check_out())

    def cancel(self, category: CategoryRef, index: int) -> TransitionOutcome:
        return self._drive(category, index, lambda room: room.cancel_room())

    def _drive(self, category: CategoryRef, index: int, step) -> TransitionOutcome:
        category = RoomCategory.coerce(category)
        outcome = step(self._occupant(category, index))

        # Номер вернулся в Available - место освобождается
        if outcome.changed and outcome.state == RoomState.AVAILABLE:
            self._slots[category][index] = EmptySlot(index=index)
            self._record_change(category)

        return outcome

    def _occupant(self, category: RoomCategory, index: int) -> RoomInstance:
        slot = self._slot(category, index)
        if isinstance(slot, EmptySlot):
            raise SlotNotOccupied(category, index)
        return slot.room

    def _slot(self, category: RoomCategory, index: int) -> Slot:
        slots = self._slots[category]
        if isinstance(index, bool) or not 0 <= index < len(slots):
            raise SlotNotFound(category, index)
        return slots[index]

    def _record_change(self, category: RoomCategory) -> None:
        self._domain_events.append(
            RoomAvailabilityChanged(
                category=category, available=self.check_availability(category)
            )
        )
