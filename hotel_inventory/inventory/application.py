"""
Прикладной слой контекста инвентаря.

HotelService - явный объект-контекст отеля: вместо глобального
синглтона он создается в bootstrap и передается всем, кому нужен.
"""

from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..config import HotelConfig
from ..notifications import INotificationHub, ISubscriber
from ..rooms import PricingPolicy, RoomFeature, RoomState, TransitionOutcome
from ..shared_kernel import ConsoleLogger, DomainException, ILogger, RoomCategory
from .domain import Inventory, OccupiedSlot, RoomAvailabilityChanged

# DTO (Data Transfer Objects) для входящих данных


class CustomerDetails(BaseModel):
    """Данные клиента из консоли; не проверяются и не сохраняются."""

    name: str = ""
    contact: str = ""
    gender: str = ""


class BookRoomRequest(BaseModel):
    """Запрос на бронирование номера."""

    selector: int
    customer: CustomerDetails = Field(default_factory=CustomerDetails)
    policy: PricingPolicy = PricingPolicy.STANDARD
    features: Tuple[RoomFeature, ...] = ()


# DTO для исходящих данных


class BookingConfirmation(BaseModel):
    """Подтверждение бронирования."""

    category: RoomCategory
    slot_index: int
    description: str
    nightly_price: float
    state: RoomState

    @classmethod
    def from_domain(
        cls, category: RoomCategory, slot: OccupiedSlot, nightly_rate: float
    ) -> "BookingConfirmation":
        """Создает DTO из доменной модели."""
        return cls(
            category=category,
            slot_index=slot.index,
            description=slot.room.description,
            nightly_price=slot.room.price(nightly_rate),
            state=slot.room.state,
        )


# Сервисы приложения


class HotelService:
    """Сервис приложения для работы с номерами отеля."""

    def __init__(
        self,
        inventory: Inventory,
        notification_hub: INotificationHub,
        config: Optional[HotelConfig] = None,
        logger: Optional[ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._inventory = inventory
        self._hub = notification_hub
        self._config = config or HotelConfig()
        self._logger = logger or ConsoleLogger(self._config.log_level)

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    def subscribe(self, subscriber: ISubscriber) -> None:
        self._hub.subscribe(subscriber)

    def unsubscribe(self, subscriber: ISubscriber) -> None:
        self._hub.unsubscribe(subscriber)

    def describe_category(self, selector: int) -> str:
        """Возвращает описание категории с ценой за ночь."""
        category = RoomCategory.from_selector(selector)
        return self._config.settings_for(category).features_text

    def check_availability(self, selector: int) -> int:
        """Возвращает число свободных мест в категории."""
        category = RoomCategory.from_selector(selector)
        available = self._inventory.check_availability(category)
        self._logger.debug(
            "Availability checked", category=category.label, available=available
        )
        return available

    def book_room(self, request: BookRoomRequest) -> BookingConfirmation:
        """Бронирует номер в первом свободном месте категории."""
        try:
            category = RoomCategory.from_selector(request.selector)
            slot = self._inventory.book(category, request.policy, request.features)
            self._publish_pending_events()

            confirmation = BookingConfirmation.from_domain(
                category, slot, self._config.settings_for(category).nightly_rate
            )
            self._logger.info("Room booked", category=category.label, slot=slot.index)
            return confirmation

        except DomainException as e:
            self._logger.warning(f"Ошибка при бронировании номера: {str(e)}")
            raise

    def check_in(self, selector: int, slot_index: int) -> TransitionOutcome:
        """Заселяет гостя в забронированный номер."""
        return self._drive(self._inventory.check_in, selector, slot_index)

    def check_out(self, selector: int, slot_index: int) -> TransitionOutcome:
        """Выселяет гостя; место освобождается."""
        return self._drive(self._inventory.check_out, selector, slot_index)

    def cancel(self, selector: int, slot_index: int) -> TransitionOutcome:
        """Отменяет бронирование; место освобождается."""
        return self._drive(self._inventory.cancel, selector, slot_index)

    def _drive(
        self,
        operation: Callable[[RoomCategory, int], TransitionOutcome],
        selector: int,
        slot_index: int,
    ) -> TransitionOutcome:
        try:
            category = RoomCategory.from_selector(selector)
            outcome = operation(category, slot_index)
            self._publish_pending_events()
            self._logger.info(
                outcome.message,
                category=category.label,
                slot=slot_index,
                kind=outcome.kind.value,
            )
            return outcome

        except DomainException as e:
            self._logger.warning(f"Ошибка при операции {operation.__name__}: {str(e)}")
            raise

    def _publish_pending_events(self) -> List[RoomAvailabilityChanged]:
        events = [
            event
            for event in self._inventory.pull_domain_events()
            if isinstance(event, RoomAvailabilityChanged)
        ]
        for event in events:
            self._hub.publish(event.message)
        return events
