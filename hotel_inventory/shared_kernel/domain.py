"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

# Общие типы идентификаторов
EntityId = UUID


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid4()


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=lambda: now())
    event_type: str


# Общие перечисления
class RoomShape(str, Enum):
    """Форма номера: одноместный или двухместный."""

    SINGLE = "single"
    DOUBLE = "double"

    @property
    def description(self) -> str:
        return "Single Room" if self is RoomShape.SINGLE else "Double Room"


class RoomCategory(str, Enum):
    """Категории номеров; порядок членов задает номер в меню (1-4)."""

    LUXURY_DOUBLE = "luxury double"
    DELUXE_DOUBLE = "deluxe double"
    LUXURY_SINGLE = "luxury single"
    DELUXE_SINGLE = "deluxe single"

    @property
    def label(self) -> str:
        return self.value

    @property
    def selector(self) -> int:
        return list(RoomCategory).index(self) + 1

    @property
    def shape(self) -> RoomShape:
        if self.value.endswith("single"):
            return RoomShape.SINGLE
        return RoomShape.DOUBLE

    @classmethod
    def from_selector(cls, selector: int) -> "RoomCategory":
        """Возвращает категорию по номеру пункта меню (1-4)."""
        members = list(cls)
        if isinstance(selector, bool) or not isinstance(selector, int):
            raise InvalidCategorySelector(selector)
        if not 1 <= selector <= len(members):
            raise InvalidCategorySelector(selector)
        return members[selector - 1]

    @classmethod
    def from_label(cls, label: str) -> "RoomCategory":
        """Возвращает категорию по названию без учета регистра."""
        try:
            return cls(label.strip().lower())
        except ValueError:
            raise InvalidCategorySelector(label) from None

    @classmethod
    def coerce(cls, value: "RoomCategory | int | str") -> "RoomCategory":
        """Приводит категорию, номер пункта меню или название к RoomCategory."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_label(value)
        return cls.from_selector(value)


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class InvalidCategorySelector(DomainException, ValueError):
    """Категория номера указана вне диапазона 1-4 или неизвестным названием."""

    user_message = "Invalid room type."

    def __init__(self, selector: object):
        self.selector = selector
        super().__init__(f"Invalid room type selector: {selector!r}")


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время (UTC)."""
    return datetime.now(timezone.utc)
