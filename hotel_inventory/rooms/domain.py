"""
Доменная модель контекста номеров.

Содержит политики ценообразования, номер с набором доп. услуг
и фабрику, создающую номер по названию категории.
"""

from enum import Enum
from typing import Dict, Iterable, Tuple

from pydantic import BaseModel, Field, field_validator

from ..shared_kernel import (
    DomainException,
    EntityId,
    RoomCategory,
    RoomShape,
    generate_id,
)
from .lifecycle import RoomAction, RoomState, TransitionOutcome, transition

DISCOUNT_RATE = 0.9


class PricingPolicy(str, Enum):
    """Политика ценообразования."""

    STANDARD = "standard"
    DISCOUNTED = "discounted"  # Скидка 10%

    def price(self, base: float) -> float:
        """Возвращает итоговую цену для базовой цены."""
        if self is PricingPolicy.DISCOUNTED:
            return base * DISCOUNT_RATE
        return base


class RoomFeature(str, Enum):
    """Дополнительные услуги номера."""

    WIFI = "wifi"
    BREAKFAST = "breakfast"

    @property
    def surcharge(self) -> float:
        return FEATURE_SURCHARGES[self]

    @property
    def suffix(self) -> str:
        return FEATURE_SUFFIXES[self]


FEATURE_SURCHARGES: Dict[RoomFeature, float] = {
    RoomFeature.WIFI: 200,
    RoomFeature.BREAKFAST: 300,
}

FEATURE_SUFFIXES: Dict[RoomFeature, str] = {
    RoomFeature.WIFI: ", Wi-Fi",
    RoomFeature.BREAKFAST: ", Breakfast",
}


def feature_surcharge(features: Iterable[RoomFeature]) -> float:
    """Сумма надбавок за услуги; от порядка не зависит."""
    return sum(RoomFeature(feature).surcharge for feature in features)


def describe(shape: RoomShape, features: Iterable[RoomFeature]) -> str:
    """Описание номера: услуги добавляются в порядке подключения."""
    return RoomShape(shape).description + "".join(
        RoomFeature(feature).suffix for feature in features
    )


class InvalidRoomLabel(DomainException, ValueError):
    """Фабрике передано неизвестное название категории."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Invalid room type: {label}")


class RoomInstance(BaseModel):
    """Номер, созданный при бронировании."""

    id: EntityId = Field(default_factory=generate_id)
    shape: RoomShape
    features: Tuple[RoomFeature, ...] = ()
    policy: PricingPolicy = PricingPolicy.STANDARD
    state: RoomState = RoomState.AVAILABLE

    @field_validator("features")
    @classmethod
    def drop_repeated_features(cls, v: Tuple[RoomFeature, ...]) -> Tuple[RoomFeature, ...]:
        # Услуга подключается один раз, порядок первого подключения сохраняется
        return tuple(dict.fromkeys(v))

    @property
    def description(self) -> str:
        return describe(self.shape, self.features)

    @property
    def surcharge(self) -> float:
        return feature_surcharge(self.features)

    def price(self, base: float) -> float:
        """Цена по политике плюс надбавки за услуги."""
        return self.policy.price(base) + self.surcharge

    def with_feature(self, feature: RoomFeature) -> "RoomInstance":
        """Возвращает новый номер с подключенной услугой.

        Копия получает собственный идентификатор.
        """
        feature = RoomFeature(feature)
        if feature in self.features:
            return self
        return self.model_copy(
            update={"id": generate_id(), "features": self.features + (feature,)}
        )

    def apply(self, action: RoomAction) -> TransitionOutcome:
        """Применяет действие к текущему состоянию номера."""
        self.state, outcome = transition(self.state, action)
        return outcome

    def book_room(self) -> TransitionOutcome:
        return self.apply(RoomAction.BOOK)

    def cancel_room(self) -> TransitionOutcome:
        return self.apply(RoomAction.CANCEL)

    def check_in(self) -> TransitionOutcome:
        return self.apply(RoomAction.CHECK_IN)

    def check_out(self) -> TransitionOutcome:
        return self.apply(RoomAction.CHECK_OUT)


def create_room(
    label: str,
    policy: PricingPolicy = PricingPolicy.STANDARD,
    features: Iterable[RoomFeature] = (),
) -> RoomInstance:
    """Создает номер по названию категории (без учета регистра).

    Фабрика определяет только форму номера; учет мест по категориям
    ведет инвентарь.
    """
    if not isinstance(label, str):
        raise InvalidRoomLabel(str(label))
    try:
        category = RoomCategory(label.strip().lower())
    except ValueError:
        raise InvalidRoomLabel(label) from None

    return RoomInstance(shape=category.shape, features=tuple(features), policy=policy)
