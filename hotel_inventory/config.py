"""
Конфигурация каталога номеров.

Значения по умолчанию совпадают с исходной консольной программой.
Файл конфигурации задается в JSON; незаданные категории берутся
из значений по умолчанию.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .shared_kernel import LOG_LEVELS, RoomCategory

CONFIG_ENV_VAR = "HOTEL_INVENTORY_CONFIG"


class CategorySettings(BaseModel):
    """Настройки одной категории номеров."""

    model_config = ConfigDict(frozen=True)

    capacity: int = Field(..., ge=0, description="Число мест в категории")
    nightly_rate: float = Field(..., ge=0, description="Цена за ночь")
    features_text: str = Field(..., description="Описание для пункта меню 1")


DEFAULT_CATEGORIES: Dict[RoomCategory, CategorySettings] = {
    RoomCategory.LUXURY_DOUBLE: CategorySettings(
        capacity=10,
        nightly_rate=4000,
        features_text=(
            "Luxury Double Room: 1 double bed, AC, Free breakfast, Rs.4000 per night."
        ),
    ),
    RoomCategory.DELUXE_DOUBLE: CategorySettings(
        capacity=20,
        nightly_rate=3000,
        features_text="Deluxe Double Room: 1 double bed, AC, Rs.3000 per night.",
    ),
    RoomCategory.LUXURY_SINGLE: CategorySettings(
        capacity=10,
        nightly_rate=2200,
        features_text=(
            "Luxury Single Room: 1 single bed, AC, Free breakfast, Rs.2200 per night."
        ),
    ),
    RoomCategory.DELUXE_SINGLE: CategorySettings(
        capacity=20,
        nightly_rate=1200,
        features_text="Deluxe Single Room: 1 single bed, Rs.1200 per night.",
    ),
}


class HotelConfig(BaseModel):
    """Конфигурация отеля."""

    categories: Dict[RoomCategory, CategorySettings] = Field(
        default_factory=lambda: dict(DEFAULT_CATEGORIES)
    )
    log_level: str = "ERROR"

    @field_validator("categories")
    @classmethod
    def fill_missing_categories(
        cls, v: Dict[RoomCategory, CategorySettings]
    ) -> Dict[RoomCategory, CategorySettings]:
        return {
            category: v.get(category, DEFAULT_CATEGORIES[category])
            for category in RoomCategory
        }

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return v

    def settings_for(self, category: RoomCategory) -> CategorySettings:
        return self.categories[RoomCategory.coerce(category)]

    @property
    def capacities(self) -> Dict[RoomCategory, int]:
        return {category: s.capacity for category, s in self.categories.items()}


def load_config(path: Optional[str] = None) -> HotelConfig:
    """Загружает конфигурацию из JSON-файла.

    Без пути берется переменная окружения HOTEL_INVENTORY_CONFIG;
    если и она не задана, возвращается конфигурация по умолчанию.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return HotelConfig()

    file_path = Path(path)
    with open(file_path, "r", encoding="utf-8") as f:
        raw_data = f.read()

    if not raw_data.strip():
        return HotelConfig()

    return HotelConfig.model_validate_json(raw_data)
