"""
Общее ядро (Shared Kernel) для учета номеров отеля.

Содержит общие типы данных и утилиты, используемые в различных контекстах.
"""

from .domain import (
    BusinessRuleValidationException,
    DomainEvent,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    InvalidCategorySelector,
    # Перечисления
    RoomCategory,
    RoomShape,
    generate_id,
    # Утилиты
    now,
)
from .infrastructure import LOG_LEVELS, ConsoleLogger
from .interfaces import ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    "DomainEvent",
    # Перечисления
    "RoomCategory",
    "RoomShape",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "InvalidCategorySelector",
    # Логирование
    "ILogger",
    "ConsoleLogger",
    "LOG_LEVELS",
    # Утилиты
    "now",
]
