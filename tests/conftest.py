"""
Общие фикстуры для тестов.
"""
from typing import List, Optional

import pytest

from hotel_inventory.config import HotelConfig
from hotel_inventory.inventory import HotelService, Inventory
from hotel_inventory.notifications import NotificationHub
from hotel_inventory.shared_kernel import ConsoleLogger


class RecordingSubscriber:
    """Подписчик, сохраняющий полученные сообщения."""

    def __init__(self, name: str = "recorder", journal: Optional[List[str]] = None):
        self.name = name
        self.messages: List[str] = []
        self._journal = journal

    def update(self, message: str) -> None:
        self.messages.append(message)
        if self._journal is not None:
            self._journal.append(self.name)


@pytest.fixture
def quiet_logger() -> ConsoleLogger:
    """Логгер, пропускающий только ошибки."""
    return ConsoleLogger("ERROR")


@pytest.fixture
def config() -> HotelConfig:
    return HotelConfig()


@pytest.fixture
def inventory(config: HotelConfig) -> Inventory:
    """Инвентарь с вместимостью по умолчанию (10/20/10/20)."""
    return Inventory(config.capacities)


@pytest.fixture
def hub(quiet_logger: ConsoleLogger) -> NotificationHub:
    return NotificationHub(logger=quiet_logger)


@pytest.fixture
def recorder() -> RecordingSubscriber:
    return RecordingSubscriber()


@pytest.fixture
def make_subscriber():
    """Фабрика подписчиков для тестов с несколькими получателями."""
    return RecordingSubscriber


@pytest.fixture
def service(
    inventory: Inventory,
    hub: NotificationHub,
    config: HotelConfig,
    quiet_logger: ConsoleLogger,
) -> HotelService:
    """Сервис отеля с чистым инвентарем."""
    return HotelService(inventory, hub, config=config, logger=quiet_logger)


@pytest.fixture
def verbose_logger() -> ConsoleLogger:
    """Логгер, выводящий все уровни."""
    return ConsoleLogger("DEBUG")


@pytest.fixture
def verbose_service(
    inventory: Inventory, config: HotelConfig, verbose_logger: ConsoleLogger
) -> HotelService:
    """Сервис отеля, у которого сервис и центр уведомлений пишут все уровни."""
    hub = NotificationHub(logger=verbose_logger)
    return HotelService(inventory, hub, config=config, logger=verbose_logger)
