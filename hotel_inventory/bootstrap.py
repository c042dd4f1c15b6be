from typing import Optional

from .config import HotelConfig, load_config
from .inventory import HotelService, Inventory
from .notifications import NotificationHub
from .shared_kernel import ConsoleLogger, ILogger


def bootstrap_app(
    config: Optional[HotelConfig] = None,
    config_path: Optional[str] = None,
    logger: Optional[ILogger] = None,
) -> HotelService:
    """Создает и настраивает все компоненты приложения."""
    # 1. Загружаем конфигурацию
    config = config or load_config(config_path)
    logger = logger or ConsoleLogger(config.log_level)

    # 2. Создаем инвентарь и центр уведомлений
    inventory = Inventory(config.capacities)
    hub = NotificationHub(logger=logger)

    # 3. Собираем сервис-контекст отеля
    return HotelService(inventory, hub, config=config, logger=logger)
