"""
Точка входа консольного меню:

    python -m hotel_inventory

Путь к JSON-конфигурации можно задать переменной HOTEL_INVENTORY_CONFIG.
"""

from .bootstrap import bootstrap_app
from .console import ConsoleFrontEnd


def main() -> None:
    """Запускает консольное меню отеля."""
    service = bootstrap_app()
    ConsoleFrontEnd(service).run()


if __name__ == "__main__":
    main()
