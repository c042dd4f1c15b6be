"""
Доменная модель контекста уведомлений.
"""

from typing import Callable

from .interfaces import ISubscriber


class Customer(ISubscriber):
    """Клиент, подписанный на уведомления из консоли."""

    def __init__(self, name: str, write: Callable[[str], None] = print):
        self.name = name
        self._write = write

    def update(self, message: str) -> None:
        self._write(f"Notification for {self.name}: {message}")

    def __repr__(self) -> str:
        return f"Customer(name={self.name!r})"
