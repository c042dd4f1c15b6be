"""
Интерфейсы (порты) для контекста уведомлений.
"""

from typing import Protocol


class ISubscriber(Protocol):
    """Подписчик на уведомления о доступности номеров."""

    def update(self, message: str) -> None: ...


class INotificationHub(Protocol):
    """Интерфейс центра уведомлений."""

    def subscribe(self, subscriber: ISubscriber) -> None: ...
    def unsubscribe(self, subscriber: ISubscriber) -> None: ...
    def publish(self, message: str) -> None: ...
