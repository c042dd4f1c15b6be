"""
Инфраструктурный слой контекста уведомлений.

Рассылка синхронная, в порядке подписки, в пределах одного процесса.
"""
from typing import List, Optional

from ..shared_kernel import ConsoleLogger, ILogger
from . import interfaces as ports


class NotificationHub(ports.INotificationHub):
    """Реализация центра уведомлений в памяти."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._subscribers: List[ports.ISubscriber] = []
        self._logger = logger or ConsoleLogger()

    @property
    def subscribers(self) -> List[ports.ISubscriber]:
        return list(self._subscribers)

    def subscribe(self, subscriber: ports.ISubscriber) -> None:
        """Подписывает получателя; повторная подписка ничего не меняет."""
        if any(s is subscriber for s in self._subscribers):
            return
        self._subscribers.append(subscriber)
        self._logger.debug(f"Subscribed {subscriber!r}")

    def unsubscribe(self, subscriber: ports.ISubscriber) -> None:
        """Отписывает получателя; неизвестный получатель игнорируется."""
        self._subscribers = [s for s in self._subscribers if s is not subscriber]
        self._logger.debug(f"Unsubscribed {subscriber!r}")

    def publish(self, message: str) -> None:
        """Доставляет сообщение каждому текущему подписчику."""
        if not self._subscribers:
            self._logger.debug("No subscribers for message", notification=message)
            return

        self._logger.info("Publishing notification", notification=message)

        # Список копируется: подписчик может отписаться во время рассылки
        for subscriber in list(self._subscribers):
            try:
                subscriber.update(message)
            except Exception as e:
                self._logger.error(
                    f"Error in subscriber {subscriber!r}",
                    error=str(e),
                    notification=message,
                )
