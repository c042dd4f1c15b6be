"""
Модуль контекста уведомлений (Notifications Context).

Рассылает подписчикам сообщения об изменении доступности номеров.
"""

from . import domain, infrastructure, interfaces
from .domain import Customer
from .infrastructure import NotificationHub
from .interfaces import INotificationHub, ISubscriber

__all__ = [
    "domain",
    "infrastructure",
    "interfaces",
    "Customer",
    "NotificationHub",
    "INotificationHub",
    "ISubscriber",
]
