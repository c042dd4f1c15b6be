"""
Учет номеров отеля: учебный пример шаблонов проектирования.

Фабрика создает номер, политика ценообразования (мост) считает цену,
доп. услуги (декоратор) добавляют надбавки, центр уведомлений
(наблюдатель) рассылает сообщения, а таблица переходов (состояние)
ведет жизненный цикл номера.
"""

from .bootstrap import bootstrap_app

__all__ = ["bootstrap_app"]
