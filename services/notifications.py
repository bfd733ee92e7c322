# services/notifications.py
"""
User-facing notifications ("toasts").

Services push messages here as a side channel; callers never branch on
them. Every message is also logged at the matching level.
"""
import logging
from typing import List

from schemas.notification import Notification, NotificationLevelEnum

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
     NotificationLevelEnum.SUCCESS: logging.INFO,
     NotificationLevelEnum.INFO: logging.INFO,
     NotificationLevelEnum.WARNING: logging.WARNING,
     NotificationLevelEnum.ERROR: logging.ERROR,
}


class Notifier:
     """Collects notifications for a single user action."""

     def __init__(self):
          self._messages: List[Notification] = []

     def notify(self, level: NotificationLevelEnum, message: str) -> None:
          logger.log(_LOG_LEVELS[level], "[%s] %s", level.value, message)
          self._messages.append(Notification(level=level, message=message))

     def success(self, message: str) -> None:
          self.notify(NotificationLevelEnum.SUCCESS, message)

     def info(self, message: str) -> None:
          self.notify(NotificationLevelEnum.INFO, message)

     def warning(self, message: str) -> None:
          self.notify(NotificationLevelEnum.WARNING, message)

     def error(self, message: str) -> None:
          self.notify(NotificationLevelEnum.ERROR, message)

     @property
     def messages(self) -> List[Notification]:
          return list(self._messages)

     def has(self, level: NotificationLevelEnum) -> bool:
          return any(m.level == level for m in self._messages)
