# schemas/notification.py
from enum import Enum
from pydantic import BaseModel


class NotificationLevelEnum(str, Enum):
     SUCCESS = "success"
     INFO = "info"
     WARNING = "warning"
     ERROR = "error"


class Notification(BaseModel):
     """A user-facing toast message."""
     level: NotificationLevelEnum
     message: str
