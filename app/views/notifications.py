# /app/views/notifications.py

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    level: NotificationLevel
    message: str


class Notifier:
    """
    Collects the transient, non-blocking notifications a view shows to the
    user. Each notification is also written to the view's logger.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.notifications: List[Notification] = []

    def _push(self, level: NotificationLevel, message: str, log_level: int) -> Notification:
        notification = Notification(level=level, message=message)
        self.notifications.append(notification)
        self.logger.log(log_level, f"[{level.value}] {message}")
        return notification

    def success(self, message: str) -> Notification:
        return self._push(NotificationLevel.SUCCESS, message, logging.INFO)

    def error(self, message: str) -> Notification:
        return self._push(NotificationLevel.ERROR, message, logging.WARNING)

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None
