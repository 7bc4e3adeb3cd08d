"""Errors raised while notifying observers."""
from typing import Any


class ObserverNotificationError(Exception):

    def __init__(self, observer: Any, message: str = "Observer failed during notification"):
        self.observer = observer
        self.message = message
        super().__init__(self.message)
