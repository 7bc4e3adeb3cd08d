"""
Observer abstraction used by `Subject`.
This module defines the IObserver interface. Implementations receive the Subject
that triggered the notification and decide for themselves whether to react,
so filtering on state stays out of the Subject.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from Notifier.Business.Subject import Subject


class IObserver(ABC):
    """Abstract observer interface."""

    @abstractmethod
    def update(self, subject: Subject) -> None:
        """React to a state change of `subject`. Must not modify its state."""
        pass
