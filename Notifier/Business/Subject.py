from __future__ import annotations
import random
from typing import List, Optional, Tuple

from Notifier.Interface.IObserver import IObserver
from Notifier.Exception.ObserverError import ObserverNotificationError

import logging
logger = logging.getLogger(__name__)

STATE_UPPER_BOUND = 10


class Subject:

    """Owns a piece of state and notifies attached observers whenever it changes.

    The random source is injected so tests can pin the state sequence. Pass either
    a `random.Random` instance or a seed, not both; with neither, an unseeded one is used.
    """
    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self._rng = rng if rng is not None else random.Random(seed)
        self._state: int = self._rng.randrange(STATE_UPPER_BOUND)
        self._observers: List[IObserver] = []

    @property
    def state(self) -> int:
        return self._state

    @property
    def observers(self) -> Tuple[IObserver, ...]:
        return tuple(self._observers)

    def attach(self, observer: IObserver) -> None:
        if observer is None:
            raise ValueError("observer is required")
        logger.info("Subject: Attached an observer.")
        self._observers.append(observer)

    def detach(self, observer: IObserver) -> None:
        # identity, not equality: a value-equal observer is a different subscriber
        for idx, attached in enumerate(self._observers):
            if attached is observer:
                del self._observers[idx]
                logger.info("Subject: Detached an observer.")
                return

    def notify(self) -> None:
        """Trigger an update in each subscriber, in attachment order.

        Iterates over a snapshot, so attach/detach calls made by an observer take
        effect from the next notification on.
        """
        logger.info("Subject: Notifying observers...")
        for observer in list(self._observers):
            logger.debug("Subject: updating %s", type(observer).__name__)
            try:
                observer.update(self)
            except Exception as e:
                logger.error("Observer %s failed: %s", type(observer).__name__, e)
                raise ObserverNotificationError(observer, f"{type(observer).__name__} failed: {e}") from e

    def some_business_logic(self) -> None:
        logger.info("Subject: I'm doing something important.")
        self._state = self._rng.randrange(STATE_UPPER_BOUND)
        logger.info("Subject: My state has just changed to: %s", self._state)
        self.notify()
