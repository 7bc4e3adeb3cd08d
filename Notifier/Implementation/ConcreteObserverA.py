from __future__ import annotations
from Notifier.Interface.IObserver import IObserver

import logging
logger = logging.getLogger(__name__)

"""Observer that only reacts to low states (below the threshold)."""
class ConcreteObserverA(IObserver):
    threshold = 3

    def update(self, subject) -> None:
        if subject.state < self.threshold:
            logger.info("ConcreteObserverA: Reacted to the event.")
        else:
            logger.debug("ConcreteObserverA: ignoring state %s", subject.state)
