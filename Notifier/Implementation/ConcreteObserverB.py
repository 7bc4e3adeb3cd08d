from __future__ import annotations
from Notifier.Interface.IObserver import IObserver

import logging
logger = logging.getLogger(__name__)

"""Observer that only reacts once the state reaches the threshold."""
class ConcreteObserverB(IObserver):
    threshold = 3

    def update(self, subject) -> None:
        if subject.state >= self.threshold:
            logger.info("ConcreteObserverB: Reacted to the event.")
        else:
            logger.debug("ConcreteObserverB: ignoring state %s", subject.state)
