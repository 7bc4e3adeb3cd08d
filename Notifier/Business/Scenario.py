"""
The demonstration run: two observers attached, three rounds of business logic,
observer B detached before the last round.
"""
from typing import Optional

from Notifier.Business.Subject import Subject
from Notifier.Implementation.ConcreteObserverA import ConcreteObserverA
from Notifier.Implementation.ConcreteObserverB import ConcreteObserverB

import logging
logger = logging.getLogger(__name__)


def run_scenario(subject: Optional[Subject] = None, seed: Optional[int] = None) -> Subject:
    subject = subject or Subject(seed=seed)

    observer_a = ConcreteObserverA()
    observer_b = ConcreteObserverB()

    subject.attach(observer_a)
    subject.attach(observer_b)

    subject.some_business_logic()
    subject.some_business_logic()

    subject.detach(observer_b)

    subject.some_business_logic()

    logger.debug("scenario finished with state %s", subject.state)
    return subject
