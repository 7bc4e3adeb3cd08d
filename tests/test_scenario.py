from Notifier.Business.Subject import Subject
from Notifier.Business.Scenario import run_scenario
from Notifier.Implementation.ConcreteObserverA import ConcreteObserverA


class DummyRandom:
    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        return self.values.pop(0)


def _messages(caplog):
    return [r.getMessage() for r in caplog.records]


def test_scenario_event_sequence(caplog):
    caplog.set_level("INFO")
    subject = run_scenario(Subject(rng=DummyRandom([5, 2, 7, 9])))
    assert _messages(caplog) == [
        "Subject: Attached an observer.",
        "Subject: Attached an observer.",
        "Subject: I'm doing something important.",
        "Subject: My state has just changed to: 2",
        "Subject: Notifying observers...",
        "ConcreteObserverA: Reacted to the event.",
        "Subject: I'm doing something important.",
        "Subject: My state has just changed to: 7",
        "Subject: Notifying observers...",
        "ConcreteObserverB: Reacted to the event.",
        "Subject: Detached an observer.",
        "Subject: I'm doing something important.",
        "Subject: My state has just changed to: 9",
        "Subject: Notifying observers...",
    ]
    assert subject.state == 9
    assert len(subject.observers) == 1
    assert isinstance(subject.observers[0], ConcreteObserverA)


def test_scenario_low_state_after_detach_still_reaches_a(caplog):
    caplog.set_level("INFO")
    run_scenario(Subject(rng=DummyRandom([0, 8, 8, 1])))
    reactions = [m for m in _messages(caplog) if "Reacted" in m]
    assert reactions == [
        "ConcreteObserverB: Reacted to the event.",
        "ConcreteObserverB: Reacted to the event.",
        "ConcreteObserverA: Reacted to the event.",
    ]


def test_scenario_with_seed_is_reproducible():
    assert run_scenario(seed=11).state == run_scenario(seed=11).state
