# This test file checks the car search debounce used between keystrokes and catalogue fetches.

from __future__ import annotations

from src.car_price_dashboard.search import SearchDebouncer


class _RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def test_first_load_fetches_without_delay() -> None:
    sleep = _RecordingSleep()
    debouncer = SearchDebouncer(delay_seconds=0.3, sleep=sleep)

    assert debouncer.settle("")
    assert sleep.calls == []


def test_changed_term_waits_before_fetch() -> None:
    sleep = _RecordingSleep()
    debouncer = SearchDebouncer(delay_seconds=0.3, sleep=sleep)
    debouncer.record("")

    assert debouncer.settle("aud")
    assert sleep.calls == [0.3]


def test_recorded_term_is_not_refetched() -> None:
    sleep = _RecordingSleep()
    debouncer = SearchDebouncer(delay_seconds=0.3, sleep=sleep)
    debouncer.record("audi")

    assert not debouncer.settle("audi")
    assert sleep.calls == []
    assert debouncer.last_term == "audi"


def test_unrecorded_term_is_retried() -> None:
    sleep = _RecordingSleep()
    debouncer = SearchDebouncer(delay_seconds=0.3, sleep=sleep)
    debouncer.record("")

    assert debouncer.settle("bmw")
    assert debouncer.settle("bmw")
    assert sleep.calls == [0.3, 0.3]
