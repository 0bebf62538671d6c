import pytest
from selenium.common.exceptions import StaleElementReferenceException

from conftest import FakeClock
from yaml_uitest.errors import FatalUIError, WaitTimeoutError
from yaml_uitest.harness.timing import attempt_name, hard_delay, retry_on_stale, wait_until
from yaml_uitest.runs.events import EventWriter, read_events


def test_hard_delay_sleeps_milliseconds_and_clamps_negative() -> None:
    clock = FakeClock()
    hard_delay(250, sleep=clock.sleep)
    hard_delay(-10, sleep=clock.sleep)
    assert clock.sleeps == [0.25, 0.0]


def test_wait_until_returns_first_truthy_value() -> None:
    clock = FakeClock()
    results = iter([None, 0, "ready"])

    value = wait_until(lambda: next(results), 1000, "never", interval_ms=100, clock=clock.clock, sleep=clock.sleep)

    assert value == "ready"
    assert clock.now == pytest.approx(0.2)


def test_wait_until_treats_predicate_errors_as_not_ready() -> None:
    clock = FakeClock()
    calls = {"n": 0}

    def _predicate() -> bool:
        calls["n"] += 1
        if calls["n"] < 3:
            raise ValueError("not rendered")
        return True

    assert wait_until(_predicate, 1000, "never", clock=clock.clock, sleep=clock.sleep) is True
    assert calls["n"] == 3


def test_wait_until_times_out_only_after_full_timeout(tmp_path) -> None:
    clock = FakeClock()
    events = EventWriter(tmp_path / "events.jsonl", "run-1")

    def _predicate() -> bool:
        raise LookupError("still missing")

    with pytest.raises(WaitTimeoutError) as excinfo:
        wait_until(
            _predicate,
            1000,
            "Widget did not show",
            interval_ms=300,
            clock=clock.clock,
            sleep=clock.sleep,
            events=events,
        )

    err = excinfo.value
    assert str(err) == "Widget did not show"
    assert isinstance(err, TimeoutError)
    assert isinstance(err.__cause__, LookupError)
    assert err.timeout_ms == 1000
    assert err.elapsed_ms >= 1000
    assert clock.now == pytest.approx(1.0)
    # The last sleep is clamped to the deadline.
    assert clock.sleeps[-1] == pytest.approx(0.1)

    recorded = read_events(tmp_path / "events.jsonl")
    assert [event["type"] for event in recorded] == ["wait_timeout"]
    assert recorded[0]["message"] == "Widget did not show"
    assert recorded[0]["last_error"] == "LookupError: still missing"


def test_wait_until_with_zero_timeout_evaluates_once() -> None:
    clock = FakeClock()
    calls = []

    with pytest.raises(WaitTimeoutError):
        wait_until(lambda: calls.append(1), 0, "no time", clock=clock.clock, sleep=clock.sleep)

    assert calls == [1]
    assert clock.sleeps == []


def test_wait_until_propagates_fatal_errors_immediately() -> None:
    clock = FakeClock()

    def _predicate() -> bool:
        raise FatalUIError("window crashed")

    with pytest.raises(FatalUIError):
        wait_until(_predicate, 5000, "never", clock=clock.clock, sleep=clock.sleep)

    assert clock.sleeps == []


def test_attempt_names() -> None:
    assert [attempt_name(i) for i in range(4)] == ["first", "retry", "retry2", "retry3"]


def test_retry_on_stale_reruns_once(tmp_path) -> None:
    events = EventWriter(tmp_path / "events.jsonl", "run-1")
    attempts = []

    def _action(attempt: str) -> str:
        attempts.append(attempt)
        if attempt == "first":
            raise StaleElementReferenceException("detached")
        return "done"

    assert retry_on_stale(_action, retries=1, events=events) == "done"
    assert attempts == ["first", "retry"]
    recorded = read_events(tmp_path / "events.jsonl")
    assert [event["type"] for event in recorded] == ["stale_retry"]
    assert recorded[0]["attempt"] == "first"


def test_retry_on_stale_gives_up_after_budget() -> None:
    attempts = []

    def _action(attempt: str) -> str:
        attempts.append(attempt)
        raise StaleElementReferenceException("detached")

    with pytest.raises(StaleElementReferenceException):
        retry_on_stale(_action, retries=1)

    assert attempts == ["first", "retry"]


def test_retry_on_stale_does_not_retry_assertions() -> None:
    attempts = []

    def _action(attempt: str) -> str:
        attempts.append(attempt)
        raise AssertionError("label missing")

    with pytest.raises(AssertionError, match="label missing"):
        retry_on_stale(_action, retries=3)

    assert attempts == ["first"]
