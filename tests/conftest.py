"""Fakes for driving the harness without a live VS Code."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from selenium.common.exceptions import NoSuchElementException

from yaml_uitest.config import HarnessConfig
from yaml_uitest.platforms import get_profile
from yaml_uitest.runs.events import EventWriter, read_events
from yaml_uitest.runs.screenshots import ScreenshotCapture
from yaml_uitest.session import UISession

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeElement:
    def __init__(
        self,
        text: str = "",
        *,
        displayed: bool = True,
        attrs: dict[str, str] | None = None,
        on_click: Callable[[], None] | None = None,
        click_error: Exception | None = None,
        on_keys: Callable[[tuple[str, ...]], None] | None = None,
    ) -> None:
        self.text = text
        self.displayed = displayed
        self.attrs = attrs or {}
        self.children: dict[tuple[str, str], list[FakeElement]] = {}
        self.on_click = on_click
        self.click_error = click_error
        self.on_keys = on_keys
        self.clicks = 0
        self.sent_keys: list[tuple[str, ...]] = []

    def add_child(self, by: str, value: str, *elements: "FakeElement") -> "FakeElement":
        self.children.setdefault((by, value), []).extend(elements)
        return self

    def is_displayed(self) -> bool:
        return self.displayed

    def click(self) -> None:
        self.clicks += 1
        if self.click_error is not None:
            raise self.click_error
        if self.on_click is not None:
            self.on_click()

    def send_keys(self, *keys: str) -> None:
        self.sent_keys.append(keys)
        if self.on_keys is not None:
            self.on_keys(keys)

    def get_attribute(self, name: str) -> str | None:
        return self.attrs.get(name)

    def find_elements(self, by: str, value: str) -> list["FakeElement"]:
        return list(self.children.get((by, value), []))

    def find_element(self, by: str, value: str) -> "FakeElement":
        found = self.find_elements(by, value)
        if not found:
            raise NoSuchElementException(f"{by}={value}")
        return found[0]


class FakeDriver:
    def __init__(self) -> None:
        self.elements: dict[tuple[str, str], Any] = {}
        self.lookups: list[tuple[str, str]] = []
        self.png: bytes | Exception = PNG_BYTES
        self.script_result: Any = None
        self.scripts: list[tuple[str, tuple[Any, ...]]] = []
        self.quit_error: Exception | None = None
        self.quit_calls = 0

    def set(self, by: str, value: str, elements: Any) -> None:
        self.elements[(by, value)] = elements

    def find_elements(self, by: str, value: str) -> list[Any]:
        self.lookups.append((by, value))
        entry = self.elements.get((by, value), [])
        if callable(entry):
            entry = entry()
        if isinstance(entry, Exception):
            raise entry
        return list(entry)

    def find_element(self, by: str, value: str) -> Any:
        found = self.find_elements(by, value)
        if not found:
            raise NoSuchElementException(f"{by}={value}")
        return found[0]

    def get_screenshot_as_png(self) -> bytes:
        if isinstance(self.png, Exception):
            raise self.png
        return self.png

    def execute_script(self, script: str, *args: Any) -> Any:
        self.scripts.append((script, args))
        return self.script_result

    def quit(self) -> None:
        self.quit_calls += 1
        if self.quit_error is not None:
            raise self.quit_error


class FakeKeyboard:
    def __init__(self) -> None:
        self.actions: list[tuple[str, tuple[str, ...]]] = []
        self.on_chord: Callable[[tuple[str, ...]], None] | None = None

    def press(self, *keys: str) -> None:
        self.actions.append(("press", keys))

    def chord(self, *keys: str) -> None:
        self.actions.append(("chord", keys))
        if self.on_chord is not None:
            self.on_chord(keys)

    def presses(self) -> list[tuple[str, ...]]:
        return [keys for kind, keys in self.actions if kind == "press"]

    def chords(self) -> list[tuple[str, ...]]:
        return [keys for kind, keys in self.actions if kind == "chord"]


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def clock(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def make_session(tmp_path: Path, *, platform: str = "linux") -> UISession:
    config = HarnessConfig(home_dir=tmp_path / "home", output_dir=tmp_path / "out", platform=platform)
    events = EventWriter(config.events_path, "run-test")
    clock = FakeClock()
    session = UISession(
        driver=FakeDriver(),
        config=config,
        profile=get_profile(platform),
        events=events,
        screenshots=ScreenshotCapture(config.screenshots_dir, events=events),
        keyboard=FakeKeyboard(),  # type: ignore[arg-type]
        clock=clock.clock,
        sleep=clock.sleep,
    )
    session.fake_clock = clock  # type: ignore[attr-defined]
    return session


def event_types(session: UISession) -> list[str]:
    return [event["type"] for event in read_events(session.config.events_path)]


def screenshot_names(session: UISession) -> list[str]:
    if not session.config.screenshots_dir.exists():
        return []
    return sorted(path.name for path in session.config.screenshots_dir.iterdir())


@pytest.fixture
def session(tmp_path: Path) -> UISession:
    return make_session(tmp_path)


@pytest.fixture
def mac_session(tmp_path: Path) -> UISession:
    return make_session(tmp_path, platform="darwin")


@pytest.fixture(scope="session")
def live_session():
    """A real VS Code under chromedriver, configured through YAML_UITEST_* variables."""
    config = HarnessConfig.from_env()
    if not config.has_launch_target:
        pytest.skip("VS Code not configured (set YAML_UITEST_CODE_BINARY or YAML_UITEST_DEBUGGER_ADDRESS)")
    ui = UISession.open(config)
    yield ui
    ui.close()
