"""Driver session: launching VS Code and bundling the harness collaborators."""

from __future__ import annotations

import json
import time
import uuid
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, TypeVar

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService

from .config import HarnessConfig
from .errors import SessionConfigError
from .harness.timing import Clock, Sleep, hard_delay, wait_until
from .platforms import PlatformProfile, get_profile
from .runs.events import EventWriter
from .runs.screenshots import ScreenshotCapture
from .workbench.keyboard import Keyboard

T = TypeVar("T")

# Settings the harness depends on: in-workbench dialogs (so modals are DOM
# nodes), the quick-input file picker, and no startup editors or trust prompts.
DEFAULT_USER_SETTINGS: dict[str, Any] = {
    "window.dialogStyle": "custom",
    "window.titleBarStyle": "custom",
    "files.simpleDialog.enable": True,
    "workbench.startupEditor": "none",
    "workbench.editor.enablePreview": False,
    "workbench.tips.enabled": False,
    "security.workspace.trust.enabled": False,
    "extensions.autoUpdate": False,
    "update.mode": "none",
    "telemetry.telemetryLevel": "off",
}

# Written by the custom-tags scenario; removed before every launch.
SCENARIO_OWNED_SETTINGS = ("yaml.customTags",)


@dataclass
class UISession:
    driver: Any
    config: HarnessConfig
    profile: PlatformProfile
    events: EventWriter
    screenshots: ScreenshotCapture
    keyboard: Keyboard
    clock: Clock = time.monotonic
    sleep: Sleep = time.sleep

    @classmethod
    def open(cls, config: HarnessConfig, *, run_id: str | None = None) -> "UISession":
        driver = launch_vscode(config)
        return cls.attach(driver, config, run_id=run_id)

    @classmethod
    def attach(cls, driver: Any, config: HarnessConfig, *, run_id: str | None = None) -> "UISession":
        events = EventWriter(config.events_path, run_id or str(uuid.uuid4()))
        return cls(
            driver=driver,
            config=config,
            profile=get_profile(config.platform),
            events=events,
            screenshots=ScreenshotCapture(config.screenshots_dir, events=events),
            keyboard=Keyboard(driver),
        )

    def for_scenario(self, scenario: str) -> "UISession":
        events = self.events.for_scenario(scenario)
        return replace(self, events=events, screenshots=self.screenshots.with_events(events))

    def delay(self, milliseconds: int) -> None:
        hard_delay(milliseconds, sleep=self.sleep)

    def wait_until(self, predicate: Callable[[], T], timeout_ms: int, message: str) -> T:
        return wait_until(
            predicate,
            timeout_ms,
            message,
            interval_ms=self.config.poll_interval_ms,
            clock=self.clock,
            sleep=self.sleep,
            events=self.events,
        )

    def screenshot(self, name: str, *, reason: str = "") -> Path:
        return self.screenshots.capture(self.driver, name, reason=reason)

    def close(self) -> None:
        try:
            self.driver.quit()
        except WebDriverException as exc:
            self.events.emit("cleanup_failed", step="driver_quit", error=exc)


def resolve_user_data_dir(config: HarnessConfig) -> Path:
    if config.user_data_dir:
        return Path(config.user_data_dir).expanduser()
    return config.output_dir / "settings"


def resolve_extensions_dir(config: HarnessConfig) -> Path:
    if config.extensions_dir:
        return Path(config.extensions_dir).expanduser()
    return config.output_dir / "extensions"


def prepare_user_settings(
    user_data_dir: Path,
    overrides: dict[str, Any] | None = None,
    *,
    reset: bool = False,
) -> Path:
    """Merge the harness defaults into `<user_data_dir>/User/settings.json`.

    With `reset` the existing file is discarded. Otherwise its keys are kept,
    except the ones the scenarios write (`SCENARIO_OWNED_SETTINGS`), which
    must start out absent for "Edit in settings.json" to produce an empty array.
    """
    settings_path = user_data_dir / "User" / "settings.json"
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    current: dict[str, Any] = {}
    if settings_path.exists() and not reset:
        try:
            loaded = json.loads(settings_path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            loaded = {}
        if isinstance(loaded, dict):
            current = loaded
    for key in SCENARIO_OWNED_SETTINGS:
        current.pop(key, None)
    merged = {**current, **DEFAULT_USER_SETTINGS, **(overrides or {})}
    settings_path.write_text(json.dumps(merged, indent=4), encoding="utf-8")
    return settings_path


def vscode_launch_args(config: HarnessConfig, *, user_data_dir: Path, extensions_dir: Path) -> list[str]:
    args = [
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--disable-workspace-trust",
        "--skip-welcome",
        "--skip-release-notes",
        f"--user-data-dir={user_data_dir}",
        f"--extensions-dir={extensions_dir}",
    ]
    if config.extension_path:
        args.append(f"--extensionDevelopmentPath={Path(config.extension_path).expanduser().resolve()}")
    return args


def launch_vscode(config: HarnessConfig) -> Any:
    """Start VS Code under chromedriver, or attach to one started with a debug port."""
    options = webdriver.ChromeOptions()
    if config.debugger_address:
        options.debugger_address = config.debugger_address
    elif config.code_binary:
        code_binary = Path(config.code_binary).expanduser()
        if not code_binary.exists():
            raise SessionConfigError(f"VS Code binary not found: {code_binary}")
        user_data_dir = resolve_user_data_dir(config)
        extensions_dir = resolve_extensions_dir(config)
        extensions_dir.mkdir(parents=True, exist_ok=True)
        # A harness-owned profile starts clean on every launch.
        prepare_user_settings(user_data_dir, reset=not config.user_data_dir)
        options.binary_location = str(code_binary)
        for arg in vscode_launch_args(config, user_data_dir=user_data_dir, extensions_dir=extensions_dir):
            options.add_argument(arg)
    else:
        raise SessionConfigError(
            "No VS Code to drive. Set YAML_UITEST_CODE_BINARY to the Code executable "
            "or YAML_UITEST_DEBUGGER_ADDRESS to a running instance's debug port."
        )
    service = ChromeService(executable_path=config.chromedriver_path) if config.chromedriver_path else ChromeService()
    return webdriver.Chrome(service=service, options=options)
