"""Harness configuration.

Every delay, attempt count and timeout the scenarios rely on is a module
constant and the default of the matching `HarnessConfig` field. Any of them can
be overridden through a `YAML_UITEST_*` environment variable (or a `.env` file
at the repo root), e.g. `YAML_UITEST_EDITOR_READY_TIMEOUT_MS=90000`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

from .utils import load_dotenv, safe_int

ENV_PREFIX = "YAML_UITEST_"

DEFAULT_YAML_FILE_NAME = "kustomization.yaml"
DEFAULT_OUTPUT_DIR = "test-resources"
SCREENSHOTS_SUBDIR = "screenshots"
EVENTS_FILE_NAME = "events.jsonl"

DEFAULT_POLL_INTERVAL_MS = 100

DEFAULT_MODAL_SETTLE_MS = 300
DEFAULT_CLOSE_MODAL_PASSES = 3
DEFAULT_CLOSE_MODAL_PASS_DELAY_MS = 200
DEFAULT_CLOSE_SETTLE_MS = 500

DEFAULT_COMMAND_PROMPT_ATTEMPTS = 3
DEFAULT_COMMAND_PROMPT_RETRY_DELAY_MS = 500
DEFAULT_INPUT_BOX_TIMEOUT_MS = 5000

DEFAULT_EDITOR_READY_TIMEOUT_MS = 45000
DEFAULT_SCHEMA_LABEL_TIMEOUT_MS = 5000
DEFAULT_SETUP_SETTLE_MS = 500

DEFAULT_SUGGEST_WIDGET_TIMEOUT_MS = 10000
DEFAULT_SUGGEST_ROWS_TIMEOUT_MS = 10000
DEFAULT_STALE_RETRIES = 1

DEFAULT_SETTINGS_SEARCH_TIMEOUT_MS = 10000
DEFAULT_SETTINGS_OPEN_SETTLE_MS = 4000
DEFAULT_SETTINGS_ESCAPE_SETTLE_MS = 500
DEFAULT_SETTINGS_CLICK_SETTLE_MS = 300
DEFAULT_SETTINGS_APPLY_SETTLE_MS = 3000
DEFAULT_CLEAR_SETTLE_MS = 500
DEFAULT_LANGUAGE_SERVER_SETTLE_MS = 1000

DEFAULT_CUSTOM_TAG = "customTag1"
DEFAULT_CUSTOM_TAG_COLUMN = 5


@dataclass(frozen=True)
class HarnessConfig:
    # Launch
    code_binary: str | None = None
    chromedriver_path: str | None = None
    extension_path: str | None = None
    debugger_address: str | None = None
    user_data_dir: str | None = None
    extensions_dir: str | None = None
    platform: str | None = None

    # Filesystem
    home_dir: Path = field(default_factory=Path.home)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    yaml_file_name: str = DEFAULT_YAML_FILE_NAME

    # Timing
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    modal_settle_ms: int = DEFAULT_MODAL_SETTLE_MS
    close_modal_passes: int = DEFAULT_CLOSE_MODAL_PASSES
    close_modal_pass_delay_ms: int = DEFAULT_CLOSE_MODAL_PASS_DELAY_MS
    close_settle_ms: int = DEFAULT_CLOSE_SETTLE_MS
    command_prompt_attempts: int = DEFAULT_COMMAND_PROMPT_ATTEMPTS
    command_prompt_retry_delay_ms: int = DEFAULT_COMMAND_PROMPT_RETRY_DELAY_MS
    input_box_timeout_ms: int = DEFAULT_INPUT_BOX_TIMEOUT_MS
    editor_ready_timeout_ms: int = DEFAULT_EDITOR_READY_TIMEOUT_MS
    schema_label_timeout_ms: int = DEFAULT_SCHEMA_LABEL_TIMEOUT_MS
    setup_settle_ms: int = DEFAULT_SETUP_SETTLE_MS
    suggest_widget_timeout_ms: int = DEFAULT_SUGGEST_WIDGET_TIMEOUT_MS
    suggest_rows_timeout_ms: int = DEFAULT_SUGGEST_ROWS_TIMEOUT_MS
    stale_retries: int = DEFAULT_STALE_RETRIES
    settings_search_timeout_ms: int = DEFAULT_SETTINGS_SEARCH_TIMEOUT_MS
    settings_open_settle_ms: int = DEFAULT_SETTINGS_OPEN_SETTLE_MS
    settings_escape_settle_ms: int = DEFAULT_SETTINGS_ESCAPE_SETTLE_MS
    settings_click_settle_ms: int = DEFAULT_SETTINGS_CLICK_SETTLE_MS
    settings_apply_settle_ms: int = DEFAULT_SETTINGS_APPLY_SETTLE_MS
    clear_settle_ms: int = DEFAULT_CLEAR_SETTLE_MS
    language_server_settle_ms: int = DEFAULT_LANGUAGE_SERVER_SETTLE_MS

    # Scenario data
    custom_tag: str = DEFAULT_CUSTOM_TAG
    custom_tag_column: int = DEFAULT_CUSTOM_TAG_COLUMN

    @property
    def yaml_file_path(self) -> Path:
        return self.home_dir / self.yaml_file_name

    @property
    def screenshots_dir(self) -> Path:
        return self.output_dir / SCREENSHOTS_SUBDIR

    @property
    def events_path(self) -> Path:
        return self.output_dir / EVENTS_FILE_NAME

    @property
    def has_launch_target(self) -> bool:
        return bool(self.code_binary or self.debugger_address)

    def with_overrides(self, **overrides: Any) -> "HarnessConfig":
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, *, dotenv: bool = True) -> "HarnessConfig":
        if env is None:
            if dotenv:
                load_dotenv()
            env = os.environ
        defaults = cls()
        values: dict[str, Any] = {}
        for spec in fields(cls):
            raw = env.get(f"{ENV_PREFIX}{spec.name.upper()}")
            if raw is None or not str(raw).strip():
                continue
            current = getattr(defaults, spec.name)
            if isinstance(current, bool):
                values[spec.name] = str(raw).strip().lower() in {"1", "true", "yes", "on"}
            elif isinstance(current, int):
                values[spec.name] = max(0, safe_int(raw, current))
            elif isinstance(current, Path):
                values[spec.name] = Path(str(raw).strip()).expanduser()
            else:
                values[spec.name] = str(raw).strip()
        return replace(defaults, **values)


def env_for_overrides(**overrides: Any) -> dict[str, str]:
    """Render config overrides as `YAML_UITEST_*` variables for a child process."""
    env: dict[str, str] = {}
    names = {spec.name for spec in fields(HarnessConfig)}
    for key, value in overrides.items():
        if value is None:
            continue
        if key not in names:
            raise KeyError(f"Unknown harness setting: {key}")
        env[f"{ENV_PREFIX}{key.upper()}"] = str(value)
    return env
