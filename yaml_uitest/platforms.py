"""Per-host keyboard and dialog behavior.

VS Code binds its workbench shortcuts to Cmd on macOS and Ctrl elsewhere, and
on macOS the "unsaved changes" dialog only reliably closes through its
"Don't Save" button. Everything platform-specific the harness does is looked
up here so the scenario code has no platform branches.
"""

from __future__ import annotations

import platform as _platform
from dataclasses import dataclass

from selenium.webdriver.common.keys import Keys

DISMISS_WITH_BUTTON = "dont_save_button"
DISMISS_WITH_ESCAPE = "escape"


@dataclass(frozen=True)
class PlatformProfile:
    name: str
    primary_modifier: str
    dismiss_strategy: str
    dismiss_button_label: str = "Don't Save"
    close_editor_key: str = "w"
    save_key: str = "s"
    select_all_key: str = "a"
    command_prompt_keys: tuple[str, ...] = ()
    goto_line_keys: tuple[str, ...] = (Keys.CONTROL, "g")
    content_assist_keys: tuple[str, ...] = (Keys.CONTROL, Keys.SPACE)

    @property
    def close_editor_chord(self) -> tuple[str, str]:
        return self.primary_modifier, self.close_editor_key

    @property
    def save_chord(self) -> tuple[str, str]:
        return self.primary_modifier, self.save_key

    @property
    def select_all_chord(self) -> tuple[str, str]:
        return self.primary_modifier, self.select_all_key

    @property
    def uses_dismiss_button(self) -> bool:
        return self.dismiss_strategy == DISMISS_WITH_BUTTON


PLATFORM_PROFILES: dict[str, PlatformProfile] = {
    "darwin": PlatformProfile(
        name="darwin",
        primary_modifier=Keys.COMMAND,
        dismiss_strategy=DISMISS_WITH_BUTTON,
        command_prompt_keys=(Keys.COMMAND, Keys.SHIFT, "p"),
    ),
    "linux": PlatformProfile(
        name="linux",
        primary_modifier=Keys.CONTROL,
        dismiss_strategy=DISMISS_WITH_ESCAPE,
        command_prompt_keys=(Keys.CONTROL, Keys.SHIFT, "p"),
    ),
    "win32": PlatformProfile(
        name="win32",
        primary_modifier=Keys.CONTROL,
        dismiss_strategy=DISMISS_WITH_ESCAPE,
        command_prompt_keys=(Keys.CONTROL, Keys.SHIFT, "p"),
    ),
}

_SYSTEM_ALIASES = {
    "darwin": "darwin",
    "macos": "darwin",
    "mac": "darwin",
    "linux": "linux",
    "windows": "win32",
    "win32": "win32",
    "cygwin": "win32",
}


def normalize_platform_name(value: str | None) -> str:
    key = (value or "").strip().lower()
    return _SYSTEM_ALIASES.get(key, "linux")


def current_platform_name() -> str:
    return normalize_platform_name(_platform.system())


def get_profile(name: str | None = None) -> PlatformProfile:
    resolved = normalize_platform_name(name) if name else current_platform_name()
    return PLATFORM_PROFILES[resolved]


def describe_profile(profile: PlatformProfile) -> dict[str, str]:
    return {
        "name": profile.name,
        "primary_modifier": key_name(profile.primary_modifier),
        "close_editor": "+".join(key_name(k) for k in profile.close_editor_chord),
        "command_prompt": "+".join(key_name(k) for k in profile.command_prompt_keys),
        "dismiss_strategy": profile.dismiss_strategy,
    }


def key_name(key: str) -> str:
    for attr in ("COMMAND", "CONTROL", "SHIFT", "ESCAPE", "SPACE", "ENTER"):
        if getattr(Keys, attr) == key:
            return attr.lower()
    return key
