"""Workbench-level entry points: command palette and settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .input_box import InputBox
from .settings import SettingsEditor

if TYPE_CHECKING:
    from ..session import UISession

COMMAND_PREFIX = ">"
OPEN_FILE_COMMAND = "File: Open File..."
OPEN_SETTINGS_COMMAND = "Preferences: Open Settings (UI)"


def command_text(command: str) -> str:
    """Palette text that runs `command` rather than searching for a file."""
    return command if command.startswith(COMMAND_PREFIX) else f"{COMMAND_PREFIX}{command}"


class Workbench:
    def __init__(self, session: "UISession") -> None:
        self.session = session

    def open_command_prompt(self) -> InputBox:
        self.session.keyboard.chord(*self.session.profile.command_prompt_keys)
        return InputBox.create(self.session)

    def execute_command(self, command: str) -> None:
        prompt = self.open_command_prompt()
        prompt.set_text(command_text(command))
        prompt.confirm()

    def open_settings(self) -> SettingsEditor:
        self.execute_command(OPEN_SETTINGS_COMMAND)
        return SettingsEditor.wait(self.session)
