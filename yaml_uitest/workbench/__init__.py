"""Selenium page objects for the parts of the VS Code workbench the scenarios touch.

Objects here never keep a WebElement across a call that can re-render the
workbench. Each method locates what it needs when it runs.
"""

from __future__ import annotations

from .content_assist import ContentAssist
from .editors import EditorView, TextEditor
from .input_box import InputBox
from .keyboard import Keyboard
from .settings import Setting, SettingsEditor
from .status_bar import StatusBar
from .workbench import Workbench, command_text

__all__ = [
    "ContentAssist",
    "EditorView",
    "InputBox",
    "Keyboard",
    "Setting",
    "SettingsEditor",
    "StatusBar",
    "TextEditor",
    "Workbench",
    "command_text",
]
