"""Editor reset, test-file creation and cleanup."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from selenium.webdriver.common.keys import Keys

from ..errors import CommandPromptUnavailable
from ..runs.events import EventWriter
from ..workbench import EditorView, InputBox, TextEditor, Workbench, command_text
from ..workbench.workbench import OPEN_FILE_COMMAND
from .modals import dismiss_blocking_modal

if TYPE_CHECKING:
    from ..session import UISession


def force_close_all_editors(session: "UISession") -> None:
    """Try hard to reach "no open editors, no dialog". Not verified afterwards."""
    config = session.config
    for _ in range(config.close_modal_passes):
        dismiss_blocking_modal(session)
        session.delay(config.close_modal_pass_delay_ms)

    try:
        EditorView(session).close_all_editors()
    except Exception as exc:
        session.events.emit("editors_close_fallback", error=exc)
        try:
            session.keyboard.chord(*session.profile.close_editor_chord)
        except Exception as chord_exc:
            session.events.emit("cleanup_failed", step="close_editor_chord", error=chord_exc)

    session.delay(config.close_settle_ms)
    dismiss_blocking_modal(session)


def write_empty_file(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def _open_command_prompt(session: "UISession") -> InputBox:
    config = session.config
    attempts = max(1, config.command_prompt_attempts)
    for attempt in range(1, attempts + 1):
        try:
            dismiss_blocking_modal(session)
            return Workbench(session).open_command_prompt()
        except Exception as exc:
            if attempt == attempts:
                raise CommandPromptUnavailable(attempts) from exc
            session.events.emit("command_prompt_retry", attempt=attempt, error=exc)
            session.keyboard.press(Keys.ESCAPE)
            session.delay(config.command_prompt_retry_delay_ms)
    raise CommandPromptUnavailable(attempts)


def create_custom_file(session: "UISession", file_path: Path) -> TextEditor:
    """Create `file_path` empty on disk and open it in the editor.

    Goes through "File: Open File..." and the path prompt that follows it
    instead of creating an untitled editor, which can bring up a Save As
    dialog on macOS. The file is left unsaved in the editor.
    """
    force_close_all_editors(session)

    path = write_empty_file(Path(file_path).expanduser())
    session.events.emit("file_created", path=path)

    prompt = _open_command_prompt(session)
    prompt.set_text(command_text(OPEN_FILE_COMMAND))
    prompt.confirm()

    # The palette is replaced by a path prompt; the old handle is gone.
    prompt = InputBox.create(session)
    prompt.set_text(str(path.resolve()))
    prompt.confirm()

    editor = session.wait_until(
        lambda: EditorView(session).open_editor(path.name),
        session.config.input_box_timeout_ms,
        f"Editor for {path.name} did not open",
    )
    editor.click()
    return editor


def delete_file_in_home_dir(
    filename: str,
    *,
    home_dir: Path | None = None,
    events: EventWriter | None = None,
) -> bool:
    target = (home_dir or Path.home()) / filename
    if not target.exists() and not target.is_symlink():
        return False
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target, ignore_errors=True)
    else:
        target.unlink(missing_ok=True)
    if events is not None:
        events.emit("file_deleted", path=target)
    return True
