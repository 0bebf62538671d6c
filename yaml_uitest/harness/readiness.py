"""Waiting for an opened file to become usable."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import WaitTimeoutError
from ..workbench import EditorView, StatusBar

if TYPE_CHECKING:
    from ..session import UISession


def wait_for_editor_ready(session: "UISession", file_name: str, timeout_ms: int | None = None) -> None:
    """Wait until the editor tab for `file_name` opens and accepts a click.

    This is the readiness signal the scenarios use. The schema label in the
    status bar would be the semantic one, but on macOS it often never renders.
    """
    timeout = session.config.editor_ready_timeout_ms if timeout_ms is None else timeout_ms

    def _ready() -> bool:
        EditorView(session).open_editor(file_name).click()
        return True

    session.wait_until(_ready, timeout, f"Editor for {file_name} was not ready within {timeout}ms")


def get_schema_label(session: "UISession", text: str) -> Any | None:
    return StatusBar(session).schema_label(text)


def wait_for_schema_label(
    session: "UISession",
    text: str,
    timeout_ms: int | None = None,
    *,
    required: bool = False,
) -> bool:
    """Wait for the schema label of `text`; when not `required`, report instead of raising."""
    timeout = session.config.schema_label_timeout_ms if timeout_ms is None else timeout_ms
    try:
        session.wait_until(
            lambda: get_schema_label(session, text) is not None,
            timeout,
            f"Schema label for {text} did not appear within {timeout}ms",
        )
    except WaitTimeoutError:
        if required:
            raise
        return False
    return True
