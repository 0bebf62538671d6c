"""Setup and teardown shared by the scenario drivers."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from ..harness.files import create_custom_file, delete_file_in_home_dir, force_close_all_editors
from ..harness.readiness import wait_for_editor_ready
from ..workbench import EditorView

if TYPE_CHECKING:
    from ..session import UISession


@contextmanager
def recorded(session: "UISession", step: str) -> Iterator[None]:
    session.events.emit("scenario_started", step=step)
    try:
        yield
    except BaseException as exc:
        session.events.emit("scenario_failed", step=step, error=exc)
        raise
    session.events.emit("scenario_passed", step=step)


def open_test_file(session: "UISession", scenario: str) -> None:
    """Create the YAML file, open it, and wait until the editor takes input."""
    config = session.config
    try:
        create_custom_file(session, config.yaml_file_path)
    except Exception as exc:
        session.screenshot(f"{scenario}-createCustomFile-failed", reason=str(exc))
        raise
    try:
        wait_for_editor_ready(session, config.yaml_file_name)
    except Exception as exc:
        session.screenshot(f"{scenario}-editor-not-ready", reason=str(exc))
        raise


def save_test_file(session: "UISession") -> None:
    """Save the YAML file if its editor is open, so no save dialog is left behind."""
    try:
        EditorView(session).open_editor(session.config.yaml_file_name).save()
    except Exception as exc:
        session.events.emit("cleanup_failed", step="save", error=exc)


def teardown(session: "UISession") -> None:
    """Close editors and delete the YAML file. Failures here are only recorded."""
    try:
        force_close_all_editors(session)
    except Exception as exc:
        session.events.emit("cleanup_failed", step="close_editors", error=exc)
    try:
        delete_file_in_home_dir(
            session.config.yaml_file_name,
            home_dir=session.config.home_dir,
            events=session.events,
        )
    except OSError as exc:
        session.events.emit("cleanup_failed", step="delete_file", error=exc)
