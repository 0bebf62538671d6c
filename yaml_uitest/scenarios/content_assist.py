"""Content assist offers `apiVersion` in an empty kustomization.yaml."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..harness.modals import dismiss_blocking_modal
from ..harness.readiness import wait_for_schema_label
from ..harness.suggestions import expect_suggestion
from ..harness.timing import retry_on_stale
from ..workbench import EditorView
from .common import open_test_file, recorded

if TYPE_CHECKING:
    from ..session import UISession

SCENARIO = "contentAssist"
TRIGGER_TEXT = "api"
EXPECTED_LABEL = "apiVersion"


def setup(session: "UISession") -> None:
    session.screenshot(f"{SCENARIO}-before-createCustomFile")
    open_test_file(session, SCENARIO)
    session.screenshot(f"{SCENARIO}-after-createCustomFile")
    # Only informative: content assist works without the schema label.
    wait_for_schema_label(session, session.config.yaml_file_name, required=False)
    session.delay(session.config.setup_settle_ms)


def check_suggestion(session: "UISession", attempt: str) -> list[str]:
    dismiss_blocking_modal(session)
    editor = EditorView(session).open_editor(session.config.yaml_file_name)
    editor.click()
    try:
        editor.type_text_at(1, 1, TRIGGER_TEXT)
    except Exception as exc:
        session.screenshot(f"{SCENARIO}-typeText-failed-{attempt}", reason=str(exc))
        raise
    labels = expect_suggestion(session, editor, EXPECTED_LABEL, scenario=SCENARIO, attempt=attempt)
    editor.save()
    return labels


def run(session: "UISession") -> list[str]:
    """Type `api` at 1:1 and expect `apiVersion`, retrying once on stale elements."""
    with recorded(session, "content_assist"):
        return retry_on_stale(
            lambda attempt: check_suggestion(session, attempt),
            retries=session.config.stale_retries,
            events=session.events,
        )
