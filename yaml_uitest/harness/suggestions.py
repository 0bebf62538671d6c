"""Reading and asserting on the suggest widget."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import WaitTimeoutError
from ..workbench import ContentAssist, TextEditor
from ..workbench.content_assist import SUGGEST_ROWS_TIMEOUT_MESSAGE

if TYPE_CHECKING:
    from ..session import UISession


def open_suggestions(session: "UISession", editor: TextEditor) -> ContentAssist:
    """Trigger content assist and wait until the widget lists at least one row."""
    assist = editor.open_content_assist()
    session.wait_until(
        lambda: assist.row_count() > 0,
        session.config.suggest_rows_timeout_ms,
        SUGGEST_ROWS_TIMEOUT_MESSAGE,
    )
    return assist


def read_suggestion_labels(session: "UISession") -> list[str]:
    return ContentAssist(session).labels()


def expect_suggestion(
    session: "UISession",
    editor: TextEditor,
    expected: str,
    *,
    scenario: str,
    attempt: str,
) -> list[str]:
    """Open suggestions and assert `expected` is among them.

    Failures leave a screenshot named after the scenario, what went wrong and
    the attempt. Timeouts re-raise as-is; a missing label raises
    `AssertionError` listing what was offered.
    """
    try:
        open_suggestions(session, editor)
    except WaitTimeoutError as exc:
        session.screenshot(f"{scenario}-no-widget-{attempt}", reason=str(exc))
        raise
    labels = read_suggestion_labels(session)
    if expected not in labels:
        session.screenshot(f"{scenario}-no-{expected}-{attempt}", reason=f"missing {expected}")
        raise AssertionError(
            f"The '{expected}' string did not appear in the content assist's suggestion list. "
            f"Found: {', '.join(labels) or '(none)'}"
        )
    return labels
