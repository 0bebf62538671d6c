"""Best-effort dismissal of blocking workbench dialogs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys

from ..workbench import locators

if TYPE_CHECKING:
    from ..session import UISession


def has_blocking_modal(session: "UISession") -> bool:
    return bool(session.driver.find_elements(By.CSS_SELECTOR, locators.MODAL_BLOCK))


def _click_dismiss_button(session: "UISession") -> bool:
    try:
        buttons = session.driver.find_elements(
            By.XPATH,
            locators.dialog_button_xpath(session.profile.dismiss_button_label),
        )
        if not buttons:
            return False
        buttons[0].click()
    except WebDriverException:
        return False
    return True


def dismiss_blocking_modal(session: "UISession") -> bool:
    """Close a blocking dialog if one is showing.

    Returns True when a dialog was found and a dismiss action was sent. Never
    raises: this runs during cleanup and between retries, where a failure here
    must not replace the error being handled.
    """
    try:
        if not has_blocking_modal(session):
            return False
        method = "escape"
        if session.profile.uses_dismiss_button and _click_dismiss_button(session):
            method = "button"
        else:
            session.keyboard.press(Keys.ESCAPE)
        session.delay(session.config.modal_settle_ms)
        session.events.emit("modal_dismissed", method=method)
        return True
    except Exception as exc:
        try:
            session.events.emit("modal_dismiss_failed", error=exc)
        except Exception:
            pass
        return False
