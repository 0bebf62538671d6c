from __future__ import annotations

import pytest
from selenium.common.exceptions import ElementClickInterceptedException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys

from conftest import FakeElement, event_types
from yaml_uitest.harness.modals import dismiss_blocking_modal
from yaml_uitest.workbench import locators


def _show_modal(session, *buttons: FakeElement) -> None:
    session.driver.set(By.CSS_SELECTOR, locators.MODAL_BLOCK, [FakeElement()])
    session.driver.set(By.XPATH, locators.dialog_button_xpath("Don't Save"), list(buttons))


def test_no_modal_is_a_noop(session) -> None:
    assert dismiss_blocking_modal(session) is False
    assert dismiss_blocking_modal(session) is False
    assert session.keyboard.actions == []
    assert session.fake_clock.sleeps == []
    assert event_types(session) == []


def test_escape_dismisses_modal_on_linux(session) -> None:
    button = FakeElement("Don't Save")
    _show_modal(session, button)

    assert dismiss_blocking_modal(session) is True

    assert session.keyboard.presses() == [(Keys.ESCAPE,)]
    assert button.clicks == 0
    assert session.fake_clock.sleeps == [pytest.approx(0.3)]
    assert event_types(session) == ["modal_dismissed"]


def test_dont_save_button_on_macos(mac_session) -> None:
    button = FakeElement("Don't Save")
    _show_modal(mac_session, button)

    assert dismiss_blocking_modal(mac_session) is True

    assert button.clicks == 1
    assert mac_session.keyboard.presses() == []


@pytest.mark.parametrize(
    "buttons",
    [
        [],
        [FakeElement("Don't Save", click_error=ElementClickInterceptedException("covered"))],
    ],
)
def test_macos_falls_back_to_escape(mac_session, buttons) -> None:
    _show_modal(mac_session, *buttons)

    assert dismiss_blocking_modal(mac_session) is True

    assert mac_session.keyboard.presses() == [(Keys.ESCAPE,)]


def test_driver_errors_are_swallowed(session) -> None:
    session.driver.set(By.CSS_SELECTOR, locators.MODAL_BLOCK, WebDriverException("renderer gone"))

    assert dismiss_blocking_modal(session) is False
    assert event_types(session) == ["modal_dismiss_failed"]
