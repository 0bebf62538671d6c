"""Quick input (command palette and its follow-up prompts)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys

from . import locators

if TYPE_CHECKING:
    from ..session import UISession


class InputBox:
    def __init__(self, session: "UISession") -> None:
        self.session = session

    @classmethod
    def create(cls, session: "UISession", timeout_ms: int | None = None) -> "InputBox":
        """Wait for the quick input widget to be visible and wrap it."""
        driver = session.driver

        def _visible() -> bool:
            widget = driver.find_element(By.CSS_SELECTOR, locators.QUICK_INPUT_WIDGET)
            return widget.is_displayed()

        session.wait_until(
            _visible,
            session.config.input_box_timeout_ms if timeout_ms is None else timeout_ms,
            "Quick input did not open",
        )
        return cls(session)

    def _field(self):
        return self.session.driver.find_element(By.CSS_SELECTOR, locators.QUICK_INPUT_FIELD)

    def clear(self) -> None:
        modifier = self.session.profile.primary_modifier
        self._field().send_keys(Keys.END, modifier, Keys.SHIFT, Keys.HOME, Keys.NULL, Keys.BACK_SPACE)

    def set_text(self, text: str) -> None:
        self.clear()
        self._field().send_keys(text)

    def confirm(self) -> None:
        self._field().send_keys(Keys.ENTER)
