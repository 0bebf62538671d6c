"""The Monaco suggest widget."""

from __future__ import annotations

from typing import TYPE_CHECKING

from selenium.webdriver.common.by import By

from . import locators

if TYPE_CHECKING:
    from ..session import UISession

SUGGEST_WIDGET_TIMEOUT_MESSAGE = "Suggest widget did not become visible"
SUGGEST_ROWS_TIMEOUT_MESSAGE = "No suggestion rows appeared"


class ContentAssist:
    def __init__(self, session: "UISession") -> None:
        self.session = session

    def is_displayed(self) -> bool:
        widgets = self.session.driver.find_elements(By.CSS_SELECTOR, locators.SUGGEST_WIDGET)
        return any(widget.is_displayed() for widget in widgets)

    def row_count(self) -> int:
        return len(self.session.driver.find_elements(By.CSS_SELECTOR, locators.SUGGEST_ROWS))

    def labels(self) -> list[str]:
        elements = self.session.driver.find_elements(By.CSS_SELECTOR, locators.SUGGEST_LABELS)
        return [element.text for element in elements]
