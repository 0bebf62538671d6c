"""Status bar entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from selenium.webdriver.common.by import By

from . import locators

if TYPE_CHECKING:
    from ..session import UISession


class StatusBar:
    def __init__(self, session: "UISession") -> None:
        self.session = session

    def schema_label(self, text: str) -> Any | None:
        """The "<text>, Select JSON Schema" entry, if the YAML extension shows one."""
        bar = self.session.driver.find_element(By.ID, locators.STATUS_BAR_ID)
        matches = bar.find_elements(By.XPATH, locators.schema_label_xpath(text))
        return matches[0] if matches else None
