"""Settings editor (UI view)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from . import locators

if TYPE_CHECKING:
    from ..session import UISession

CATEGORY_SEPARATOR = " › "


class SettingsEditor:
    def __init__(self, session: "UISession") -> None:
        self.session = session

    @classmethod
    def wait(cls, session: "UISession") -> "SettingsEditor":
        driver = session.driver
        session.wait_until(
            lambda: driver.find_element(By.CSS_SELECTOR, locators.SETTINGS_EDITOR).is_displayed(),
            session.config.editor_ready_timeout_ms,
            "Settings editor did not open",
        )
        return cls(session)

    def search(self, query: str) -> None:
        field = self.session.driver.find_element(By.CSS_SELECTOR, locators.SETTINGS_SEARCH_INPUT)
        field.send_keys(query)

    def find_setting(self, title: str, *categories: str) -> "Setting":
        self.search(title)
        setting = Setting(self.session, title=title, category=CATEGORY_SEPARATOR.join(categories))
        self.session.wait_until(
            setting.exists,
            self.session.config.settings_search_timeout_ms,
            f"Setting {setting.category}: {title} not found",
        )
        return setting


class Setting:
    """A settings row, located by title and category on every access."""

    def __init__(self, session: "UISession", *, title: str, category: str) -> None:
        self.session = session
        self.title = title
        self.category = category

    def _matches(self, row: Any) -> bool:
        try:
            label = row.find_element(By.CSS_SELECTOR, locators.SETTINGS_ITEM_LABEL).text.strip()
            category = row.find_element(By.CSS_SELECTOR, locators.SETTINGS_ITEM_CATEGORY).text.strip()
        except NoSuchElementException:
            return False
        return label == self.title and category.rstrip(":").strip().lower() == self.category.lower()

    def _row(self) -> Any:
        for row in self.session.driver.find_elements(By.CSS_SELECTOR, locators.SETTINGS_ITEM):
            if self._matches(row):
                return row
        raise NoSuchElementException(f"Setting {self.category}: {self.title} is not rendered")

    def exists(self) -> bool:
        try:
            self._row()
        except NoSuchElementException:
            return False
        return True

    def find_element(self, by: str, value: str) -> Any:
        return self._row().find_element(by, value)

    def edit_in_settings_json(self) -> None:
        self.find_element(By.CLASS_NAME, locators.SETTINGS_EDIT_IN_JSON).click()
