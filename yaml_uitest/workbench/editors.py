"""Editor tabs and the Monaco text editor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys

from ..errors import HarnessError
from . import locators
from .content_assist import SUGGEST_WIDGET_TIMEOUT_MESSAGE, ContentAssist
from .input_box import InputBox

if TYPE_CHECKING:
    from ..session import UISession


class EditorView:
    def __init__(self, session: "UISession") -> None:
        self.session = session

    def _tabs(self) -> list[Any]:
        return self.session.driver.find_elements(By.CSS_SELECTOR, locators.EDITOR_TABS)

    def tab_titles(self) -> list[str]:
        titles = []
        for tab in self._tabs():
            try:
                titles.append(tab.find_element(By.CSS_SELECTOR, locators.EDITOR_TAB_LABEL).text)
            except NoSuchElementException:
                continue
        return titles

    def _find_tab(self, title: str) -> Any:
        for tab in self._tabs():
            try:
                label = tab.find_element(By.CSS_SELECTOR, locators.EDITOR_TAB_LABEL).text
            except NoSuchElementException:
                continue
            if label == title:
                return tab
        raise NoSuchElementException(f"No editor tab titled {title!r}")

    def open_editor(self, title: str) -> "TextEditor":
        self._find_tab(title).click()
        return TextEditor(self.session, title=title)

    def close_all_editors(self) -> None:
        """Click the close action of every tab, re-reading the tab strip each time.

        Raises when a tab cannot be closed (typically because a save dialog
        appeared) so callers can fall back to another strategy.
        """
        budget = len(self._tabs()) + 2
        for _ in range(budget):
            tabs = self._tabs()
            if not tabs:
                return
            tabs[0].find_element(By.CSS_SELECTOR, locators.EDITOR_TAB_CLOSE).click()
        remaining = self.tab_titles()
        if remaining:
            raise HarnessError(f"Editors still open after close all: {', '.join(remaining)}")


class TextEditor:
    def __init__(self, session: "UISession", *, title: str | None = None) -> None:
        self.session = session
        self.title = title

    def _root(self) -> Any:
        return self.session.driver.find_element(By.CSS_SELECTOR, locators.ACTIVE_EDITOR)

    def _input_area(self) -> Any:
        return self._root().find_element(By.CSS_SELECTOR, locators.EDITOR_INPUT_AREA)

    def click(self) -> None:
        self._root().click()

    def move_cursor(self, line: int, column: int) -> None:
        if line < 1 or column < 1:
            raise ValueError(f"Cursor position must be 1-based, got {line}:{column}")
        self.session.keyboard.chord(*self.session.profile.goto_line_keys)
        prompt = InputBox.create(self.session)
        prompt.set_text(f":{line},{column}")
        prompt.confirm()

    def type_text(self, text: str) -> None:
        self._input_area().send_keys(text)

    def type_text_at(self, line: int, column: int, text: str) -> None:
        self.move_cursor(line, column)
        self.type_text(text)

    def _send_chord(self, *keys: str) -> None:
        self._input_area().send_keys(*keys, Keys.NULL)

    def set_text(self, text: str) -> None:
        self.click()
        self._send_chord(*self.session.profile.select_all_chord)
        self._input_area().send_keys(Keys.BACK_SPACE)
        if text:
            self.type_text(text)

    def get_text(self) -> str:
        """Text of the lines Monaco has rendered.

        Monaco virtualizes long documents, so this is the whole document only
        when it fits in the viewport, which holds for the files the scenarios
        edit.
        """
        lines = self.session.driver.execute_script(locators.READ_VISIBLE_LINES_JS, self._root())
        return "\n".join(str(line) for line in (lines or []))

    def save(self) -> None:
        self._send_chord(*self.session.profile.save_chord)

    def toggle_content_assist(self, show: bool = True) -> ContentAssist | None:
        if not show:
            self.close_content_assist()
            return None
        return self.open_content_assist()

    def close_content_assist(self) -> None:
        self.session.keyboard.press(Keys.ESCAPE)

    def open_content_assist(self) -> ContentAssist:
        """Trigger the suggest widget; raises `WaitTimeoutError` if it never shows up."""
        self.session.keyboard.chord(*self.session.profile.content_assist_keys)
        assist = ContentAssist(self.session)
        self.session.wait_until(
            assist.is_displayed,
            self.session.config.suggest_widget_timeout_ms,
            SUGGEST_WIDGET_TIMEOUT_MESSAGE,
        )
        return assist
