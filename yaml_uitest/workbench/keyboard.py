"""Keyboard input sent to whatever currently has focus in the workbench."""

from __future__ import annotations

from typing import Any

from selenium.webdriver.common.action_chains import ActionChains


class Keyboard:
    def __init__(self, driver: Any) -> None:
        self.driver = driver

    def press(self, *keys: str) -> None:
        ActionChains(self.driver).send_keys(*keys).perform()

    def chord(self, *keys: str) -> None:
        """Hold every key but the last, press the last, release in reverse."""
        if not keys:
            return
        *modifiers, key = keys
        chain = ActionChains(self.driver)
        for modifier in modifiers:
            chain.key_down(modifier)
        chain.send_keys(key)
        for modifier in reversed(modifiers):
            chain.key_up(modifier)
        chain.perform()
