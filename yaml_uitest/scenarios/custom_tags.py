"""A tag added to `yaml.customTags` shows up in content assist."""

from __future__ import annotations

from typing import TYPE_CHECKING

from selenium.webdriver.common.keys import Keys

from ..harness.readiness import wait_for_schema_label
from ..harness.suggestions import expect_suggestion
from ..harness.timing import retry_on_stale
from ..workbench import EditorView, Workbench
from .common import open_test_file, recorded
from .settings_text import CUSTOM_TAGS_KEY, array_entry, find_array_entry_line

if TYPE_CHECKING:
    from ..session import UISession

SCENARIO = "customTags"
SETTING_TITLE = "Custom Tags"
SETTING_CATEGORY = "Yaml"
SETTINGS_FILE_NAME = "settings.json"
TRIGGER_TEXT = "custom"


def setup(session: "UISession") -> None:
    open_test_file(session, SCENARIO)
    wait_for_schema_label(session, session.config.yaml_file_name, required=False)


def add_custom_tag(session: "UISession", tag: str) -> int:
    """Type `tag` into the `yaml.customTags` array of the user settings.

    Returns the 1-based line the entry was typed on.
    """
    config = session.config
    settings_editor = Workbench(session).open_settings()
    settings_editor.find_setting(SETTING_TITLE, SETTING_CATEGORY).edit_in_settings_json()
    session.delay(config.settings_open_settle_ms)

    editor = EditorView(session).open_editor(SETTINGS_FILE_NAME)
    # settings.json opens with suggestions for the new key already showing.
    session.keyboard.press(Keys.ESCAPE)
    session.delay(config.settings_escape_settle_ms)

    line = find_array_entry_line(editor.get_text(), CUSTOM_TAGS_KEY)
    if line is None:
        session.screenshot(f"{SCENARIO}-no-{CUSTOM_TAGS_KEY}", reason="settings key not found")
        raise AssertionError(f"Could not find {CUSTOM_TAGS_KEY} in {SETTINGS_FILE_NAME}")

    editor.click()
    session.delay(config.settings_click_settle_ms)
    editor.type_text_at(line, config.custom_tag_column, array_entry(tag))
    editor.save()
    session.delay(config.settings_apply_settle_ms)
    return line


def check_suggestion(session: "UISession", attempt: str) -> list[str]:
    config = session.config
    editor = EditorView(session).open_editor(config.yaml_file_name)
    editor.click()
    editor.set_text("")
    session.delay(config.clear_settle_ms)
    editor.type_text_at(1, 1, TRIGGER_TEXT)
    session.delay(config.language_server_settle_ms)
    labels = expect_suggestion(session, editor, config.custom_tag, scenario=SCENARIO, attempt=attempt)
    editor.save()
    return labels


def run(session: "UISession") -> list[str]:
    """Register the custom tag, then expect it after typing `custom` in the YAML file."""
    with recorded(session, "custom_tags"):
        add_custom_tag(session, session.config.custom_tag)
        return retry_on_stale(
            lambda attempt: check_suggestion(session, attempt),
            retries=session.config.stale_retries,
            events=session.events,
        )
