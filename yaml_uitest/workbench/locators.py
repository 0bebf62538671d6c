"""CSS / XPath locators for the VS Code workbench DOM."""

from __future__ import annotations

MODAL_BLOCK = ".monaco-dialog-modal-block.dimmed"
DIALOG_BUTTON_XPATH = "//a[contains(@class, 'monaco-button') and contains(text(), {label})]"

QUICK_INPUT_WIDGET = ".quick-input-widget"
QUICK_INPUT_FIELD = ".quick-input-widget .quick-input-box input"

EDITOR_TABS = ".editor-group-container .tabs-container div.tab"
EDITOR_TAB_LABEL = ".label-name"
EDITOR_TAB_CLOSE = ".tab-actions a.codicon-close"
ACTIVE_EDITOR = ".editor-group-container.active .editor-container .monaco-editor"
EDITOR_INPUT_AREA = "textarea.inputarea, .native-edit-context"

SUGGEST_WIDGET = ".suggest-widget"
SUGGEST_ROWS = ".suggest-widget .monaco-list-row"
SUGGEST_LABELS = ".suggest-widget .monaco-list-row .label-name"

STATUS_BAR_ID = "workbench.parts.statusbar"
SCHEMA_LABEL_XPATH = './/a[@aria-label="{text}, Select JSON Schema"]'

SETTINGS_EDITOR = ".settings-editor"
SETTINGS_SEARCH_INPUT = ".settings-editor .settings-header .search-container textarea, .settings-editor .settings-header .search-container .native-edit-context"
SETTINGS_ITEM = ".settings-editor .setting-item-contents"
SETTINGS_ITEM_LABEL = ".setting-item-label"
SETTINGS_ITEM_CATEGORY = ".setting-item-category"
SETTINGS_EDIT_IN_JSON = "edit-in-settings-button"

# Visible Monaco lines are not in document order; sort by their `top` offset.
READ_VISIBLE_LINES_JS = """
const root = arguments[0];
const lines = Array.from(root.querySelectorAll('.view-lines .view-line'));
lines.sort((a, b) => parseFloat(a.style.top || '0') - parseFloat(b.style.top || '0'));
return lines.map((line) => line.textContent.replace(/\\u00a0/g, ' '));
"""


def xpath_literal(value: str) -> str:
    """Quote `value` for XPath 1.0, which has no escape sequences."""
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    parts = value.split('"')
    return "concat(" + ", '\"', ".join(f'"{part}"' for part in parts) + ")"


def dialog_button_xpath(label: str) -> str:
    return DIALOG_BUTTON_XPATH.format(label=xpath_literal(label))


def schema_label_xpath(text: str) -> str:
    return SCHEMA_LABEL_XPATH.format(text=text.replace('"', ""))
