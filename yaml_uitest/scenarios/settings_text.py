"""Locating where to type a new entry in the user's settings.json.

The lookup is textual: the first line containing both the setting key and an
opening bracket is taken as the start of the array, and the entry goes on the
line after it. That matches what "Edit in settings.json" produces for an empty
array setting:

    "yaml.customTags": [
        |
    ]

It does not parse JSON. A key split across lines, a bracket on its own line
or an array that already has entries will put the text in the wrong place or
produce invalid JSON. Those layouts are not handled on purpose; a failure
there shows up as the custom tag missing from the suggestions.
"""

from __future__ import annotations

import json

CUSTOM_TAGS_KEY = "yaml.customTags"


def setting_marker(key: str) -> str:
    return json.dumps(key)


def find_array_entry_line(text: str, key: str = CUSTOM_TAGS_KEY) -> int | None:
    """1-based line to type the first entry of the `key` array on, or None."""
    marker = setting_marker(key)
    for index, line in enumerate(text.splitlines()):
        if marker in line and "[" in line:
            return index + 2
    return None


def array_entry(value: str) -> str:
    return json.dumps(value)
