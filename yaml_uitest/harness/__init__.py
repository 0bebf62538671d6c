"""Synchronization helpers that make workbench automation repeatable.

Flaky UI interactions (save dialogs, re-rendered elements, a command palette
that does not open on the first try) are absorbed here with bounded retries
and best-effort cleanup, so scenarios can be written as straight-line code.
"""
