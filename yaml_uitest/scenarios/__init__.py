"""Scenario drivers exercised by the UI test modules."""
