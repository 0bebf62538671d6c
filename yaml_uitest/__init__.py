"""UI test harness for the VS Code YAML extension."""

__all__ = ["__version__"]

__version__ = "0.1.0"
