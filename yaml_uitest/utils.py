"""Shared utilities for the YAML UI harness."""

from __future__ import annotations

import os
import re
from datetime import datetime, timezone
from pathlib import Path
import tomllib
from typing import Any


def now_utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def slug(value: str, fallback: str = "shot") -> str:
    cleaned = re.sub(r"[^a-zA-Z0-9._-]+", "-", value.strip()).strip("-.")
    return cleaned[:80] or fallback


def safe_int(value: Any, default: int = 0) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def parse_env_line(line: str) -> tuple[str, str] | None:
    """`KEY=value` (optionally `export`ed, optionally quoted) or None for blanks and comments."""
    text = line.strip()
    if text.startswith("export "):
        text = text[len("export "):].lstrip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key, value


def load_dotenv(path: Path | None = None, override: bool = False) -> bool:
    """Export the variables of a `.env` file; the repo root's by default."""
    env_path = path or dotenv_path()
    if not env_path.is_file():
        return False
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        parsed = parse_env_line(raw_line)
        if parsed is None:
            continue
        key, value = parsed
        if override or key not in os.environ:
            os.environ[key] = value
    return True


def dotenv_path(start: Path | None = None) -> Path:
    base = start or Path.cwd()
    root = find_repo_root(base)
    return (root or base) / ".env"


def _is_project_root(directory: Path) -> bool:
    if (directory / "yaml_uitest" / "__init__.py").is_file():
        return True
    pyproject = directory / "pyproject.toml"
    if not pyproject.is_file():
        return False
    try:
        project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return project.get("name") == "yaml-uitest"


def find_repo_root(start: Path) -> Path | None:
    """Nearest directory at or above `start` holding this project."""
    for directory in (start, *start.parents):
        if _is_project_root(directory):
            return directory
    return None
