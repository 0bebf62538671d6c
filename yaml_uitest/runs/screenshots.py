"""Diagnostic screenshots for failing or interesting scenario steps."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

from PIL import Image, ImageDraw, ImageFont

from ..utils import slug
from .events import EventWriter


class ScreenshotCapture:
    """Write numbered PNG screenshots into one directory.

    File names are `<seq>-<name>.png`. `seq` increases with every capture and
    skips numbers already taken on disk, so two captures never share a path
    and reruns into a clean directory produce the same names.
    """

    def __init__(self, out_dir: Path, *, events: EventWriter | None = None) -> None:
        self.out_dir = out_dir
        self.events = events
        self._seq = 0

    def with_events(self, events: EventWriter | None) -> "ScreenshotCapture":
        """Same directory and numbering, reporting to `events`."""
        capture = ScreenshotCapture(self.out_dir, events=events)
        capture._seq = self._seq
        return capture

    def next_path(self, name: str) -> Path:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        stem = slug(name)
        while True:
            self._seq += 1
            path = self.out_dir / f"{self._seq:03d}-{stem}.png"
            if not path.exists():
                return path

    def capture(self, driver: Any, name: str, *, reason: str = "") -> Path:
        path = self.next_path(name)
        source = "driver"
        error = ""
        try:
            png = driver.get_screenshot_as_png()
            if not png:
                raise ValueError("driver returned an empty screenshot")
            path.write_bytes(png)
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"
            source = self._write_placeholder(path, name=name, reason=reason, error=error)
        if self.events is not None:
            self.events.emit("screenshot_saved", name=name, path=path, source=source, reason=reason, error=error or None)
        print(f"Saved screenshot: {path}")
        return path

    def _write_placeholder(self, path: Path, *, name: str, reason: str, error: str) -> str:
        try:
            width = 1024
            height = 320
            canvas = Image.new("RGB", (width, height), (30, 30, 30))
            draw = ImageDraw.Draw(canvas)
            font = ImageFont.load_default()
            y = 16
            for line in _placeholder_lines(name=name, reason=reason, error=error):
                draw.text((16, y), line, fill=(220, 220, 220), font=font)
                y += 18
                if y > height - 18:
                    break
            canvas.save(path, format="PNG")
            return "placeholder"
        except Exception:
            # Keep the artifact slot even without a renderable image.
            path.write_text(
                "\n".join(_placeholder_lines(name=name, reason=reason, error=error)),
                encoding="utf-8",
            )
            return "marker"


def _placeholder_lines(*, name: str, reason: str, error: str) -> list[str]:
    lines = [f"screenshot: {name}", "driver screenshot unavailable"]
    if reason:
        lines.extend(textwrap.wrap(f"reason: {reason}", 120))
    if error:
        lines.extend(textwrap.wrap(f"error: {error}", 120))
    return lines
