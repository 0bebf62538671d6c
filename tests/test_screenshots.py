from __future__ import annotations

from pathlib import Path

from PIL import Image
from selenium.common.exceptions import WebDriverException

from conftest import PNG_BYTES, FakeDriver
from yaml_uitest.runs.events import EventWriter, read_events
from yaml_uitest.runs.screenshots import ScreenshotCapture


def test_capture_writes_numbered_files(tmp_path: Path, capsys) -> None:
    capture = ScreenshotCapture(tmp_path / "shots")
    driver = FakeDriver()

    first = capture.capture(driver, "contentAssist-before-createCustomFile")
    second = capture.capture(driver, "contentAssist-before-createCustomFile")

    assert first.name == "001-contentAssist-before-createCustomFile.png"
    assert second.name == "002-contentAssist-before-createCustomFile.png"
    assert first.read_bytes() == PNG_BYTES
    assert f"Saved screenshot: {first}" in capsys.readouterr().out


def test_existing_files_are_not_overwritten(tmp_path: Path) -> None:
    out_dir = tmp_path / "shots"
    out_dir.mkdir()
    (out_dir / "001-step.png").write_bytes(b"old")

    path = ScreenshotCapture(out_dir).capture(FakeDriver(), "step")

    assert path.name == "002-step.png"
    assert (out_dir / "001-step.png").read_bytes() == b"old"


def test_names_are_sanitised(tmp_path: Path) -> None:
    capture = ScreenshotCapture(tmp_path)
    assert capture.next_path("no apiVersion / retry").name == "001-no-apiVersion-retry.png"
    assert capture.next_path("///").name == "002-shot.png"


def test_driver_failure_writes_placeholder(tmp_path: Path) -> None:
    events = EventWriter(tmp_path / "events.jsonl", "run-1")
    driver = FakeDriver()
    driver.png = WebDriverException("session deleted")

    path = ScreenshotCapture(tmp_path / "shots", events=events).capture(driver, "editor-not-ready", reason="timeout")

    with Image.open(path) as image:
        assert image.format == "PNG"
    event = read_events(tmp_path / "events.jsonl")[0]
    assert event["type"] == "screenshot_saved"
    assert event["source"] == "placeholder"
    assert "session deleted" in event["error"]
