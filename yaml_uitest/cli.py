"""yaml-uitest CLI entrypoints."""

from __future__ import annotations

import argparse
import json
import os
import shutil
import subprocess
import sys
from pathlib import Path

from .config import HarnessConfig, env_for_overrides
from .harness.files import delete_file_in_home_dir
from .platforms import PLATFORM_PROFILES, current_platform_name, describe_profile
from .utils import find_repo_root, load_dotenv


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yaml-uitest", description="VS Code YAML extension UI tests")
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Run the UI scenarios against VS Code")
    run.add_argument("--code-binary", dest="code_binary", help="VS Code executable to launch")
    run.add_argument("--chromedriver", dest="chromedriver_path", help="chromedriver matching the VS Code Electron version")
    run.add_argument("--extension-path", dest="extension_path", help="Extension under development to load")
    run.add_argument("--debugger-address", dest="debugger_address", help="host:port of an already running VS Code")
    run.add_argument("--platform", dest="platform", choices=sorted(PLATFORM_PROFILES), help="Override host platform")
    run.add_argument("--output", dest="output_dir", help="Directory for screenshots and events.jsonl")
    run.add_argument("--home-dir", dest="home_dir", help="Directory the test YAML file is created in")
    run.add_argument("--tests", default=None, help="Test path (default: <repo>/tests)")
    run.add_argument("-k", dest="keyword", default=None, help="pytest -k expression")

    clean = sub.add_parser("clean", help="Delete the test YAML file and screenshots")
    clean.add_argument("--home-dir", dest="home_dir")
    clean.add_argument("--output", dest="output_dir")

    sub.add_parser("platforms", help="Show the per-platform key and dialog table")
    return parser


def _default_tests_path() -> Path:
    root = find_repo_root(Path.cwd()) or find_repo_root(Path(__file__).resolve().parent)
    return (root or Path.cwd()) / "tests"


def build_pytest_command(args: argparse.Namespace) -> list[str]:
    tests = Path(args.tests) if args.tests else _default_tests_path()
    command = [sys.executable, "-m", "pytest", str(tests), "-m", "ui"]
    if args.keyword:
        command.extend(["-k", args.keyword])
    return command


def _run(args: argparse.Namespace) -> int:
    env = dict(os.environ)
    env.update(
        env_for_overrides(
            code_binary=args.code_binary,
            chromedriver_path=args.chromedriver_path,
            extension_path=args.extension_path,
            debugger_address=args.debugger_address,
            platform=args.platform,
            output_dir=args.output_dir,
            home_dir=args.home_dir,
        )
    )
    result = subprocess.run(build_pytest_command(args), env=env, check=False)
    return result.returncode


def _clean(args: argparse.Namespace) -> int:
    config = HarnessConfig.from_env().with_overrides(
        home_dir=Path(args.home_dir).expanduser() if args.home_dir else None,
        output_dir=Path(args.output_dir).expanduser() if args.output_dir else None,
    )
    if delete_file_in_home_dir(config.yaml_file_name, home_dir=config.home_dir):
        print(f"Deleted {config.yaml_file_path}")
    if config.screenshots_dir.exists():
        shutil.rmtree(config.screenshots_dir)
        print(f"Deleted {config.screenshots_dir}")
    return 0


def _platforms() -> int:
    current = current_platform_name()
    rows = []
    for name, profile in sorted(PLATFORM_PROFILES.items()):
        row = describe_profile(profile)
        row["current"] = "yes" if name == current else ""
        rows.append(row)
    print(json.dumps(rows, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "run":
        return _run(args)
    if args.command == "clean":
        return _clean(args)
    if args.command == "platforms":
        return _platforms()
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
