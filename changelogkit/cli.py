"""Command-line interface: validate a changelog or record a new release."""

from __future__ import annotations

import argparse
import os
import sys
from datetime import date
from typing import NoReturn, Optional, Sequence

from .core import Changelog, ChangelogError, Entry, Section
from .parser import load_changelog_from_file
from .version import Version, VersionError, parse_version

DEFAULT_FILE = "CHANGELOG.md"

# Sections that can be given on the command line, in prompting order.
_CLI_SECTIONS = (
    Section.ADDED,
    Section.CHANGED,
    Section.REMOVED,
    Section.FIXED,
    Section.SECURITY,
)


def _fatal(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _read_line() -> Optional[str]:
    """Read one line from standard input, or None at end of input."""
    line = sys.stdin.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def _prompt(text: str) -> Optional[str]:
    print(text, end="", flush=True)
    return _read_line()


def prompt_items(title: str) -> list[str]:
    """Ask for list items until an empty line or end of input."""
    print(f"Enter {title} items (press Enter twice to finish):")
    items: list[str] = []
    while True:
        line = _prompt("- ")
        if line is None:
            break
        text = line.strip()
        if not text:
            break
        items.append(text)
    return items


def _today() -> str:
    return date.today().isoformat()


def _build_new_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="changelog new")
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Disable all interactive prompts",
    )
    for section in _CLI_SECTIONS:
        name = str(section).lower()
        parser.add_argument(
            f"--{name}",
            action="append",
            default=[],
            metavar="ITEM",
            help=f"Specify multiple --{name} flags for multiple items",
        )
    parser.add_argument(
        "--file", default=DEFAULT_FILE, help="Path to the changelog file"
    )
    parser.add_argument(
        "--version", default="", help="Version number (e.g. 1.2.3)"
    )
    return parser


def _requested_items(options: argparse.Namespace) -> dict[Section, list[str]]:
    return {
        section: list(getattr(options, str(section).lower()))
        for section in _CLI_SECTIONS
    }


def _resolve_version(text: str, no_prompt: bool) -> Version:
    if not text:
        if no_prompt:
            _fatal("❌ --version is required when --no-prompt is enabled.")
        answer = _prompt("Enter version (e.g., 1.2.3): ")
        text = answer.strip() if answer is not None else ""
        if not text:
            _fatal("❌ Version is required.")
    try:
        return parse_version(text)
    except VersionError as err:
        _fatal(f'❌ Invalid version "{text}": {err}')


def _load_or_create(path: str) -> Changelog:
    try:
        os.stat(path)
    except FileNotFoundError:
        return Changelog()
    except OSError as err:
        _fatal(f"Failed to check changelog file: {err}")
    try:
        return load_changelog_from_file(path)
    except OSError as err:
        _fatal(f"Failed to load changelog: {err}")


def _collect(
    section: Section, values: list[str], no_prompt: bool
) -> Optional[list[str]]:
    """Items for a section: the given ones, prompted ones, or None to skip."""
    if values:
        return values
    if no_prompt:
        return None
    return prompt_items(str(section))


def new_command(args: Optional[Sequence[str]] = None) -> None:
    """Add a release to the changelog, prompting for whatever is missing."""
    options = _build_new_parser().parse_args(
        list(sys.argv[2:] if args is None else args)
    )
    no_prompt: bool = options.no_prompt
    requested = _requested_items(options)

    version = _resolve_version(options.version, no_prompt)

    if no_prompt and not any(requested.values()):
        _fatal(
            "❌ At least one change section (e.g. --added) must be defined "
            "when --no-prompt is enabled."
        )

    changelog = _load_or_create(options.file)
    existing = changelog.releases.get(version)

    if existing is not None:
        if no_prompt:
            _fatal(
                f"❌ Version {version} already exists. "
                "Cannot continue in --no-prompt mode."
            )
        print(f"⚠️ Version {version} already exists. Choose action:")
        print("1) Override")
        print("2) Update (merge)")
        print("3) Exit")
        answer = _prompt("Enter choice [1/2/3]: ")
        choice = answer.strip() if answer is not None else ""

        if choice == "2":
            for section, values in requested.items():
                items = _collect(section, values, no_prompt)
                if items is not None:
                    existing.changes.setdefault(section, []).extend(items)
            existing.date = _today()
            changelog.releases[version] = existing
            changelog.write_to_file(options.file)
            return
        if choice in ("3", ""):
            print("❌ Aborted.")
            raise SystemExit(0)
        if choice != "1":
            _fatal("❌ Invalid choice.")

    changes: dict[Section, list[str]] = {}
    for section, values in requested.items():
        items = _collect(section, values, no_prompt)
        changes[section] = items if items is not None else []

    changelog.releases[version] = Entry(date=_today(), changes=changes)
    changelog.write_to_file(options.file)


def validate_command(args: Optional[Sequence[str]] = None) -> None:
    """Check that a changelog file loads and its releases are well ordered."""
    arguments = list(sys.argv[2:] if args is None else args)
    path = arguments[0] if arguments and arguments[0] else DEFAULT_FILE

    try:
        changelog = load_changelog_from_file(path)
    except OSError as err:
        _fatal(f"Can not load changelog from file {path}: {err}")
    try:
        changelog.verify()
    except ChangelogError as err:
        _fatal(f"Changelog is not valid: {err}")
    print(f"{path} is a valid.")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Dispatch to a subcommand."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    if not arguments:
        print("Usage: changelog <command> [options]")
        print("Commands: verify, new")
        raise SystemExit(1)

    command, rest = arguments[0], arguments[1:]
    if command == "validate":
        validate_command(rest)
    elif command == "new":
        new_command(rest)
    else:
        print(f"Unknown command: {command}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()