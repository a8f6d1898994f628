"""Changelog model, validation and Keep a Changelog rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from functools import cmp_to_key
from os import PathLike
from typing import Optional, Union

from .version import Version, compare

_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})", re.ASCII)
_version_key = cmp_to_key(compare)

HEADER = (
    "# Changelog\n\n"
    "All notable changes to this project will be documented in this file.\n"
)


class ChangelogError(Exception):
    """Raised when a changelog fails validation."""


class Section(IntEnum):
    """A change category, in rendering order."""

    ADDED = 0
    CHANGED = 1
    DEPRECATED = 2
    REMOVED = 3
    FIXED = 4
    SECURITY = 5

    def __str__(self) -> str:
        return self.name.capitalize()


_SECTIONS_BY_NAME = {section.name.lower(): section for section in Section}


def parse_section(text: str) -> Optional[Section]:
    """Return the section named by text, case-insensitively, or None."""
    return _SECTIONS_BY_NAME.get(text.lower())


@dataclass
class Entry:
    """One changelog block: a release date and the changes per section."""

    date: str = ""
    changes: dict[Section, list[str]] = field(default_factory=dict)


def _parse_date(text: str) -> date:
    match = _DATE.fullmatch(text)
    if match is None:
        raise ValueError(f"date {text!r} does not match YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


@dataclass
class Changelog:
    """An unreleased block and the released versions."""

    unreleased: Entry = field(default_factory=Entry)
    releases: dict[Version, Entry] = field(default_factory=dict)

    def has_unreleased(self) -> bool:
        """Whether the unreleased block has any sections."""
        return len(self.unreleased.changes) > 0

    def _versions_descending(self) -> list[Version]:
        return sorted(self.releases, key=_version_key, reverse=True)

    def verify(self) -> None:
        """Check every release has a valid date and dates descend with versions."""
        dated: dict[Version, date] = {}
        for version, entry in self.releases.items():
            if not entry.date:
                raise ChangelogError(f"release date is empty for version {version}")
            try:
                dated[version] = _parse_date(entry.date)
            except ValueError as err:
                raise ChangelogError(
                    f"invalid date format for version {version}: {err}"
                ) from err

        ordered = self._versions_descending()
        for newer, older in zip(ordered, ordered[1:]):
            if dated[newer] < dated[older]:
                raise ChangelogError(
                    f"version {newer} has an older date ({dated[newer].isoformat()}) "
                    f"than version {older} ({dated[older].isoformat()})"
                )

    def generate_markdown(self) -> str:
        """Render the changelog in Keep a Changelog format."""
        parts = [HEADER]
        if self.has_unreleased():
            parts.append("## [Unreleased]")
            parts.append(_render_entry(self.unreleased))

        for version in self._versions_descending():
            entry = self.releases[version]
            line = f"\n## [{version}]"
            if entry.date:
                line += f" - {entry.date}"
            parts.append(line + "\n")
            parts.append(_render_entry(entry))
        return "".join(parts)

    def write_to_file(self, path: Union[str, PathLike]) -> None:
        """Write the rendered markdown to path, replacing its contents."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(self.generate_markdown())


def _render_entry(entry: Entry) -> str:
    if not entry.changes:
        return "\n"
    parts = []
    for section in Section:
        items = entry.changes.get(section)
        if not items:
            continue
        parts.append(f"\n### {section}\n\n")
        parts.extend(f"- {item.strip()}\n" for item in items)
    return "".join(parts)