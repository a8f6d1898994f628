"""Reading Keep a Changelog markdown into a Changelog."""

from __future__ import annotations

import re
from os import PathLike
from typing import IO, Iterable, Iterator, Optional, Union

from .core import Changelog, Entry, Section, parse_section
from .version import VersionError, parse_version

_RELEASE = re.compile(r"## \[(.*?)\](?: - ([0-9]{4}-[0-9]{2}-[0-9]{2}))?")
_SECTION = re.compile(r"### (.+)")
_BULLET = re.compile(r"- (.+)")


def _lines(stream: Iterable[Union[str, bytes]]) -> Iterator[str]:
    for raw in stream:
        line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line.replace("\u00a0", " ")


def _store(changelog: Changelog, label: str, entry: Entry) -> None:
    if not label:
        return
    if label.lower() == "unreleased":
        changelog.unreleased = entry
        return
    try:
        changelog.releases[parse_version(label)] = entry
    except VersionError:
        pass


def parse(stream: Union[IO[str], IO[bytes], Iterable[str]]) -> Changelog:
    """Parse changelog markdown from a text or binary stream.

    Blocks whose heading is not a valid version are dropped, as are bullets
    that do not follow a recognised section heading.
    """
    changelog = Changelog()
    entry = Entry()
    label = ""
    section: Optional[Section] = Section.ADDED

    for line in _lines(stream):
        match = _RELEASE.match(line)
        if match:
            _store(changelog, label, entry)
            label = match.group(1)
            entry = Entry(date=match.group(2) or "")
            continue

        match = _SECTION.match(line)
        if match:
            found = parse_section(match.group(1))
            if found is not None:
                section = found
                entry.changes.setdefault(section, [])
            continue

        match = _BULLET.match(line)
        if match and section in entry.changes:
            entry.changes[section].append(match.group(1))

    _store(changelog, label, entry)
    return changelog


def load_changelog_from_file(path: Union[str, PathLike]) -> Changelog:
    """Parse the changelog stored at path."""
    with open(path, "rb") as handle:
        return parse(handle)