"""Semantic version values and their ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional

_IDENTIFIER = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_PATTERN = re.compile(
    r"(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"
    rf"(?:-({_IDENTIFIER}(?:\.{_IDENTIFIER})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)
_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


class VersionError(ValueError):
    """Raised when a text is not a valid semantic version."""


@dataclass(frozen=True)
class Version:
    """A semantic version: MAJOR.MINOR.PATCH with optional pre-release and build."""

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise VersionError("version components must not be negative")

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            text += f"-{self.prerelease}"
        if self.build is not None:
            text += f"+{self.build}"
        return text


def parse_version(text: str) -> Version:
    """Parse a semantic version string, raising VersionError if it is invalid."""
    match = _PATTERN.fullmatch(text)
    if match is None:
        raise VersionError(f"invalid semantic version: {text!r}")
    major, minor, patch, prerelease, build = match.groups()
    return Version(int(major), int(minor), int(patch), prerelease, build)


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _as_integer(part: str) -> Optional[int]:
    if _INTEGER.fullmatch(part):
        return int(part)
    return None


def _compare_prerelease(a: Optional[str], b: Optional[str]) -> int:
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1

    for a_part, b_part in zip_longest(a.split("."), b.split("."), fillvalue=""):
        a_num = _as_integer(a_part)
        b_num = _as_integer(b_part)
        if a_num is not None and b_num is not None:
            if a_num != b_num:
                return _sign(a_num, b_num)
        elif a_num is None and b_num is None:
            if a_part != b_part:
                return -1 if a_part < b_part else 1
        elif a_num is not None:
            return -1
        else:
            return 1
    return 0


def compare(a: Version, b: Version) -> int:
    """Return -1, 0 or 1 as a orders before, equal to, or after b.

    Build metadata is ignored; a release orders after its pre-releases.
    """
    core = _sign((a.major, a.minor, a.patch), (b.major, b.minor, b.patch))
    if core:
        return core
    return _compare_prerelease(a.prerelease, b.prerelease)