import io

import pytest

from changelogkit.core import Changelog, Entry, Section
from changelogkit.parser import load_changelog_from_file, parse
from changelogkit.version import parse_version

SAMPLE = """# Changelog

All notable changes to this project will be documented in this file.

## [Unreleased]

### Added

- new thing

## [1.1.0] - 2024-03-01

### Fixed

- a fix
- another fix

## [1.0.0] - 2024-01-15

### Added

- initial release
"""


def test_parse_sample_releases():
    cl = parse(io.StringIO(SAMPLE))
    assert set(cl.releases) == {parse_version("1.1.0"), parse_version("1.0.0")}
    assert cl.releases[parse_version("1.1.0")] == Entry(
        "2024-03-01", {Section.FIXED: ["a fix", "another fix"]}
    )
    assert cl.releases[parse_version("1.0.0")] == Entry(
        "2024-01-15", {Section.ADDED: ["initial release"]}
    )


def test_parse_sample_unreleased():
    cl = parse(io.StringIO(SAMPLE))
    assert cl.has_unreleased() is True
    assert cl.unreleased.changes == {Section.ADDED: ["new thing"]}


def test_parse_sample_verifies():
    assert parse(io.StringIO(SAMPLE)).verify() is None


def test_parse_bytes_with_crlf():
    data = SAMPLE.replace("\n", "\r\n").encode("utf-8")
    assert parse(io.BytesIO(data)) == parse(io.StringIO(SAMPLE))


def test_unreleased_heading_is_case_insensitive():
    cl = parse(io.StringIO("## [UNRELEASED]\n### Removed\n- gone\n"))
    assert cl.unreleased.changes == {Section.REMOVED: ["gone"]}
    assert cl.releases == {}


def test_invalid_version_block_dropped():
    text = "## [not-a-version] - 2024-01-01\n### Added\n- x\n## [1.0.0]\n### Added\n- y\n"
    cl = parse(io.StringIO(text))
    assert list(cl.releases) == [parse_version("1.0.0")]
    assert cl.releases[parse_version("1.0.0")] == Entry("", {Section.ADDED: ["y"]})


def test_bullets_before_section_are_dropped():
    text = "## [1.0.0]\n- orphan\n### Changed\n- kept\n"
    cl = parse(io.StringIO(text))
    assert cl.releases[parse_version("1.0.0")].changes == {Section.CHANGED: ["kept"]}


def test_unknown_section_keeps_previous_section():
    text = "## [1.0.0]\n### Added\n- a\n### Other\n- b\n"
    cl = parse(io.StringIO(text))
    assert cl.releases[parse_version("1.0.0")].changes == {Section.ADDED: ["a", "b"]}


def test_non_breaking_space_normalised():
    text = "##\u00a0[1.0.0]\u00a0-\u00a02024-01-01\n###\u00a0Added\n-\u00a0item\n"
    cl = parse(io.StringIO(text))
    assert cl.releases[parse_version("1.0.0")] == Entry("2024-01-01", {Section.ADDED: ["item"]})


def test_content_without_heading_is_ignored():
    cl = parse(io.StringIO("### Added\n- floating\n"))
    assert cl == Changelog()


def test_last_line_without_newline():
    cl = parse(io.StringIO("## [1.0.0]\n### Fixed\n- last"))
    assert cl.releases[parse_version("1.0.0")].changes == {Section.FIXED: ["last"]}


def test_duplicate_version_last_wins():
    text = "## [1.0.0]\n### Added\n- one\n## [1.0.0]\n### Added\n- two\n"
    cl = parse(io.StringIO(text))
    assert cl.releases[parse_version("1.0.0")].changes == {Section.ADDED: ["two"]}


def test_markdown_round_trip():
    original = Changelog(
        unreleased=Entry(changes={Section.SECURITY: ["patch cve"]}),
        releases={
            parse_version("2.0.0-rc.1"): Entry(
                "2024-04-01",
                {Section.CHANGED: ["api"], Section.DEPRECATED: ["old flag"]},
            ),
            parse_version("1.0.0"): Entry(
                "2024-01-01", {Section.ADDED: ["a", "b"], Section.FIXED: ["c"]}
            ),
        },
    )
    assert parse(io.StringIO(original.generate_markdown())) == original


def test_load_from_file(tmp_path):
    target = tmp_path / "CHANGELOG.md"
    target.write_text(SAMPLE, encoding="utf-8")
    assert load_changelog_from_file(target) == parse(io.StringIO(SAMPLE))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_changelog_from_file(tmp_path / "absent.md")