# changelogkit

changelogkit works with changelogs written in the Keep a Changelog style. It can:

- read a `CHANGELOG.md` into Python objects;
- check that the releases in it are dated in a consistent order;
- add or update a release entry from the command line.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command line

Installing the package provides a `changelog` command. It has two subcommands, `validate` and `new`. If you run `changelog` with no subcommand, it prints a usage line and exits with status 1. An unknown subcommand also exits with status 1.

### Validate a changelog

```
changelog validate [FILE]
```

`FILE` defaults to `CHANGELOG.md`. The command prints `FILE is a valid.` when the check passes. It prints an error to standard error and exits with status 1 in these cases:

- the file cannot be read;
- a release has no date;
- a release date is not in `YYYY-MM-DD` form;
- a higher version carries an earlier date than a lower version.

### Add a release

```
changelog new --version 1.2.0 --added "New export option" --fixed "Crash on empty input"
```

Options:

- `--file PATH`: the changelog file. Default: `CHANGELOG.md`. If the file does not exist, a new changelog is started.
- `--version X.Y.Z`: the semantic version to add. Without it you are prompted for one.
- `--added`, `--changed`, `--removed`, `--fixed`, `--security`: items for that section. Repeat an option to give several items.
- `--no-prompt`: turns off all prompts. In this mode both of these are required:
  - `--version`;
  - at least one section item.

  A version that is already in the file is an error in this mode.

For each section you leave out, you are prompted for its items. Enter one item per line, then an empty line to finish.

If the version is already in the file, you choose one of these actions:

1. **Override**: replace the entry with the new items.
2. **Update (merge)**: append the new items to the existing sections.
3. **Exit**: leave the file unchanged. An empty answer also exits.

In both the override and merge cases, the entry is dated today. The whole file is then rewritten in Keep a Changelog form.

## Library use

```python
from changelogkit.core import ChangelogError
from changelogkit.parser import load_changelog_from_file
from changelogkit.version import parse_version

changelog = load_changelog_from_file("CHANGELOG.md")
try:
    changelog.verify()
except ChangelogError as err:
    print("invalid:", err)

entry = changelog.releases[parse_version("1.0.0")]
print(entry.date, entry.changes)

print(changelog.generate_markdown())
changelog.write_to_file("CHANGELOG.md")
```

### `changelogkit.version`

- `Version`: a frozen dataclass with these fields:
  - `major`, `minor`, `patch`;
  - optional `prerelease` and `build`.
- `parse_version(text)`: parses a semantic version string. It raises `VersionError`, a subclass of `ValueError`, when the text is not valid.
- `compare(a, b)`: returns `-1`, `0` or `1` by semantic-versioning precedence. Build metadata is ignored, and a release orders after its pre-releases.

### `changelogkit.core`

- `Section`: an enum with the members `ADDED`, `CHANGED`, `DEPRECATED`, `REMOVED`, `FIXED` and `SECURITY`.
- `parse_section(text)`: returns the `Section` for a name, ignoring case, or `None` if the name is not a section.
- `Entry`: a `date` string and `changes`, which maps each `Section` to a list of items.
- `Changelog`: holds an `unreleased` entry and a `releases` dict keyed by `Version`. Its methods are:
  - `has_unreleased()`;
  - `verify()`, which raises `ChangelogError`;
  - `generate_markdown()`;
  - `write_to_file(path)`.

### `changelogkit.parser`

- `parse(stream)`: reads changelog markdown from a text stream, a binary stream or an iterable of lines.
- `load_changelog_from_file(path)`: opens the file at `path` and parses it.

## Limitations

- Parsing silently drops these parts of a changelog:
  - release blocks whose heading is not a valid semantic version;
  - bullets that do not follow a recognised `### Section` heading;
  - any other text, such as prose, links and the file header.
- The `new` command has no option for the `Deprecated` section. It does keep `Deprecated` items that are already in the file.
- The command line cannot add items to the `[Unreleased]` block or move them into a release.