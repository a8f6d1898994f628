"""Read, validate and extend Keep a Changelog style changelogs."""

__version__ = "1.0.0"