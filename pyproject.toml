[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "changelogkit"
version = "1.0.0"
description = "Parse, validate and extend changelogs in the Keep a Changelog format"
requires-python = ">=3.10"
dependencies = []
keywords = ["changelog", "keep-a-changelog", "semver", "release", "markdown"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
changelog = "changelogkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["changelogkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
