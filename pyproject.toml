[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orcrank"
version = "0.1.0"
description = "Browse and filter JoSAA opening and closing rank datasets stored in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["josaa", "opening rank", "closing rank", "sqlite", "admissions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orcrank = "orcrank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["orcrank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
