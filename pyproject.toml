[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftselect"
version = "0.1.0"
description = "printf-style formatting with terminal colour tags, plus small string and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "printf", "format", "colour", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Text Processing :: General",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftselect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
