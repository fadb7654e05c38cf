[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rterm"
version = "0.1.0"
description = "A block-based terminal: each command and its output are kept as a searchable, collapsible block"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "shell", "ansi", "vt100", "escape-sequences", "blocks", "pty"]
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
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rterm = "rterm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
