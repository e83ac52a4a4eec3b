[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vtterm"
version = "0.1.0"
description = "Terminal emulator building blocks: cell attributes, UTF-8 characters, VT escape-sequence parse tables and key codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "vt100", "xterm", "escape sequences", "ansi", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vtterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
