"""Terminal emulator building blocks: positions, cell attributes, UTF-8 characters, key codes and VT parse tables."""

__version__ = "0.1.0"