"""Print the hosting-platform permalink of a file in a git working tree."""

__version__ = "0.1.0"
