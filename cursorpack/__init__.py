"""Assemble ARM Linux builds of Cursor on top of VS Code releases."""

__version__ = "0.1.0"
