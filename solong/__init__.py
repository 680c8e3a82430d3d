"""Helpers for characters, byte buffers, strings, linked lists, line reading and formatted output."""

__version__ = "0.1.0"