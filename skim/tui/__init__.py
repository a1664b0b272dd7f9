"""Textual front end: the reader app, its key map and the file picker."""

from skim.tui.app import SkimApp

__all__ = ["SkimApp"]
