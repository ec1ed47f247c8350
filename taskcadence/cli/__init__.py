"""Command-line interface for taskcadence."""

from .commands import main

__all__ = ["main"]
