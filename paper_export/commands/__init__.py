"""Command implementations for paper-export."""

from .export import cmd_export

__all__ = ["cmd_export"]
