"""textquery domain layer - query commands with no I/O."""

from . import commands

from .commands import (
    Command,
    EndsWithText,
    GTEByText,
    Limit,
    LTEByText,
    OrderByTextAsc,
    OrderByTextDesc,
    StartsWithText,
    TextExtractor,
    create_pipeline,
    execute_all,
    execute_command,
)

__all__ = [
    "commands",
    "Command",
    "TextExtractor",
    "OrderByTextAsc",
    "OrderByTextDesc",
    "StartsWithText",
    "EndsWithText",
    "GTEByText",
    "LTEByText",
    "Limit",
    "create_pipeline",
    "execute_all",
    "execute_command",
]
