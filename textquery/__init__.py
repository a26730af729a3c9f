"""textquery - filter, sort and paginate element collections by their text."""

from .domain import (
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
