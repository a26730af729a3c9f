"""In-place query commands for ordered element collections."""

from .core import (
    Command,
    Element,
    ElementCollection,
    EndsWithText,
    GTEByText,
    Limit,
    LTEByText,
    OrderByTextAsc,
    OrderByTextDesc,
    StartsWithText,
    TextExtractor,
    compare_text,
    create_pipeline,
    execute_all,
    execute_command,
    parse_integer,
)

__all__ = [
    # Types
    "Command",
    "Element",
    "ElementCollection",
    "TextExtractor",
    # Ordering
    "OrderByTextAsc",
    "OrderByTextDesc",
    # Filtering
    "EndsWithText",
    "GTEByText",
    "LTEByText",
    "StartsWithText",
    # Selection
    "Limit",
    # Execution
    "create_pipeline",
    "execute_all",
    "execute_command",
    # Text helpers
    "compare_text",
    "parse_integer",
]
