"""
Declarative registry of query commands.

Maps step types of the form ``"<category>.<method>"`` to factories that build
commands from plain config dicts, so a query can be described as data:

    steps = [
        {"type": "filter.starts_with", "config": {"prefix": "a"}},
        {"type": "sorter.by_text", "config": {"reverse": True}},
        {"type": "selector.limit", "config": {"count": 5}},
    ]
    run_query(steps, extract_text, elements)

Categories:
- filter: Commands that keep elements matching a text predicate
- sorter: Commands that reorder elements by their text
- selector: Commands that keep a positional sub-range
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from textquery.config import get_logger, settings
from textquery.domain.commands import (
    Command,
    ElementCollection,
    EndsWithText,
    GTEByText,
    Limit,
    LTEByText,
    OrderByTextAsc,
    OrderByTextDesc,
    StartsWithText,
    TextExtractor,
    execute_all,
)

logger = get_logger(__name__)

type CommandFactory = Callable[[TextExtractor, Mapping[str, Any]], Command]


def _sort_by_text(extractor: TextExtractor, cfg: Mapping[str, Any]) -> Command:
    if cfg.get("reverse", False):
        return OrderByTextDesc(extractor)
    return OrderByTextAsc(extractor)


# === COMMAND FACTORIES ===

COMMAND_REGISTRY: dict[str, dict[str, CommandFactory]] = {
    "filter": {
        "starts_with": lambda ext, cfg: StartsWithText(ext, cfg["prefix"]),
        "ends_with": lambda ext, cfg: EndsWithText(ext, cfg["suffix"]),
        "min_value": lambda ext, cfg: GTEByText(ext, cfg["number"]),
        "max_value": lambda ext, cfg: LTEByText(ext, cfg["number"]),
    },
    "sorter": {
        "by_text": _sort_by_text,
        "by_text_asc": lambda ext, _cfg: OrderByTextAsc(ext),
        "by_text_desc": lambda ext, _cfg: OrderByTextDesc(ext),
    },
    "selector": {
        # Extractor is unused: limits are positional
        "limit": lambda _ext, cfg: Limit(
            cfg.get("count", settings.commands.default_limit_count),
            index=cfg.get("index", 0),
        ),
    },
}


def build_command(
    step_type: str,
    extractor: TextExtractor,
    config: Mapping[str, Any] | None = None,
) -> Command:
    """
    Build a single command from its step type and config.

    Args:
        step_type: Registry key such as ``"filter.starts_with"``
        extractor: Text extractor handed to text commands
        config: Command parameters

    Returns:
        The configured command

    Raises:
        ValueError: If the step type is not registered
        KeyError: If a required config key is missing
    """
    category, _, method = step_type.partition(".")
    factory = COMMAND_REGISTRY.get(category, {}).get(method)
    if factory is None:
        raise ValueError(f"Invalid command type: {step_type}")

    command = factory(extractor, config or {})
    logger.debug("Built command", step_type=step_type, command=repr(command))
    return command


def build_pipeline(
    steps: Iterable[Mapping[str, Any]],
    extractor: TextExtractor,
) -> list[Command]:
    """Build commands for each ``{"type": ..., "config": ...}`` step, in order."""
    return [
        build_command(step["type"], extractor, step.get("config")) for step in steps
    ]


def run_query(
    steps: Iterable[Mapping[str, Any]],
    extractor: TextExtractor,
    elements: ElementCollection,
) -> None:
    """Build every step first, then apply them to ``elements`` in place."""
    commands = build_pipeline(steps, extractor)
    logger.debug("Running query", step_count=len(commands), element_count=len(elements))
    execute_all(commands, elements)
