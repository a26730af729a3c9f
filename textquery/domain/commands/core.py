"""
In-place query commands over ordered element collections.

Commands filter, reorder or truncate a mutable sequence of opaque elements,
keyed by text pulled from each element through a caller-supplied extractor.
Every command mutates the collection it is given and returns None, so a
pipeline is a sequence of commands run left to right against one list.

Command types are frozen attrs classes carrying only their parameters. The set
is closed: `execute_command` dispatches over it with a single match statement.
"""

from collections.abc import Callable, Iterable, MutableSequence
from functools import cmp_to_key
import re
from typing import Any

from attrs import define, field, validators
from toolz import curry

from textquery.config import get_logger

logger = get_logger(__name__)

# Elements come from an external document model and are never inspected
type Element = Any
type TextExtractor = Callable[[Element], str]
type ElementCollection = MutableSequence[Element]

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
# Ordering recognises ASCII digits only; threshold parsing takes any decimal digit
_SIGNED_INTEGER_PATTERN = re.compile(r"[-+]?\d+")


# === Text Comparison ===


def _compare_trimmed(first: str, second: str) -> int:
    """Text-or-number comparison of already stripped texts."""
    if _INTEGER_PATTERN.fullmatch(first) and _INTEGER_PATTERN.fullmatch(second):
        left, right = int(first), int(second)
        return (left > right) - (left < right)
    return (first > second) - (first < second)


def compare_text(first: str, second: str) -> int:
    """Compare two texts, numerically when both are integers.

    Both operands are stripped first. If both then match ``-?[0-9]+`` they are
    compared as signed integers, otherwise as strings (code point order).

    Returns:
        A negative number, zero or a positive number, like a classic comparator
    """
    return _compare_trimmed(first.strip(), second.strip())


def parse_integer(text: str) -> int:
    """Parse extracted text as a base-10 signed integer.

    Any Unicode decimal digit is accepted (``"\u0665"`` parses as 5). No
    trimming is applied: whitespace and underscores are rejected.

    Raises:
        ValueError: If the text is not a plain integer literal
    """
    if not _SIGNED_INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"Extracted text is not a base-10 integer: {text!r}")
    return int(text)


# === Collection Primitives ===


def _sort_by_text(
    elements: ElementCollection,
    extractor: TextExtractor,
    descending: bool,
) -> None:
    """Stable in-place sort keyed on stripped text, one extraction per element."""
    if len(elements) < 2:
        return

    keyed = [(extractor(element).strip(), element) for element in elements]

    if descending:
        # Mirror of ascending: operands swapped, result not negated
        key = cmp_to_key(lambda a, b: _compare_trimmed(b[0], a[0]))
    else:
        key = cmp_to_key(lambda a, b: _compare_trimmed(a[0], b[0]))

    keyed.sort(key=key)
    elements[:] = [element for _, element in keyed]


def _retain(
    elements: ElementCollection,
    keep: Callable[[Element], bool],
) -> None:
    """Compact survivors to the front, then drop the tail.

    If ``keep`` raises, elements already rejected stay removed and every
    element not yet visited stays in place, in order.
    """
    write = read = 0
    try:
        while read < len(elements):
            element = elements[read]
            if keep(element):
                elements[write] = element
                write += 1
            read += 1
    finally:
        del elements[write:read]


def _limit(elements: ElementCollection, index: int, count: int) -> None:
    """Keep ``[index, index + count)`` clipped to the current size."""
    if index >= len(elements):
        del elements[:]
        return

    del elements[:index]
    del elements[min(count, len(elements)) :]


# === Commands ===


class _Executable:
    __slots__ = ()

    def execute(self, elements: ElementCollection) -> None:
        """Apply this command to ``elements`` in place."""
        execute_command(self, elements)


_callable = validators.is_callable()
_str = validators.instance_of(str)


def _not_bool(_instance, attribute, value) -> None:
    if isinstance(value, bool):
        raise TypeError(f"'{attribute.name}' must be an int, not bool: {value!r}")


_int = [validators.instance_of(int), _not_bool]
_non_negative_int = [*_int, validators.ge(0)]


@define(frozen=True, slots=True)
class OrderByTextAsc(_Executable):
    """Sort elements in ascending order of their text."""

    extractor: TextExtractor = field(validator=_callable)


@define(frozen=True, slots=True)
class OrderByTextDesc(_Executable):
    """Sort elements in descending order of their text."""

    extractor: TextExtractor = field(validator=_callable)


@define(frozen=True, slots=True)
class StartsWithText(_Executable):
    """Keep only elements whose text starts with ``prefix`` (case-sensitive)."""

    extractor: TextExtractor = field(validator=_callable)
    prefix: str = field(validator=_str)


@define(frozen=True, slots=True)
class EndsWithText(_Executable):
    """Keep only elements whose text ends with ``suffix`` (case-sensitive)."""

    extractor: TextExtractor = field(validator=_callable)
    suffix: str = field(validator=_str)


@define(frozen=True, slots=True)
class GTEByText(_Executable):
    """Keep only elements whose text, as an integer, is >= ``number``."""

    extractor: TextExtractor = field(validator=_callable)
    number: int = field(validator=_int)


@define(frozen=True, slots=True)
class LTEByText(_Executable):
    """Keep only elements whose text, as an integer, is <= ``number``."""

    extractor: TextExtractor = field(validator=_callable)
    number: int = field(validator=_int)


@define(frozen=True, slots=True)
class Limit(_Executable):
    """Keep the ``count`` elements starting at ``index``.

    ``index`` is keyword-only: ``Limit(2, index=1)``. An index past the end
    empties the collection. Negative values and bools are rejected at
    construction.
    """

    count: int = field(validator=_non_negative_int)
    index: int = field(default=0, kw_only=True, validator=_non_negative_int)


type Command = (
    OrderByTextAsc
    | OrderByTextDesc
    | StartsWithText
    | EndsWithText
    | GTEByText
    | LTEByText
    | Limit
)


# === Execution ===


@curry
def execute_command(command: Command, elements: ElementCollection) -> None:
    """
    Apply a single command to a collection in place.

    Curried: `execute_command(command)` returns a one-argument callable.

    Args:
        command: Command to execute
        elements: Mutable, ordered collection of elements

    Raises:
        TypeError: If ``command`` is not a known command type
        ValueError: If a threshold filter meets non-integer text
    """
    original_count = len(elements)

    match command:
        case OrderByTextAsc(extractor=extractor):
            _sort_by_text(elements, extractor, descending=False)
        case OrderByTextDesc(extractor=extractor):
            _sort_by_text(elements, extractor, descending=True)
        case StartsWithText(extractor=extractor, prefix=prefix):
            _retain(elements, lambda e: extractor(e).startswith(prefix))
        case EndsWithText(extractor=extractor, suffix=suffix):
            _retain(elements, lambda e: extractor(e).endswith(suffix))
        case GTEByText(extractor=extractor, number=number):
            _retain(elements, lambda e: parse_integer(extractor(e)) >= number)
        case LTEByText(extractor=extractor, number=number):
            _retain(elements, lambda e: parse_integer(extractor(e)) <= number)
        case Limit(count=count, index=index):
            _limit(elements, index, count)
        case _:
            raise TypeError(f"Unsupported command: {command!r}")

    logger.debug(
        "Executed command",
        command=type(command).__name__,
        original_count=original_count,
        result_count=len(elements),
        removed_count=original_count - len(elements),
    )


def execute_all(commands: Iterable[Command], elements: ElementCollection) -> None:
    """Apply commands to the same collection, left to right."""
    for command in commands:
        execute_command(command, elements)


def create_pipeline(*commands: Command) -> Callable[[ElementCollection], None]:
    """
    Bundle commands into a single in-place operation.

    Args:
        *commands: Commands to apply, in order

    Returns:
        A function that runs every command against the collection it is given
    """
    steps = tuple(commands)

    def run(elements: ElementCollection) -> None:
        execute_all(steps, elements)

    return run
