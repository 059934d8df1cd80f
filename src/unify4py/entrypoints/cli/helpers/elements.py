"""Conversion between element files and `HashSet` instances.

An element file is UTF-8 text with one element per line. When a delimiter is
given, each line is split further on it. Whitespace around every element is
stripped and empty fragments are skipped, so trailing newlines and blank
lines never produce elements.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from unify4py.config import get_element_converter
from unify4py.errors import ElementConversionError, ElementDecodeError
from unify4py.sets import HashSet
from unify4py.sets.hashset import SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

logger = logging.getLogger(__name__)


def _fragments(lines: Iterable[str], delimiter: str | None) -> Iterable[str]:
    for line in lines:
        parts = line.split(delimiter) if delimiter else [line]
        for part in parts:
            if fragment := part.strip():
                yield fragment


def convert_element(text: str, type_name: str) -> Any:
    """Convert the textual form of one element to ``type_name``.

    Raises:
        UnknownElementTypeError: If ``type_name`` is not registered.
        ElementConversionError: If the converter rejects ``text``.
    """
    converter = get_element_converter(type_name)
    try:
        return converter(text)
    except ValueError as e:
        raise ElementConversionError(text, type_name) from e


def parse_elements(
    lines: Iterable[str], *, delimiter: str | None = None, type_name: str = "str"
) -> list[Any]:
    """Parse element text into a list of typed values.

    Args:
        lines: Lines of an element file (with or without line endings).
        delimiter: Optional separator splitting each line into several elements.
        type_name: Name of the element type (see `unify4py.config.ELEMENT_TYPES`).

    Returns:
        The converted elements in input order; duplicates are kept.

    Raises:
        ElementConversionError: If an element cannot be converted.
    """
    return [convert_element(f, type_name) for f in _fragments(lines, delimiter)]


def load_set(
    stream: TextIO, *, delimiter: str | None = None, type_name: str = "str"
) -> HashSet[Any]:
    """Read an element stream into a new `HashSet`.

    Raises:
        ElementConversionError: If an element cannot be converted.
        ElementDecodeError: If the stream is not valid UTF-8.
    """
    source = getattr(stream, "name", "<stream>")
    try:
        elements = parse_elements(stream, delimiter=delimiter, type_name=type_name)
    except UnicodeDecodeError as e:
        raise ElementDecodeError(source, e.reason) from e
    result: HashSet[Any] = HashSet(*elements)
    logger.debug(
        "Loaded %d element(s), %d distinct, from %s",
        len(elements),
        result.size(),
        source,
    )
    return result


def render_set(hash_set: HashSet[Any], *, sort: bool = True, join: bool = False) -> str:
    """Render ``hash_set`` for stdout.

    Args:
        hash_set: The set to render.
        sort: Order elements by their natural ordering. Elements that cannot
            be compared with each other are ordered by their text instead.
        join: Produce a single comma-joined line (the ``str()`` form of the
            set) instead of one element per line.

    Returns:
        The rendered text without a trailing newline; ``""`` for an empty set.
    """
    elements = hash_set.to_list()
    if sort:
        try:
            elements.sort()
        except TypeError:
            elements.sort(key=str)
    separator = SEPARATOR if join else "\n"
    return separator.join(str(e) for e in elements)
