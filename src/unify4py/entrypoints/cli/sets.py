"""unify SET CLI - set algebra over element files.

Every command reads one or two element files (``-`` means stdin) into
`HashSet` instances, applies one operation, and writes the result to
**stdout**. Human-oriented notices go to **stderr** so results can be piped.

Behavior
- Elements are one per line; ``--delimiter`` splits lines further.
- ``--type`` converts elements before comparison, so ``1`` and ``01`` are
  the same element with ``--type int`` but different ones with ``str``.
- Output is sorted by default; ``--join`` prints the comma-joined form.
- An input without any element is allowed but logged as a warning.

Failure modes
- An element that cannot be converted to ``--type``, or a file that is not
  UTF-8 → ``BadParameter`` naming the offending file.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

import click
import click_extra as clickx

from unify4py import config
from unify4py.errors import ElementConversionError, ElementDecodeError
from unify4py.sets import HashSet

from .helpers import convert_element, error, load_set, render_set, success, warn

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)

Operation: TypeAlias = Callable[[HashSet[Any], HashSet[Any]], HashSet[Any]]

ELEMENT_FILE = click.File("r", encoding="utf-8")


def _input_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--type",
        "type_name",
        type=click.Choice(list(config.ELEMENT_TYPES), case_sensitive=False),
        default=config.DEFAULT_ELEMENT_TYPE,
        envvar=config.ELEMENT_TYPE_ENV,
        show_default=True,
        show_envvar=True,
        help="Convert elements to this type before comparing them.",
    )(func)
    func = click.option(
        "--delimiter",
        "-d",
        default=None,
        help="Split each line into several elements on this separator.",
    )(func)
    return func


def _output_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--sort/--no-sort",
        default=True,
        show_default=True,
        help="Sort the output by the elements' natural order.",
    )(func)
    func = click.option(
        "--join",
        is_flag=True,
        help="Print a single comma-joined line instead of one element per line.",
    )(func)
    return func


def _load(stream: TextIO, delimiter: str | None, type_name: str) -> HashSet[Any]:
    try:
        loaded = load_set(stream, delimiter=delimiter, type_name=type_name)
    except (ElementConversionError, ElementDecodeError) as e:
        raise click.BadParameter(str(e), param_hint=f"'{stream.name}'") from e
    if loaded.is_empty():
        logger.warning("%s holds no elements", stream.name)
    return loaded


def _emit(result: HashSet[Any], sort: bool, join: bool) -> None:
    if result.is_empty():
        logger.info("Result is empty")
        return
    click.echo(render_set(result, sort=sort, join=join))


def _apply(  # pylint: disable=too-many-arguments
    name: str,
    operation: Operation,
    first: TextIO,
    second: TextIO,
    *,
    delimiter: str | None,
    type_name: str,
    sort: bool,
    join: bool,
) -> None:
    left = _load(first, delimiter, type_name)
    right = _load(second, delimiter, type_name)
    result = operation(left, right)
    logger.info(
        "%s of %s (%d) and %s (%d): %d element(s)",
        name,
        first.name,
        left.size(),
        second.name,
        right.size(),
        result.size(),
    )
    _emit(result, sort, join)


@click.group(name="set", cls=clickx.ExtraGroup)
def set_group() -> None:
    """Set algebra over element files."""


@set_group.command()
@click.argument("first", type=ELEMENT_FILE)
@click.argument("second", type=ELEMENT_FILE)
@_input_options
@_output_options
def union(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    first: TextIO,
    second: TextIO,
    delimiter: str | None,
    type_name: str,
    sort: bool,
    join: bool,
) -> None:
    """Print every element present in FIRST or SECOND."""
    _apply(
        "Union",
        HashSet.union,
        first,
        second,
        delimiter=delimiter,
        type_name=type_name,
        sort=sort,
        join=join,
    )


@set_group.command()
@click.argument("first", type=ELEMENT_FILE)
@click.argument("second", type=ELEMENT_FILE)
@_input_options
@_output_options
def intersection(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    first: TextIO,
    second: TextIO,
    delimiter: str | None,
    type_name: str,
    sort: bool,
    join: bool,
) -> None:
    """Print the elements present in both FIRST and SECOND."""
    _apply(
        "Intersection",
        HashSet.intersection,
        first,
        second,
        delimiter=delimiter,
        type_name=type_name,
        sort=sort,
        join=join,
    )


@set_group.command()
@click.argument("first", type=ELEMENT_FILE)
@click.argument("second", type=ELEMENT_FILE)
@_input_options
@_output_options
def difference(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    first: TextIO,
    second: TextIO,
    delimiter: str | None,
    type_name: str,
    sort: bool,
    join: bool,
) -> None:
    """Print the elements of FIRST that are not in SECOND."""
    _apply(
        "Difference",
        HashSet.difference,
        first,
        second,
        delimiter=delimiter,
        type_name=type_name,
        sort=sort,
        join=join,
    )


@set_group.command(name="symmetric-difference")
@click.argument("first", type=ELEMENT_FILE)
@click.argument("second", type=ELEMENT_FILE)
@_input_options
@_output_options
def symmetric_difference(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    first: TextIO,
    second: TextIO,
    delimiter: str | None,
    type_name: str,
    sort: bool,
    join: bool,
) -> None:
    """Print the elements present in exactly one of FIRST and SECOND."""
    _apply(
        "Symmetric difference",
        HashSet.symmetric_difference,
        first,
        second,
        delimiter=delimiter,
        type_name=type_name,
        sort=sort,
        join=join,
    )


@set_group.command()
@click.argument("source", type=ELEMENT_FILE)
@_input_options
@_output_options
def unique(
    source: TextIO, delimiter: str | None, type_name: str, sort: bool, join: bool
) -> None:
    """Print the distinct elements of SOURCE."""
    _emit(_load(source, delimiter, type_name), sort, join)


@set_group.command()
@click.argument("source", type=ELEMENT_FILE)
@_input_options
def size(source: TextIO, delimiter: str | None, type_name: str) -> None:
    """Print the number of distinct elements in SOURCE."""
    click.echo(_load(source, delimiter, type_name).size())


@set_group.command()
@click.argument("source", type=ELEMENT_FILE)
@click.argument("element")
@_input_options
@click.pass_context
def contains(
    ctx: click.Context,
    source: TextIO,
    element: str,
    delimiter: str | None,
    type_name: str,
) -> None:
    """Check whether ELEMENT is in SOURCE.

    Exits with status 0 when it is present and 1 when it is absent.
    """
    try:
        value = convert_element(element.strip(), type_name)
    except ElementConversionError as e:
        error(str(e))
        ctx.exit(2)
    if _load(source, delimiter, type_name).contains(value):
        success(f"'{element}' is in {source.name}")
    else:
        warn(f"'{element}' is not in {source.name}")
        ctx.exit(1)
