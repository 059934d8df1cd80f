"""Top-level ``unify`` command.

The group callback only sets up logging; the work happens in subcommands
registered at the bottom of this module (currently ``unify set``).

Console verbosity starts at WARNING and moves one level per ``-v``/``-q``.
The flight recorder is independent of that: it keeps DEBUG records in memory
and writes them to ``--log-path`` when a warning or error is logged, so the
file explains what happened without rerunning with ``-vv``.

Examples
    $ unify --version
    $ unify -v set union fruits.txt vegetables.txt
    $ UNIFY_LOG_PATH=run.log unify --force-flush set size fruits.txt
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from unify4py import __version__, config
from unify4py.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .sets import set_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

_LEVEL_STEP = 10  # pragma: no mutate


HELP = """Set algebra over plain-text element lists.

    Each input file holds one element per line (or several per line with
    --delimiter). Results go to stdout, one element per line; logs and
    notices go to stderr, so output can be piped into other tools.
    """


def _console_level(verbose_count: int, quiet_count: int) -> int:
    """Return WARNING moved one level per -v (down) and -q (up), clamped."""
    level = logging.WARNING + _LEVEL_STEP * (quiet_count - verbose_count)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


def _build_handlers(
    ctx: click.Context,
    *,
    level: int,
    debug: bool,
    log_path: Path | None,
    capacity: int,
    force_flush: bool,
) -> list[Handler]:
    # ctx.color is None unless --color/--no-color was given
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                log_path, capacity=capacity, flush_on_close=force_flush
            )
        )
    return handlers


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show more log output on stderr (-v: INFO, -vv: DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show less log output on stderr (-q: ERROR, -qq: CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything with timestamps, logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=config.default_log_path,
    show_default="<user log dir>/latest.log",
    envvar=f"{config.ENV_PREFIX}_LOG_PATH",
    show_envvar=True,
    help="File the flight recorder writes to. It is truncated on every run.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar=f"{config.ENV_PREFIX}_FLIGHT_RECORDER_CAPACITY",
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_default=True,
    envvar=f"{config.ENV_PREFIX}_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory and write them to --log-path "
        "when a warning or error is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    show_default=True,
    envvar=f"{config.ENV_PREFIX}_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
    help="Also write the flight recorder buffer when the command finishes.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=f"{config.ENV_PREFIX}_LOGGER_LEVEL",
    show_envvar=True,
    help=(
        "Set a logger's own level as NAME=LEVEL, e.g. "
        "-L unify4py.entrypoints.cli.helpers=INFO. Repeatable; the "
        "environment variable takes a comma or space separated list. "
        "Applies to the console and the flight recorder alike."
    ),
)
@clickx.pass_context
def unify(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Configure logging, then hand over to the subcommand."""
    level = _console_level(verbose_count, quiet_count)
    handlers = _build_handlers(
        ctx,
        level=level,
        debug=debug,
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush,
    )

    # the root logger passes everything; each handler applies its own level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, logger_level in logger_levels.items():
        logging.getLogger(name).setLevel(logger_level)

    log_startup(
        logger,
        app_version=__version__,
        command=ctx.invoked_subcommand,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


unify.add_command(set_group)
