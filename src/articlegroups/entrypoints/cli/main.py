"""articlegroups CLI entry point.

Defines the top-level ``articlegroups`` command (via Click-Extra), configures
logging from its options and registers the subcommands.

Currently available commands
- ``articlegroups shell`` — run article group commands read from stdin
  against one in-memory registry.

Notes
- The CLI version is sourced from `articlegroups.__version__` and displayed
  by Click-Extra (``--version``).

Examples
    $ articlegroups --version
    $ printf 'create "Java Basics" "Intro articles"\\nstats\\n' | articlegroups shell
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from articlegroups import __version__, config
from articlegroups.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers import parse_log_level
from .shell import shell

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """articlegroups command-line interface.

    Organize help-desk articles into named, described groups. Groups live in
    memory for the length of a session; use the shell command to create,
    update, search and summarize them.
    """


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
    help="Show more log records on the console (-v INFO, -vv DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show fewer log records on the console (-q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source lines.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=config.default_log_path,
    envvar=config.LOG_PATH_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar=config.FLIGHT_RECORDER_ENVVAR,
    show_envvar=True,
    help=(
        "Buffer DEBUG records of the session in memory and write them to "
        "--log-path as soon as a warning or error is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    envvar=config.FORCE_FLUSH_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer to --log-path at exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=config.LOGGER_LEVELS_ENVVAR,
    show_envvar=True,
    help=(
        "Minimum level for one logger as NAME=LEVEL, applied to the console "
        "and the flight recorder alike. Repeatable, e.g. "
        "-L articlegroups.service_layer=DEBUG."
    ),
)
@clickx.pass_context
def articlegroups(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """articlegroups command-line interface."""
    level = console_level(verbose_count, quiet_count)
    handlers = _logging_handlers(
        level,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        force_flush=force_flush,
    )
    # handlers do the filtering; the root logger passes everything on
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, logger_level in logger_levels.items():
        logging.getLogger(name).setLevel(logger_level)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
        force_flush_fr=force_flush,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


def console_level(verbose_count: int, quiet_count: int) -> int:
    """Return the console log level, one step from WARNING per -v or -q."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def _logging_handlers(
    level: int,
    *,
    debug: bool,
    color: bool,
    log_path: Path | None,
    force_flush: bool,
) -> list[Handler]:
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
                flush_on_close=force_flush,
            )
        )
    return handlers


articlegroups.add_command(shell)
