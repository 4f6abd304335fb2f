import functools
import logging
from typing import Any, Callable, NoReturn, Optional, TypeVar

import click

from .. import criteria as c
from .._conf import Settings
from ..exc import RandpassError
from .exc import CLIError

__all__ = (
    "DEFAULT_REGEX_PATTERN",
    "charset_options",
    "get_settings",
    "handle_exception",
    "resolve_criteria",
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_REGEX_PATTERN = "[A-Za-z0-9]"

CRITERIA_OPTIONS = (
    "uppercase",
    "lowercase",
    "digits",
    "symbols",
    "base_charset",
    "regex_pattern",
)


def charset_options(fn: F) -> F:
    """Adds the options selecting the password criteria and extra chars."""
    decorators = (
        click.option(
            "-u",
            "--uppercase",
            is_flag=True,
            default=False,
            help="Use uppercase letters and digits only.",
        ),
        click.option(
            "-L",
            "--lowercase",
            is_flag=True,
            default=False,
            help="Use lowercase letters and digits only.",
        ),
        click.option(
            "-d", "--digits", is_flag=True, default=False, help="Use digits only."
        ),
        click.option(
            "-s",
            "--symbols",
            is_flag=True,
            default=False,
            help="Use all letters, digits, and symbols.",
        ),
        click.option(
            "-b",
            "--base",
            "base_charset",
            metavar="CHARSET",
            help="Custom base character set to use.",
        ),
        click.option(
            "-r",
            "--regex",
            "regex_pattern",
            metavar="PATTERN",
            help=(
                "Regex pattern for allowed characters, tested against each printable "
                "ASCII character on its own. Defaults to %r."
            )
            % DEFAULT_REGEX_PATTERN,
        ),
        click.option(
            "-e",
            "--extra",
            "extra_charset",
            metavar="CHARS",
            help="Extra characters to include in every password.",
        ),
    )
    return functools.reduce(lambda acc, dec: dec(acc), reversed(decorators), fn)


def resolve_criteria(
    settings: Settings,
    uppercase: bool,
    lowercase: bool,
    digits: bool,
    symbols: bool,
    base_charset: Optional[str],
    regex_pattern: Optional[str],
) -> c.AbstractCriteria:
    """
    Picks the criteria selected on the command line, falling back on the configured
    one and then on the default regex pattern.

    Raises:
        click.UsageError: If more than one criteria option is given.
    """
    values = dict(
        zip(
            CRITERIA_OPTIONS,
            (uppercase, lowercase, digits, symbols, base_charset, regex_pattern),
        )
    )
    selected = [name for name, value in values.items() if value]

    if len(selected) > 1:
        raise click.UsageError(
            "The options %s are mutually exclusive."
            % ", ".join("'--%s'" % name.split("_")[0] for name in selected)
        )

    if uppercase:
        return c.UppercaseAndDigitsOnly()
    if lowercase:
        return c.LowercaseAndDigitsOnly()
    if digits:
        return c.DigitsOnly()
    if symbols:
        return c.AllPrintableChars()
    if base_charset:
        return c.BaseCharset(charset=base_charset.encode("utf-8"))
    if regex_pattern:
        return c.RegexPattern(pattern=regex_pattern)
    if settings.criteria is not None:
        return settings.criteria

    return c.RegexPattern(pattern=DEFAULT_REGEX_PATTERN)


def get_settings(ctx: click.Context) -> Settings:
    if (settings := ctx.find_object(Settings)) is None:
        raise RuntimeError("Configuration not found")
    return settings


def raise_unexpected_exc(ex: Exception) -> NoReturn:
    logger.debug(ex, exc_info=ex)
    raise CLIError("unexpected error: %r" % ex, exit_code=128) from ex


def handle_exception(ex: Exception) -> NoReturn:
    if isinstance(ex, click.ClickException):
        raise ex

    if isinstance(ex, RandpassError):
        raise CLIError(str(ex)) from ex

    raise_unexpected_exc(ex)
