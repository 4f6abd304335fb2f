import logging
from typing import Optional

import click

from ... import charset, entropy, exc, generator
from ..._conf import DEFAULT_PASSWORD_LENGTH
from ...util.escape import parse_escape_sequences
from .. import output
from ..common import charset_options, get_settings, handle_exception, resolve_criteria

__all__ = ["generate", "get_newline", "report_entropy"]


logger = logging.getLogger(__name__)


def report_entropy(
    base_charset: bytes,
    extra_charset: bytes,
    password_length: int,
    verbose: bool,
    quiet: bool,
    fail: bool,
) -> None:
    """
    Tells the user how strong the passwords are going to be.

    Raises:
        PasswordEntropyInsufficientError: If the password is weak and ``fail`` is
            set.
    """
    base_charset_size = len(base_charset)
    extra_char_multiplicities = charset.calculate_char_multiplicities(extra_charset)
    value = entropy.calculate_entropy(
        password_length, base_charset_size, extra_char_multiplicities
    )
    logger.debug(
        "entropy of a %d chars password over %d chars: %.2f bits",
        password_length,
        base_charset_size,
        value,
    )

    if value >= entropy.ENTROPY_THRESHOLD:
        if verbose:
            output.print_info("your password has %.2f bits of entropy" % value)
        return

    if fail:
        raise exc.PasswordEntropyInsufficientError(
            ctx=exc.PasswordEntropyInsufficientError.Context(entropy=value)
        )

    if quiet:
        return

    output.print_warning("your password has only %.2f bits of entropy" % value)

    if suggested_length := entropy.suggest_password_length(
        base_charset_size, extra_char_multiplicities
    ):
        output.print_hint(
            "set '--length' to '%d' or longer (use '--quiet' to hide this message)"
            % suggested_length
        )


def get_newline(delimiter: Optional[str], last_line: bool, no_newline: bool) -> str:
    """Returns what follows a password: the delimiter, a newline or nothing."""
    if delimiter is not None:
        return "" if last_line else parse_escape_sequences(delimiter)

    return "" if last_line and no_newline else "\n"


@click.command()
@click.option(
    "-l",
    "--length",
    "password_length",
    type=click.IntRange(min=0),
    help=(
        "Length of the password, overriding the configured length.  [default: %d]"
        % DEFAULT_PASSWORD_LENGTH
    ),
)
@charset_options
@click.option(
    "-n",
    "--number",
    "password_quantity",
    type=click.IntRange(min=1),
    help="Number of passwords to generate.  [default: 1]",
)
@click.option(
    "-f",
    "--format",
    "format_string",
    metavar="FORMAT",
    help="Customize the output format of the password, '{}' is the password.",
)
@click.option(
    "-N",
    "--no-newline",
    is_flag=True,
    default=False,
    help="Do not print the trailing newline character.",
)
@click.option(
    "-D",
    "--delimiter",
    metavar="DELIMITER",
    help="Use a custom delimiter between passwords, escape sequences allowed.",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Do not warn about weak passwords.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Always output the strength of the password.",
)
@click.option(
    "-F",
    "--fail",
    is_flag=True,
    default=False,
    help="Terminate if the password is weak.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    password_length: Optional[int],
    uppercase: bool,
    lowercase: bool,
    digits: bool,
    symbols: bool,
    base_charset: Optional[str],
    regex_pattern: Optional[str],
    extra_charset: Optional[str],
    password_quantity: Optional[int],
    format_string: Optional[str],
    no_newline: bool,
    delimiter: Optional[str],
    quiet: bool,
    verbose: bool,
    fail: bool,
) -> None:
    """
    Generate random passwords.

    Passwords and their delimiters are written to standard output; warnings and
    hints go to standard error.

    Examples:

    \b
      # A 20 chars alphanumeric password
      $ randpass generate
    \b
      # Five 32 chars passwords with symbols, comma-separated
      $ randpass generate -s -l 32 -n 5 -D ','
    \b
      # Lowercase hex digits, exit with an error if the password is weak
      $ randpass generate -r '[0-9a-f]' -F
    """
    settings = get_settings(ctx)

    password_length = (
        password_length if password_length is not None else settings.length
    )
    password_quantity = password_quantity or settings.quantity
    if format_string is None:
        format_string = settings.format_string
    if delimiter is None:
        delimiter = settings.delimiter
    no_newline = no_newline or settings.no_newline
    quiet, verbose, fail = (
        quiet or settings.quiet,
        verbose or settings.verbose,
        fail or settings.fail,
    )

    if quiet and verbose:
        raise click.UsageError(
            "The options '--quiet' and '--verbose' are mutually exclusive."
        )

    extra = (
        extra_charset if extra_charset is not None else settings.extra_charset or ""
    ).encode("utf-8")

    try:
        criteria = resolve_criteria(
            settings, uppercase, lowercase, digits, symbols, base_charset, regex_pattern
        )

        if len(extra) > password_length:
            raise exc.TooManyExtraCharsError(
                ctx=exc.TooManyExtraCharsError.Context(
                    password_length=password_length, extra_chars=len(extra)
                )
            )

        base = charset.create_charset(criteria, extra)

        if not quiet or fail:
            report_entropy(base, extra, password_length, verbose, quiet, fail)

        for i in range(password_quantity):
            newline = get_newline(delimiter, i == password_quantity - 1, no_newline)
            password = generator.create_password(password_length, base, criteria, extra)

            if format_string is not None:
                password = format_string.replace("{}", password)

            click.echo(password + newline, nl=False)
    except Exception as ex:
        handle_exception(ex)
