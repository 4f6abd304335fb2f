from typing import Optional

import click

from ... import charset
from ... import entropy as _entropy
from ..._conf import DEFAULT_PASSWORD_LENGTH
from ..common import charset_options, get_settings, handle_exception, resolve_criteria

__all__ = ["entropy"]


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
@click.pass_context
def entropy(
    ctx: click.Context,
    password_length: Optional[int],
    uppercase: bool,
    lowercase: bool,
    digits: bool,
    symbols: bool,
    base_charset: Optional[str],
    regex_pattern: Optional[str],
    extra_charset: Optional[str],
) -> None:
    """
    Show the strength of passwords without generating any.

    Prints the entropy in bits of a password built with the given options, followed
    by the shortest length reaching 72 bits ("none" if no practical length does).

    Examples:

    \b
      # Strength of a 10 digits PIN
      $ randpass entropy -d -l 10
    """
    settings = get_settings(ctx)

    if password_length is None:
        password_length = settings.length

    extra = (
        extra_charset if extra_charset is not None else settings.extra_charset or ""
    ).encode("utf-8")

    try:
        criteria = resolve_criteria(
            settings, uppercase, lowercase, digits, symbols, base_charset, regex_pattern
        )
        base_charset_size = len(charset.create_charset(criteria, extra))
        multiplicities = charset.calculate_char_multiplicities(extra)

        value = _entropy.calculate_entropy(
            password_length, base_charset_size, multiplicities
        )
        suggested_length = _entropy.suggest_password_length(
            base_charset_size, multiplicities
        )
    except Exception as ex:
        handle_exception(ex)

    click.echo("entropy: %.2f bits" % value)
    click.echo(
        "suggested length: %s"
        % (suggested_length if suggested_length is not None else "none")
    )
