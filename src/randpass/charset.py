import logging
from collections import Counter

import regex

from . import criteria as c
from .exc import InvalidRegexError, NoValidCharsError, RegexMatchesNoCharsError

__all__ = (
    "DIGITS",
    "UPPERCASE",
    "LOWERCASE",
    "PRINTABLE",
    "create_charset",
    "create_charset_from_regex",
    "calculate_char_multiplicities",
)

logger = logging.getLogger(__name__)

DIGITS = bytes(range(ord("0"), ord("9") + 1))
UPPERCASE = bytes(range(ord("A"), ord("Z") + 1))
LOWERCASE = bytes(range(ord("a"), ord("z") + 1))
PRINTABLE = bytes(range(ord(" "), ord("~") + 1))


def create_charset(
    criteria: c.AbstractCriteria, extra_charset: bytes | None = None
) -> bytes:
    """
    Builds the base charset a password is sampled from.

    Every extra character becomes part of the charset, even when the criteria would
    not allow it on its own.

    Returns:
        The distinct characters sorted by byte value.

    Raises:
        NoValidCharsError: If the resulting charset is empty.
        InvalidRegexError: If a regex criteria holds an invalid pattern.
        RegexMatchesNoCharsError: If a regex criteria matches no printable char.
    """
    match criteria:
        case c.Alphanumeric():
            charset = set(DIGITS + UPPERCASE + LOWERCASE)
        case c.UppercaseAndDigitsOnly():
            charset = set(DIGITS + UPPERCASE)
        case c.LowercaseAndDigitsOnly():
            charset = set(DIGITS + LOWERCASE)
        case c.DigitsOnly():
            charset = set(DIGITS)
        case c.AllPrintableChars():
            charset = set(PRINTABLE)
        case c.BaseCharset(charset=chars):
            charset = set(chars)
        case c.RegexPattern(pattern=pattern):
            charset = set(create_charset_from_regex(pattern))
        case _:
            raise TypeError("Unsupported criteria %r" % criteria)

    if extra_charset:
        charset.update(extra_charset)

    if not charset:
        raise NoValidCharsError()

    logger.debug("built a charset of %d chars for %r", len(charset), criteria)
    return bytes(sorted(charset))


def create_charset_from_regex(pattern: str) -> bytes:
    """
    Collects the printable ASCII characters that match ``pattern``.

    The pattern is searched in each character on its own, so it only ever sees a
    string of length one.

    POSIX bracket classes such as ``[[:digit:]]`` and Unicode properties such as
    ``\\p{Lu}`` are understood.
    """
    try:
        compiled = regex.compile(pattern)
    except regex.error as ex:
        raise InvalidRegexError(
            ctx=InvalidRegexError.Context(pattern=pattern, reason=str(ex))
        ) from ex

    charset = bytes(ch for ch in PRINTABLE if compiled.search(chr(ch)))

    if not charset:
        raise RegexMatchesNoCharsError(
            ctx=RegexMatchesNoCharsError.Context(pattern=pattern)
        )

    return charset


def calculate_char_multiplicities(charset: bytes) -> list[int]:
    """
    Counts how many times each distinct character occurs in ``charset``.

    Example::

        >>> calculate_char_multiplicities(b"hello")
        [1, 1, 1, 2]
    """
    return sorted(Counter(charset).values())
