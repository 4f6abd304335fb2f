import logging
import math
from collections.abc import Sequence

from . import criteria as c
from .charset import calculate_char_multiplicities, create_charset
from .exc import TooManyExtraCharsError

__all__ = (
    "ENTROPY_THRESHOLD",
    "MAX_SUGGESTED_LENGTH",
    "log2_factorial",
    "log2_binomial_coefficient",
    "calculate_entropy",
    "calculate_password_entropy",
    "suggest_password_length",
)

logger = logging.getLogger(__name__)

ENTROPY_THRESHOLD = 72.0
"""The minimum entropy, in bits, of a secure password."""

MAX_SUGGESTED_LENGTH = 1000
"""Lengths from this one on are impractical; the length advisor gives up."""


def log2_factorial(n: int) -> float:
    return sum(math.log2(i) for i in range(1, n + 1))


def log2_binomial_coefficient(n: int, k: int) -> float:
    if n < k:
        raise ValueError("n must be greater than or equal to k, got n=%d k=%d" % (n, k))
    return log2_factorial(n) - log2_factorial(k) - log2_factorial(n - k)


def calculate_entropy(
    password_length: int,
    base_charset_size: int,
    extra_char_multiplicities: Sequence[int] | None = None,
) -> float:
    """
    Calculates the entropy of a random password, in bits.

    Without extra chars, every position is drawn independently from the base
    charset. With extra chars, the count of distinct passwords is the product of:

    * the ways to choose which positions hold the extra chars,
    * the distinct orderings of the extra chars (a multinomial coefficient, since
      repeated chars are indistinguishable), and
    * the free choices for the remaining positions.

    Args:
        password_length: Length of the password.
        base_charset_size: Number of distinct chars the password is sampled from.
        extra_char_multiplicities: How many times each distinct extra char occurs,
            see :func:`~randpass.charset.calculate_char_multiplicities`.

    Raises:
        TooManyExtraCharsError: If the extra chars do not fit in the password.
    """
    free_entropy = math.log2(base_charset_size)

    if extra_char_multiplicities is None:
        return password_length * free_entropy

    extra_charset_size = sum(extra_char_multiplicities)

    if password_length < extra_charset_size:
        raise TooManyExtraCharsError(
            ctx=TooManyExtraCharsError.Context(
                password_length=password_length, extra_chars=extra_charset_size
            )
        )

    return (
        log2_binomial_coefficient(password_length, extra_charset_size)
        + (
            log2_factorial(extra_charset_size)
            - sum(log2_factorial(num) for num in extra_char_multiplicities)
        )
        + (password_length - extra_charset_size) * free_entropy
    )


def calculate_password_entropy(
    password_length: int,
    criteria: c.AbstractCriteria,
    extra_charset: bytes | None = None,
) -> float:
    """
    Shortcut for :func:`calculate_entropy` that derives the charset size and the
    extra char multiplicities from ``criteria`` and ``extra_charset``.
    """
    base_charset = create_charset(criteria, extra_charset)
    entropy = calculate_entropy(
        password_length,
        len(base_charset),
        (
            calculate_char_multiplicities(extra_charset)
            if extra_charset is not None
            else None
        ),
    )
    logger.debug("password of length %d has %.2f bits", password_length, entropy)
    return entropy


def suggest_password_length(
    base_charset_size: int,
    extra_char_multiplicities: Sequence[int] | None = None,
) -> int | None:
    """
    Suggests the minimum length for a secure password.

    Returns:
        The shortest length reaching :data:`ENTROPY_THRESHOLD`, or ``None`` when no
        length below :data:`MAX_SUGGESTED_LENGTH` does.
    """
    for length in range(1, MAX_SUGGESTED_LENGTH):
        try:
            entropy = calculate_entropy(
                length, base_charset_size, extra_char_multiplicities
            )
        except TooManyExtraCharsError:
            continue

        if entropy >= ENTROPY_THRESHOLD:
            return length

    return None
