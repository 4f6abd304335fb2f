import logging
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, MutableSequence

from typing_extensions import override

from . import criteria as c
from .charset import DIGITS, LOWERCASE, PRINTABLE, UPPERCASE
from .exc import PasswordDecodeError

__all__ = ("RandomSource", "SystemRandomSource", "SYMBOLS", "create_password")

logger = logging.getLogger(__name__)

SYMBOLS = bytes(ch for ch in PRINTABLE if ch not in DIGITS + UPPERCASE + LOWERCASE)


@dataclass(slots=True)
class RandomSource(ABC):
    """
    Provides uniform random choices to the password generator.

    Implementations must be unbiased: every index in ``range(n)`` is equally likely
    and every permutation produced by :meth:`shuffle` is equally likely.
    """

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Returns a random int in ``range(n)``."""

    @abstractmethod
    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Shuffles ``seq`` in place."""

    def choice(self, charset: bytes) -> int:
        return charset[self.randbelow(len(charset))]


@dataclass(slots=True)
class SystemRandomSource(RandomSource):
    """Draws from the operating system's CSPRNG."""

    _rng: secrets.SystemRandom = field(default_factory=secrets.SystemRandom)

    @override
    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)

    @override
    def shuffle(self, seq: MutableSequence[Any]) -> None:
        self._rng.shuffle(seq)


def create_password(
    password_length: int,
    base_charset: bytes,
    criteria: c.AbstractCriteria,
    extra_charset: bytes | None = None,
    *,
    rng: RandomSource | None = None,
) -> str:
    """
    Creates a password.

    The extra chars are all placed in the password, the remaining positions are
    drawn from ``base_charset``, and the result is shuffled so the extra chars end
    up in random positions. With :class:`~randpass.criteria.AllPrintableChars`,
    at least one symbol is guaranteed when there is room for it.

    Args:
        password_length: Length of the password.
        base_charset: The charset built by :func:`~randpass.charset.create_charset`.
        criteria: The criteria ``base_charset`` was built from.
        extra_charset: Chars that must all appear in the password.
        rng: Source of randomness, the OS CSPRNG by default.

    Raises:
        PasswordDecodeError: If the generated bytes are not valid UTF-8.
    """
    rng = rng or SystemRandomSource()
    password_chars = bytearray(extra_charset or b"")

    if (
        isinstance(criteria, c.AllPrintableChars)
        and len(password_chars) < password_length
    ):
        password_chars.append(rng.choice(SYMBOLS))

    remaining_length = max(password_length - len(password_chars), 0)
    password_chars.extend(rng.choice(base_charset) for _ in range(remaining_length))

    rng.shuffle(password_chars)

    try:
        return password_chars.decode("utf-8")
    except UnicodeDecodeError as ex:
        logger.debug("generated bytes are not valid utf-8", exc_info=ex)
        raise PasswordDecodeError() from ex
