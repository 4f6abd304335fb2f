from dataclasses import dataclass, field

from typing_extensions import TypedDict, override

__all__ = (
    "RandpassError",
    "NoValidCharsError",
    "InvalidRegexError",
    "RegexMatchesNoCharsError",
    "TooManyExtraCharsError",
    "PasswordEntropyInsufficientError",
    "PasswordDecodeError",
)


@dataclass(slots=True)
class RandpassError(Exception):
    """
    Base exception for all randpass errors.
    """

    class Context(TypedDict): ...

    message: str = "error"
    ctx: Context | None = None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class NoValidCharsError(RandpassError):
    """Raised when the charset derived from the criteria and extra chars is empty."""

    message: str = "no valid characters left in the charset"


@dataclass(slots=True)
class InvalidRegexError(RandpassError):
    class Context(TypedDict):
        pattern: str
        reason: str

    message: str = "invalid regex pattern"
    ctx: Context | None = None


@dataclass(slots=True)
class RegexMatchesNoCharsError(RandpassError):
    """
    Raised when a regex pattern compiles but none of the printable ASCII characters
    satisfies it.
    """

    class Context(TypedDict):
        pattern: str

    message: str = "no valid characters found for the provided regex"
    ctx: Context | None = None


@dataclass(slots=True)
class TooManyExtraCharsError(RandpassError):
    """
    Raised when the extra characters that must appear in the password outnumber the
    requested password length.
    """

    class Context(TypedDict):
        password_length: int
        extra_chars: int

    message: str = "too many extra characters"
    ctx: Context | None = None


@dataclass(slots=True)
class PasswordEntropyInsufficientError(RandpassError):
    """
    Raised by callers that refuse to emit passwords below the entropy threshold.

    The computed entropy is available as ``ctx["entropy"]``.
    """

    class Context(TypedDict):
        entropy: float

    message: str = "your password has only {ctx[entropy]:.2f} bits of entropy"
    ctx: Context = field(default_factory=lambda: {"entropy": 0.0})

    @property
    def entropy(self) -> float:
        return self.ctx["entropy"]


@dataclass(slots=True)
class PasswordDecodeError(RandpassError):
    """Raised when the generated bytes are not valid UTF-8 text."""
