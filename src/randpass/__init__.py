__all__ = (
    "criteria",
    "exc",
    "PasswordCriteria",
    "Alphanumeric",
    "UppercaseAndDigitsOnly",
    "LowercaseAndDigitsOnly",
    "DigitsOnly",
    "AllPrintableChars",
    "BaseCharset",
    "RegexPattern",
    "RandpassError",
    "NoValidCharsError",
    "InvalidRegexError",
    "RegexMatchesNoCharsError",
    "TooManyExtraCharsError",
    "PasswordEntropyInsufficientError",
    "PasswordDecodeError",
    "create_charset",
    "calculate_char_multiplicities",
    "ENTROPY_THRESHOLD",
    "calculate_entropy",
    "calculate_password_entropy",
    "suggest_password_length",
    "RandomSource",
    "SystemRandomSource",
    "create_password",
)
__version__ = "0.1.0"

from . import criteria, exc
from .charset import calculate_char_multiplicities, create_charset
from .criteria import (
    AllPrintableChars,
    Alphanumeric,
    BaseCharset,
    DigitsOnly,
    LowercaseAndDigitsOnly,
    PasswordCriteria,
    RegexPattern,
    UppercaseAndDigitsOnly,
)
from .entropy import (
    ENTROPY_THRESHOLD,
    calculate_entropy,
    calculate_password_entropy,
    suggest_password_length,
)
from .exc import (
    InvalidRegexError,
    NoValidCharsError,
    PasswordDecodeError,
    PasswordEntropyInsufficientError,
    RandpassError,
    RegexMatchesNoCharsError,
    TooManyExtraCharsError,
)
from .generator import RandomSource, SystemRandomSource, create_password
