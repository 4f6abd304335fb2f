from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = (
    "AbstractCriteria",
    "Alphanumeric",
    "UppercaseAndDigitsOnly",
    "LowercaseAndDigitsOnly",
    "DigitsOnly",
    "AllPrintableChars",
    "BaseCharset",
    "RegexPattern",
    "PasswordCriteria",
)


class AbstractCriteria(BaseModel):
    """
    Defines which characters a password may be built from.

    Criteria are immutable values; two criteria with the same fields are equal.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str


class Alphanumeric(AbstractCriteria):
    """Allows letters and digits."""

    kind: Literal["alphanumeric"] = "alphanumeric"


class UppercaseAndDigitsOnly(AbstractCriteria):
    """Allows only uppercase letters and digits."""

    kind: Literal["uppercase_and_digits_only"] = "uppercase_and_digits_only"


class LowercaseAndDigitsOnly(AbstractCriteria):
    """Allows only lowercase letters and digits."""

    kind: Literal["lowercase_and_digits_only"] = "lowercase_and_digits_only"


class DigitsOnly(AbstractCriteria):
    """Allows only digits."""

    kind: Literal["digits_only"] = "digits_only"


class AllPrintableChars(AbstractCriteria):
    """Allows all printable ASCII characters, space included."""

    kind: Literal["all_printable_chars"] = "all_printable_chars"


class BaseCharset(AbstractCriteria):
    """
    Uses a custom base character set.

    The bytes are taken verbatim and are not restricted to printable ASCII.
    """

    kind: Literal["base_charset"] = "base_charset"
    charset: bytes


class RegexPattern(AbstractCriteria):
    """
    Allows every printable ASCII character that, taken on its own, matches
    ``pattern``.
    """

    kind: Literal["regex_pattern"] = "regex_pattern"
    pattern: str


PasswordCriteria = Annotated[
    Union[
        Alphanumeric,
        UppercaseAndDigitsOnly,
        LowercaseAndDigitsOnly,
        DigitsOnly,
        AllPrintableChars,
        BaseCharset,
        RegexPattern,
    ],
    Field(discriminator="kind"),
]
