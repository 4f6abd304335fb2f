"""
Tests for configuration and criteria models
===========================================
"""

import os

import pydantic
import pytest
from pydantic import TypeAdapter

from randpass import criteria as c
from randpass._conf import DEFAULT_PASSWORD_LENGTH, Settings
from randpass.util.model import convert_errors


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("RANDPASS_"):
            monkeypatch.delenv(name)


class TestCriteria:
    """Tests for the criteria models."""

    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"kind": "alphanumeric"}, c.Alphanumeric()),
            ({"kind": "digits_only"}, c.DigitsOnly()),
            ({"kind": "all_printable_chars"}, c.AllPrintableChars()),
            ({"kind": "base_charset", "charset": "abc"}, c.BaseCharset(charset=b"abc")),
            (
                {"kind": "regex_pattern", "pattern": "[a-f]"},
                c.RegexPattern(pattern="[a-f]"),
            ),
        ],
    )
    def test_discriminated_union(self, payload, expected):
        assert TypeAdapter(c.PasswordCriteria).validate_python(payload) == expected

    def test_immutable(self):
        criteria = c.RegexPattern(pattern="[a-z]")
        with pytest.raises(pydantic.ValidationError):
            criteria.pattern = "[0-9]"

    def test_value_equality(self):
        assert c.BaseCharset(charset=b"ab") == c.BaseCharset(charset=b"ab")
        assert c.BaseCharset(charset=b"ab") != c.BaseCharset(charset=b"ba")


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.length == DEFAULT_PASSWORD_LENGTH
        assert settings.quantity == 1
        assert settings.criteria is None
        assert not (settings.quiet or settings.verbose or settings.fail)

    def test_criteria(self):
        settings = Settings(criteria={"kind": "regex_pattern", "pattern": "[0-9]"})
        assert settings.criteria == c.RegexPattern(pattern="[0-9]")

    def test_environment_beats_file_values(self, monkeypatch):
        monkeypatch.setenv("RANDPASS_LENGTH", "40")
        assert Settings(length=12).length == 40

    def test_extra_fields_are_forbidden(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(colour="red")

    def test_shell_environment_does_not_leak(self):
        assert not [name for name in os.environ if name.startswith("RANDPASS_")]
        assert not Settings().quiet
        assert Settings().extra_charset is None


class TestConvertErrors:
    """Tests for convert_errors."""

    def errors(self, **payload):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            Settings(**payload)
        return convert_errors(exc_info.value)

    def test_greater_than_equal(self):
        (error,) = self.errors(length=0)
        assert error["loc"] == ("length",)
        assert error["msg"] == "Input must be greater than or equal to 1"
        assert "ctx" not in error

    def test_unknown_criteria_kind(self):
        (error,) = self.errors(criteria={"kind": "emoji"})
        assert error["loc"] == ("criteria", "kind")
        assert error["type"] == "enum_value_out_of_range"
        assert error["msg"].startswith("Input must be set to one of the following")

    def test_missing_criteria_kind(self):
        (error,) = self.errors(criteria={"pattern": "[a-z]"})
        assert error["loc"] == ("criteria", "kind")
        assert error["msg"] == "Field is required"

    def test_criteria_field_location(self):
        (error,) = self.errors(criteria={"kind": "regex_pattern"})
        assert error["loc"] == ("criteria", "pattern")
        assert error["msg"] == "Field is required"

    def test_extra_field(self):
        (error,) = self.errors(colour="red")
        assert error["msg"] == "Extra fields not allowed"
