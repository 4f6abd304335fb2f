from dataclasses import dataclass
from typing import IO, Any, Optional

import click
from typing_extensions import TypedDict, override

from . import output


class Location(TypedDict):
    filename: str


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    Signals that an error has occurred in the application.

    Provides an `exit_code` attribute for specifying a specific exit code, and a
    `message` attribute containing a human-readable description of the error.

    Warning:
        Allowed exit codes are defined in the Advanced Bash-Scripting Guide at
        https://tldp.org/LDP/abs/html/exitcodes.html. Note that user-defined exit
        codes are restricted to the range 64 - 113.
    """

    message: str
    exit_code: int = 1

    @override
    def show(self, file: Optional[IO[Any]] = None) -> None:
        output.print_error(self.format_message())


@dataclass(slots=True)
class ConfigError(CLIError):
    pass


@dataclass(slots=True, kw_only=True)
class ConfigSyntaxError(ConfigError):
    class Context(TypedDict):
        loc: Location

    ctx: Context

    @override
    def format_message(self) -> str:
        return "decoding failed for configuration file %r\n\n%s" % (
            self.ctx["loc"]["filename"],
            self.message,
        )


@dataclass(slots=True, kw_only=True)
class ConfigValidationError(ConfigError):
    @override
    def format_message(self) -> str:
        return "invalid configuration input\n\n%s" % self.message
