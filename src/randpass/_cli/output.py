"""
Messages for the person running the command.

Messages go to stderr so that stdout only ever carries passwords. Labels are
coloured and the text is wrapped to the terminal width when stderr is a terminal;
otherwise the plain ``label: text`` form is written, wrapped at 80 columns.
"""

from enum import StrEnum

from rich.console import Console
from rich.text import Text

__all__ = ("print_info", "print_hint", "print_warning", "print_error")


class LabelStyle(StrEnum):
    INFO = "bold cyan"
    HINT = "bold green"
    WARNING = "bold yellow"
    ERROR = "bold red"


def _console() -> Console:
    # per call, so that redirected streams are picked up
    return Console(stderr=True, highlight=False)


def _print(label: str, style: LabelStyle, text: str) -> None:
    _console().print(
        Text.assemble((f"{label}:", style.value), " ", (text, "bold")),
    )


def print_info(text: str) -> None:
    _print("info", LabelStyle.INFO, text)


def print_hint(text: str) -> None:
    _print("hint", LabelStyle.HINT, text)


def print_warning(text: str) -> None:
    _print("warning", LabelStyle.WARNING, text)


def print_error(text: str) -> None:
    _print("error", LabelStyle.ERROR, text)
