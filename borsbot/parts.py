"""Splitting a command line into parts, and the errors of command parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class CommandParseError(Exception):
    """A bot command could not be parsed."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandParseError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MissingCommand(CommandParseError):
    """The prefix was given with no command after it."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Missing command"


class UnknownCommand(CommandParseError):
    """The command is not one the bot knows."""

    def __init__(self, command: str) -> None:
        super().__init__(command)
        self.command = command

    def __str__(self) -> str:
        return f"Unknown command `{self.command}`"


class MissingArgValue(CommandParseError):
    """A ``key=`` argument had no value."""

    def __init__(self, arg: str) -> None:
        super().__init__(arg)
        self.arg = arg

    def __str__(self) -> str:
        return f"Missing value for argument `{self.arg}`"


class UnknownArg(CommandParseError):
    """An argument is not accepted by the command."""

    def __init__(self, arg: str) -> None:
        super().__init__(arg)
        self.arg = arg

    def __str__(self) -> str:
        return f"Unknown argument `{self.arg}`"


class DuplicateArg(CommandParseError):
    """The same argument key was given twice."""

    def __init__(self, arg: str) -> None:
        super().__init__(arg)
        self.arg = arg

    def __str__(self) -> str:
        return f"Duplicate argument `{self.arg}`"


class ValidationError(CommandParseError):
    """An argument value was not valid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Bare:
    """A bare word such as ``try``."""

    text: str


@dataclass(frozen=True)
class KeyValue:
    """A ``key=value`` argument."""

    key: str
    value: str


CommandPart = Union[Bare, KeyValue]


def parse_parts(text: str) -> list[CommandPart]:
    """Split the text following the prefix into command parts.

    Parsing stops at the first word starting with ``@``, which addresses
    another bot. Raises MissingArgValue or DuplicateArg.
    """
    parts: list[CommandPart] = []
    seen_keys: set[str] = set()
    for item in text.split():
        if item.startswith("@"):
            break
        key, sep, value = item.partition("=")
        if not sep:
            parts.append(Bare(item))
            continue
        if not value:
            raise MissingArgValue(key)
        if key in seen_keys:
            raise DuplicateArg(key)
        seen_keys.add(key)
        parts.append(KeyValue(key, value))
    return parts