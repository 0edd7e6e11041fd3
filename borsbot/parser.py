"""Parsing bot commands out of comment text."""

from __future__ import annotations

import re
from typing import Callable, Optional, Sequence, Union

from borsbot.commands import (
    Approve,
    Approver,
    BorsCommand,
    CommitSha,
    DelegatedPermission,
    Help,
    Info,
    LastParent,
    Myself,
    OpenTree,
    Parent,
    Ping,
    RollupMode,
    SetDelegate,
    SetPriority,
    SetRollupMode,
    Specified,
    TreeClosed,
    Try,
    TryCancel,
    Unapprove,
    Undelegate,
)
from borsbot.parts import (
    Bare,
    CommandParseError,
    CommandPart,
    KeyValue,
    MissingArgValue,
    MissingCommand,
    UnknownArg,
    UnknownCommand,
    ValidationError,
    parse_parts,
)

_PRIORITY_MAX = 2**32 - 1
_PRIORITY_RE = re.compile(r"\+?[0-9]+")
_MAX_TRY_JOBS = 10

ParseOutcome = Union[BorsCommand, CommandParseError]


class CommandParser:
    """Finds commands that follow a given prefix in comment text."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def parse_commands(self, text: str) -> list[ParseOutcome]:
        """Parse every line of ``text`` that contains the prefix.

        Each line yields at most one entry: the parsed command, or the
        CommandParseError describing why it could not be parsed.
        """
        results: list[ParseOutcome] = []
        for line in _lines(text):
            index = line.find(self.prefix)
            if index < 0:
                continue
            try:
                results.append(parse_command(line[index + len(self.prefix):]))
            except CommandParseError as error:
                results.append(error)
        return results


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_command(text: str) -> BorsCommand:
    """Parse a single command from the text following the prefix.

    Raises a CommandParseError subclass when the command is invalid.
    """
    parts = parse_parts(text)
    if not parts:
        raise MissingCommand()
    command, arguments = parts[0], parts[1:]
    for parser in _PARSERS:
        result = parser(command, arguments)
        if result is not None:
            return result
    unknown = command.text if isinstance(command, Bare) else command.key
    raise UnknownCommand(unknown)


def _parse_priority_value(value: str) -> int:
    if _PRIORITY_RE.fullmatch(value):
        priority = int(value)
        if priority <= _PRIORITY_MAX:
            return priority
    raise ValidationError("Priority must be a non-negative integer")


def _find_priority(parts: Sequence[CommandPart]) -> Optional[int]:
    for part in parts:
        if isinstance(part, KeyValue) and part.key in ("p", "priority"):
            return _parse_priority_value(part.value)
    return None


def _find_rollup(parts: Sequence[CommandPart]) -> Optional[RollupMode]:
    for part in parts:
        if part == Bare("rollup-"):
            return RollupMode.MAYBE
        if part == Bare("rollup"):
            return RollupMode.ALWAYS
        if isinstance(part, KeyValue) and part.key == "rollup":
            try:
                return RollupMode.from_str(part.value)
            except ValueError as error:
                raise ValidationError(str(error)) from None
    return None


def _parse_sha(value: str) -> CommitSha:
    if len(value.encode()) != 40:
        raise ValueError("SHA must have exactly 40 characters")
    return CommitSha(value)


def _approval(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    approver: Approver
    if command == Bare("r+"):
        approver = Myself()
    elif isinstance(command, KeyValue) and command.key == "r":
        if not command.value:
            raise MissingArgValue("r")
        approver = Specified(command.value)
    else:
        return None
    priority = _find_priority(parts)
    rollup = _find_rollup(parts)
    return Approve(approver=approver, priority=priority, rollup=rollup)


def _unapprove(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Unapprove() if command == Bare("r-") else None


def _rollup(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    mode = _find_rollup([command])
    return None if mode is None else SetRollupMode(mode)


def _priority(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    priority = _find_priority([command])
    return None if priority is None else SetPriority(priority)


def _try_cancel(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command == Bare("try") and parts and parts[0] == Bare("cancel"):
        return TryCancel()
    return None


def _try(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command != Bare("try"):
        return None
    parent: Optional[Parent] = None
    jobs: tuple[str, ...] = ()
    for part in parts:
        if isinstance(part, Bare):
            raise UnknownArg(part.text)
        if part.key == "parent":
            if part.value == "last":
                parent = LastParent()
            else:
                try:
                    parent = _parse_sha(part.value)
                except ValueError as error:
                    raise ValidationError(
                        f"Try parent has to be a valid commit SHA: {error}"
                    ) from None
        elif part.key == "jobs":
            raw_jobs = tuple(part.value.split(","))
            if len(raw_jobs) > _MAX_TRY_JOBS:
                raise ValidationError("Try jobs must not have more than 10 jobs")
            jobs = raw_jobs
        else:
            raise UnknownArg(part.key)
    return Try(parent=parent, jobs=jobs)


def _delegate(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command == Bare("delegate+"):
        return SetDelegate(DelegatedPermission.REVIEW)
    if isinstance(command, KeyValue) and command.key == "delegate":
        try:
            return SetDelegate(DelegatedPermission.from_str(command.value))
        except ValueError as error:
            raise ValidationError(str(error)) from None
    return None


def _undelegate(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Undelegate() if command == Bare("delegate-") else None


def _info(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Info() if command == Bare("info") else None


def _help(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Help() if command == Bare("help") else None


def _ping(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Ping() if command == Bare("ping") else None


def _tree_ops(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command in (Bare("treeclosed-"), Bare("treeopen")):
        return OpenTree()
    if isinstance(command, KeyValue) and command.key == "treeclosed":
        return TreeClosed(_parse_priority_value(command.value))
    return None


_Parser = Callable[[CommandPart, Sequence[CommandPart]], Optional[BorsCommand]]

# The order matters: earlier parsers take precedence.
_PARSERS: tuple[_Parser, ...] = (
    _approval,
    _unapprove,
    _rollup,
    _priority,
    _try_cancel,
    _try,
    _delegate,
    _undelegate,
    _info,
    _help,
    _ping,
    _tree_ops,
)