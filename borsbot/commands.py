"""Bot commands and the values they carry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class CommitSha:
    """The SHA of a git commit."""

    sha: str

    def __str__(self) -> str:
        return self.sha


class DelegatedPermission(Enum):
    """What a reviewer has delegated to the pull request author."""

    TRY = "try"
    REVIEW = "review"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value: str) -> "DelegatedPermission":
        """Parse a delegation type, raising ValueError for unknown values."""
        for permission in cls:
            if permission.value == value:
                return permission
        raise ValueError(
            f"Invalid delegation type `{value}`. Possible values are try/review"
        )


class RollupMode(Enum):
    """How a pull request may take part in rollups."""

    ALWAYS = "always"
    IFFY = "iffy"
    MAYBE = "maybe"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value: str) -> "RollupMode":
        """Parse a rollup mode, raising ValueError for unknown values."""
        for mode in cls:
            if mode.value == value:
                return mode
        raise ValueError(
            f"Invalid rollup mode `{value}`. "
            "Possible values are always/iffy/never/maybe"
        )


@dataclass(frozen=True)
class LastParent:
    """Use the parent of the previous build (``parent=last``)."""


Parent = Union[CommitSha, LastParent]


@dataclass(frozen=True)
class Myself:
    """The approver is the author of the comment."""


@dataclass(frozen=True)
class Specified:
    """The approver is named explicitly."""

    name: str


Approver = Union[Myself, Specified]


class BorsCommand:
    """Base of every command a user can give the bot."""

    __slots__ = ()


@dataclass(frozen=True)
class Approve(BorsCommand):
    """Approve a pull request."""

    approver: Approver
    priority: Optional[int] = None
    rollup: Optional[RollupMode] = None


@dataclass(frozen=True)
class Unapprove(BorsCommand):
    """Withdraw an approval."""


@dataclass(frozen=True)
class Help(BorsCommand):
    """Print help."""


@dataclass(frozen=True)
class Ping(BorsCommand):
    """Ping the bot."""


@dataclass(frozen=True)
class Try(BorsCommand):
    """Perform a try build."""

    parent: Optional[Parent] = None
    jobs: tuple[str, ...] = ()


@dataclass(frozen=True)
class TryCancel(BorsCommand):
    """Cancel a running try build."""


@dataclass(frozen=True)
class SetPriority(BorsCommand):
    """Set the priority of a pull request."""

    priority: int


@dataclass(frozen=True)
class Info(BorsCommand):
    """Show information about the pull request."""


@dataclass(frozen=True)
class SetDelegate(BorsCommand):
    """Delegate authority to the pull request author."""

    permission: DelegatedPermission


@dataclass(frozen=True)
class Undelegate(BorsCommand):
    """Revoke a previous delegation."""


@dataclass(frozen=True)
class SetRollupMode(BorsCommand):
    """Set the rollup mode of a pull request."""

    mode: RollupMode


@dataclass(frozen=True)
class OpenTree(BorsCommand):
    """Open the repository tree for merging."""


@dataclass(frozen=True)
class TreeClosed(BorsCommand):
    """Close the tree below the given priority."""

    priority: int