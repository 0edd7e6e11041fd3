"""Events that the bot reacts to."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Optional

from borsbot.commands import CommitSha


class WorkflowStatus(Enum):
    """State of a CI workflow."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class WorkflowType(Enum):
    """Where a CI workflow runs."""

    GITHUB = "github"
    EXTERNAL = "external"


class BorsGlobalEvent(Enum):
    """Events that concern the bot as a whole."""

    INSTALLATIONS_CHANGED = "installations_changed"
    """The repositories of the bot's app installation have changed."""
    REFRESH = "refresh"
    """Periodic event for checking timeouts and similar state."""


@dataclass(frozen=True)
class BorsRepositoryEvent:
    """Base of every event that belongs to a single repository."""

    repository: str


@dataclass(frozen=True)
class PullRequestComment(BorsRepositoryEvent):
    """A comment was posted on a pull request."""

    author: Any
    pr_number: int
    text: str
    html_url: str


@dataclass(frozen=True)
class PullRequestPushed(BorsRepositoryEvent):
    """A new commit was pushed to the pull request branch."""

    pull_request: Any


@dataclass(frozen=True)
class PullRequestEdited(BorsRepositoryEvent):
    """The pull request was edited by its author."""

    pull_request: Any
    from_base_sha: Optional[CommitSha] = None


@dataclass(frozen=True)
class PullRequestOpened(BorsRepositoryEvent):
    """A pull request was opened."""

    pull_request: Any
    draft: bool = False


@dataclass(frozen=True)
class PullRequestClosed(BorsRepositoryEvent):
    """A pull request was closed."""

    pull_request: Any


@dataclass(frozen=True)
class PullRequestMerged(BorsRepositoryEvent):
    """A pull request was merged."""

    pull_request: Any


@dataclass(frozen=True)
class PullRequestReopened(BorsRepositoryEvent):
    """A pull request was reopened."""

    pull_request: Any


@dataclass(frozen=True)
class PullRequestConvertedToDraft(BorsRepositoryEvent):
    """A pull request was converted to a draft."""

    pull_request: Any


@dataclass(frozen=True)
class PullRequestReadyForReview(BorsRepositoryEvent):
    """A pull request was marked ready for review."""

    pull_request: Any


@dataclass(frozen=True)
class PushToBranch(BorsRepositoryEvent):
    """Something was pushed to, or deleted from, a branch."""

    branch: str


@dataclass(frozen=True)
class WorkflowStarted(BorsRepositoryEvent):
    """A workflow or external check run has started."""

    name: str
    branch: str
    commit_sha: CommitSha
    run_id: int
    workflow_type: WorkflowType
    url: str


@dataclass(frozen=True)
class WorkflowCompleted(BorsRepositoryEvent):
    """A workflow or external check run has completed."""

    branch: str
    commit_sha: CommitSha
    run_id: int
    status: WorkflowStatus
    running_time: Optional[timedelta] = None


@dataclass(frozen=True)
class CheckSuiteCompleted(BorsRepositoryEvent):
    """A check suite has completed."""

    branch: str
    commit_sha: CommitSha