"""Comments that the bot posts to pull requests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from borsbot.commands import CommitSha
from borsbot.events import WorkflowStatus


class _Workflow(Protocol):
    name: str
    url: str
    status: WorkflowStatus


@dataclass(frozen=True)
class TryBuildCompleted:
    """Metadata attached to the comment announcing a finished try build."""

    merge_sha: str

    def to_json(self) -> str:
        """Serialize as compact JSON with a leading ``type`` tag."""
        return json.dumps(
            {"type": "TryBuildCompleted", "merge_sha": self.merge_sha},
            separators=(",", ":"),
        )


@dataclass(frozen=True)
class Comment:
    """A comment that can be posted to a pull request."""

    text: str
    metadata: Optional[TryBuildCompleted] = None

    def render(self) -> str:
        """Return the comment body, with metadata in an HTML comment if present."""
        if self.metadata is not None:
            return f"{self.text}\n<!-- homu: {self.metadata.to_json()} -->"
        return self.text


def _list_workflows_status(workflows: Iterable[_Workflow]) -> str:
    return "\n".join(
        f"- [{w.name}]({w.url}) "
        + (":white_check_mark:" if w.status == WorkflowStatus.SUCCESS else ":x:")
        for w in workflows
    )


def try_build_succeeded_comment(
    workflows: Iterable[_Workflow], commit_sha: CommitSha
) -> Comment:
    """Announce a successful try build."""
    status = _list_workflows_status(workflows)
    return Comment(
        text=(
            ":sunny: Try build successful\n"
            f"{status}\n"
            f"Build commit: {commit_sha} (`{commit_sha}`)"
        ),
        metadata=TryBuildCompleted(merge_sha=str(commit_sha)),
    )


def try_build_in_progress_comment() -> Comment:
    return Comment(
        ":exclamation: A try build is currently in progress. "
        "You can cancel it using @bors try cancel."
    )


def cant_find_last_parent_comment() -> Comment:
    return Comment(
        ":exclamation: There was no previous build. Please set an explicit parent "
        "or remove the `parent=last` argument to use the default parent."
    )


def no_try_build_in_progress_comment() -> Comment:
    return Comment(":exclamation: There is currently no try build in progress.")


def unclean_try_build_cancelled_comment() -> Comment:
    return Comment(
        "Try build was cancelled. It was not possible to cancel some workflows."
    )


def try_build_cancelled_comment(workflow_urls: Iterable[str]) -> Comment:
    """Announce a cancelled try build, listing the cancelled workflows."""
    lines = ["Try build cancelled.\nCancelled workflows:"]
    lines.extend(f"- {url}" for url in workflow_urls)
    return Comment("\n".join(lines))


def workflow_failed_comment(workflows: Iterable[_Workflow]) -> Comment:
    """Announce a failed build with the status of each workflow."""
    return Comment(f":broken_heart: Test failed\n{_list_workflows_status(workflows)}")