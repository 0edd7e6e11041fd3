import json
from dataclasses import dataclass

from borsbot.commands import CommitSha
from borsbot.comment import (
    Comment,
    TryBuildCompleted,
    cant_find_last_parent_comment,
    no_try_build_in_progress_comment,
    try_build_cancelled_comment,
    try_build_in_progress_comment,
    try_build_succeeded_comment,
    unclean_try_build_cancelled_comment,
    workflow_failed_comment,
)
from borsbot.events import WorkflowStatus

SHA = CommitSha("ea9c1b050cc8b420c2c211d2177811e564a4dc60")


@dataclass
class Workflow:
    name: str
    url: str
    status: WorkflowStatus


WORKFLOWS = [
    Workflow("build", "https://ci.example.com/1", WorkflowStatus.SUCCESS),
    Workflow("lint", "https://ci.example.com/2", WorkflowStatus.FAILURE),
]


def test_render_without_metadata_is_text():
    assert Comment("hello").render() == "hello"


def test_metadata_json_round_trip():
    data = json.loads(TryBuildCompleted(merge_sha=str(SHA)).to_json())
    assert data == {"type": "TryBuildCompleted", "merge_sha": str(SHA)}


def test_metadata_json_is_compact_and_tag_first():
    encoded = TryBuildCompleted(merge_sha="abc").to_json()
    assert " " not in encoded
    assert encoded.startswith('{"type":"TryBuildCompleted"')


def test_render_with_metadata_appends_homu_comment():
    metadata = TryBuildCompleted(merge_sha=str(SHA))
    rendered = Comment("text", metadata).render()
    assert rendered == f"text\n<!-- homu: {metadata.to_json()} -->"


def test_try_build_succeeded_comment():
    comment = try_build_succeeded_comment(WORKFLOWS, SHA)
    assert comment.text == (
        ":sunny: Try build successful\n"
        "- [build](https://ci.example.com/1) :white_check_mark:\n"
        "- [lint](https://ci.example.com/2) :x:\n"
        f"Build commit: {SHA} (`{SHA}`)"
    )
    assert comment.metadata == TryBuildCompleted(merge_sha=str(SHA))
    assert "<!-- homu: " in comment.render()


def test_workflow_failed_comment():
    comment = workflow_failed_comment(WORKFLOWS)
    assert comment.text == (
        ":broken_heart: Test failed\n"
        "- [build](https://ci.example.com/1) :white_check_mark:\n"
        "- [lint](https://ci.example.com/2) :x:"
    )
    assert comment.render() == comment.text


def test_pending_workflow_is_not_marked_success():
    pending = [Workflow("w", "u", WorkflowStatus.PENDING)]
    assert workflow_failed_comment(pending).text.endswith("- [w](u) :x:")


def test_try_build_cancelled_comment_lists_urls():
    comment = try_build_cancelled_comment(iter(["a", "b"]))
    assert comment.text == "Try build cancelled.\nCancelled workflows:\n- a\n- b"


def test_try_build_cancelled_comment_without_urls():
    assert (
        try_build_cancelled_comment([]).text
        == "Try build cancelled.\nCancelled workflows:"
    )


def test_fixed_comments():
    assert try_build_in_progress_comment().text == (
        ":exclamation: A try build is currently in progress. "
        "You can cancel it using @bors try cancel."
    )
    assert cant_find_last_parent_comment().text == (
        ":exclamation: There was no previous build. Please set an explicit parent "
        "or remove the `parent=last` argument to use the default parent."
    )
    assert (
        no_try_build_in_progress_comment().text
        == ":exclamation: There is currently no try build in progress."
    )
    assert (
        unclean_try_build_cancelled_comment().text
        == "Try build was cancelled. It was not possible to cancel some workflows."
    )
    assert unclean_try_build_cancelled_comment().metadata is None