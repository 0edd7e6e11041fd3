# borsbot

Building blocks for a merge bot that reacts to comments on pull requests:

- `borsbot.commands`: the commands a user can give, such as `Approve`, `Try`
  or `SetPriority`, and the values they carry (`CommitSha`, `RollupMode`,
  `DelegatedPermission`, `Myself`, `Specified`, `LastParent`)
- `borsbot.parts`: splitting a command line into `Bare` and `KeyValue` parts
  with `parse_parts`, and the `CommandParseError` family of errors
- `borsbot.parser`: `CommandParser` and `parse_command`
- `borsbot.events`: the events the bot handles (comments, pushes, workflow
  runs, check suites) and `BorsGlobalEvent`
- `borsbot.comment`: the comments the bot posts back
- `borsbot.context`: `BorsContext`, holding the parser, a database handle and
  the known repositories

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Parsing commands

`CommandParser` looks for its prefix on each line of a comment and parses what
follows it. Each line holding the prefix gives one result: either a command, or
the `CommandParseError` that explains why it could not be parsed.

```python
from borsbot.parser import CommandParser
from borsbot.commands import Approve, Myself, RollupMode
from borsbot.parts import UnknownCommand

parser = CommandParser("@bors")

results = parser.parse_commands("Looks good!\n@bors r+ p=1 rollup=iffy")
assert results == [Approve(approver=Myself(), priority=1, rollup=RollupMode.IFFY)]

assert parser.parse_commands("@bors foo") == [UnknownCommand("foo")]
```

`parse_command(text)` parses the text after a prefix directly and raises the
`CommandParseError` subclass instead of returning it.

Supported commands:

| Comment                               | Command |
|---------------------------------------|---------|
| `r+` / `r=<user>`                     | `Approve` (optional `p=`/`priority=`, `rollup`, `rollup-`, `rollup=<mode>`) |
| `r-`                                  | `Unapprove` |
| `try`                                 | `Try` (optional `parent=<40-character sha>`, `parent=last`, `jobs=a,b` with at most 10 jobs) |
| `try cancel`                          | `TryCancel` |
| `p=<n>` / `priority=<n>`              | `SetPriority` |
| `rollup`, `rollup-`, `rollup=<mode>`  | `SetRollupMode` (`always`, `maybe`, mode as given) |
| `delegate+`, `delegate=<try\|review>` | `SetDelegate` |
| `delegate-`                           | `Undelegate` |
| `info`, `help`, `ping`                | `Info`, `Help`, `Ping` |
| `treeopen`, `treeclosed-`             | `OpenTree` |
| `treeclosed=<n>`                      | `TreeClosed` |

Priorities must be non-negative integers no larger than 4294967295.

Errors are `MissingCommand`, `UnknownCommand`, `MissingArgValue`,
`UnknownArg`, `DuplicateArg` and `ValidationError`; errors of the same kind
with the same arguments compare equal.

Parsing stops at a word starting with `@`, so `@bors try @rust-timer queue` is
read as a plain `try`.

## Comments

```python
from borsbot.comment import try_build_cancelled_comment

comment = try_build_cancelled_comment(["https://ci.example.com/run/1"])
print(comment.render())
```

`try_build_succeeded_comment` attaches `TryBuildCompleted` metadata, which
`Comment.render` appends as a trailing HTML comment of the form
`<!-- homu: {"type":"TryBuildCompleted","merge_sha":"..."} -->`. The workflow
lists in it and in `workflow_failed_comment` take any objects with `name`,
`url` and `status` attributes, marking `WorkflowStatus.SUCCESS` with
`:white_check_mark:` and anything else with `:x:`.

## Context

`BorsContext(parser, db, repositories)` keeps the parser and database handle
as attributes. `get_repository(name)` returns a repository's state or `None`,
`set_repositories` replaces them all, and the `repositories` property returns a
copy; all three are guarded by a lock and may be called from several threads.

## What this package does not do

It does not talk to GitHub, receive webhooks, keep a database or run as a
service, and it has no command to start. Events, the database handle and
repository states are plain values that the caller supplies; nothing in the
package acts on parsed commands or posts comments.