from __future__ import annotations

"""Turn raw CLI tokens into a validated OperationRequest."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from fileops.services.path_encoding import check_path


class Action(str, Enum):
    COPY = "copy"
    MOVE = "move"
    DELETE = "delete"


class UsageError(ValueError):
    """Malformed or insufficient arguments. Always reported with usage text."""


FLAG_FROM = "--from"
FLAG_TO = "--to"
FLAG_SHOW_ERRORS = "--show-errors"

USAGE = (
    "\n"
    "usage: (action is one of: copy, move, delete)\n"
    "  fileops <action> --from <sourcePath> [sourcePath]* --to <directoryPath>\n"
    "  fileops <action> --from <sourcePath> [sourcePath]* --to <destPath> [destPath]*\n"
    "  fileops delete --from <sourcePath> [sourcePath]*"
)


@dataclass(frozen=True)
class OperationRequest:
    action: Action
    sources: Tuple[str, ...]
    destinations: Tuple[str, ...] = ()
    show_error_dialog: bool = False

    @property
    def multi_destination(self) -> bool:
        """True when destinations pair one-to-one with sources."""
        return len(self.destinations) > 1

    @property
    def pairs(self) -> List[Tuple[str, Optional[str]]]:
        """(source, destination) pairs as the shell will apply them.

        No destinations: each source stands alone (delete). One destination:
        every source goes to it. Otherwise positional.
        """
        if not self.destinations:
            return [(s, None) for s in self.sources]
        if len(self.destinations) == 1:
            return [(s, self.destinations[0]) for s in self.sources]
        return list(zip(self.sources, self.destinations))


@dataclass
class ParsedArgs:
    action: str = ""
    sources: List[str] = field(default_factory=list)
    destinations: List[str] = field(default_factory=list)
    show_errors: bool = False


def split_tokens(tokens: Sequence[str]) -> ParsedArgs:
    """Sort tokens into action / --from / --to buckets.

    Unknown --flags are skipped so newer callers can pass options this
    version doesn't know about.
    """
    parsed = ParsedArgs()
    section = "action"
    for arg in tokens:
        if arg == FLAG_FROM:
            section = "from"
            continue
        if arg == FLAG_TO:
            section = "to"
            continue
        if arg == FLAG_SHOW_ERRORS:
            parsed.show_errors = True
            continue
        if arg.startswith("--"):
            continue

        if section == "action":
            # later action tokens replace earlier ones
            parsed.action = arg
        elif section == "from":
            parsed.sources.append(arg)
        else:
            parsed.destinations.append(arg)
    return parsed


def validate(action: str, sources: Sequence[str], destinations: Sequence[str]) -> Action:
    """Check the arity rules; returns the Action or raises UsageError."""
    if not action:
        raise UsageError("error: action is required")

    try:
        act = Action(action)
    except ValueError:
        raise UsageError("error: action must be one of: copy, move, delete") from None

    if len(sources) == 0:
        raise UsageError("error: at least one source path is required")

    if act is Action.DELETE:
        if len(destinations) > 0:
            raise UsageError("error: cannot specify destination path when action is delete")
    elif len(destinations) == 0:
        raise UsageError("error: at least one destination path is required when action is not delete")

    if len(destinations) > len(sources):
        raise UsageError(
            "error: number of destination paths cannot be more than number of source paths"
        )

    if len(sources) > 1 and len(destinations) > 1 and len(sources) != len(destinations):
        raise UsageError(
            "error: number of source and destination paths must match "
            "when more than one destination path is specified"
        )

    if not all(check_path(p) for p in list(sources) + list(destinations)):
        raise UsageError("error: paths must be non-empty and must not contain NUL characters")

    return act


def build_request(tokens: Sequence[str]) -> OperationRequest:
    parsed = split_tokens(tokens)
    act = validate(parsed.action, parsed.sources, parsed.destinations)
    return OperationRequest(
        action=act,
        sources=tuple(parsed.sources),
        destinations=tuple(parsed.destinations),
        show_error_dialog=parsed.show_errors,
    )
