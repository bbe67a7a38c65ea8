"""
Data models for classified commits.

A :class:`ParsedCommit` is a commit whose message follows the Conventional
Commits grammar, enriched with the identity of the commit it came from.
Footer notes titled ``BREAKING CHANGE`` are additionally lifted into
:class:`BreakingChange` records, which get their own changelog section.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

BREAKING_CHANGE_TITLE = "BREAKING CHANGE"


@dataclass(frozen=True)
class Note:
    """A footer note of a commit message, e.g. ``Refs: #12``."""

    title: str
    text: str


@dataclass(frozen=True)
class ConventionalMessage:
    """Grammar-level result of parsing one commit message.

    Attributes
    ----------
    type : str
        Commit type token, e.g. ``feat``.
    scope : Optional[str]
        Scope from ``type(scope): ...``, or ``None``.
    subject : str
        Text after the ``:`` on the header line.
    body : str
        Free-form text between the header and the footer notes.
    notes : Tuple[Note, ...]
        Footer notes in message order.
    breaking : bool
        True if the header carried ``!`` or a breaking-change note exists.
    """

    type: str
    subject: str
    scope: Optional[str] = None
    body: str = ""
    notes: Tuple[Note, ...] = ()
    breaking: bool = False


@dataclass(frozen=True)
class ParsedCommit:
    """A classified commit ready to be rendered into a changelog group."""

    type: str
    scope: Optional[str]
    subject: str
    commit_id: str
    url: str
    author_login: str
    author_url: str
    notes: Tuple[Note, ...] = ()


@dataclass(frozen=True)
class BreakingChange:
    """A breaking change announced by a commit."""

    commit_id: str
    url: str
    subject: str
    author_login: str
    author_url: str
    text: str


@dataclass
class ClassificationResult:
    """Output of :func:`~vc_release_notes.grouping.commit_classifier.classify_commits`."""

    parsed: List[ParsedCommit] = field(default_factory=list)
    breaking: List[BreakingChange] = field(default_factory=list)
    skipped_count: int = 0
    failed_count: int = 0
