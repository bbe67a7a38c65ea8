"""
Conventional Commits grammar.

Parses messages of the form::

    type(scope)!: subject

    optional body paragraphs

    Token: footer value
    BREAKING CHANGE: description

The scope and ``!`` are optional. Footer notes start after a blank line
(or directly after the header) with a ``Token: value`` or ``Token #value``
line; lines that follow belong to the same note until the next token.
``BREAKING-CHANGE`` is accepted as a synonym of ``BREAKING CHANGE``, and
its value may follow the colon directly or start on the next line. Other
tokens need whitespace after the colon, so text such as ``https://...``
stays in the body.

Parsing never raises: :func:`parse_commit_message` returns a
:class:`ParseResult` that either carries a :class:`ConventionalMessage`
or the reason the message is not conventional.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from vc_release_notes.grouping.group_model import BREAKING_CHANGE_TITLE, ConventionalMessage, Note

HEADER_RE = re.compile(
    r"^(?P<type>[^\s():!]+)"
    r"(?:\((?P<scope>[^()\r\n]+)\))?"
    r"(?P<breaking>!)?"
    r":[ \t]*(?P<subject>\S.*)$"
)
FOOTER_RE = re.compile(
    r"^(?P<token>BREAKING[ -]CHANGE(?=:|[ \t]+#)|[\w-]+(?=:(?:[ \t]|$)|[ \t]+#))"
    r"(?::[ \t]*|[ \t]+#)(?P<text>.*)$"
)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a single commit message."""

    message: Optional[ConventionalMessage] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.message is not None


def _normalize_token(token: str) -> str:
    if token in ("BREAKING CHANGE", "BREAKING-CHANGE"):
        return BREAKING_CHANGE_TITLE
    return token


def _split_body_and_notes(lines: List[str]) -> Tuple[str, List[Note]]:
    body: List[str] = []
    notes: List[Tuple[str, List[str]]] = []
    current: Optional[Tuple[str, List[str]]] = None
    previous_blank = True
    for line in lines:
        footer = FOOTER_RE.match(line)
        if footer and (previous_blank or current is not None):
            current = (_normalize_token(footer.group("token")), [footer.group("text")])
            notes.append(current)
        elif current is not None:
            current[1].append(line)
        else:
            body.append(line)
        previous_blank = not line.strip()
    return (
        "\n".join(body).strip(),
        [Note(title=title, text="\n".join(text).strip()) for title, text in notes],
    )


def parse_commit_message(message: str) -> ParseResult:
    """Parse ``message`` against the Conventional Commits grammar.

    Parameters
    ----------
    message : str
        Full commit message, header first.

    Returns
    -------
    ParseResult
        ``ok`` with the parsed message, or an ``error`` describing why the
        header does not match.

    Examples
    --------
    >>> parse_commit_message("fix(api): handle empty body").message.scope
    'api'
    >>> parse_commit_message("Merge branch 'main'").ok
    False
    """
    text = (message or "").replace("\r\n", "\n").strip()
    if not text:
        return ParseResult(error="empty commit message")

    lines = text.split("\n")
    header = HEADER_RE.match(lines[0].strip())
    if header is None:
        return ParseResult(error=f"header does not match 'type(scope): subject': {lines[0]!r}")

    subject = header.group("subject").strip()
    body, notes = _split_body_and_notes(lines[1:])
    has_breaking_note = any(note.title == BREAKING_CHANGE_TITLE for note in notes)
    if header.group("breaking") and not has_breaking_note:
        notes.append(Note(title=BREAKING_CHANGE_TITLE, text=subject))

    return ParseResult(
        message=ConventionalMessage(
            type=header.group("type"),
            scope=header.group("scope"),
            subject=subject,
            body=body,
            notes=tuple(notes),
            breaking=bool(header.group("breaking")) or has_breaking_note,
        )
    )
