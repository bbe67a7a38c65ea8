"""
Composition of changelog lines from classified commits.

Groups are emitted in configuration order, each as a ``###`` heading
followed by one bullet per commit. Breaking changes always form the last
section. Every returned string is one output line; empty strings are
intentional blank lines.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from vc_release_notes.config.model import ChangelogConfig, GroupConfig
from vc_release_notes.grouping.group_model import BreakingChange, ParsedCommit

PR_SUFFIX_RE = re.compile(r"\(#(\d+)\)$")
BREAKING_CHANGES_TITLE = "КРИТИЧЕСКИЕ ИЗМЕНЕНИЯ"
BREAKING_CHANGES_ICON = ":boom:"
SHORT_SHA_LENGTH = 7


def build_subject(subject: str, author: str) -> str:
    """Attach author attribution to a commit subject.

    A trailing pull-request marker ``(#123)`` is replaced by
    ``*(PR #123 от @author)*``; any other subject gets
    ``*(коммит от @author)*`` appended.

    >>> build_subject("Add feature (#42)", "alice")
    'Add feature *(PR #42 от @alice)*'
    >>> build_subject("Add feature", "alice")
    'Add feature *(коммит от @alice)*'
    """
    if PR_SUFFIX_RE.search(subject):
        return PR_SUFFIX_RE.sub(lambda m: f"*(PR #{m.group(1)} от @{author})*", subject)
    return f"{subject} *(коммит от @{author})*"


def _heading(title: str, icon: str, use_icons: bool) -> str:
    if use_icons and icon:
        return f"### {icon} {title}"
    return f"### {title}"


def _commit_link(commit_id: str, url: str) -> str:
    return f"[`{commit_id[:SHORT_SHA_LENGTH]}`]({url})"


def _group_lines(group: GroupConfig, commits: Sequence[ParsedCommit], use_icons: bool) -> List[str]:
    lines = [_heading(group.title, group.icon or "", use_icons)]
    for commit in commits:
        scope = f"**{commit.scope}**: " if commit.scope else ""
        subject = build_subject(commit.subject, commit.author_login)
        lines.append(f"- {_commit_link(commit.commit_id, commit.url)} - {scope}{subject}")
    return lines


def _breaking_lines(breaking: Sequence[BreakingChange], use_icons: bool) -> List[str]:
    lines = [_heading(BREAKING_CHANGES_TITLE, BREAKING_CHANGES_ICON, use_icons)]
    for change in breaking:
        # two trailing spaces keep the markdown line breaks inside the bullet
        body = "  \n".join(f"  {line}" for line in change.text.split("\n"))
        subject = build_subject(change.subject, change.author_login)
        lines.append(f"- из-за {_commit_link(change.commit_id, change.url)} - {subject}:{body}")
    return lines


def compose(
    parsed: Sequence[ParsedCommit],
    breaking: Sequence[BreakingChange],
    config: ChangelogConfig,
    use_icons: bool,
) -> List[str]:
    """Build the changelog lines for ``parsed`` and ``breaking``.

    Parameters
    ----------
    parsed : Sequence[ParsedCommit]
        Classified commits, newest first.
    breaking : Sequence[BreakingChange]
        Breaking changes, newest first.
    config : ChangelogConfig
        Supplies group order, titles, icons and excluded types.
    use_icons : bool
        Whether headings carry the configured icons.

    Returns
    -------
    List[str]
        Output lines. Empty when no group matched and there are no
        breaking changes, meaning there is nothing to publish.
    """
    lines: List[str] = []
    for group in config.groups:
        if group.types & config.exclude_types:
            continue
        matching = [commit for commit in parsed if commit.type in group.types]
        if not matching:
            continue
        if lines:
            lines.append("")
        lines.extend(_group_lines(group, matching, use_icons))

    if breaking:
        lines.append("")
        lines.extend(_breaking_lines(breaking, use_icons))
    return lines
