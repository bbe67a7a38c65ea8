"""
The changelog pipeline.

:func:`build_changelog` resolves the latest tag, collects the commits
since that tag, classifies them, and renders the changelog text. Run-level
conditions that leave nothing to render are reported through
:class:`NoCommitsFound` and :class:`NoValidCommits`. When every commit is
filtered out by the configuration the result is simply empty, which
callers report as a warning rather than a failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from vc_release_notes.context import RunContext
from vc_release_notes.grouping.commit_classifier import classify_commits
from vc_release_notes.grouping.group_model import ClassificationResult
from vc_release_notes.history.model import HistorySource, ReleaseTag
from vc_release_notes.history.traversal import find_release_commits
from vc_release_notes.render.composer import compose
from vc_release_notes.render.template import render


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class NoCommitsFound(Exception):
    """Raised when no commits exist since the latest tag."""

    pass


class NoValidCommits(Exception):
    """Raised when none of the collected commits is a usable conventional commit."""

    pass


@dataclass
class ChangelogResult:
    """Rendered changelog and the data it was built from."""

    lines: List[str]
    text: str
    latest_tag: Optional[ReleaseTag]
    commit_count: int
    classification: ClassificationResult

    @property
    def has_changes(self) -> bool:
        return bool(self.lines)


def build_changelog(context: RunContext, source: HistorySource) -> ChangelogResult:
    """Run the full pipeline for ``context`` using ``source`` as history provider.

    Raises
    ------
    HistoryUnavailable
        If the history provider fails.
    NoCommitsFound
        If the history since the latest tag is empty.
    NoValidCommits
        If every commit was skipped or is not conventional.
    """
    latest_tag = source.resolve_latest_tag()
    if latest_tag is not None:
        logger.info("Using tag %s (%s) as the history boundary", latest_tag.name, latest_tag.commit_id)
    else:
        logger.info("No tag found, building history from the first commit")

    commits = find_release_commits(source, latest_tag)
    if not commits:
        raise NoCommitsFound("No commits found since the latest tag or the start of the history")
    logger.info("Collected %d commit(s) from %s@%s", len(commits), context.full_name, context.branch)

    classification = classify_commits(commits, context.config)
    if not classification.parsed:
        raise NoValidCommits(
            f"None of {len(commits)} commit(s) is a valid conventional commit "
            f"({classification.skipped_count} skipped, {classification.failed_count} not conventional)"
        )

    lines = compose(classification.parsed, classification.breaking, context.config, context.use_icons)
    text = render(context.config.template, lines) if lines else ""
    return ChangelogResult(
        lines=lines,
        text=text,
        latest_tag=latest_tag,
        commit_count=len(commits),
        classification=classification,
    )
