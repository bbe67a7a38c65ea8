"""
Classification of raw commits into changelog entries.

Each commit is checked against the configured skip markers, then parsed
with :func:`~vc_release_notes.grouping.commit_parser.parse_commit_message`.
Commits that are skipped or not conventional are counted and dropped;
they never abort the run.
"""

from __future__ import annotations

import logging
from typing import Iterable

from vc_release_notes.config.model import ChangelogConfig
from vc_release_notes.grouping.commit_parser import parse_commit_message
from vc_release_notes.grouping.group_model import (
    BREAKING_CHANGE_TITLE,
    BreakingChange,
    ClassificationResult,
    ParsedCommit,
)
from vc_release_notes.history.model import RawCommit


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


def classify_commits(commits: Iterable[RawCommit], config: ChangelogConfig) -> ClassificationResult:
    """Classify ``commits`` against the Conventional Commits grammar.

    Parameters
    ----------
    commits : Iterable[RawCommit]
        Commits in history order (newest first).
    config : ChangelogConfig
        Supplies the skip markers.

    Returns
    -------
    ClassificationResult
        Parsed commits and breaking changes in input order, plus the
        number of skipped and non-conventional commits.
    """
    result = ClassificationResult()
    for commit in commits:
        if any(marker in commit.message for marker in config.skip_markers):
            logger.debug("Skipping commit %s: message contains a skip marker", commit.commit_id)
            result.skipped_count += 1
            continue

        outcome = parse_commit_message(commit.message)
        if not outcome.ok:
            logger.warning(
                "Skipping commit %s: not a conventional commit (%s)", commit.commit_id, outcome.error
            )
            result.failed_count += 1
            continue

        message = outcome.message
        result.parsed.append(
            ParsedCommit(
                type=message.type,
                scope=message.scope,
                subject=message.subject,
                commit_id=commit.commit_id,
                url=commit.url,
                author_login=commit.author_login,
                author_url=commit.author_url,
                notes=message.notes,
            )
        )
        for note in message.notes:
            if note.title == BREAKING_CHANGE_TITLE:
                result.breaking.append(
                    BreakingChange(
                        commit_id=commit.commit_id,
                        url=commit.url,
                        subject=message.subject,
                        author_login=commit.author_login,
                        author_url=commit.author_url,
                        text=note.text,
                    )
                )
        scope = f" in scope {message.scope}" if message.scope else ""
        logger.debug("Commit %s of type %s%s - %s", commit.commit_id, message.type, scope, message.subject)

    logger.info("Valid commits found: %d", len(result.parsed))
    logger.info("Commits with breaking changes found: %d", len(result.breaking))
    return result
