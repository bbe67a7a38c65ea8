"""
Collection of the commits that belong to the next release.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from vc_release_notes.history.model import HistorySource, HistoryUnavailable, RawCommit, ReleaseTag


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


def find_release_commits(source: HistorySource, latest_tag: Optional[ReleaseTag]) -> List[RawCommit]:
    """Walk the branch history back to the latest release tag.

    Pages are fetched one after another, newest first. Every entry is
    collected; when ``latest_tag`` is known and an entry is the tagged
    commit, the walk stops right after that entry, so the tagged commit is
    part of the result and nothing older is. Without a tag the walk runs
    until the source reports no further pages.

    Raises
    ------
    HistoryUnavailable
        If the source fails, or claims more pages without a cursor.
    """
    commits: List[RawCommit] = []
    cursor: Optional[str] = None
    pages = 0
    while True:
        page = source.fetch_history_page(cursor)
        pages += 1
        for entry in page.entries:
            commits.append(entry)
            if latest_tag is not None and entry.commit_id == latest_tag.commit_id:
                logger.debug("Reached tag %s after %d page(s)", latest_tag.name, pages)
                return commits
        if not page.has_more:
            break
        if not page.next_cursor:
            raise HistoryUnavailable("History provider reported more pages without a cursor")
        cursor = page.next_cursor

    logger.debug("Read %d commit(s) from %d page(s)", len(commits), pages)
    return commits
