"""
Types shared by history sources and the release traversal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol


class HistoryUnavailable(Exception):
    """Raised when the history provider returns no usable data."""

    pass


@dataclass(frozen=True)
class ReleaseTag:
    """The latest published tag and the commit it points at."""

    name: str
    commit_id: str


@dataclass(frozen=True)
class RawCommit:
    """A single commit of the branch history, as delivered by the provider."""

    commit_id: str
    message: str
    url: str
    author_login: str
    author_url: str


@dataclass(frozen=True)
class HistoryPage:
    """One page of history, newest commit first."""

    entries: List[RawCommit]
    has_more: bool
    next_cursor: Optional[str] = None


class HistorySource(Protocol):
    """Supplier of release tags and commit history for one branch."""

    def resolve_latest_tag(self) -> Optional[ReleaseTag]:
        """Return the most recently created tag, or ``None`` if there is none."""
        ...

    def fetch_history_page(self, after_cursor: Optional[str] = None) -> HistoryPage:
        """Return the page of history following ``after_cursor``.

        Raises
        ------
        HistoryUnavailable
            If the provider response holds no usable history.
        """
        ...
