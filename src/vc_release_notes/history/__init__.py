"""
Repository history retrieval.

This package contains the :class:`HistorySource` protocol, the GitHub
GraphQL implementation :class:`GitHubClient`, and the traversal that
collects every commit since the latest release tag.
"""

from .github_client import GitHubClient  # noqa: F401
from .model import HistoryPage, HistorySource, HistoryUnavailable, RawCommit, ReleaseTag  # noqa: F401
from .traversal import find_release_commits  # noqa: F401
