"""
Immutable per-run context.

Everything a run needs to know about its target and settings is collected
once into a :class:`RunContext` and passed explicitly to the components
that need it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from vc_release_notes.config.model import ChangelogConfig
from vc_release_notes.history.github_client import DEFAULT_API_URL


def split_repository(slug: str) -> Tuple[str, str]:
    """Split an ``owner/repo`` slug into its two parts.

    Raises
    ------
    ValueError
        If ``slug`` is not of the form ``owner/repo``.
    """
    owner, sep, repo = (slug or "").strip().partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ValueError(f"Repository must be given as 'owner/repo', got: {slug!r}")
    return owner, repo


@dataclass(frozen=True)
class RunContext:
    """Settings of one changelog run."""

    owner: str
    repo: str
    token: str
    config: ChangelogConfig
    branch: str = "master"
    use_icons: bool = False
    api_url: str = DEFAULT_API_URL
    request_timeout: float = 30.0

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
