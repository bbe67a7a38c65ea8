"""
Client for reading tags and commit history from the GitHub GraphQL API.

This client wraps HTTP requests to the GitHub v4 (GraphQL) endpoint. It
implements :class:`~vc_release_notes.history.model.HistorySource` for a
single branch of one repository. On transport failures, non-200
responses, GraphQL errors, or responses without the expected data, a
:class:`HistoryUnavailable` is raised. No retries are attempted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import requests

from vc_release_notes.history.model import HistoryPage, HistoryUnavailable, RawCommit, ReleaseTag


logger = logging.getLogger(__name__)
# Attach a null handler to avoid errors when the root logger is missing a
# stream. Messages will still propagate to the root logger if configured.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False

DEFAULT_API_URL = "https://api.github.com/graphql"

# Number of commits requested per history page.
PAGE_SIZE = 10

LATEST_TAG_QUERY = """
query findLatestTag($owner: String!, $repo: String!) {
  repository(owner: $owner, name: $repo) {
    refs(
      last: 1
      refPrefix: "refs/tags/"
      orderBy: {field: TAG_COMMIT_DATE, direction: ASC}
    ) {
      nodes {
        name
        target {
          oid
          ... on Tag {
            target {
              oid
            }
          }
        }
      }
    }
  }
}
"""

HISTORY_QUERY = """
query findCommits($owner: String!, $repo: String!, $branch: String!, $pageSize: Int!, $after: String) {
  repository(owner: $owner, name: $repo) {
    ref(qualifiedName: $branch) {
      target {
        ... on Commit {
          history(first: $pageSize, after: $after) {
            pageInfo {
              hasNextPage
              endCursor
            }
            edges {
              node {
                oid
                message
                commitUrl
                author {
                  name
                  user {
                    login
                    url
                  }
                }
                committer {
                  name
                  user {
                    login
                    url
                  }
                }
              }
            }
          }
        }
      }
    }
  }
}
"""


def _resolve_author(node: Dict[str, Any]) -> Tuple[str, str]:
    """Return ``(login, url)`` for a commit node.

    The linked GitHub user of the author is preferred, then the linked
    user of the committer. Commits by unlinked e-mail addresses fall back
    to the author's git name and an empty URL.
    """
    for role in ("author", "committer"):
        actor = node.get(role) or {}
        user = actor.get("user") or {}
        if user.get("login"):
            return user["login"], user.get("url") or ""
    author = node.get("author") or {}
    return author.get("name") or "", ""


def _parse_commit(node: Any) -> RawCommit:
    if not isinstance(node, dict) or not node.get("oid") or not isinstance(node.get("message"), str):
        raise HistoryUnavailable("Commit history entry is missing its oid or message")
    login, url = _resolve_author(node)
    return RawCommit(
        commit_id=node["oid"],
        message=node["message"],
        url=node.get("commitUrl") or "",
        author_login=login,
        author_url=url,
    )


@dataclass
class GitHubClient:
    """History source backed by the GitHub GraphQL API.

    Parameters
    ----------
    token : str
        Access token sent as a bearer credential.
    owner : str
        Repository owner (user or organisation).
    repo : str
        Repository name.
    branch : str, optional
        Branch whose history is read. Defaults to ``"master"``.
    api_url : str, optional
        GraphQL endpoint. Defaults to the public GitHub API.
    request_timeout : float, optional
        Timeout in seconds for each HTTP request. Defaults to 30 seconds.
    """

    token: str
    owner: str
    repo: str
    branch: str = "master"
    api_url: str = DEFAULT_API_URL
    request_timeout: float = 30.0

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"bearer {self.token}",
            "Accept": "application/vnd.github+json",
        }

    def execute(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """Run a GraphQL query and return its ``data`` member.

        Raises
        ------
        HistoryUnavailable
            If the request fails, the server answers with a non-200 status,
            the body is not JSON, or the response carries GraphQL errors.
        """
        variables = {"owner": self.owner, "repo": self.repo, **variables}
        logger.debug("Sending GraphQL request to %s with variables: %s", self.api_url, variables)
        try:
            response = requests.post(
                self.api_url,
                json={"query": query, "variables": variables},
                headers=self._headers(),
                timeout=self.request_timeout,
            )
        except requests.RequestException as exc:
            logger.error("Failed to connect to GitHub: %s", exc)
            raise HistoryUnavailable(str(exc)) from exc
        if response.status_code != 200:
            logger.error("GitHub returned non-200 status %s: %s", response.status_code, response.text)
            raise HistoryUnavailable(f"GitHub returned status {response.status_code}: {response.text}")
        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Failed to parse GitHub response: %s", exc)
            raise HistoryUnavailable("Failed to parse GitHub response") from exc
        if not isinstance(payload, dict):
            raise HistoryUnavailable("Unexpected response structure from GitHub")
        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors)
            logger.error("GitHub GraphQL errors: %s", messages)
            raise HistoryUnavailable(f"GitHub GraphQL errors: {messages}")
        data = payload.get("data")
        if not isinstance(data, dict):
            raise HistoryUnavailable("GitHub response has no data")
        return data

    def _repository(self, data: Dict[str, Any]) -> Dict[str, Any]:
        repository = data.get("repository")
        if not isinstance(repository, dict):
            raise HistoryUnavailable(f"Repository {self.owner}/{self.repo} not found")
        return repository

    def resolve_latest_tag(self) -> Optional[ReleaseTag]:
        """Return the most recently created tag, or ``None`` for an untagged repository.

        Annotated tags are peeled so that ``commit_id`` always names the
        tagged commit rather than the tag object.
        """
        repository = self._repository(self.execute(LATEST_TAG_QUERY, {}))
        refs = repository.get("refs") or {}
        nodes = refs.get("nodes") or []
        if not nodes or not isinstance(nodes[0], dict):
            logger.debug("No tags found in %s/%s", self.owner, self.repo)
            return None
        node = nodes[0]
        target = node.get("target") or {}
        peeled = target.get("target") or {}
        commit_id = peeled.get("oid") or target.get("oid")
        if not node.get("name") or not commit_id:
            raise HistoryUnavailable("Latest tag is missing its name or target")
        return ReleaseTag(name=node["name"], commit_id=commit_id)

    def fetch_history_page(self, after_cursor: Optional[str] = None) -> HistoryPage:
        """Fetch one page of branch history, newest commit first.

        Parameters
        ----------
        after_cursor : Optional[str]
            Cursor returned with the previous page; ``None`` starts at the
            branch tip.
        """
        data = self.execute(
            HISTORY_QUERY,
            {"branch": self.branch, "pageSize": PAGE_SIZE, "after": after_cursor},
        )
        ref = self._repository(data).get("ref")
        if not isinstance(ref, dict):
            raise HistoryUnavailable(f"Branch '{self.branch}' not found in {self.owner}/{self.repo}")
        history = (ref.get("target") or {}).get("history")
        if not isinstance(history, dict) or not isinstance(history.get("edges"), list):
            raise HistoryUnavailable(f"No commit history returned for branch '{self.branch}'")

        entries = [_parse_commit((edge or {}).get("node")) for edge in history["edges"]]
        page_info = history.get("pageInfo") or {}
        logger.debug("Fetched %d commit(s) after cursor %s", len(entries), after_cursor)
        return HistoryPage(
            entries=entries,
            has_more=bool(page_info.get("hasNextPage")),
            next_cursor=page_info.get("endCursor"),
        )
