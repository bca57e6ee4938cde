"""GitHub API client utilities for star data retrieval.

This module provides a small synchronous client for the two GitHub endpoints
the suggestion engine needs: the stargazers of a repository and the
repositories starred by an account. Only a single page is fetched per call.

Failures never propagate to the caller. A network error, a non-2xx status or
an undecodable body is logged and reported as an empty `FetchResult`, so one
broken account cannot abort a whole suggestion run.

Environment Variables:
    GITHUB_TOKEN: Optional GitHub personal access token, used when no token
                  is passed explicitly.

Example:
    ```python
    from starlink.core.github import GitHubStars

    gh = GitHubStars(token="...")
    result = gh.list_stargazers("psf", "requests", per_page=50)
    if result.ok:
        print(result.items)
    ```
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol
import logging
import os
import httpx
from dotenv import load_dotenv
load_dotenv()

GH_API = "https://api.github.com"

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Outcome of a single fail-soft fetch.

    Attributes:
        items: Logins or repository full names, empty when the fetch failed.
        error: Description of the failure, or None on success.
    """

    items: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when the fetch succeeded, even if it returned nothing."""
        return self.error is None

    @classmethod
    def failed(cls, error: str) -> "FetchResult":
        """Build an empty result carrying `error`.

        Args:
            error: Description of what went wrong.

        Returns:
            A `FetchResult` with no items.
        """
        return cls(items=[], error=error)


class StarSource(Protocol):
    """Anything that can answer the two star queries."""

    def list_stargazers(self, owner: str, repo: str, per_page: int) -> FetchResult:
        ...

    def list_starred(self, login: str, per_page: int) -> FetchResult:
        ...


class GitHubStars:
    """`StarSource` backed by the GitHub REST API."""

    def __init__(self, token: str | None = None, base_url: str = GH_API, timeout: float = 20.0):
        self.token = token or os.getenv("GITHUB_TOKEN") or ""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        """Construct HTTP headers, adding Authorization when a token is set."""
        h = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    def _get_list(self, path: str, per_page: int) -> List[Dict[str, Any]]:
        """GET a single page of a list endpoint.

        Redirects are followed, since GitHub answers 301 for renamed or
        transferred repositories.

        Args:
            path: API path relative to `base_url`.
            per_page: Value for the `per_page` query parameter.

        Returns:
            The decoded JSON list.

        Raises:
            httpx.HTTPError: On transport failures or non-2xx responses.
            ValueError: If the body is not a JSON list.
        """
        with httpx.Client(timeout=self.timeout, headers=self._headers(), follow_redirects=True) as client:
            r = client.get(f"{self.base_url}{path}", params={"per_page": per_page})
            r.raise_for_status()
            data = r.json()
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON list from {path}, got {type(data).__name__}")
        return data

    def list_stargazers(self, owner: str, repo: str, per_page: int) -> FetchResult:
        """Return logins of accounts that starred `owner/repo`.

        Args:
            owner: Repository owner.
            repo: Repository name.
            per_page: Maximum number of stargazers to fetch.

        Returns:
            A `FetchResult` with logins, or an empty failed result.
        """
        try:
            users = self._get_list(f"/repos/{owner}/{repo}/stargazers", per_page)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("error at getting stargazers for %s/%s: %s", owner, repo, e)
            return FetchResult.failed(str(e))
        logins = [u["login"] for u in users if isinstance(u, dict) and u.get("login")]
        logger.debug("%s/%s has %d stargazers in this page", owner, repo, len(logins))
        return FetchResult(items=logins)

    def list_starred(self, login: str, per_page: int) -> FetchResult:
        """Return full names of repositories starred by `login`.

        Args:
            login: GitHub account name.
            per_page: Maximum number of starred repositories to fetch.

        Returns:
            A `FetchResult` with `owner/name` identifiers, or an empty failed result.
        """
        try:
            repos = self._get_list(f"/users/{login}/starred", per_page)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("error at getting starred for %s: %s", login, e)
            return FetchResult.failed(str(e))
        names = [r["full_name"] for r in repos if isinstance(r, dict) and r.get("full_name")]
        return FetchResult(items=names)
