"""Co-star suggestion engine.

Given a seed repository, this module asks a `StarSource` for the seed's
stargazers and for what each of them starred, counts how many stargazers
share each repository and ranks the repositories by that count.

Example:
    ```python
    from starlink.core.github import GitHubStars
    from starlink.core.suggest import split_owner_repo, suggest

    owner, repo = split_owner_repo("https://github.com/psf/requests")
    names = suggest(GitHubStars(), owner, repo, per_page=100)
    ```
"""
from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import logging

from .github import StarSource

GITHUB_WEB = "http://github.com"

logger = logging.getLogger(__name__)


def split_owner_repo(identifier: str) -> Tuple[str, str]:
    """Split `owner/name` out of an identifier or repository URL.

    The owner is the second-to-last slash-separated token and the name is the
    last one, so URL prefixes such as `http://github.com/` are ignored.

    Args:
        identifier: `owner/name` or anything ending in it.

    Returns:
        An `(owner, repo)` tuple.

    Raises:
        ValueError: If the identifier has no owner or no name.
    """
    tokens = identifier.strip().rstrip("/").split("/")
    if len(tokens) < 2 or not tokens[-2] or not tokens[-1]:
        raise ValueError(f"expected owner/name, got {identifier!r}")
    return tokens[-2], tokens[-1]


def count_co_stars(
        source: StarSource,
        owner: str,
        repo: str,
        per_page: int,
        on_stargazer: Optional[Callable[[], object]] = None) -> Dict[str, int]:
    """Count, per repository, how many stargazers of `owner/repo` starred it.

    A stargazer adds at most one to any repository even if its starred list
    repeats an entry. `on_stargazer` is called once after each stargazer,
    including those whose fetch failed.

    Args:
        source: Where stars come from.
        owner: Seed repository owner.
        repo: Seed repository name.
        per_page: Page size for both kinds of fetch.
        on_stargazer: Optional progress callback taking no arguments.

    Returns:
        Mapping of repository identifier to co-star count.
    """
    counts: Dict[str, int] = {}
    stargazers = source.list_stargazers(owner, repo, per_page)
    for login in stargazers.items:
        starred = source.list_starred(login, per_page)
        for name in dict.fromkeys(starred.items):
            counts[name] = counts.get(name, 0) + 1
        if on_stargazer is not None:
            on_stargazer()
    logger.debug("counted %d repositories from %d stargazers of %s/%s",
                 len(counts), len(stargazers.items), owner, repo)
    return counts


def rank(counts: Dict[str, int]) -> List[str]:
    """Order repository identifiers by descending count.

    Identifiers sharing a count come out in lexicographic order.
    """
    by_count: Dict[int, List[str]] = {}
    for name, c in counts.items():
        by_count.setdefault(c, []).append(name)
    names: List[str] = []
    for c in sorted(by_count, reverse=True):
        names.extend(sorted(by_count[c]))
    return names


def suggest(
        source: StarSource,
        owner: str,
        repo: str,
        per_page: int,
        on_stargazer: Optional[Callable[[], object]] = None) -> List[str]:
    """Return repositories ranked by how many of the seed's stargazers starred them."""
    return rank(count_co_stars(source, owner, repo, per_page, on_stargazer))


def filter_ignored(names: Iterable[str], ignore: Iterable[str]) -> List[str]:
    """Drop ignored identifiers while keeping the order of the rest."""
    ignored = set(ignore)
    return [n for n in names if n not in ignored]


def repo_url(name: str) -> str:
    """Return the web URL of a repository.

    Args:
        name: Repository identifier in `owner/name` form.

    Returns:
        The repository page URL on github.com.
    """
    return f"{GITHUB_WEB}/{name}"
