"""GitHub repository suggestions from shared stargazers.

starlink looks at the people who starred a seed repository, collects what
else they starred and ranks those repositories by how many of the seed's
stargazers they share. It can be used both as a command-line tool and as a
Python library.

Quick Start:
    ```python
    import starlink

    owner, repo = starlink.split_owner_repo("https://github.com/psf/requests")
    names = starlink.suggest(starlink.GitHubStars(), owner, repo, per_page=50)
    ```

CLI Usage:
    ```bash
    starlink suggest psf/requests
    starlink ignore psf/requests-html
    ```
"""

__version__ = "0.1.0"

# Re-export main functionality for easy importing
from .core import (
    FetchResult,
    GitHubStars,
    StarSource,
    count_co_stars,
    filter_ignored,
    rank,
    repo_url,
    split_owner_repo,
    suggest,
    Config,
    ConfigError,
    load_config,
    save_config,
)

__all__ = [
    "FetchResult",
    "GitHubStars",
    "StarSource",
    "count_co_stars",
    "filter_ignored",
    "rank",
    "repo_url",
    "split_owner_repo",
    "suggest",
    "Config",
    "ConfigError",
    "load_config",
    "save_config",
]
