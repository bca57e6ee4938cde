"""Core functionality for starlink.

This module contains the core business logic for:
- GitHub star lookups
- Co-star counting and ranking
- Configuration management
"""

from .github import FetchResult, GitHubStars, StarSource
from .suggest import count_co_stars, filter_ignored, rank, repo_url, split_owner_repo, suggest
from .config import Config, ConfigError, load_config, save_config

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
