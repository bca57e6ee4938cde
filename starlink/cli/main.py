"""Command-line interface for starlink.

This module provides the `starlink` command. It parses command-line
arguments, loads the per-user configuration, asks GitHub who starred a seed
repository and what else those people starred, and prints the resulting
suggestions one URL per line.

Subcommands:
    - suggest: rank repositories co-starred with a seed repository
    - ignore: add a repository to the persisted ignore list

Usage:
    ```bash
    # Suggest repositories related to psf/requests
    starlink suggest psf/requests

    # URLs work too
    starlink suggest https://github.com/psf/requests

    # Never suggest this one again
    starlink ignore https://github.com/kennethreitz/records
    ```

Output:
    Suggestions go to stdout; the progress bar, log messages and
    confirmations go to stderr so the output can be piped.
"""
from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import sys

from tqdm import tqdm

from ..core.config import ConfigError, load_config, save_config
from ..core.github import GitHubStars
from ..core.suggest import filter_ignored, repo_url, split_owner_repo, suggest


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout stays clean for suggestions.

    Args:
        verbose: Log at DEBUG instead of INFO.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(asctime)s [starlink] %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its two subcommands."""
    p = argparse.ArgumentParser(prog="starlink", description="Suggest GitHub repositories from shared stargazers.")
    p.add_argument("--config", help="Path to the config file (defaults to ~/.starlink.json)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("suggest", help="suggest repository")
    sp.add_argument("from_", metavar="from", help="repository name (owner/name or URL)")
    sp.add_argument("--per-page", type=int, help="Override the configured page size (1-100)")

    ip = sub.add_parser(
        "ignore",
        help="ignore repository (names already in the list are not added twice)",
        description="Add a repository to the ignore list. A name already in the list is left as is.",
    )
    ip.add_argument("ignore_target", help="repository name to ignore")
    return p


def suggest_main(p: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Run a suggestion and print non-ignored URLs to stdout."""
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        p.exit(1, f"starlink: {e}\n")

    try:
        owner, repo = split_owner_repo(args.from_)
    except ValueError as e:
        p.error(str(e))

    per_page = cfg.per_page if args.per_page is None else args.per_page
    if not 1 <= per_page <= 100:
        p.error(f"--per-page must be between 1 and 100, got {per_page}")

    source = GitHubStars(token=cfg.token)
    with tqdm(total=per_page, file=sys.stderr, unit="user", desc=f"{owner}/{repo}", disable=None) as bar:
        names = suggest(source, owner, repo, per_page, on_stargazer=bar.update)

    for name in filter_ignored(names, cfg.ignore):
        print(repo_url(name))


def ignore_main(p: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Append the normalized target to the ignore list and save it."""
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        p.exit(1, f"starlink: {e}\n")

    try:
        owner, repo = split_owner_repo(args.ignore_target)
    except ValueError as e:
        p.error(str(e))
    name = f"{owner}/{repo}"

    if cfg.add_ignore(name):
        try:
            save_config(cfg, args.config)
        except ConfigError as e:
            p.exit(1, f"starlink: {e}\n")
        print(f"added {name} to ignore list", file=sys.stderr)
    else:
        print(f"{name} is already in ignore list", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    Args:
        argv: Argument list, defaults to `sys.argv[1:]`.

    Raises:
        SystemExit: With status 1 when the configuration cannot be loaded or
            saved, and 2 on usage errors such as a malformed identifier.
    """
    p = build_parser()
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "suggest":
        suggest_main(p, args)
    elif args.command == "ignore":
        ignore_main(p, args)


if __name__ == "__main__":
    main()
