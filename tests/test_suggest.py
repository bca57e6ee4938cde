"""Tests for co-star counting and ranking."""

import pytest
from starlink.core.github import FetchResult
from starlink.core.suggest import (
    count_co_stars,
    filter_ignored,
    rank,
    repo_url,
    split_owner_repo,
    suggest,
)


class FakeStars:
    """In-memory star source; logins listed in `broken` fail like a bad fetch."""

    def __init__(self, stargazers, starred, broken=()):
        self.stargazers = stargazers
        self.starred = starred
        self.broken = set(broken)
        self.calls = []

    def list_stargazers(self, owner, repo, per_page):
        self.calls.append(("stargazers", f"{owner}/{repo}", per_page))
        return FetchResult(items=list(self.stargazers.get(f"{owner}/{repo}", [])))

    def list_starred(self, login, per_page):
        self.calls.append(("starred", login, per_page))
        if login in self.broken:
            return FetchResult.failed("401 Unauthorized")
        return FetchResult(items=list(self.starred.get(login, [])))


class Progress:
    """Counts progress callback invocations."""

    def __init__(self):
        self.ticks = 0

    def __call__(self):
        self.ticks += 1


class TestSplitOwnerRepo:
    """Test identifier parsing."""

    @pytest.mark.parametrize("identifier", [
        "foo/bar",
        "http://github.com/foo/bar",
        "https://github.com/foo/bar/",
        "  foo/bar\n",
    ])
    def test_split_variants(self, identifier):
        """Test that bare names and URLs split the same way."""
        assert split_owner_repo(identifier) == ("foo", "bar")

    def test_extra_prefix_segments_ignored(self):
        """Test that only the last two segments are used."""
        assert split_owner_repo("a/b/c/foo/bar") == ("foo", "bar")

    @pytest.mark.parametrize("identifier", ["", "foobar", "/bar", "foo/", "/"])
    def test_malformed_raises(self, identifier):
        """Test that identifiers without owner or name raise ValueError."""
        with pytest.raises(ValueError, match="expected owner/name"):
            split_owner_repo(identifier)

    def test_case_is_preserved(self):
        """Test that identifiers are not case-normalized."""
        assert split_owner_repo("Foo/Bar") == ("Foo", "Bar")


class TestCountCoStars:
    """Test aggregation over stargazers."""

    def test_counts_shared_stars(self):
        """Test counts for two stargazers sharing one repository."""
        src = FakeStars({"seed/repo": ["a", "b"]}, {"a": ["X", "Y"], "b": ["Y", "Z"]})
        counts = count_co_stars(src, "seed", "repo", 30)
        assert counts == {"X": 1, "Y": 2, "Z": 1}

    def test_page_size_passed_through(self):
        """Test that the page size reaches both fetches."""
        src = FakeStars({"seed/repo": ["a"]}, {"a": ["X"]})
        count_co_stars(src, "seed", "repo", 42)
        assert src.calls == [("stargazers", "seed/repo", 42), ("starred", "a", 42)]

    def test_duplicates_in_one_response_count_once(self):
        """Test that a stargazer adds at most one per repository."""
        src = FakeStars({"seed/repo": ["a", "b"]}, {"a": ["X", "X", "Y"], "b": ["X"]})
        counts = count_co_stars(src, "seed", "repo", 30)
        assert counts == {"X": 2, "Y": 1}

    def test_no_stargazers(self):
        """Test that zero stargazers give no counts and no progress."""
        src = FakeStars({}, {})
        progress = Progress()
        counts = count_co_stars(src, "seed", "repo", 30, on_stargazer=progress)
        assert counts == {}
        assert progress.ticks == 0

    def test_callback_once_per_stargazer(self):
        """Test one progress call per stargazer, even with empty stars."""
        src = FakeStars({"seed/repo": ["a", "b", "c"]}, {"a": ["X"], "c": ["Y"]})
        progress = Progress()
        count_co_stars(src, "seed", "repo", 30, on_stargazer=progress)
        assert progress.ticks == 3

    def test_failed_stargazer_is_tolerated(self):
        """Test that a failed fetch counts as empty and still reports progress."""
        src = FakeStars(
            {"seed/repo": ["a", "broken", "b"]},
            {"a": ["X", "Y"], "broken": ["Q"], "b": ["Y"]},
            broken=["broken"],
        )
        progress = Progress()
        counts = count_co_stars(src, "seed", "repo", 30, on_stargazer=progress)
        assert counts == {"X": 1, "Y": 2}
        assert progress.ticks == 3

    def test_fresh_state_per_call(self):
        """Test that counts do not leak between calls."""
        src = FakeStars({"seed/repo": ["a"]}, {"a": ["X"]})
        assert count_co_stars(src, "seed", "repo", 30) == {"X": 1}
        assert count_co_stars(src, "seed", "repo", 30) == {"X": 1}


class TestRank:
    """Test ordering of counted repositories."""

    def test_descending_with_lexicographic_ties(self):
        """Test descending order with alphabetical ties."""
        assert rank({"Z": 1, "Y": 2, "X": 1}) == ["Y", "X", "Z"]

    def test_empty(self):
        """Test ranking an empty mapping."""
        assert rank({}) == []

    def test_descending_invariant_and_completeness(self):
        """Test that every name appears once in non-increasing count order."""
        counts = {"a/1": 3, "b/2": 7, "c/3": 1, "d/4": 7, "e/5": 3, "f/6": 2}
        names = rank(counts)
        assert sorted(names) == sorted(counts)
        assert len(names) == len(set(names))
        for first, second in zip(names, names[1:]):
            assert counts[first] >= counts[second]


class TestSuggest:
    """Test the full suggestion pipeline against a fake source."""

    def test_shared_star_ranks_first(self):
        """Test that the most co-starred repository comes first."""
        src = FakeStars({"seed/repo": ["a", "b"]}, {"a": ["X", "Y"], "b": ["Y", "Z"]})
        names = suggest(src, "seed", "repo", 30)
        assert names[0] == "Y"
        assert names in (["Y", "X", "Z"], ["Y", "Z", "X"])

    def test_every_observed_repo_appears_once(self):
        """Test that no observed repository is dropped or repeated."""
        starred = {
            "a": ["p/1", "p/2", "p/3"],
            "b": ["p/2", "p/4"],
            "c": ["p/1", "p/2", "p/5"],
        }
        src = FakeStars({"seed/repo": list(starred)}, starred)
        names = suggest(src, "seed", "repo", 30)
        observed = {n for repos in starred.values() for n in repos}
        assert len(names) == len(observed)
        assert set(names) == observed
        assert names[0] == "p/2"

    def test_seed_is_not_filtered(self):
        """Test that the seed repository itself is not removed."""
        src = FakeStars({"seed/repo": ["a"]}, {"a": ["seed/repo", "other/x"]})
        assert "seed/repo" in suggest(src, "seed", "repo", 30)


class TestRendering:
    """Test ignore filtering and URL rendering."""

    def test_filter_ignored_keeps_order(self):
        """Test that ignored names are dropped and order is kept."""
        assert filter_ignored(["foo/a", "foo/b", "foo/c"], ["foo/b"]) == ["foo/a", "foo/c"]

    def test_filter_ignored_is_exact_match(self):
        """Test that ignore matching is case-sensitive."""
        assert filter_ignored(["Foo/A"], ["foo/a"]) == ["Foo/A"]

    def test_repo_url(self):
        """Test the rendered repository URL."""
        assert repo_url("foo/bar") == "http://github.com/foo/bar"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
